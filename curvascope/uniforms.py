"""Hand render parameters to the renderer as named uniform values.

The renderer is treated as an opaque consumer with a fixed set of
named input slots ("uniforms"). Once per frame, and whenever the
parameters change, the `UniformBridge` builds an immutable
`UniformSnapshot` out of the current `RenderParams`, the animation
time and the viewport, and copies every value into the consumer.
The bridge is the only thing that writes to the consumer.

"""

from collections import namedtuple

# uniform names, in the order the renderer declares them
UNIFORM_NAMES = [
    "tileCol", "resolution", "refNrm", "mousePos", "invCen", "time",
    "scale", "invRad", "modelIdx", "nIterations", "nSamples",
    "doEdges", "doSolidColor", "doParity", "doAntialias"
]


class UniformSnapshot(namedtuple("UniformSnapshot", UNIFORM_NAMES)):
    """Values of every uniform for a single frame.

    Vectors are stored as tuples of floats, so a snapshot can't be
    changed after it has been built.

    """
    __slots__ = ()

    def as_dict(self):
        return dict(self._asdict())

def _vec2(z):
    return (float(z[0]), float(z[1]))

def snapshot(params, time, viewport):
    """Build the uniform values for the given parameters.

    Parameters
    ----------
    params : RenderParams
        current render parameters
    time : float
        animation time, in [0, 1)
    viewport : Viewport
        current canvas size

    Returns
    -------
    UniformSnapshot

    """
    return UniformSnapshot(
        tileCol=params.color,
        resolution=(float(viewport.width), float(viewport.height)),
        refNrm=_vec2(params.reflection_normal),
        mousePos=_vec2(params.pointer),
        invCen=_vec2(params.inversion_center),
        time=float(time),
        scale=float(viewport.scale),
        invRad=float(params.inversion_radius),
        modelIdx=int(params.model_index),
        nIterations=int(params.n_iterations),
        nSamples=int(params.n_samples),
        doEdges=bool(params.edges),
        doSolidColor=bool(params.solid_color),
        doParity=bool(params.parity),
        doAntialias=bool(params.antialias)
    )

class UniformTable:
    """A stand-in rendering consumer which just stores its uniforms.

    Only declared slots can be written; writing to an undeclared name
    is a programming error and raises `KeyError`.

    """
    def __init__(self, names=UNIFORM_NAMES):
        self.values = {name: None for name in names}
        self.writes = 0

    def set_uniform(self, name, value):
        if name not in self.values:
            raise KeyError("No uniform named '{}'".format(name))
        self.values[name] = value
        self.writes += 1

    def __getitem__(self, name):
        return self.values[name]

class UniformBridge:
    """Push render parameters into a rendering consumer.

    The consumer can be any object with a `set_uniform(name, value)`
    method.

    """
    def __init__(self, consumer):
        self.consumer = consumer
        self.last_snapshot = None

    def push(self, params, time, viewport):
        """Copy the current parameters into the consumer's uniforms.

        Returns
        -------
        UniformSnapshot
            the values which were pushed

        """
        values = snapshot(params, time, viewport)
        for name, value in zip(UNIFORM_NAMES, values):
            self.consumer.set_uniform(name, value)

        self.last_snapshot = values
        return values
