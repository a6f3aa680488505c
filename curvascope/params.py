"""The render parameters shared between the interface and the renderer.

All of the state describing what should be drawn lives in a single
immutable `RenderParams` object. Interface actions never modify it;
they build a new one with one of the `with_*` methods (which also
bumps the `version` counter), and the frame loop always reads
whichever object is current when a frame starts.

"""

from collections import namedtuple
from numbers import Integral

from curvascope.base import ValidationError
from curvascope.complex_plane import Complex, ZERO
from curvascope.models import Model
from curvascope import tiling

DEFAULT_P = 5
DEFAULT_Q = 5
DEFAULT_ITERATIONS = 50
DEFAULT_SAMPLES = 1

ITERATION_RANGE = (20, 100)
SAMPLE_RANGE = (1, 5)

# preset tiling colors, as 8-bit RGB
COLORS = [
    (244, 67, 54), (233, 30, 99), (156, 39, 176), (103, 58, 183),
    (63, 81, 181), (33, 150, 243), (3, 169, 244), (0, 188, 212),
    (0, 150, 136), (76, 175, 80), (139, 195, 74), (205, 220, 57),
    (255, 235, 59), (255, 235, 59), (255, 193, 7), (255, 152, 0),
    (255, 87, 34), (183, 28, 28), (136, 14, 79), (74, 20, 140),
    (49, 27, 146), (13, 71, 161), (1, 87, 155), (0, 96, 100),
    (0, 77, 64), (27, 94, 32), (51, 105, 30), (130, 119, 23),
    (245, 127, 23), (255, 111, 0), (230, 81, 0), (191, 54, 12),
    (250, 250, 250), (96, 125, 139)
]

_FIELDS = [
    "p", "q", "model_index", "color_index", "n_iterations", "n_samples",
    "antialias", "edges", "parity", "solid_color",
    "inversion_center", "inversion_radius", "reflection_normal",
    "pointer", "version"
]


def color_rgb(index):
    """Get a preset color as three floats between 0 and 1."""
    return tuple(channel / 255 for channel in COLORS[index])

def _check_int_range(name, value, bounds):
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            "{} must be an integer, not {!r}".format(name, value)
        )
    if not low <= value <= high:
        raise ValidationError(
            "{} must be between {} and {} (got {})".format(
                name, low, high, value
            ))

class RenderParams(namedtuple("RenderParams", _FIELDS)):
    """Immutable snapshot of everything the renderer needs to know.

    Use `RenderParams.default()` to get the startup parameters, and
    the `with_*` methods to derive new parameters from old ones. The
    tiling geometry (`inversion_center`, `inversion_radius`,
    `reflection_normal`) is only ever set together with `p` and `q`,
    so it always matches the current Schläfli symbol.

    """
    __slots__ = ()

    @staticmethod
    def default():
        geometry = tiling.generate_tiling_params(DEFAULT_P, DEFAULT_Q)
        return RenderParams(
            p=DEFAULT_P,
            q=DEFAULT_Q,
            model_index=Model.POINCARE.value,
            color_index=0,
            n_iterations=DEFAULT_ITERATIONS,
            n_samples=DEFAULT_SAMPLES,
            antialias=True,
            edges=True,
            parity=False,
            solid_color=False,
            inversion_center=geometry.inversion_center,
            inversion_radius=geometry.inversion_radius,
            reflection_normal=geometry.reflection_normal,
            pointer=ZERO,
            version=0
        )

    @property
    def model(self):
        return Model.from_index(self.model_index)

    @property
    def geometry(self):
        return tiling.generate_tiling_params(self.p, self.q)

    @property
    def color(self):
        return color_rgb(self.color_index)

    def _evolve(self, **changes):
        return self._replace(version=self.version + 1, **changes)

    def with_tiling(self, p, q):
        """Switch to the {p,q} tiling.

        Raises
        ------
        ValidationError
            Raised if {p,q} is not a hyperbolic tiling. `self` is
            unaffected, so the caller keeps the last valid parameters.

        """
        tiling.validate_schlafli(p, q)
        geometry = tiling.generate_tiling_params(p, q)

        return self._evolve(
            p=p, q=q,
            inversion_center=geometry.inversion_center,
            inversion_radius=geometry.inversion_radius,
            reflection_normal=geometry.reflection_normal
        )

    def with_model(self, model):
        """Switch to a different model, given as a `Model` or an index.

        Raises
        ------
        IndexError
            Raised if the index is outside the model catalog.

        """
        if not isinstance(model, Model):
            model = Model.from_index(model)
        return self._evolve(model_index=model.value)

    def with_color(self, index):
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise ValidationError(
                "color index must be an integer, not {!r}".format(index)
            )
        if not 0 <= index < len(COLORS):
            raise IndexError("No preset color with index {}".format(index))
        return self._evolve(color_index=index)

    def with_iterations(self, n_iterations):
        _check_int_range("iteration count", n_iterations, ITERATION_RANGE)
        return self._evolve(n_iterations=n_iterations)

    def with_samples(self, n_samples):
        _check_int_range("antialiasing sample count", n_samples, SAMPLE_RANGE)
        return self._evolve(n_samples=n_samples)

    def with_toggles(self, edges=None, parity=None, solid_color=None,
                     antialias=None):
        """Set any of the boolean render toggles. Toggles passed as `None`
        keep their current value.

        """
        changes = {}
        for name, value in (("edges", edges), ("parity", parity),
                            ("solid_color", solid_color),
                            ("antialias", antialias)):
            if value is not None:
                changes[name] = bool(value)
        return self._evolve(**changes)

    def with_pointer(self, position):
        """Move the pointer (the point the view is centered on), given in
        Poincare disk coordinates.

        """
        return self._evolve(pointer=Complex(*position))
