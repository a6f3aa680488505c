"""Application controller tying the geometry engine to a renderer.

`Curvascope` owns the current `RenderParams`, reacts to interface
actions (settings changes, pointer events, resizes, shared links) by
replacing them, and runs the frame loop which pushes them into the
rendering consumer through a `UniformBridge`.

```python
from curvascope.app import Curvascope

app = Curvascope()
app.set_tiling(7, 3)
app.start()
app.scheduler.run_frame(0.)
app.bridge.last_snapshot.invRad
```

"""

import logging

from curvascope import links
from curvascope.animation import FrameLoop, ManualScheduler
from curvascope.base import ValidationError
from curvascope.interaction import InteractionMapper, Viewport, pointer_position
from curvascope.params import RenderParams
from curvascope.uniforms import UniformBridge, UniformTable

logger = logging.getLogger(__name__)

# the loop is paused on viewports narrower than this
MIN_WIDTH = 768

DEFAULT_VIEWPORT = Viewport(0, 0, 1024, 768)

INVALID_TILING_MESSAGE = ("This is not a valid hyperbolic tiling. "
                          "Try changing the parameters.")


class Curvascope:
    def __init__(self, consumer=None, scheduler=None, viewport=None,
                 renderer=None, url=None):
        """
        Parameters
        ----------
        consumer : object with a `set_uniform(name, value)` method
            where uniform values are written. Defaults to a fresh
            `UniformTable`.
        scheduler : object with `request_frame` and `cancel_frame` methods
            frame scheduler. Defaults to a `ManualScheduler`.
        viewport : Viewport
            initial canvas rectangle
        renderer : callable
            called with the `UniformSnapshot` after the uniforms are
            pushed on every frame.
        url : str
            if given, load parameters from this shared link

        """
        if consumer is None:
            consumer = UniformTable()
        if scheduler is None:
            scheduler = ManualScheduler()
        if viewport is None:
            viewport = DEFAULT_VIEWPORT

        self.bridge = UniformBridge(consumer)
        self.scheduler = scheduler
        self.viewport = viewport
        self.renderer = renderer
        self.error_message = None
        self.too_small = viewport.width < MIN_WIDTH

        self.params = RenderParams.default()
        if url is not None:
            self.params = links.load_link(self.params, url)

        self.mapper = InteractionMapper(self.params.model_index,
                                        self.params.pointer)
        self.loop = FrameLoop(scheduler, self._render_frame)
        self.push()

    @property
    def time(self):
        return self.loop.clock.time

    def push(self):
        return self.bridge.push(self.params, self.time, self.viewport)

    def _update(self, params):
        self.params = params
        self.mapper.set_model(params.model_index)
        self.push()

    def _render_frame(self, time):
        values = self.bridge.push(self.params, time, self.viewport)
        if self.renderer is not None:
            self.renderer(values)

    # settings

    def set_tiling(self, p, q):
        """Switch to the {p,q} tiling.

        Returns
        -------
        bool
            whether the tiling was accepted. If not, the current
            parameters are kept and `error_message` explains why.

        """
        try:
            params = self.params.with_tiling(p, q)
        except ValidationError as err:
            logger.info("rejected tiling {%s,%s}: %s", p, q, err)
            self.error_message = INVALID_TILING_MESSAGE
            return False

        self.error_message = None
        self._update(params)
        return True

    def set_model(self, model):
        self._update(self.params.with_model(model))

    def set_color(self, index):
        self._update(self.params.with_color(index))

    def set_iterations(self, n_iterations):
        self._update(self.params.with_iterations(n_iterations))

    def set_samples(self, n_samples):
        self._update(self.params.with_samples(n_samples))

    def set_toggles(self, **toggles):
        self._update(self.params.with_toggles(**toggles))

    # pointer input

    def pointer_down(self, event=None):
        self.mapper.press()

    def pointer_move(self, event):
        x, y = pointer_position(event)
        position = self.mapper.move(x, y, self.viewport)
        if position is not None:
            self._update(self.params.with_pointer(position))
        return position

    def pointer_up(self, event=None):
        self.mapper.release()

    @property
    def dragging(self):
        return self.mapper.dragging

    # viewport and frame loop

    def start(self):
        """Start the frame loop, unless the viewport is too small."""
        if not self.too_small:
            self.loop.start()

    def stop(self):
        self.loop.cancel()

    def resize(self, width, height, left=0, top=0):
        """Handle a change in the canvas size, pausing the frame loop
        while the viewport is narrower than `MIN_WIDTH`.

        A collapsed canvas (zero or negative size) pauses the loop and
        keeps the previous viewport.

        """
        if width < MIN_WIDTH:
            if not self.too_small:
                logger.info("viewport is %s pixels wide, pausing", width)
            self.too_small = True
            self.loop.cancel()

        if width <= 0 or height <= 0:
            return

        self.viewport = Viewport(left, top, width, height)

        if width >= MIN_WIDTH and self.too_small:
            self.too_small = False
            self.loop.start()

        self.push()

    # shared links

    def share_link(self, base_url):
        return links.encode_link(self.params, base_url)

    def load_link(self, url):
        """Load parameters from a shared link. Malformed links leave the
        current parameters untouched.

        """
        self._update(links.load_link(self.params, url))
