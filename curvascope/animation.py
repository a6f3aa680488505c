"""Drive the renderer once per display frame.

Frames are requested from a scheduler, which calls back with a
timestamp (in milliseconds) when the next frame is due. The real
application gets these callbacks from the display; `ManualScheduler`
lets you fire them yourself, which is what the tests (and headless
rendering) do.

```python
from curvascope.animation import FrameLoop, ManualScheduler

scheduler = ManualScheduler()
loop = FrameLoop(scheduler, on_frame=print)
loop.start()
scheduler.run_frame(0.)
scheduler.run_frame(16.)
```

"""

import logging

logger = logging.getLogger(__name__)

# animation time advanced per millisecond
TIME_FACTOR = 2e-4


class AnimationClock:
    """Accumulate elapsed time between frames, wrapping around at 1.

    The first frame after construction (or after `reset()`) counts as
    having zero elapsed time.

    """
    def __init__(self, time_factor=TIME_FACTOR):
        self.time_factor = time_factor
        self.time = 0.
        self.previous = None

    def delta(self, timestamp):
        """Get the time in milliseconds since the previous frame, and
        remember `timestamp` as the previous frame."""
        delta = 0.
        if self.previous is not None:
            delta = timestamp - self.previous
        self.previous = timestamp
        return delta

    def advance(self, delta):
        self.time = (self.time + self.time_factor * delta) % 1
        return self.time

    def reset(self):
        self.previous = None

class ManualScheduler:
    """Frame scheduler which only runs frames when told to."""

    def __init__(self):
        self._pending = {}
        self._next_handle = 0

    def request_frame(self, callback):
        """Schedule `callback(timestamp)` for the next frame.

        Returns
        -------
        int
            handle which can be passed to `cancel_frame`
        """
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle):
        self._pending.pop(handle, None)

    @property
    def pending(self):
        return len(self._pending)

    def run_frame(self, timestamp):
        """Run every callback scheduled before this call, in the order
        they were requested. Callbacks requested while running go to
        the next frame.

        """
        callbacks = sorted(self._pending.items())
        self._pending = {}
        for _, callback in callbacks:
            callback(timestamp)

class FrameLoop:
    """Call `on_frame(time)` once per frame until cancelled.

    On every frame, `on_frame` is passed the current animation time
    (in [0, 1)); the clock then advances by the time elapsed since the
    last frame and the loop reschedules itself.

    """
    def __init__(self, scheduler, on_frame, clock=None):
        self.scheduler = scheduler
        self.on_frame = on_frame

        if clock is None:
            clock = AnimationClock()
        self.clock = clock

        self._handle = None

    @property
    def running(self):
        return self._handle is not None

    def start(self):
        """Start (or resume) the loop. Does nothing if it is already
        running."""
        if self.running:
            return

        logger.debug("starting frame loop")
        self._handle = self.scheduler.request_frame(self._tick)

    def cancel(self):
        """Stop the loop. The next `start()` resumes from a clean state,
        with zero elapsed time on its first frame."""
        if not self.running:
            return

        logger.debug("cancelling frame loop")
        self.scheduler.cancel_frame(self._handle)
        self._handle = None
        self.clock.reset()

    def _tick(self, timestamp):
        handle = self._handle

        delta = self.clock.delta(timestamp)
        try:
            self.on_frame(self.clock.time)
        except Exception:
            # nothing is scheduled any more, so let start() resume
            if self._handle == handle:
                self._handle = None
                self.clock.reset()
            raise
        self.clock.advance(delta)

        # on_frame might have cancelled (or restarted) the loop
        if handle is not None and self._handle == handle:
            self._handle = self.scheduler.request_frame(self._tick)
