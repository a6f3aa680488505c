"""Turn pointer input on the canvas into points in the Poincare disk.

Dragging on the canvas moves the point the tiling is centered on. A
pointer position in pixels is first rescaled to model coordinates
(the shorter side of the viewport spans [-1, 1]), then pushed through
the current model's mapping to get a point in the disk. If that point
falls off the edge of the model, the drag ends.

"""

import logging
from collections import namedtuple
from enum import Enum

from curvascope.base import DomainError, UnimplementedModelError
from curvascope.complex_plane import Complex, ZERO
from curvascope.models import Model, model_map

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"

class Viewport(namedtuple("Viewport", ["left", "top", "width", "height"])):
    """Rectangle occupied by the canvas, in pixels. `left` and `top` give
    the position of its top-left corner.

    """
    __slots__ = ()

    def __new__(cls, left, top, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(
                "Viewport must have positive size (got {}x{})".format(
                    width, height
                ))
        return super().__new__(cls, left, top, width, height)

    @staticmethod
    def from_size(width, height):
        return Viewport(0, 0, width, height)

    @property
    def scale(self):
        return min(self.width, self.height)

    @property
    def resolution(self):
        return Complex(self.width, self.height)

    def to_model(self, x, y):
        """Convert a pointer position to model coordinates.

        The center of the viewport goes to the origin, the y axis is
        flipped to point up, and distances are divided by half of the
        shorter side of the viewport.

        """
        rel_x = x - self.left
        rel_y = y - self.top
        return Complex((2 * rel_x - self.width) / self.scale,
                       (self.height - 2 * rel_y) / self.scale)

def pointer_position(event):
    """Get the (x, y) position of a pointer event.

    `event` may be a mouse-style object with `clientX`/`clientY`
    attributes (or `x`/`y`), a touch event whose first entry in
    `touches` is used instead, or a plain (x, y) pair.

    """
    touches = getattr(event, "touches", None)
    if touches:
        event = touches[0]

    for x_attr, y_attr in (("clientX", "clientY"), ("x", "y")):
        try:
            return (getattr(event, x_attr), getattr(event, y_attr))
        except AttributeError:
            pass

    x, y = event
    return (x, y)

class InteractionMapper:
    """Track a drag on the canvas and convert it to Poincare disk
    coordinates.

    The mapper is either idle or dragging. Pressing always starts a
    drag and releasing always ends it. While dragging, each pointer
    move is mapped into the disk; if the image is inside the closed
    unit disk it becomes the new `position`, and otherwise the drag
    ends and `position` keeps its last accepted value.

    """
    def __init__(self, model=Model.POINCARE, position=ZERO):
        """
        Parameters
        ----------
        model : Model or int
            model of the hyperbolic plane shown on screen
        position : Complex
            initial pointer position, in disk coordinates

        Raises
        ------
        IndexError
            Raised if `model` is not a valid catalog index.

        """
        self.state = DragState.IDLE
        self.position = Complex(*position)
        self.set_model(model)

    def set_model(self, model):
        if not isinstance(model, Model):
            model = Model.from_index(model)
        self.model = model

    @property
    def dragging(self):
        return self.state == DragState.DRAGGING

    def press(self):
        self.state = DragState.DRAGGING

    def release(self):
        self.state = DragState.IDLE

    def candidate(self, x, y, viewport):
        """Map a pointer position to the Poincare disk, without changing
        any state.

        Returns
        -------
        Complex or None
            the mapped point, or `None` if the position has no image
            under the current model's mapping.

        """
        model_pos = viewport.to_model(x, y)
        try:
            return model_map(self.model)(model_pos)
        except (DomainError, UnimplementedModelError) as err:
            logger.debug("pointer at %s has no disk image: %s",
                         tuple(model_pos), err)
            return None

    def move(self, x, y, viewport):
        """Handle a pointer move to pixel position (x, y).

        Returns
        -------
        Complex or None
            the new pointer position in the disk, or `None` if the
            move was ignored (not dragging) or ended the drag.

        """
        if not self.dragging:
            return None

        disk_pos = self.candidate(x, y, viewport)

        # NaN fails this comparison too
        if disk_pos is not None and disk_pos.normsq() <= 1:
            self.position = disk_pos
            return disk_pos

        self.release()
        return None
