"""
Live placement of a rectangular clip on a plane.

Position is tracked by the top-left corner. Size is tracked by the length of
the diagonal between the top-left and bottom-right corners, together with the
two direction ratios of that diagonal taken at construction time:

    width  = sin * diag
    height = cos * diag

Zooming only ever changes ``diag``, so the aspect ratio cannot drift.
"""
import logging
import math

from rect import Rect
from utils import InvalidDimensionsError, safe_div, to_int

logger = logging.getLogger(__name__)


class RectAdjustment:
    def __init__(self, left, top, width, height):
        """
        Args:
            left: x of the top-left corner on the plane
            top: y of the top-left corner on the plane
            width: starting width, truncated to an int
            height: starting height, truncated to an int
        """
        width = self._coerce_size(width, 'width')
        height = self._coerce_size(height, 'height')
        if width == 0 and height == 0:
            raise InvalidDimensionsError("width and height cannot both be 0")

        self.x = float(left)
        self.y = float(top)
        self.diag = math.hypot(width, height)

        # Direction ratios of the diagonal; fixed for the life of the instance
        self._sin = width / self.diag
        self._cos = height / self.diag

    @staticmethod
    def _coerce_size(value, name):
        try:
            size = to_int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidDimensionsError(f"{name} is not numeric: {value!r}") from e
        if size < 0:
            raise InvalidDimensionsError(f"{name} cannot be negative: {size}")
        return size

    @property
    def sin(self):
        return self._sin

    @property
    def cos(self):
        return self._cos

    def move(self, dx, dy):
        """Move the clip around on the plane."""
        self.x += dx
        self.y += dy

    def zoom(self, amount):
        """Grow or shrink the diagonal by ``amount``, keeping the center fixed."""
        new_diag = self.diag + amount
        if new_diag < 0:
            logger.debug("Zoom of %s would invert the clip, clamping diagonal at 0", amount)
            new_diag = 0.0
        applied = new_diag - self.diag
        self.diag = new_diag

        # Half the diagonal change lands on each side of the center; the
        # fixed ratios split it into horizontal and vertical components.
        half = applied / 2
        self.x -= half * self._sin
        self.y -= half * self._cos

    def width(self):
        return self._sin * self.diag

    def height(self):
        return self._cos * self.diag

    def hyp_delta_for_width(self, target_width):
        """Diagonal change that would make the width ``target_width``. Non-destructive."""
        return self.diag - safe_div(target_width, self._sin)

    def hyp_delta_for_height(self, target_height):
        """Diagonal change that would make the height ``target_height``. Non-destructive."""
        return self.diag - safe_div(target_height, self._cos)

    def snapshot(self):
        """Get the current position and size as a Rect."""
        return Rect(self.x, self.y, self.width(), self.height())

    def dump(self):
        """For easier logging and debugging."""
        return {
            'x': self.x,
            'y': self.y,
            'diag': self.diag,
            'sin': self._sin,
            'cos': self._cos,
            'width': self.width(),
            'height': self.height(),
        }

    def __repr__(self):
        return (f"RectAdjustment(x={self.x!r}, y={self.y!r}, "
                f"width={self.width()!r}, height={self.height()!r})")
