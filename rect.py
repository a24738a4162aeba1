"""
Rect value type and the PlotResult pairing handed to drawing code
"""
from dataclasses import dataclass, asdict
from typing import Tuple

import numpy as np

from utils import safe_div


@dataclass(frozen=True)
class Rect:
    """A stationary rectangle described by its top-left corner and size."""
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_size(cls, width, height):
        return cls(0, 0, width, height)

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def width_to_height_ratio(self):
        return safe_div(self.width, self.height)

    def height_to_width_ratio(self):
        return safe_div(self.height, self.width)

    def is_square(self):
        return self.width == self.height

    def is_horizontal(self):
        return self.width > self.height

    def is_vertical(self):
        return self.height > self.width

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class PlotResult:
    """
    Source and destination rectangles for one draw call.

    ``image_rect`` is the full, un-cropped source image and ``viewport_rect``
    is where that image lands in viewport coordinates. Both are in pixels.
    """
    image_rect: Rect
    viewport_rect: Rect

    def draw_image_args(self):
        """Arguments in canvas ``drawImage(img, sx, sy, sw, sh, dx, dy, dw, dh)`` order."""
        src = self.image_rect
        dst = self.viewport_rect
        return (src.left, src.top, src.width, src.height,
                dst.left, dst.top, dst.width, dst.height)

    def scale(self):
        """Uniform scale applied to the source image."""
        return safe_div(self.viewport_rect.width, self.image_rect.width)

    def transform_matrix(self):
        """Get the affine matrix mapping source pixels onto the viewport."""
        src = self.image_rect
        dst = self.viewport_rect
        scale_x = safe_div(dst.width, src.width)
        scale_y = safe_div(dst.height, src.height)
        return np.array([
            [scale_x, 0, dst.left - src.left * scale_x],
            [0, scale_y, dst.top - src.top * scale_y],
            [0, 0, 1]
        ])

    def to_dict(self):
        return {
            'image_rect': self.image_rect.to_dict(),
            'viewport_rect': self.viewport_rect.to_dict(),
        }
