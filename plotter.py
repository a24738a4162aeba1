"""
Image plotter: places an image clip inside a viewport.

It only does the math. Every operation returns a PlotResult whose two
rectangles can be passed straight to a draw call that maps the source image
onto the viewport.
"""
import logging

from rect import Rect, PlotResult
from rect_adjustment import RectAdjustment
from utils import COVER, CONTAIN, InvalidDimensionsError, to_int

logger = logging.getLogger(__name__)


class Plotter:
    def __init__(self, image_width, image_height, viewport_width, viewport_height,
                 orientation=None, zoom_multiplier=1):
        # Sets intensity of zoom; 10 zooms faster than 1
        self.zoom_multiplier = zoom_multiplier

        self.image_rect = Rect()
        self.viewport_rect = Rect()
        self.adjustment = None

        self.init(image_width, image_height, viewport_width, viewport_height,
                  orientation=orientation or COVER)

    @classmethod
    def from_config(cls, image_width, image_height, viewport_width, viewport_height, config):
        """Build a plotter from a PlotterConfig."""
        return cls(image_width, image_height, viewport_width, viewport_height,
                   orientation=config.orientation,
                   zoom_multiplier=config.zoom_multiplier)

    def init(self, image_width, image_height, viewport_width, viewport_height, orientation=None):
        """Initialize a new image clip in the viewport, replacing all state."""
        # Validate everything before touching state so a bad call leaves the
        # previous placement intact. The adjustment validates and truncates
        # the image size; the static image rect must agree with it.
        adjustment = RectAdjustment(0, 0, image_width, image_height)
        image_rect = Rect.from_size(to_int(image_width), to_int(image_height))
        viewport_rect = Rect.from_size(self._coerce_viewport(viewport_width, 'viewport width'),
                                       self._coerce_viewport(viewport_height, 'viewport height'))

        self.adjustment = adjustment
        self.image_rect = image_rect
        self.viewport_rect = viewport_rect

        if orientation == CONTAIN:
            return self.contain()
        if orientation not in (None, COVER):
            logger.debug("Unknown orientation %r, falling back to %s", orientation, COVER)
        return self.cover()

    @staticmethod
    def _coerce_viewport(value, name):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise InvalidDimensionsError(f"{name} is not numeric: {value!r}") from e

    def plot(self):
        """Get the current placement without changing it."""
        return PlotResult(
            image_rect=Rect.from_size(self.image_rect.width, self.image_rect.height),
            viewport_rect=self.adjustment.snapshot()
        )

    def recenter_full_size(self):
        """Center the image in the viewport at its natural size."""
        image_width = self.image_rect.width
        image_height = self.image_rect.height

        # Fresh adjustment so repeated fits start from the same baseline
        self.adjustment = RectAdjustment(0, 0, image_width, image_height)

        width_diff = image_width - self.viewport_rect.width
        height_diff = image_height - self.viewport_rect.height
        self.adjustment.move(-width_diff / 2, -height_diff / 2)
        return self.plot()

    def cover(self):
        """Scale the image just enough to cover the entire viewport."""
        self.recenter_full_size()
        image = self.image_rect

        if min(image.width, image.height) == image.width:
            self._fit_width()
        else:
            self._fit_height()
        return self.plot()

    def contain(self):
        """Scale the image so all of it fits inside the viewport."""
        self.recenter_full_size()
        image = self.image_rect

        if max(image.width, image.height) == image.width:
            self._fit_width()
        else:
            self._fit_height()
        return self.plot()

    def _fit_width(self):
        hyp_delta = self.adjustment.hyp_delta_for_width(self.viewport_rect.width)
        self.adjustment.zoom(-hyp_delta)

    def _fit_height(self):
        hyp_delta = self.adjustment.hyp_delta_for_height(self.viewport_rect.height)
        self.adjustment.zoom(-hyp_delta)

    def move(self, dx, dy):
        """Pan the image clip by a viewport offset."""
        self.adjustment.move(dx, dy)
        return self.plot()

    def zoom(self, zoom_depth=0, zoom_multiplier=None):
        """
        Zoom around the center of the image clip.

        Args:
            zoom_depth: positive zooms in, negative zooms out; truncated to an
                int, anything unparseable counts as 0
            zoom_multiplier: overrides ``self.zoom_multiplier`` for this call
        """
        multiplier = self.zoom_multiplier if zoom_multiplier is None else zoom_multiplier
        depth = to_int(zoom_depth, default=0)

        self.adjustment.zoom(multiplier * depth)
        logger.debug("Zoomed by %s: %s", multiplier * depth, self.adjustment.dump())
        return self.plot()
