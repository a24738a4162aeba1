import json
import logging
import math
import os
from dataclasses import dataclass, asdict

from utils import COVER, ORIENTATIONS

logger = logging.getLogger(__name__)


@dataclass
class PlotterConfig:
    orientation: str = COVER
    zoom_multiplier: float = 1.0
    zoom_step: int = 1  # default zoom depth for one CLI zoom request


class ConfigManager:
    def __init__(self, config_file='config/plotter.json'):
        self.config_file = config_file
        self.plotter = PlotterConfig()
        self.load_config()

    def load_config(self):
        """Load configuration from file with error handling."""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    data = json.load(f)

                if 'plotter' in data:
                    plotter_data = data.get('plotter', {})
                    self.plotter = PlotterConfig(
                        orientation=str(plotter_data.get('orientation', COVER)),
                        zoom_multiplier=float(plotter_data.get('zoom_multiplier', 1.0)),
                        zoom_step=int(plotter_data.get('zoom_step', 1))
                    )

                logger.info("Config loaded from %s", self.config_file)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warning("Error loading config %s: %s; using defaults", self.config_file, e)
                self._create_default_config()
        else:
            logger.info("Config file %s not found, creating default", self.config_file)
            self._create_default_config()
            self.save_config()

    def _create_default_config(self):
        """Create default configuration."""
        self.plotter = PlotterConfig()

    def save_config(self):
        """Save configuration to file with error handling."""
        try:
            config_data = {
                'plotter': asdict(self.plotter)
            }

            config_dir = os.path.dirname(self.config_file)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(self.config_file, 'w') as f:
                json.dump(config_data, f, indent=4, ensure_ascii=False)

            logger.info("Config saved to %s", self.config_file)
            return True
        except OSError as e:
            logger.warning("Error saving config %s: %s", self.config_file, e)
            return False

    def update_plotter_config(self, **kwargs):
        """Update plotter configuration; unknown keys are ignored."""
        for key, value in kwargs.items():
            if hasattr(self.plotter, key):
                setattr(self.plotter, key, value)
            else:
                logger.debug("Ignoring unknown plotter config key %r", key)
        return True

    def validate_config(self):
        """Validate all configuration values."""
        errors = []
        if self.plotter.orientation not in ORIENTATIONS:
            errors.append(f"Orientation must be one of {', '.join(ORIENTATIONS)}")
        try:
            if not math.isfinite(float(self.plotter.zoom_multiplier)):
                errors.append("Zoom multiplier must be finite")
        except (TypeError, ValueError):
            errors.append("Zoom multiplier must be a number")
        if not isinstance(self.plotter.zoom_step, int):
            errors.append("Zoom step must be an integer")

        for error in errors:
            logger.warning("Config validation error: %s", error)
        return not errors
