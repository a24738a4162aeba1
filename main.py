#!/usr/bin/env python3
"""
Canvas Image Plotter
Main Entry Point
"""
import argparse
import json
import logging
import sys

from config_manager import ConfigManager, PlotterConfig
from plotter import Plotter
from utils import InvalidDimensionsError, ORIENTATIONS

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compute where an image lands inside a viewport."
    )
    parser.add_argument('image_width', type=float)
    parser.add_argument('image_height', type=float)
    parser.add_argument('viewport_width', type=float)
    parser.add_argument('viewport_height', type=float)
    parser.add_argument('--orientation', choices=ORIENTATIONS, default=None,
                        help="initial fit (default from config, else cover)")
    parser.add_argument('--move', nargs=2, type=float, action='append', default=[],
                        metavar=('DX', 'DY'), help="pan by DX, DY (repeatable)")
    parser.add_argument('--zoom', type=int, nargs='?', const=None, action='append', default=[],
                        metavar='DEPTH',
                        help="zoom by DEPTH, or by the configured zoom step (repeatable)")
    parser.add_argument('--zoom-multiplier', type=float, default=None)
    parser.add_argument('--config', default=None, help="JSON config file")
    parser.add_argument('--json', action='store_true', help="print the result as JSON")
    parser.add_argument('--verbose', action='store_true')
    return parser


def format_result(result):
    lines = []
    for name, rect in (('image', result.image_rect), ('viewport', result.viewport_rect)):
        lines.append(f"{name:<9} left={rect.left:.3f} top={rect.top:.3f} "
                     f"width={rect.width:.3f} height={rect.height:.3f}")
    return "\n".join(lines)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    plotter_config = PlotterConfig()
    if args.config:
        config = ConfigManager(args.config)
        if config.validate_config():
            plotter_config = config.plotter
        else:
            logger.warning("Invalid config in %s, using defaults", args.config)

    orientation = args.orientation or plotter_config.orientation

    try:
        plotter = Plotter(args.image_width, args.image_height,
                          args.viewport_width, args.viewport_height,
                          orientation=orientation,
                          zoom_multiplier=plotter_config.zoom_multiplier)
    except InvalidDimensionsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Pans are applied before zooms
    result = plotter.plot()
    for dx, dy in args.move:
        result = plotter.move(dx, dy)
    for depth in args.zoom:
        if depth is None:
            depth = plotter_config.zoom_step
        result = plotter.zoom(zoom_depth=depth, zoom_multiplier=args.zoom_multiplier)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
