import pytest

from config_manager import PlotterConfig
from plotter import Plotter
from rect import Rect
from utils import InvalidDimensionsError

TOL = 1e-9

SIZES = [
    (400, 200, 100, 100),
    (200, 400, 100, 100),
    (1920, 1080, 800, 600),
    (1280, 720, 640, 480),
    (480, 640, 300, 400),
    (300, 300, 200, 50),
    (50, 900, 1024, 768),
]


def _assert_rect(rect, left, top, width, height):
    assert rect.left == pytest.approx(left)
    assert rect.top == pytest.approx(top)
    assert rect.width == pytest.approx(width)
    assert rect.height == pytest.approx(height)


def test_cover_landscape_image_in_square_viewport():
    result = Plotter(400, 200, 100, 100, orientation="cover").plot()

    assert result.image_rect == Rect(0, 0, 400, 200)
    _assert_rect(result.viewport_rect, -50, 0, 200, 100)


def test_contain_landscape_image_in_square_viewport():
    result = Plotter(400, 200, 100, 100, orientation="contain").plot()

    assert result.image_rect == Rect(0, 0, 400, 200)
    _assert_rect(result.viewport_rect, 0, 25, 100, 50)


def test_cover_portrait_image_fits_width():
    result = Plotter(200, 400, 100, 100).plot()

    _assert_rect(result.viewport_rect, 0, -50, 100, 200)


def test_square_image_takes_width_branch():
    plotter = Plotter(300, 300, 200, 50)

    _assert_rect(plotter.cover().viewport_rect, 0, -75, 200, 200)
    _assert_rect(plotter.contain().viewport_rect, 0, -75, 200, 200)


def test_default_and_unknown_orientation_cover():
    expected = Plotter(400, 200, 100, 100, orientation="cover").plot()

    assert Plotter(400, 200, 100, 100).plot() == expected
    assert Plotter(400, 200, 100, 100, orientation="stretch").plot() == expected


@pytest.mark.parametrize("iw, ih, vw, vh", SIZES)
def test_cover_fills_viewport(iw, ih, vw, vh):
    rect = Plotter(iw, ih, vw, vh, orientation="cover").plot().viewport_rect

    assert rect.width >= vw - TOL
    assert rect.height >= vh - TOL
    assert rect.left <= TOL
    assert rect.top <= TOL
    assert rect.width == pytest.approx(vw) or rect.height == pytest.approx(vh)
    assert rect.width / rect.height == pytest.approx(iw / ih)


@pytest.mark.parametrize("iw, ih, vw, vh", [s for s in SIZES if s != (300, 300, 200, 50)])
def test_contain_fits_inside_viewport(iw, ih, vw, vh):
    rect = Plotter(iw, ih, vw, vh, orientation="contain").plot().viewport_rect

    assert rect.width <= vw + TOL
    assert rect.height <= vh + TOL
    assert rect.left >= -TOL
    assert rect.top >= -TOL
    assert rect.width == pytest.approx(vw) or rect.height == pytest.approx(vh)
    assert rect.width / rect.height == pytest.approx(iw / ih)


@pytest.mark.parametrize("iw, ih, vw, vh", SIZES)
def test_fit_is_centered(iw, ih, vw, vh):
    for orientation in ("cover", "contain"):
        rect = Plotter(iw, ih, vw, vh, orientation=orientation).plot().viewport_rect
        assert rect.center == pytest.approx((vw / 2, vh / 2))


def test_cover_is_not_cumulative():
    plotter = Plotter(400, 200, 100, 100)

    first = plotter.cover()
    second = plotter.cover()
    plotter.move(30, -12)
    plotter.zoom(zoom_depth=25)
    third = plotter.cover()

    assert first == second == third


def test_recenter_full_size_centers_without_scaling():
    plotter = Plotter(400, 200, 100, 100)
    plotter.zoom(zoom_depth=40)

    result = plotter.recenter_full_size()

    assert result.image_rect == Rect(0, 0, 400, 200)
    _assert_rect(result.viewport_rect, -150, -50, 400, 200)


def test_move_translates_only():
    plotter = Plotter(400, 200, 100, 100)

    result = plotter.move(12.5, -7)

    _assert_rect(result.viewport_rect, -37.5, -7, 200, 100)
    assert result.image_rect == Rect(0, 0, 400, 200)


def test_moves_accumulate():
    plotter = Plotter(400, 200, 100, 100)
    plotter.move(10, 10)

    _assert_rect(plotter.move(-30, 5).viewport_rect, -70, 15, 200, 100)


def test_zoom_in_keeps_center_and_aspect():
    plotter = Plotter(400, 200, 100, 100)

    rect = plotter.zoom(zoom_depth=10).viewport_rect

    assert rect.center == pytest.approx((50, 50))
    assert rect.width / rect.height == pytest.approx(2)
    assert rect.width > 200
    assert plotter.zoom(zoom_depth=-20).viewport_rect.width < 200


def test_zoom_uses_instance_multiplier():
    scaled = Plotter(400, 200, 100, 100, zoom_multiplier=5)
    plain = Plotter(400, 200, 100, 100)

    assert scaled.zoom(zoom_depth=2) == plain.zoom(zoom_depth=10)

    scaled.zoom_multiplier = 2
    plain.zoom(zoom_depth=6)
    assert scaled.zoom(zoom_depth=3) == plain.plot()


def test_zoom_multiplier_argument_overrides_instance_value():
    plotter = Plotter(400, 200, 100, 100, zoom_multiplier=5)
    before = plotter.plot()

    assert plotter.zoom(zoom_depth=10, zoom_multiplier=0) == before
    _assert_rect(plotter.zoom(zoom_depth=1, zoom_multiplier=10).viewport_rect,
                 *_expected_after_zoom(before.viewport_rect, 10))


def _expected_after_zoom(rect, amount):
    sin = 400 / (400 ** 2 + 200 ** 2) ** 0.5
    cos = 200 / (400 ** 2 + 200 ** 2) ** 0.5
    return (rect.left - amount / 2 * sin, rect.top - amount / 2 * cos,
            rect.width + amount * sin, rect.height + amount * cos)


@pytest.mark.parametrize(
    "depth, expected",
    [("3.9", 3), (2.7, 2), (-4.2, -4), ("5px", 5), ("1e3", 1), ("-2 steps", -2), ("abc", 0), (None, 0)],
)
def test_zoom_depth_is_truncated(depth, expected):
    plotter = Plotter(400, 200, 100, 100)
    reference = Plotter(400, 200, 100, 100)

    assert plotter.zoom(zoom_depth=depth) == reference.zoom(zoom_depth=expected)


def test_init_replaces_state():
    plotter = Plotter(400, 200, 100, 100)
    plotter.move(40, 40)

    result = plotter.init(200, 400, 50, 100, orientation="contain")

    assert plotter.image_rect == Rect(0, 0, 200, 400)
    assert plotter.viewport_rect == Rect(0, 0, 50, 100)
    _assert_rect(result.viewport_rect, 0, 0, 50, 100)


def test_from_config():
    config = PlotterConfig(orientation="contain", zoom_multiplier=3)

    plotter = Plotter.from_config(400, 200, 100, 100, config)

    assert plotter.zoom_multiplier == 3
    _assert_rect(plotter.plot().viewport_rect, 0, 25, 100, 50)


@pytest.mark.parametrize("iw, ih", [(0, 0), (-400, 200), ("tall", 200)])
def test_invalid_image_size_is_rejected(iw, ih):
    with pytest.raises(InvalidDimensionsError):
        Plotter(iw, ih, 100, 100)


@pytest.mark.parametrize("vw, vh", [("wide", 100), (100, None)])
def test_failed_init_keeps_previous_placement(vw, vh):
    plotter = Plotter(400, 200, 100, 100)
    plotter.move(7, -3)
    before = plotter.plot()

    with pytest.raises(InvalidDimensionsError):
        plotter.init(30, 40, vw, vh)

    assert plotter.plot() == before
    assert plotter.image_rect == Rect(0, 0, 400, 200)
    assert plotter.viewport_rect == Rect(0, 0, 100, 100)


def test_failed_init_with_bad_image_keeps_previous_placement():
    plotter = Plotter(400, 200, 100, 100, orientation="contain")
    before = plotter.plot()

    with pytest.raises(InvalidDimensionsError):
        plotter.init(0, 0, 50, 50)

    assert plotter.plot() == before


def test_image_size_strings_use_leading_digits():
    result = Plotter("400px", "200px", 100, 100).plot()

    assert result.image_rect == Rect(0, 0, 400, 200)
    _assert_rect(result.viewport_rect, -50, 0, 200, 100)
