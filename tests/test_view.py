import pytest

from wirefdf.heightmap import parse_map
from wirefdf.projection import rotate_points
from wirefdf.view import LINE_COLOR, Key, View

GRID = ["0 0 0", "0 5 0", "0 0 0"]


def make_view(**kwargs):
    return View(parse_map(GRID), **kwargs)


def test_defaults():
    view = make_view()
    assert view.zoom == 20
    assert view.height_z == 1
    assert (view.angle_x, view.angle_y, view.angle_z) == (0, 0, 0)


def test_zoom_keys():
    view = make_view()
    assert view.handle_key(Key.PAGE_UP)
    assert view.zoom == pytest.approx(20 + 0.9)
    view.handle_key(Key.PAGE_DOWN)
    assert view.zoom == pytest.approx(20)


def test_zoom_limits():
    view = make_view(zoom=71)
    view.handle_key(Key.PAGE_UP)
    assert view.zoom == 71
    view = make_view(zoom=0)
    view.handle_key(Key.PAGE_DOWN)
    assert view.zoom == 0


def test_arrows_move():
    view = make_view()
    view.handle_key(Key.UP)
    view.handle_key(Key.LEFT)
    assert (view.x_move, view.y_move) == (-2, -2)
    view.handle_key(Key.DOWN)
    view.handle_key(Key.RIGHT)
    view.handle_key(Key.RIGHT)
    assert (view.x_move, view.y_move) == (2, 0)


def test_height_keys_rescale_points():
    view = make_view()
    view.handle_key(Key.PLUS)
    assert view.height_z == pytest.approx(1.1)
    assert view.heightmap.points[1][1].z == pytest.approx(5 * 1.1)
    view.handle_key(Key.MINUS)
    assert view.height_z == pytest.approx(1.0)


def test_preset_and_reset():
    view = make_view()
    view.handle_key(Key.KEY_I)
    assert (view.angle_x, view.angle_y, view.angle_z) == (45, 26.65, -30)
    view.handle_key(Key.KEY_P)
    assert (view.angle_x, view.angle_y, view.angle_z) == (0, 0, 0)


@pytest.mark.parametrize(
    "key,attr,delta",
    [
        (Key.NUM_8, "angle_x", 3),
        (Key.NUM_2, "angle_x", -3),
        (Key.NUM_6, "angle_y", 3),
        (Key.NUM_4, "angle_y", -3),
        (Key.NUM_9, "angle_z", 3),
        (Key.NUM_7, "angle_z", -3),
    ],
)
def test_rotation_keys(key, attr, delta):
    view = make_view()
    view.handle_key(key)
    assert getattr(view, attr) == delta


def test_rotation_key_reprojects():
    view = make_view()
    view.handle_key(Key.NUM_9)
    expected = parse_map(GRID)
    rotate_points(expected, 0, 0, 3, 1)
    assert [(p.x, p.y, p.z) for p in view.heightmap] == [(p.x, p.y, p.z) for p in expected]


def test_escape_closes():
    view = make_view()
    assert view.handle_key(Key.ESC) is False
    assert view.handle_key(Key.UP) is True


def test_segment_count():
    view = make_view()
    rows, width = view.heightmap.rows, view.heightmap.width
    assert len(list(view.segments())) == rows * (width - 1) + (rows - 1) * width


def test_segments_are_unit_grid_edges_at_zero_angles():
    view = make_view()
    for (sx, sy), (ex, ey) in view.segments():
        assert abs(ex - sx) + abs(ey - sy) == pytest.approx(view.zoom)


def test_draw_plots_in_bounds():
    view = make_view()
    plotted = []
    view.draw(lambda x, y, color: plotted.append((x, y, color)))
    assert all(color == LINE_COLOR for _, _, color in plotted)
    assert all(0 <= x < view.width and 0 <= y < view.height for x, y, _ in plotted)
    (sx, sy), _ = next(view.segments())
    assert (int(sx), int(sy)) in {(x, y) for x, y, _ in plotted}