import pytest

from wirefdf.heightmap import (
    DEFAULT_COLOR,
    HeightMap,
    InvalidMapError,
    Point,
    is_valid_chars,
    line_width,
    load_map,
    parse_map,
)

GRID = ["0 0 0", "0 10 0", "0 0 0"]


@pytest.mark.parametrize("line", ["1 2  3", "  4", "", "7 8 9 10 "])
def test_line_width_counts_words(line):
    assert line_width(line, " ") == len(line.split())


def test_valid_chars():
    assert is_valid_chars("1 -2,0xFFa\t3")
    assert not is_valid_chars("1 z")
    assert not is_valid_chars("1\r")


def test_parse_grid_shape():
    heightmap = parse_map(GRID)
    assert heightmap.rows == len(GRID)
    assert heightmap.width == len(GRID[0].split())
    assert len(list(heightmap)) == heightmap.rows * heightmap.width


def test_parse_heights_and_centering():
    heightmap = parse_map(GRID)
    centre = heightmap.points[1][1]
    assert centre.z_origin == 10
    assert centre.z_change
    assert (centre.x_origin, centre.y_origin) == (0, 0)
    assert [p.x_origin for p in heightmap.points[0]] == [-1, 0, 1]
    assert not heightmap.points[0][0].z_change


def test_projected_starts_at_origin():
    point = parse_map(GRID).points[2][0]
    assert (point.x, point.y, point.z) == (point.x_origin, point.y_origin, point.z_origin)


def test_color_is_default():
    heightmap = parse_map(["1,0xFF 2,0xFF", "3 4"])
    assert all(p.color == DEFAULT_COLOR for p in heightmap)
    assert [p.z_origin for p in heightmap.points[0]] == [1, 2]


def test_negative_heights():
    heightmap = parse_map(["-3 4", "5 -6"])
    assert [p.z_origin for p in heightmap] == [-3, 4, 5, -6]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 0 0"],
        ["0", "0"],
        ["0 0", "0 0 0"],
        ["0 0", "0 q"],
        ["0 0", "0 1000001"],
        ["0 0", "-1000001 0"],
        [],
    ],
)
def test_invalid_maps(lines):
    with pytest.raises(InvalidMapError):
        parse_map(lines)


def test_limit_values_accepted():
    heightmap = parse_map(["1000000 0", "0 -1000000"])
    assert heightmap.points[0][0].z_origin == 1000000
    assert heightmap.points[1][1].z_origin == -1000000


def test_load_map_from_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("\n".join(GRID) + "\n")
    loaded = load_map(path)
    parsed = parse_map(GRID)
    assert [p.z_origin for p in loaded] == [p.z_origin for p in parsed]
    assert loaded.rows == parsed.rows


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "absent.fdf")


def test_heightmap_iteration_order():
    points = [[Point(0, 0, 1), Point(1, 0, 2)], [Point(0, 1, 3), Point(1, 1, 4)]]
    assert [p.z_origin for p in HeightMap(points)] == [1, 2, 3, 4]