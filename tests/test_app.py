import pytest

from wirefdf.app import help_lines, main


def test_help_starts_with_title():
    assert help_lines()[0] == (30, 60, 0xFF0000, "HOW TO USE")


def test_help_lines_are_stacked_in_one_column():
    lines = help_lines()
    ys = [y for _, y, _, _ in lines]
    assert ys == sorted(set(ys))
    assert {x for x, _, _, _ in lines} == {30}
    assert "Quit = ESC" in [text for _, _, _, text in lines]


def test_help_body_colour():
    assert {color for _, _, color, _ in help_lines()[1:]} == {0xFFFF00}


@pytest.mark.parametrize("argv", [[], ["one", "two"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.startswith("usage:")


def test_missing_file_prints_usage(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == 0
    assert capsys.readouterr().out.startswith("usage:")


@pytest.mark.parametrize(
    "content",
    ["1 2\n1 2 3\n", "1 2\n", "1 g\n2 3\n", "1\n2\n", "1 2\n3 2000000\n"],
)
def test_invalid_map_is_reported(tmp_path, capsys, content):
    path = tmp_path / "map.fdf"
    path.write_text(content)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "invalid map"