import pytest

from wirefdf.xpm import (
    XpmError,
    XpmImage,
    find_unquoted,
    parse_xpm,
    parse_xpm_file,
    parse_xpm_text,
    split_words,
    strip_comments,
)

LINES = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]

XPM_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c None",
// pixels
"ab",
"ba"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  10 20\t3  1 ") == ["10", "20", "3", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"/*" /*'
    pos = find_unquoted(text, "/*")
    assert text[pos:pos + 2] == "/*"
    assert pos > text.index('"', 1)


def test_find_unquoted_missing():
    assert find_unquoted("abc", "x") == -1


def test_strip_comments_keeps_length_and_quoted_text():
    text = 'a /* x */ "/* kept */" b // tail\nc'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert '"/* kept */"' in result
    assert "tail" not in result
    assert " x " not in result
    assert result.startswith("a ")
    assert result.endswith("c")


def test_parse_basic_image():
    image = parse_xpm(LINES)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == ((0xFF0000, -1), (-1, 0xFF0000))
    assert image.pixel(1, 0) == -1
    assert image.transparent


def test_named_colour_with_two_words():
    image = parse_xpm(["1 1 1 1", "a c dark red", "a"])
    assert image.pixel(0, 0) == 0x8B0000


def test_named_colour_ignores_case():
    image = parse_xpm(["1 1 1 1", "a c RED", "a"])
    assert image.pixel(0, 0) == 0xFF0000
    assert not image.transparent


def test_hex_all_ones_is_transparent():
    image = parse_xpm(["1 1 1 1", "a c #FFFFFFFF", "a"])
    assert image.pixel(0, 0) == -1


def test_long_keys_keep_first_definition():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == 0xFF0000


def test_short_keys_keep_last_definition():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0xFF


def test_unknown_key_is_black():
    image = parse_xpm(["1 1 1 3", "aaa c red", "bbb"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_parse_text_matches_lines():
    assert parse_xpm_text(XPM_TEXT) == parse_xpm(LINES)


def test_parse_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(XPM_TEXT)
    image = parse_xpm_file(path)
    assert isinstance(image, XpmImage)
    assert image == parse_xpm(LINES)


def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_xpm_file(tmp_path / "absent.xpm")