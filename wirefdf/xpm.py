"""Reading images in the XPM format."""

import re
from dataclasses import dataclass

from wirefdf.colornames import NONE_COLOR, lookup_color
from wirefdf.numbers import parse_int

_NAME_LIMIT = 63
_LONG_MAX = 2**63 - 1
_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; pixels are 0xRRGGBB values, -1 for transparent."""

    width: int
    height: int
    pixels: tuple

    def pixel(self, x, y):
        """Return the colour at column ``x`` of row ``y``."""
        return self.pixels[y][x]

    @property
    def transparent(self):
        """Whether any pixel of the image is transparent."""
        return any(color == NONE_COLOR for row in self.pixels for color in row)


def split_words(text):
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text, find):
    """Return the first position of ``find`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def strip_comments(text):
    """Blank out C-style comments lying outside quotes, keeping the length."""
    while (start := find_unquoted(text, "/*")) != -1:
        close = text.find("*/", start + 2)
        stop = len(text) if close == -1 else close + 2
        text = text[:start] + " " * (stop - start) + text[stop:]
    while (start := find_unquoted(text, "//")) != -1:
        newline = text.find("\n", start + 2)
        stop = len(text) if newline == -1 else newline + 1
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _text_rgb(name, end):
    if name.startswith("#"):
        sign, digits = _HEX.match(name, 1).groups()
        value = min(int(digits, 16) if digits else 0, _LONG_MAX)
        if sign == "-":
            value = -value
        return _to_int32(value)
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    return lookup_color(name)


def _next_line(rows, what):
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def _read_header(rows):
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    values = [parse_int(word)[0] for word in words[:4]]
    if any(value <= 0 for value in values):
        raise XpmError("header values must be positive")
    return values


def _read_colors(rows, count, cpp):
    table = {}
    direct = cpp <= 2
    for _ in range(count):
        line = _next_line(rows, "colour")
        key = line[:cpp]
        tokens = split_words(line[cpp:])
        try:
            index = tokens.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line {line!r} has no 'c' key") from None
        if index >= len(tokens):
            raise XpmError(f"colour line {line!r} has no colour")
        end = tokens[index + 1] if index + 1 < len(tokens) else None
        color = _text_rgb(tokens[index], end)
        # Short keys keep the last definition, longer ones the first.
        if direct or key not in table:
            table[key] = color
    return table


def parse_xpm(lines):
    """Decode an XPM image from its strings: header, colours, then rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    table = _read_colors(rows, ncolors, cpp)
    pixels = []
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is too short")
        keys = (line[start:start + cpp] for start in range(0, width * cpp, cpp))
        pixels.append(tuple(table.get(key, 0) for key in keys))
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text):
    """Decode an XPM image from the text of an XPM file."""
    return parse_xpm(match.group(1) for match in _QUOTED.finditer(strip_comments(text)))


def parse_xpm_file(path):
    """Decode the XPM image stored at ``path``."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())