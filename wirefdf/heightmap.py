"""Loading and validating wireframe height maps."""

from dataclasses import dataclass, field

from wirefdf.numbers import parse_int

DEFAULT_COLOR = 0x00FF00
Z_LIMIT = 1000000
_VALID_CHARS = frozenset(" \t-0123456789,xABCDEFabcdef")


class InvalidMapError(ValueError):
    """Raised when a map file is not a valid height map."""


@dataclass
class Point:
    """One grid point: its original position and its projected one."""

    x_origin: float
    y_origin: float
    z_origin: float
    color: int = DEFAULT_COLOR
    x: float = field(default=0.0)
    y: float = field(default=0.0)
    z: float = field(default=0.0)

    def __post_init__(self):
        self.x = self.x_origin
        self.y = self.y_origin
        self.z = self.z_origin

    @property
    def z_change(self):
        """Whether the height of this point is scaled."""
        return self.z_origin != 0


@dataclass
class HeightMap:
    """A rectangular grid of points, indexed as ``points[row][column]``."""

    points: list

    @property
    def rows(self):
        return len(self.points)

    @property
    def width(self):
        return len(self.points[0]) if self.points else 0

    def __iter__(self):
        for row in self.points:
            yield from row


def line_width(line, delimiter=" "):
    """Count the words of ``line`` separated by ``delimiter``."""
    return sum(1 for word in line.split(delimiter) if word)


def is_valid_chars(line):
    """Whether ``line`` holds only characters allowed in a map."""
    return all(char in _VALID_CHARS for char in line)


def _parse_row(line, y, width, rows):
    row = []
    index = 0
    for x in range(width):
        z, index = parse_int(line, index)
        if z > Z_LIMIT or z < -Z_LIMIT:
            raise InvalidMapError(f"height {z} out of range")
        row.append(Point(float(x - width // 2), float(y - rows // 2), float(z)))
        while index < len(line) and line[index] != " ":
            index += 1
    return row


def parse_map(lines):
    """Build a height map from an iterable of text lines."""
    width = -1
    raw = []
    for line in lines:
        line = line.rstrip("\n")
        if not is_valid_chars(line):
            raise InvalidMapError("invalid characters in map")
        words = line_width(line, " ")
        if width == -1:
            width = words
        elif words != width:
            raise InvalidMapError("rows of different width")
        raw.append(line)
    if len(raw) < 2 or width < 2:
        raise InvalidMapError("map is too small")
    rows = len(raw)
    return HeightMap([_parse_row(line, y, width, rows) for y, line in enumerate(raw)])


def load_map(path):
    """Read and parse the height map stored at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return parse_map(lines)