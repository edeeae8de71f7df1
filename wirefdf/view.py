"""Interactive view state: keys, projection and drawing."""

from dataclasses import dataclass
from enum import IntEnum

from wirefdf.heightmap import HeightMap
from wirefdf.projection import rotate_points
from wirefdf.raster import line_points

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 900
LINE_COLOR = 0xFF4433
ZOOM_STEP = 0.9
ZOOM_LIMIT = 70
HEIGHT_STEP = 0.1
MOVE_STEP = 2
ANGLE_STEP = 3


class Key(IntEnum):
    """Key codes the view reacts to."""

    KEY_I = 34
    KEY_P = 35
    PLUS = 69
    MINUS = 78
    NUM_2 = 84
    NUM_4 = 86
    NUM_6 = 88
    NUM_7 = 89
    NUM_8 = 91
    NUM_9 = 92
    ESC = 53
    PAGE_UP = 116
    PAGE_DOWN = 121
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


_ROTATION_KEYS = frozenset(
    {Key.NUM_6, Key.NUM_4, Key.NUM_8, Key.KEY_I, Key.KEY_P, Key.NUM_2, Key.NUM_9, Key.NUM_7}
)


@dataclass
class View:
    """Camera settings for a height map and the window it is drawn in."""

    heightmap: HeightMap
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    zoom: float = 20
    height_z: float = 1
    x_move: float = 0
    y_move: float = 0
    angle_x: float = 0
    angle_y: float = 0
    angle_z: float = 0

    def _apply_zoom(self, key):
        if key == Key.PAGE_UP and self.zoom <= ZOOM_LIMIT:
            self.zoom += ZOOM_STEP
        if key == Key.PAGE_DOWN and self.zoom > 0:
            self.zoom -= ZOOM_STEP

    def _apply_move(self, key):
        if key == Key.UP:
            self.y_move -= MOVE_STEP
        if key == Key.DOWN:
            self.y_move += MOVE_STEP
        if key == Key.RIGHT:
            self.x_move += MOVE_STEP
        if key == Key.LEFT:
            self.x_move -= MOVE_STEP

    def _apply_height(self, key):
        if key == Key.PLUS:
            self.height_z += HEIGHT_STEP
        if key == Key.MINUS:
            self.height_z -= HEIGHT_STEP
        if key in (Key.PLUS, Key.MINUS):
            self.rotate()

    def _apply_rotation(self, key):
        if key == Key.KEY_P:
            self.angle_x, self.angle_y, self.angle_z = 0, 0, 0
        if key == Key.KEY_I:
            self.angle_x, self.angle_y, self.angle_z = 45, 26.65, -30
        if key == Key.NUM_8:
            self.angle_x += ANGLE_STEP
        if key == Key.NUM_2:
            self.angle_x -= ANGLE_STEP
        if key == Key.NUM_6:
            self.angle_y += ANGLE_STEP
        if key == Key.NUM_4:
            self.angle_y -= ANGLE_STEP
        if key == Key.NUM_9:
            self.angle_z += ANGLE_STEP
        if key == Key.NUM_7:
            self.angle_z -= ANGLE_STEP
        if key in _ROTATION_KEYS:
            self.rotate()

    def handle_key(self, key):
        """Apply a key press; return False when the view should close."""
        self._apply_zoom(key)
        self._apply_move(key)
        self._apply_height(key)
        self._apply_rotation(key)
        return key != Key.ESC

    def rotate(self):
        """Recompute the projected points from the current angles."""
        rotate_points(self.heightmap, self.angle_x, self.angle_y, self.angle_z, self.height_z)

    def _screen(self, point):
        return (
            self.width / 3 + (point.x + self.x_move) * self.zoom,
            self.height / 3 + (point.y + self.y_move) * self.zoom,
        )

    def segments(self):
        """Yield the screen segments of the wireframe as (start, end) pairs."""
        points = self.heightmap.points
        rows = self.heightmap.rows
        width = self.heightmap.width
        for i, row in enumerate(points):
            for j, point in enumerate(row):
                start = self._screen(point)
                if j + 1 < width:
                    yield start, self._screen(row[j + 1])
                if i + 1 < rows:
                    yield start, self._screen(points[i + 1][j])

    def draw(self, plot):
        """Call ``plot(x, y, color)`` for every pixel of the wireframe."""
        for start, end in self.segments():
            for x, y in line_points(start, end, self.width, self.height):
                plot(x, y, LINE_COLOR)