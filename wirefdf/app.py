"""Command-line entry point: show a height map as a wireframe."""

import sys

from wirefdf.heightmap import InvalidMapError, load_map
from wirefdf.view import Key, View

USAGE = "usage: wirefdf map_file"
INVALID_MAP = "invalid map"
TITLE = "Fdf"
FONT_SIZE = 20
FRAME_RATE = 60


def help_lines():
    """Return the on-screen help as (x, y, color, text) tuples."""
    return [
        (30, 60, 0xFF0000, "HOW TO USE"),
        (30, 80, 0xFFFF00, "Quit = ESC"),
        (30, 100, 0xFFFF00, "Move = ^ v < >"),
        (30, 120, 0xFFFF00, "Zoom = page-up page-down"),
        (30, 140, 0xFFFF00, "Change Height_Z = + - "),
        (30, 160, 0xFFFF00, "Change Y = 4 6"),
        (30, 180, 0xFFFF00, "Change X = 8 2"),
        (30, 200, 0xFFFF00, "Change Z = 7 9"),
    ]


def _rgb(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _key_table(pygame):
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_PAGEUP: Key.PAGE_UP,
        pygame.K_PAGEDOWN: Key.PAGE_DOWN,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP2: Key.NUM_2,
        pygame.K_KP4: Key.NUM_4,
        pygame.K_KP6: Key.NUM_6,
        pygame.K_KP7: Key.NUM_7,
        pygame.K_KP8: Key.NUM_8,
        pygame.K_KP9: Key.NUM_9,
        pygame.K_2: Key.NUM_2,
        pygame.K_4: Key.NUM_4,
        pygame.K_6: Key.NUM_6,
        pygame.K_7: Key.NUM_7,
        pygame.K_8: Key.NUM_8,
        pygame.K_9: Key.NUM_9,
        pygame.K_i: Key.KEY_I,
        pygame.K_p: Key.KEY_P,
    }


def _render(pygame, screen, font, view):
    screen.fill((0, 0, 0))

    def plot(x, y, color):
        screen.set_at((x, y), _rgb(color))

    screen.lock()
    try:
        view.draw(plot)
    finally:
        screen.unlock()
    for x, y, color, text in help_lines():
        label = font.render(text, True, _rgb(color))
        screen.blit(label, (x, y - label.get_height()))
    pygame.display.flip()


def _run(view):
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        keys = _key_table(pygame)
        clock = pygame.time.Clock()
        _render(pygame, screen, font, view)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 1
                if event.type == pygame.KEYDOWN:
                    if not view.handle_key(keys.get(event.key, -1)):
                        return 0
                    _render(pygame, screen, font, view)
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv=None):
    """Load the map named on the command line and show it; return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        heightmap = load_map(args[0])
    except OSError:
        print(USAGE)
        return 0
    except InvalidMapError:
        print(INVALID_MAP)
        return 0
    view = View(heightmap, angle_x=48, angle_y=30, angle_z=-6)
    view.rotate()
    return _run(view)


if __name__ == "__main__":
    sys.exit(main())