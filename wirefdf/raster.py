"""Line rasterisation."""


def _inside(x, y, width, height):
    return 0 <= x < width and 0 <= y < height


def line_points(start, end, width, height):
    """Yield the pixels of the segment from ``start`` to ``end``.

    Pixels outside the ``width`` x ``height`` area are dropped, except that a
    zero-length segment always yields its start pixel once before the
    clipped walk.
    """
    sx, sy = start
    ex, ey = end
    dx = 1 if ex - sx >= 0 else -1
    dy = 1 if ey - sy >= 0 else -1
    length_x = abs(ex - sx)
    length_y = abs(ey - sy)
    length = max(length_x, length_y)
    x = int(sx)
    y = int(sy)
    if length == 0:
        yield (x, y)
    remaining = length + 1
    if length_y <= length_x:
        error = -length_x
        while remaining > 0:
            if _inside(x, y, width, height):
                yield (x, y)
            x += dx
            error += 2 * length_y
            if error > 0:
                error -= 2 * length_x
                y += dy
            remaining -= 1
    else:
        error = -length_y
        while remaining > 0:
            if _inside(x, y, width, height):
                yield (x, y)
            y += dy
            error += 2 * length_x
            if error > 0:
                error -= 2 * length_y
                x += dx
            remaining -= 1