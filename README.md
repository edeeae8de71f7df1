# wirefdf

A small viewer that draws a height map as a rotated wireframe grid, plus a
reader for XPM images and a table of X11 colour names.

## Map files

A map file is plain text: each line is one row of integer heights separated
by spaces, and every row must have the same number of columns. There must be
at least two rows and two columns, and every height must lie between
-1000000 and 1000000. Only digits, spaces, tabs, `-`, `,`, `x` and the hex
letters `a`-`f` / `A`-`F` may appear. For example:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

A colour suffix such as `10,0xFF0000` is accepted in a cell, but it is
skipped: every line of the wireframe is drawn in the same colour.

## Running

```
pip install .
wirefdf path/to/map.fdf
```

A window opens with the grid drawn in a tilted view and a short key help in
the corner. With a wrong number of arguments, or with a file that cannot be
opened, the line `usage: wirefdf map_file` is printed; a malformed map prints
`invalid map`. Esc exits with status 0, closing the window with status 1.

## Keys

| Key                        | Action                              |
|----------------------------|-------------------------------------|
| Esc                        | quit                                |
| arrow keys                 | move the picture                    |
| Page Up / Page Down        | zoom in / out                       |
| `+` (or `=`) / `-`         | raise / flatten the non-zero heights|
| 8 / 2                      | rotate about X                      |
| 6 / 4                      | rotate about Y                      |
| 9 / 7                      | rotate about Z                      |
| `i`                        | preset view (45, 26.65, -30 degrees)|
| `p`                        | reset all angles to zero            |

Digit keys work both on the keypad and on the main row.

## Library use

The pieces are usable on their own:

- `wirefdf.heightmap.load_map(path)` and `parse_map(lines)` build a
  `HeightMap` of `Point`s, raising `InvalidMapError` on bad input.
- `wirefdf.numbers.parse_int(text, index)` reads one integer and returns
  `(value, next_index)`.
- `wirefdf.projection.rotate_points(heightmap, angle_x, angle_y, angle_z, height_z)`
  rotates a map's points in place (angles in degrees).
- `wirefdf.raster.line_points(start, end, width, height)` yields the pixels of
  a line, clipped to the given area.
- `wirefdf.view.View` holds zoom, offset and angles, reacts to `Key` presses
  through `handle_key`, yields screen `segments()`, and draws through any
  `plot(x, y, color)` callable with `draw`.
- `wirefdf.colornames.lookup_color(name)` resolves X11 colour names
  (case-insensitive; unknown names give 0, `"none"` gives -1), and
  `good_color(color, depth, shifts)` converts a 0xRRGGBB value to a
  visual's pixel layout.
- `wirefdf.xpm.parse_xpm_file(path)`, `parse_xpm_text(text)` and
  `parse_xpm(lines)` read an XPM image into an `XpmImage`, raising
  `XpmError` on bad data.

## What it does not do

The viewer only shows height maps; it does not display XPM images, and it
does not use the per-cell colours of a map. XPM images are decoded to colour
values in memory only.

## Tests

```
pip install .[test]
pytest
```