# fdfview

A viewer for `.fdf` wireframe height maps. Each line of an `.fdf` file is a
row of the map; each space-separated token is a height, optionally followed
by a colour, for example `10,0xFF0000`. The viewer joins every point to its
right and lower neighbour with a line in that point's colour and shows the
result in a pygame window.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
fdfview maps/42.fdf
fdfview --classic maps/42.fdf
```

The command takes one map path, whose name must end in `.fdf` and have
something before the extension. An optional `--classic` placed before the
path selects the fixed view. If the arguments are wrong or the file cannot be
opened, the command exits with status 1 without opening a window; otherwise
it exits with status 0 when the window is closed.

### Interactive view (default)

A 1700x1000 window showing the map in an isometric projection that can be
rotated, zoomed, moved and switched to a parallel (top-down) layout.

| Key                        | Action                                   |
|----------------------------|------------------------------------------|
| `Esc`                      | close the window                         |
| `I`                        | isometric projection                     |
| `P`                        | parallel (top-down) projection           |
| `W` / `S`                  | rotate about the X axis (−3° / +3°)      |
| `A` / `D`                  | rotate about the Y axis (−3° / +3°)      |
| `Q` / `E`                  | rotate about the Z axis (−3° / +3°)      |
| `+`, `=`, keypad `+`       | zoom in                                  |
| `-`, keypad `-`            | zoom out (never below 1)                 |
| arrow keys                 | move the drawing by 10 pixels            |
| `R`                        | toggle continuous automatic rotation     |

With automatic rotation on, every angle advances by one degree per frame.

### Classic view (`--classic`)

A 2100x1300 window with a fixed isometric projection. The scale depends on
the number of rows: 20 pixels per unit up to 40 rows, 3 up to 250 rows, 1
beyond that. Only `Esc` (or closing the window) does anything.

## Map format

- Rows are lines of the file; tokens are separated by spaces.
- A token is `height` or `height,color`. A colour starting with `0x` is read
  as hexadecimal; otherwise it is read as a decimal number. Points without a
  colour are white (`0xFFFFFF`).
- Heights are decimal and may have a leading `+`. A `-` sign is not
  understood, so a negative value reads as 0. Reading stops before a digit
  that would take the value past 20000.
- Every row is cut to the length of the shortest row.

## Using it as a library

```python
from fdfview.parsing import load_map
from fdfview.raster import Framebuffer
from fdfview.projection import View, view_project, render

heightmap = load_map("maps/42.fdf")
buffer = Framebuffer(1700, 1000)
view = View()
render(
    heightmap,
    buffer,
    lambda x, y, z: view_project(x, y, z, view, buffer.width, buffer.height),
)
pixels = buffer.to_bytes()  # row by row, 4 little-endian bytes per pixel
```

- `fdfview.parsing`: `load_map`, `parse_map` (lines already in memory),
  `parse_line`, `parse_value`, `parse_int`, `parse_hex`, and the `HeightMap`
  and `Point` types.
- `fdfview.raster`: `Framebuffer` (`put_pixel`, `get_pixel`, `clear`,
  `to_bytes`), `bresenham_line` and `draw_line`.
- `fdfview.projection`: `View`, `ProjectionMode`, `view_project`,
  `classic_project`, the `rotate_x` / `rotate_y` / `rotate_z` helpers and
  `render`.
- `fdfview.controls`: `Key`, `Action`, `handle_keypress` and `auto_rotate`,
  which update a `View` without any window involved.

## Limitations

The viewer only displays maps: it does not save or export the rendered image,
and it does not edit maps.