# hexlogogen

Generate the layout of geometric logos: coloured shapes placed on a hexagon
that is cut into triangular cells.

A hexagon is divided into a triangular grid (`TriangularGrid`). Shapes are
grown outward, one cell at a time, from cells near the centre or next to
shapes that already exist. Candidate shapes are rated for compactness,
smoothness and balance, and the shapes are then coloured from a theme so
that bordering shapes get different colours where the palette allows it.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. Tests need
the `test` extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
from hexlogogen.generator import Generator
from hexlogogen.palette import Theme

generator = Generator(6, 3, 0.8, seed=42)
generator.set_theme(Theme.BLUES).set_allow_overlap(True)
generator.generate()

for shape in generator.shapes:
    print(shape.color, shape.opacity, shape.cells)

grid = generator.grid
for cell_id in generator.shapes[0].cells:
    print(grid.get_cell(cell_id).vertices)
```

`Generator(grid_size, shapes_count, opacity, seed=None)` clamps its
arguments: the grid size to 2–8, the number of shapes to 1–10 and the
opacity to 0.0–1.0. The hexagon has a size (centre to corner) of 100 and is
centred on the origin. A grid size of 2 gives a 24-triangle layout of four
triangles per sector; larger sizes give `6 * n * n` cells.

Each `Shape` holds a colour (`"#RRGGBB"`), an opacity and a list of cell
ids into the grid. Each call to `generate()` builds a new grid and a new set
of shapes.

Without overlap (the default), shapes do not share cells and are coloured
so that bordering shapes differ. With `set_allow_overlap(True)` and at least
two shapes, the first two shapes are drawn in a pair of contrasting colours
(the second is the colour of highest contrast to the first among those
drawn), and the cells they share become a separate shape in the average of
the two colours. Further shapes avoid the cells already used.

### Themes

`Generator.available_themes()` (or `hexlogogen.palette.available_themes()`)
lists the theme names: `mesos` (the default), `google`, `blues`, `greens`,
`reds`, `purples` and `rainbow`. Pick one with `set_theme(Theme.REDS)` or by
name with `set_color_scheme("reds")`; names are case-insensitive and unknown
names fall back to `mesos`. `Theme.palette()` returns a theme's colours.

### Building blocks

- `hexlogogen.geometry`: `Point`, `Cell` (a triangle with its centroid) and
  `HexGrid`.
- `hexlogogen.grid`: `TriangularGrid`, with `get_cell`, `cell_count`,
  `adjacent_cells` and `get_cell_centroid`.
- `hexlogogen.shape`: `Shape` and `ShapeMetrics`.
- `hexlogogen.shape_scoring`: `ShapeEvaluator`, which orders cells by
  distance from the centre, finds cells bordering a set of cells, scores
  candidate cells and rates whole shapes.
- `hexlogogen.shape_growth` and `hexlogogen.shape_generator`:
  `ShapeGrower` and `ShapeGenerator`, which grow centre, connected,
  avoiding, angular and balanced shapes, or a whole set with
  `generate_shapes`.
- `hexlogogen.color`: `ColorManager`, which draws random colours from a
  palette and assigns colours to shapes.

### Colour helpers

`hexlogogen.colorutil` holds small functions for `#RRGGBB` strings:
`hex_to_rgb`, `rgb_to_hex`, `blend_colors`, `average_colors`,
`relative_luminance` and `color_contrast` (the WCAG contrast ratio).

```python
from hexlogogen.colorutil import blend_colors, color_contrast

blend_colors("#FF0000", "#0000FF", 0.5)   # "#800080"
color_contrast("#FFFFFF", "#000000")      # about 21
```

### Randomness

A seed is combined with part of the current time, so the same seed does not
give identical designs from one run to the next. Without a seed the
generator draws fresh randomness from the system.

## What it does not do

The package computes shapes, cells and colours only. It does not draw them:
there is no SVG or PNG output, no command-line program and no web server.
To produce an image, render each shape's cells (the triangles from
`TriangularGrid.get_cell(...).vertices`) in the shape's colour and opacity
with a drawing library of your choice.