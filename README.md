# chartkit

Building blocks for drawing charts: colors, affine transforms, vector paths,
Bézier curve and arc flattening, dashing and stroking, a drawing context with
a save/restore stack, aliased line drawing onto Pillow images, and a few
computed series and file helpers.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Colors

`chartkit.drawing.color` provides the frozen `Color` dataclass (8-bit `r`,
`g`, `b`, `a`) and named constants such as `COLOR_RED`, `COLOR_SILVER` and
`COLOR_TRANSPARENT`.

```python
from chartkit.drawing.color import parse_color, color_from_hex

red = parse_color("#F00")
silver = parse_color("rgba(192, 192, 192, 1.0)")
navy = parse_color("navy")
print(str(color_from_hex("008000")))   # rgba(0,128,0,1.0)
print(red.with_alpha(64).is_transparent())   # False
```

`parse_color` accepts `rgba(...)`, `rgb(...)`, `#rrggbb` / `#rgb` and the
basic CSS color names (case-insensitive); an unknown name gives the zero
color `Color()`. Unparsable channel values inside `rgb()`/`rgba()` read as 0.
`Color.rgba()` returns alpha-premultiplied 16-bit channels and
`color_from_alpha_mixed_rgba` reverses that.

## Styles

`chartkit.drawing.styles` holds the enumerations `FillRule`, `LineCap`,
`LineJoin`, `Valign`, `Halign`, `ScalingPolicy` and `ImageFilter`, the
records `StrokeStyle`, `SolidFillStyle`, `TextStyle` and `ImageScaling`,
and `DEFAULT_DPI` (96.0). `chartkit.drawing.util` converts between pixels
and points (`pixels_to_points`, `points_to_pixels`) and measures distances.

## Transforms and paths

```python
import math
from chartkit.drawing.matrix import identity_matrix
from chartkit.drawing.path import Path

m = identity_matrix()
m.translate(10, 20)
m.rotate(math.pi / 2)
print(m.transform_point(1, 0))

p = Path()
p.move_to(0, 0)
p.line_to(10, 0)
p.quad_curve_to(15, 5, 10, 10)
p.close()
print(p)
```

`Matrix` methods such as `translate`, `scale`, `rotate`, `compose` and
`inverse` change the matrix in place; `transform`, `inverse_transform` and
`vector_transform` return new point lists. Inverting a matrix with a zero
determinant raises `ValueError`.

## Flattening, dashing and stroking

`flatten` turns a `Path` into straight segments and sends them to any
flattener: a `SegmentedPath` (collects points), a `Transformer` (applies a
`Matrix`), a `DashVertexConverter` (cuts lines into dashes and gaps), a
`LineStroker` (builds the outline polygon of a stroke) or a
`DemuxFlattener` fanning out to several of them. The curve helpers
`trace_quad`, `trace_cubic` and `trace_arc` live in `chartkit.drawing.curve`.

```python
from chartkit.drawing.flatteners import SegmentedPath, flatten

out = SegmentedPath()
flatten(p, out, 1.0)
print(out.points)
```

## Graphic context

`chartkit.drawing.context.StackGraphicContext` holds a `ContextState`: the
current transform, path, line width, dash, stroke and fill colors, fill
rule, cap, join and font settings. Path calls (`move_to`, `line_to`,
`arc_to`, ...) build the current path; `save()` pushes a copy of the state
and `restore()` returns to the last saved one.

## Line drawing

`chartkit.drawing.line.bresenham` and `polyline_bresenham` draw aliased
lines onto a Pillow image in mode `RGB` or `RGBA`, skipping pixels that fall
outside it.

## Series and helpers

- `chartkit.ema_series.EMASeries` – exponential moving average over an inner series (default period 12).
- `chartkit.histogram_series.HistogramSeries` – splits each value into an upper bound (positive values) or a lower bound (the rest).
- `chartkit.grid_line.generate_grid_lines` – alternating major/minor grid lines at every tick but the first and last.
- `chartkit.jet.jet` – the jet color map.
- `chartkit.fileutil.read_lines` / `read_chunks` – feed a file to a handler line by line or in fixed-size byte chunks.
- `chartkit.image_writer.ImageWriter` – collects written PNG bytes or a raw Pillow image and returns it as an image.

## What it does not do

chartkit has no chart type that lays out axes, ticks, legends and series
and renders them to a PNG or SVG file, no anti-aliased rasterizer that
fills or strokes paths onto an image, and no font loading or text drawing.
The flatteners produce point lists and outlines; turning them into pixels,
beyond the aliased Bresenham lines, is left to the caller. There is no
command-line tool.