# sanjiplot

A small 2D plotting library. It draws line plots, dot plots and quiver
(arrow field) plots with automatic axis limits, tick labels, an optional
equal axes ratio and a zoom history, and renders figures to RGB images
with Pillow.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Usage

`sanjiplot.api` keeps a set of numbered figures and a current figure.

```python
import numpy as np
from sanjiplot import api
from sanjiplot.colors import BLUE, RED

api.init()

x = np.linspace(0.0, 2.0 * np.pi, 1000)

api.figure("Simple data")
api.plot(x, np.sin(x), {"line_style": "-", "color": RED}, 10)
api.plot(x, np.cos(x), {"line_style": "-", "color": BLUE}, 2)

api.current_figure().save("simple.png", 800, 600)
```

- `api.init()` forgets all figures and restarts numbering at zero.
- `api.figure(name)` creates a figure on the lowest free number and makes it
  current; without a name the figure is named after its number.
- `api.plot` and `api.quiver` draw into the current figure and create one
  if there is none. Calls with empty `x` are ignored.
- `Figure.render(width, height)` returns a Pillow image;
  `Figure.save(path, width, height)` writes it, the file suffix choosing the
  format.

`y` passed to `plot` has one row per `x` value and may have several columns,
one curve per column. Series with a higher priority are drawn on top of those
with a lower one. Colours are `0xRRGGBB` integers; named colours such as
`BLACK`, `WHITE`, `BLUE`, `ORANGE`, `GREEN`, `RED`, `PURPLE`, `BROWN`,
`PINK`, `GRAY`, `OLIVE` and `CYAN` live in `sanjiplot.colors`.

### Line styles

The style key `"line_style"` takes `"-"` (solid, the default), `"."`
(dotted) or `"o"` (dots); the character code as a number works as well.
Any other value, or a series with only one point, raises `ValueError` when
the figure is rendered.

### Axis limits and appearance

Limits follow the data, with a 2.5 % margin, unless fixed explicitly. These
setters only take effect once the current figure holds data:

```python
api.set_xlimits(0.0, 6.0)
api.set_ymin(-1.5)
api.set_axes_ratio("equal")
api.set_plot_background_color(0x000000)
api.set_xticks_background_color(0xFFFFFF)
api.set_yticks_background_color(0xFFFFFF)
```

`set_xmin`, `set_xmax`, `set_ymin`, `set_ymax` and `set_ylimits` work the
same way.

### Quiver plots

```python
api.figure("Arrows")
api.quiver(x, y, u, v, {"arrow_length": 0.5})
api.quiver(x, y, u, v, {"arrow_length": 0.5}, flags=["center_arrows"])
```

Arrows start at `(x, y)` and point along `(u, v)`; their length is that of
`(u, v)` unless `"arrow_length"` is given. Each entry of `flags` is added to
the style with the value `1.0`. Style keys:

- `"color"`: arrow colour (default black).
- `"center_arrows"`: shift each arrow back by half its length.
- `"use_colormap"`: colour arrows by magnitude between `"min"` and `"max"`
  with the turbo colour map. `"arrow_length"`, `"colormap"` (which must be
  `sanjiplot.colors.TURBO`), `"min"` and `"max"` must then be given;
  `"use_logscale"` maps magnitudes on a logarithmic scale.

Mismatched array lengths or a missing required key raise `ValueError`.

### Zoom history

Each plot's `LimitsInfo` (in `sanjiplot.limits`) keeps a history of axes
limits: `add_axes_limits(xmin, xmax, ymin, ymax)` steps forward to new
limits, and `back()`, `forward()` and `home()` move through them.
`PlotArea.press`, `move` and `release` (in `sanjiplot.plotarea`) turn a
rubber-band selection in pixels into a new history entry, and `PlotUI`
(in `sanjiplot.plotui`) maps clicks on its home, back and forward buttons to
those moves.

### Colours

`sanjiplot.colors.hsv_to_rgb(h, s, v)` converts hue, saturation and value,
each in `[0, 1]`, to a packed `0xRRGGBB` integer, and
`sanjiplot.colors.split_rgb(color)` splits a packed colour into its red,
green and blue bytes.

## Examples

```
sanjiplot-examples
```

asks which example to render: `[1] DotPlot`, `[2] Quiver` or
`[3] SimpleLinePlot`. The number can also be given directly, and `-o DIR`
chooses the output directory (the current one by default):

```
sanjiplot-examples 3 -o plots
```

The example writes one PNG per figure and prints the file paths.

## What it does not do

sanjiplot renders to images only: it opens no windows, and mouse zooming
and the navigation buttons are only reachable by calling the methods above.
The figure and module-level API has no function for showing an image, and
there is no heatmap or image-file example.