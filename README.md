# transforma

A small, dependency-free toolkit for classic computer-graphics exercises.
Every scene class computes geometry only: it returns line segments as pairs
of integer `(x, y)` device coordinates, ready to hand to any drawing library.

## Modules

- `transforma.matrix`: a plain `Matrix` type (`from_rows`, `identity`,
  indexing with `m[r, c]`, `*` for matrix or scalar products,
  `rounded_product`, `to_rows`) and homogeneous 2D transformations.
  `translate`, `scale`, `scale_about`, `rotate` and `rotate_about` take a
  list of `(x, y)` or `(x, y, w)` points and return new tuples. Each partial
  product is rounded half up to an integer before summing, so figures stay
  on whole-pixel coordinates. Angles are in degrees; the matrix builders
  (`translation_matrix`, `scaling_matrix`, `fixed_point_scaling_matrix`,
  `rotation_matrix`, `pivot_rotation_matrix`) and `radians` are public too.
- `transforma.mapping`: `Mapper`, a window-to-viewport mapping. Set the
  world window with `set_window` and the device viewport with
  `set_viewport`. `map_point(x, y, left, top)` then flips the y axis and
  adds the origin offset. It raises `ValueError` if either rectangle is
  missing or the window has no width or height.
- `transforma.projection3d`: `Scene3D`, an oblique projection of a cube or
  of the letters "ITL" (`Shape.CUBE`, `Shape.ITL`). `set_alpha` and
  `set_phi` set the projection angles. `handle_key` covers translation
  (`W A S D Q E`), per-axis scaling (`M N K L P O`) and rotation (`+`/`-`
  about `rotation_axis`). `mode` chooses translate, scale or rotate.
  `projected_points`, `segments` and `z_axis` return device coordinates.
  `oblique_offset` projects a single point.
- `transforma.transform2d`: `TransformScene`, a triangle drawn about the
  centre of the drawing area. It can be translated, scaled and rotated, with
  fixed-point and pivot variants, and restored with `reset`. The `move_*`
  helpers, `handle_key` and the two rotation animations
  (`animation_one_step`, `animation_two_step`) act on it. `axes` and
  `segments` give the lines to draw.
- `transforma.mapping2d`: `MappingView`, triangle, star and dinosaur
  figures (`FigureKind`). `segments(mapped)` draws them as stored or
  through a viewport that grows with `set_zoom`. `sheet_rect` gives the
  sheet rectangle, which scales with the zoom.
- `transforma.dino_game`: `DinoGame`, a dinosaur that moves and resizes on
  key presses, and a cactus that grows twice on `cactus_tick` and then snaps
  back. The `P` and `G` keys return a lost or won message and reset the
  dinosaur.
- `transforma.motion`: `BouncingLabel` and `Aquarium`, objects that move
  ten pixels per `step` between zero and a limit. Labels reverse their text
  when they turn; the fish switches between two image names.
  `reverse_text` reverses a string.
- `transforma.linked_controls`: `LinkedControls`, a spin box and a slider
  kept in step with a text label. Values are clamped to the range, and
  `subscribe` registers callbacks for label changes.
- `transforma.random_fill`: `fill_random(count, rng)` returns random
  integers from 10 to 99.

## Installation

```
pip install .
```

## Example

```python
from transforma.matrix import rotate_about, translate
from transforma.mapping import Mapper

triangle = [(10, 10, 1), (30, 10, 1), (20, 30, 1), (10, 10, 1)]
moved = translate(triangle, 5, 0)
turned = rotate_about(triangle, 90, 20, 30)

mapper = Mapper()
mapper.set_window(0, 0, 400, 300)
mapper.set_viewport(0, 0, 400, 300)
print(mapper.map_point(10, 20, 200, 150))
```

## Command line

`transforma-fill` fills a list with random numbers from 10 to 99. It prints
a line with the list's address, then the numbers, then the numbers a second
time:

```
transforma-fill
transforma-fill --count 8 --seed 42
```

`--count` sets how many numbers to draw (default 5). `--seed` makes the
output repeatable.

## What it does not do

The package opens no windows, draws nothing and reads no keyboard itself.
Scenes take key names as strings through `handle_key`, and timers are
represented by `step`/`tick` methods that the caller invokes. Painting the
returned segments and wiring up input and timers is left to the
application.

## Tests

```
pip install .[test]
pytest
```