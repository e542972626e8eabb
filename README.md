# meshcore

Building blocks for polygon mesh tools and viewers, written in Python on
top of numpy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `meshcore.properties`: per-element attribute storage.
  `PropertyArray` is a named list of values with a default fill value;
  `Property` is a handle to one array (falsy when it refers to nothing);
  `PropertyContainer` holds uniquely named arrays that are resized,
  extended (`push_back`) and swapped together. Adding a name that already
  exists raises `InvalidInputException`; `get` returns an invalid handle for
  a missing name; `copy` makes a deep copy.
- `meshcore.stopwatch`: `StopWatch`, an accumulating timer
  (`start`, `resume`, `stop`, `elapsed` in milliseconds). It can be used as
  a context manager, and `str()` gives e.g. `"3.2 ms"`.
- `meshcore.memory_usage`: `max_size()` and `current_size()` give the peak
  and current resident set size of the process in bytes. `max_size` works
  on Linux and macOS, `current_size` on Linux; elsewhere both return 0.
- `meshcore.barycentric`: `barycentric_coordinates(p, u, v, w)` returns
  the barycentric coordinates of a 3D point with respect to a triangle as a
  numpy array; a degenerate triangle gives `(1/3, 1/3, 1/3)`.
- `meshcore.textures`: `cold_warm_texture()` returns the cold-warm color
  map as a `(256, 3)` uint8 array; `cold_warm_color(t)` looks up a value in
  it with linear filtering, clamping `t` to [0, 1] and returning RGB in
  [0, 1]; `checkerboard_texture(resolution=512)` returns a blue and white
  checkerboard image with 32-pixel squares.
- `meshcore.tessellation`: `tessellate(points)` splits a polygon into
  triangles given as index triples. Quads take the split with the smaller
  sum of squared areas; larger polygons are triangulated by dynamic
  programming, minimising that sum so that non-convex polygons do not fold
  over. `squared_triangle_area(p0, p1, p2)` is the cost used.
- `meshcore.trackball`: `DrawModes`, an ordered list of named draw modes
  with one active (`add`, `set`, `current`, `cycle`, `clear`), and
  `TrackballCamera`, which keeps modelview and projection matrices and
  updates them for rotation, panning, zooming and scrolling driven by mouse
  positions (`motion` dispatches on the buttons and modifiers held).
- `meshcore.help_items`: `HelpItems`, an ordered list of
  `(key, description)` pairs that can be inserted at a position.
- `meshcore.exceptions`: the error types raised by the package
  (`InvalidInputException` is a `ValueError`, `IOException` an `OSError`,
  and so on).

Invalid arguments, such as a polygon with fewer than three corners, a
non-positive viewport size or an out-of-range help item position, raise
`InvalidInputException`.

## Examples

```python
from meshcore.properties import PropertyContainer

vertices = PropertyContainer()
weights = vertices.add("v:weight", 1.0)
vertices.resize(3)
weights[1] = 0.5
print(weights.vector())            # [1.0, 0.5, 1.0]
```

```python
from meshcore.stopwatch import StopWatch

with StopWatch() as watch:
    sum(range(100_000))
print(watch)                       # e.g. "3.2 ms"
```

```python
from meshcore.tessellation import tessellate

square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
print(tessellate(square))          # [(0, 1, 3), (1, 2, 3)]
```

```python
from meshcore.trackball import TrackballCamera

camera = TrackballCamera(800, 600)
camera.set_scene((0.0, 0.0, 0.0), 1.0)
camera.rotate((0.0, 1.0, 0.0), 30.0)
projection = camera.update_projection()
```

## What this package does not do

There is no surface mesh data structure, no mesh file reading or writing,
and no mesh processing algorithms. Nothing here opens a window, draws with
a graphics API or handles input events: the camera, draw mode and help item
classes hold only the state and math a viewer needs. There is no command to
run.