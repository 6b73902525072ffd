# minisolar

A small 2D solar-system demo built on pygame. A sun spins in the middle of
the window, an earth orbits the sun, and a moon orbits the earth. Each body
is placed by a `Transform` whose world matrix is built from its scale,
rotation and position and then chained through its parent, so turning the
sun carries the earth and the moon with it.

The package also holds the pieces the demo is built from, which can be used
on their own:

- `minisolar.mymath` – `clamp(value, min_val, max_val)` and `square(value)`.
- `minisolar.vector2.Vector2` – a mutable 2D vector with `+`, `-`, `*`,
  `/`, iteration, `length()`, `length_sq()`, `normalized()`, `normalize()`,
  and the static helpers `dot`, `distance`, `distance_sq`, `direction`,
  `lerp` (with `t` clamped to `[0, 1]`) and `reflect`. Dividing by a number
  whose magnitude is at most `0.0001` gives an infinite vector.
- `minisolar.matrix3x2.Matrix3x2` – an immutable 2D affine matrix in the
  row-vector convention (`a * b` applies `a` first, then `b`), with
  `identity()`, `translation()`, `rotation()` (degrees), `scale()`,
  `inverse()` (raises `ValueError` for a singular matrix), `as_tuple()` and
  `transform_point()`.
- `minisolar.transform.Transform` – `position`, `rotation`, `scale` and an
  optional `parent`, with `world_matrix()`, `reset()`, `translate()` and
  `rotate()`.
- `minisolar.gameobject.GameObject` – an abstract base class owning a
  `Transform`, with `update()` and `render()` to override.
- `minisolar.image.Image` – holds a bitmap; `size()` returns its width and
  height and raises `ValueError` when no bitmap is set.
- `minisolar.renderer.Renderer` – clears a pygame surface, draws surfaces
  through a `Matrix3x2` with optional destination and source rectangles
  (`(left, top, right, bottom)`) and opacity, and offers `unity_matrix()`,
  which maps y-up coordinates centred on the window to pixels. Shear in a
  transform is not drawn.
- `minisolar.camera.Camera` – moved by the arrow keys; its
  `inverted_matrix()` maps world space to view space.
- `minisolar.spaceobject.SpaceObject` – an image that turns by a fixed
  number of degrees every frame and draws itself centred on its transform.
- `minisolar.winapp.WinApp` – opens a window and runs the event, update and
  render loop at 60 frames a second.
- `minisolar.app.DemoGameApp` – the demo scene, and `main()`, the command.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
minisolar
```

An 800×600 window opens. The sun turns 0.3°, the earth 0.6° and the moon
0.9° each frame. The arrow keys move the camera by three units per frame.
Releasing Escape, or closing the window, ends the demo.

The demo loads `Sun.png`, `Earth.png` and `Moon.png` from the directory
`Resource`, relative to where it is started. Another directory can be given:

```
minisolar --resources path/to/images
```

A missing image stops the demo with `FileNotFoundError`.

## Using the maths on its own

```python
from minisolar.vector2 import Vector2
from minisolar.transform import Transform

sun = Transform()
earth = Transform()
earth.position = Vector2(800.0, 0.0)
earth.parent = sun

sun.rotate(90.0)
x, y = earth.world_matrix().transform_point(Vector2(0.0, 0.0))
```

Rotations accumulate in degrees; when a call to `rotate()` takes the total
past 360 it is brought back by one turn.

## What it does not do

The package ships no images: the three pictures the demo draws must be
supplied by the user. The demo has no sound, no settings and no way to save
or restore the scene.