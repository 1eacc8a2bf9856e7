# glsketches

A collection of small sketches built around 3D geometry and simple physics.
Everything is plain Python using only the standard library. Shapes are
described as lists of `Primitive` values (a joining `Mode`, a tuple of
vertices and a colour) that any renderer can consume.

## What is inside

- `glsketches.coords` — `deg2rad` / `rad2deg`, and `cart2pol` / `pol2cart`
  for converting between Cartesian `(x, y, z)` and polar
  `(norm, horizontal, vertical)` coordinates. The horizontal angle is measured
  in the x-z plane from the x axis towards z; the vertical angle is the
  elevation towards y. `CoordSystem(diffs)` keeps a position and its
  derivatives up to `diffs` in both forms at once (`set_cart`, `cart`,
  `set_pol`, `pol`, `carts`, `polars`); an index outside `0..diffs` raises
  `IndexError`.
- `glsketches.physics` — `Body(mass, size)`, holding position, velocity and
  acceleration. Setting the acceleration sets the force and setting the
  force sets the acceleration (F = m·a). `Body.step()` adds the acceleration
  to the velocity, then the velocity to the position, and returns the new
  position.
- `glsketches.shapes` — vertex generation for `cube`, `arrow`, `curve`
  (a parabola in unit steps), `circle`, `circle3d`, `spiral3d`, `vortex3d`
  and `axis`, plus `CubeScene`, a cube turned with the keyboard.
- `glsketches.camera` — `OrbitCamera`, a camera looking at the origin and
  moved over a sphere by keys (`i`/`k`, `j`/`l`, `u`/`o`, `r`), and
  `ArrowScene`, an arrow aimed by horizontal and vertical angle.
- `glsketches.spirals` — `ellipse`, `tilted_circle`, `flat_spiral` and
  `SpiralScene`, which combines a circle, spirals and a vortex and spins
  them with `step()`.
- `glsketches.lightsout` — the "Tap To On" puzzle: a square `Board` of lights
  where toggling one flips it and its four neighbours, and `TapToOn`, which
  lays the board out on a window and turns mouse presses into taps.
- `glsketches.collision` — `CollisionSim`, a light block between a wall and a
  heavy block of mass `100 ** digits`; the collision count spells out digits
  of π.
- `glsketches.loading` — `LoadingIndicator`, with cycling "Now Loading"
  dots and a spinner arc fraction (`arc_rate()`).
- `glsketches.motion` — `RollingCube`, `CircularMotion`, `ProjectileMotion`
  and `SpringMotion`, each stepping a small physical system.

Scenes take keys through `handle_key(key)` with single-character strings;
`q` clears their `running` flag and space toggles `playing` where they have
one.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### tap-to-on

```
tap-to-on MAP
```

Plays the lights-out puzzle on the terminal, using the board stored in
`MAP`. The file's first line holds the board size `N`; the next `N` lines
each hold at least `N` characters, `1` for a lit light and anything else for
a dark one:

```
3
010
101
010
```

The board is printed, then commands are read from standard input, one per
line:

- `PX PY` taps the light in column `PX` and row `PY`, both counted from 0;
  rows are counted from the bottom of the printed board.
- `r` reloads the board from `MAP`.
- `p` toggles the game's paused flag.
- `q` quits.

After each command the board is printed again, and `Clear! Restart: R key`
is printed once every light is on. Without `MAP`, or with a file that cannot
be read or parsed, the command prints a message and exits with status 1.

### collision-pi

```
collision-pi [DIGITS [V0 [CUBE_SIZE]]]
```

Runs the block-collision simulation to its end and prints the result.
`DIGITS` sets the heavy block's mass to 100^DIGITS (default 1), `V0` its
starting speed towards the wall (default 1, always taken as moving towards
it), and `CUBE_SIZE` the block scale (default 10). With no arguments, or more
than three, a usage line is printed and the defaults are used. The
simulation stops once the light block moves away from the wall no faster
than the heavy one (or after 200,000 ticks), then prints the collision count
and both blocks' positions and speeds.

## Using the library

```python
from glsketches.coords import cart2pol, pol2cart
from glsketches.physics import Body

norm, horizontal, vertical = cart2pol(1.0, 0.0, 1.0)
x, y, z = pol2cart(norm, horizontal, vertical)

ball = Body(2, 5)
ball.set_cart(0, -50, 0, 50)     # position
ball.set_cart(2, 0, -0.98, 0)    # acceleration
for _ in range(10):
    position = ball.step()
```

```python
from glsketches.lightsout import Board

board = Board.from_text("2\n10\n01\n")
board.toggle(0, 0)
print(board.lit_count(), board.is_cleared())
```

```python
from glsketches.shapes import cube, Mode

faces = cube(0, 0, 0, 50, 0.0, 0.0)
assert faces[0].mode is Mode.QUADS
```

## What it does not do

The package opens no windows and draws nothing on screen. The shape
functions and scenes only compute vertices and colours, and key handling is
driven by calling `handle_key` yourself; showing the primitives, text labels
and animation loop is left to whatever renderer you connect them to. The
two commands run on the terminal only.