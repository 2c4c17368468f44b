# particlesim

A small two-dimensional particle simulation. A cluster of discs with random
masses (250 to 2000) is dropped around the centre of a rectangular field. The
discs fall under gravity and a dynamic friction force opposes their motion.
They bounce off the walls with a coefficient of restitution, and they collide
with one another as discs: overlapping pairs are pushed apart in proportion to
their inverse masses, and approaching pairs exchange an impulse.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
particlesim
```

This opens a resizable 800×600 window titled "Physics Simulation". Another
size can be given:

```
particlesim --width 1024 --height 768
```

Both values must be positive.

The window has a small control panel:

- drag the slider to choose a particle count between 25 and 500 (250 by
  default);
- press **Start** to spawn the cluster, or **Restart** to spawn a new one with
  the current count;
- the panel shows the current frame rate.

Over the field:

- scroll the mouse wheel to zoom between 1× and 2×;
- drag with the right mouse button to pan while zoomed in. The view cannot be
  panned outside the field.

Mouse input over the panel is taken by the panel and does not pan or zoom.
Resizing the window resizes the field, and the field stays centred in it.

## Using the library

The simulation does not need the window. It can be driven directly:

```python
import random

from particlesim.vector import Dimensions
from particlesim.field import Field
from particlesim.motion import Motion

field = Field(Dimensions(800, 600))
motion = Motion(100, field, random.Random(42))

for _ in range(600):
    motion.update(1 / 60)

for particle in motion.particles:
    print(particle.position, particle.velocity)
```

The building blocks:

- `particlesim.vector.Vector3` is an immutable 3-component vector with
  arithmetic, `dot`, `length`, `distance` and `normalized`. Equality compares
  with a tolerance of `1e-5`.
- `particlesim.vector.Dimensions` holds a width, a height and a depth, with
  `to_vector`, `center` and `center_as_vector`.
- `particlesim.particle.Particle` is a point mass with a radius and a unique
  `id`. It adds up forces with `add_force` and integrates them with
  `integrate(dt)`, which then clears them.
- `particlesim.field.Field` is the world rectangle, centred on its `position`.
  It holds the `gravity`, `friction` and `restitution` constants, tells whether
  a point or a particle lies inside it with `contains`, and `reset` restores
  the default constants.
- `particlesim.forces` provides `gravity(field)` and `friction(field)` force
  generators, and `combine(...)` to apply several of them in order.
- `particlesim.motion.Motion` owns the particles and advances them in
  `update(dt)`; `resolve_bounds` and `resolve_collision` handle walls and
  pairs.
- `particlesim.camera.Camera2D` maps world positions to normalised device
  coordinates with `world_to_ndc`, with zoom (`set_zoom`) and a clamped pan
  offset (`move`).
- `particlesim.input.InputManager` tracks pressed keys and mouse buttons and
  turns cursor, button, scroll and resize events into camera and field
  changes.
- `particlesim.app.Application` ties these together; `draw_shapes` returns the
  particles as discs in normalised device coordinates, and `run` opens the
  window.

## Limits

Collisions are checked between every pair of particles each step, so the cost
grows with the square of the particle count. Motion is confined to the x/y
plane. Keys are recorded but do not control anything.