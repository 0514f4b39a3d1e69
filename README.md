# sllothkit

Building blocks for small 2D games, in plain Python with no third-party
dependencies.

## Modules

- `sllothkit.trigonometry`: trigonometry in degrees (`sin_deg`, `cos_deg`,
  `tan_deg`, `arc_sin`, `arc_cos`, `arc_tan2`), conversions (`rad_to_deg`,
  `deg_to_rad`, `to_degree`, `to_radian`) and the constant `PI`.
  `arc_sin` and `arc_cos` raise `ValueError` outside [-1, 1].
- `sllothkit.vector_algebra`: an immutable `Vector2` dataclass supporting
  `+`, `-`, unary `-`, multiplication and division by a scalar, unpacking,
  and `is_zero()`. Functions on it, with angles in degrees: `length`,
  `squared_length`, `with_length`, `unit_vector`, `polar_angle`,
  `with_polar_angle`, `rotated_vector`, `perpendicular_vector`,
  `signed_angle`, `dot_product`, `cross_product`, `cwise_product`,
  `cwise_quotient` and `projected_vector`. Functions that need a non-zero
  vector (or a divisor without zero components) raise `ValueError`.
- `sllothkit.utils`: radian-based helpers: `sqr_magnitude`,
  `rotate_vector`, `angle_between`, `to_degrees`, `to_radians`, `distance`,
  `normalize` (returns the zero vector unchanged), `lerp` (when `clamped`,
  the default, `t` is capped at 1 from above only), `lerp_vector` and `dot`.
- `sllothkit.enums`: integer enumerations `BossAbility`, `BossAnimation`,
  `Direction`, `EnemyAnimation`, `GamepadButton`,
  `MeleeIndicatorAnimation` and `PlayerAnimation`.
- `sllothkit.gameobject`: `GameObject`, a named container of components.
  `add_component`, `init` and `update(delta_time)` run over the components
  in the order they were added; `get_components_of_type(type)` and
  `get_component(component_id)` look them up. A component is anything that
  fits the `Component` protocol: a `component_id` attribute and `init()` and
  `update(delta_time)` methods.
- `sllothkit.physics`: `Rect` (top-left corner and size, with `center()`),
  `Manifold` (two bodies, a penetration depth and a normal) and
  `aabb_vs_aabb(a, b)`, which returns `(normal, penetration)` along the
  axis of least penetration, or `None` when the rectangles do not overlap.
- `sllothkit.fps`: `FpsCounter`, which counts calls to `update()` and
  reports, through its `fps` property, how many fell in the last completed
  second. The clock is a callable returning seconds and defaults to
  `time.monotonic`.
- `sllothkit.input`: `InputManager`, fed with `Event` values (an
  `EventType` plus a key, a `MouseButton` or a `Vector2` position). It
  answers `key_pressed`, `key_down`, `key_up`, `mouse_pressed`,
  `mouse_down` and `mouse_up`, and keeps `mouse_position`. "Down" and "up"
  flags last until the next `update()`; "pressed" lasts while held.
  `init()` forgets every state.
- `sllothkit.states`: the abstract `GameState` (`init`, `exit`, `update`,
  `render`, `has_closed`) and `GameStateManager`, which registers named
  states, switches with `set_state(name, window)` (exiting the old state and
  initialising the new one; switching to the current state does nothing;
  an unknown name raises `KeyError`), runs `update` and `render` on the
  current state, and keeps a gamepad on/off flag (`toggle_gamepad_use`,
  `gamepad_use`).
- `sllothkit.render`: `RenderManager`, which holds objects fitting the
  `RenderComponent` protocol (a `layer_nr` and a `draw()` method) and, on
  `render()`, sorts them by layer number and draws them lowest first.

## Example

```python
from sllothkit.vector_algebra import Vector2, length, rotated_vector
from sllothkit.physics import Rect, aabb_vs_aabb

v = Vector2(3.0, 4.0)
print(length(v))                 # 5.0
print(rotated_vector(v, 90.0))   # about Vector2(-4, 3)

hit = aabb_vs_aabb(Rect(0, 0, 10, 10), Rect(8, 0, 10, 10))
if hit is not None:
    normal, penetration = hit    # Vector2(-1.0, 0.0), 2.0
```

## What it does not do

sllothkit is a set of pieces, not a game. It opens no window, draws nothing
itself (drawing is whatever your render components do), loads no images,
sounds or maps, and reads no keyboard, mouse or gamepad hardware: you feed
`InputManager` the events yourself. It has no ready-made menu, gameplay or
end screens, and no physics loop that steps bodies or resolves collisions;
only the overlap test and the `Manifold` record are provided. There is no
command to run.

## Install

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```