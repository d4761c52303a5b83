# tinkerbench

A collection of small, self-contained experiments packaged as a library with a few
command-line demos. It has no dependencies beyond the standard library.

## What is inside

- `tinkerbench.geometry`: 2D vectors (`Vec2d`) and even-grade multivectors
  (`MVec2dE`, scalar part `c0`, bivector part `c1`). Both support negation,
  addition, subtraction, multiplication by a scalar from either side, and the
  geometric product with `*` or `gpr()`. `dot()` and `wdg()` give the inner and
  wedge products of two vectors. Equality tolerates a deviation below 1e-7 per
  component. `E1_2D` and `E2_2D` are the unit basis vectors.
- `tinkerbench.lua_values`: a tagged value model (`LuaType`, `LuaValue`) for the
  kinds nil, boolean, number, string, function and table. Build values with
  `lua_nil()`, `lua_boolean()`, `lua_number()`, `lua_string()`, `lua_function()`
  and `lua_table()`; render them with `lua_value_string()` (numbers with six
  decimal places).
- `tinkerbench.ring`: `CircularBuffer`, a fixed-capacity buffer with `push_back`,
  `pop_back`, `pop_front`, `front`, `back`, `capacity`, `full` and `empty`.
  Pushing onto a full buffer drops the front item; reading or popping an empty
  buffer raises `IndexError`.
- `tinkerbench.instrumented`: `Instrumented` wraps a value and counts
  construction, copying (`copy()`), assignment (`assign()`), unwrapping
  (`unwrap()`), equality checks and ordering comparisons. Read the counters with
  `counts()` (a dict keyed by `Operation`) and clear them with `reset_counts(n)`.
  `CountCalls` forwards calls to a callable and reports how many there were with
  `count()`.
- `tinkerbench.points`: `Point2d`, `join_values()`, `sample_exp()` (points
  `(x, exp(x))` on a stepped range) and `padded_names()` (zero-padded names).
- `tinkerbench.pipeline`: lazy `traced_filter()` and `traced_transform()` stages
  that report each call to a trace function (`print` by default), so you can see
  the order in which chained stages run; `format_range()` renders items as
  `[ a, b, ]`.
- `tinkerbench.properties`: dataclasses `Window`, `Font`, `Circle`, `Rectangle`
  and their parts (`Size`, `ColorRGB`, `Position`, `Speed`), each with
  `from_json()`. `parse_properties()` reads a JSON document in document order
  (`circles` and `rectangles` hold lists); an unknown key raises
  `UnknownPropertyError`. `load_properties()` reads a file.
- `tinkerbench.joystick`: joystick records `DevId`, `DevCap`, `DevButton` (with
  `from_json()` and `to_json()`), `Device`, `DevButtonAction` and the `Axis`
  flags. `read_config()` reads the `device`, `device_capabilities` and
  `device_map_buttons` sections of a document into a `JoystickConfig`;
  `template_document()` returns a document of default entries.

## Example

```python
from tinkerbench.geometry import Vec2d, gpr
from tinkerbench.ring import CircularBuffer

print(gpr(Vec2d(1.0, 0.0), Vec2d(0.0, 1.0)))   # (0,1)

cb = CircularBuffer(3)
for i in range(1, 6):
    cb.push_back(i)
print(cb, cb.front(), cb.back())               # [3, 4, 5] 3 5
```

## Commands

```
tinkerbench-ring
tinkerbench-instrumented
tinkerbench-points
tinkerbench-pipeline
tinkerbench-properties path/to/input.json
tinkerbench-joystick path/to/input.json
```

The first four print small demonstrations. `tinkerbench-properties` prints a
property file and each property read from it; `tinkerbench-joystick` prints the
joystick configuration in a file followed by a template document. Both print
`Error: ...` and exit with status 1 when the file cannot be read or is invalid.

## What it does not do

`tinkerbench.lua_values` only models values; the package contains no Lua
interpreter and cannot run scripts or read configuration written in Lua.
`tinkerbench.joystick` describes devices and mappings as data; it does not talk
to any input device.

## Tests

```
pip install -e ".[test]"
pytest
```