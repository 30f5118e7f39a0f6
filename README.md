# imgview

`imgview` contains the parts of an image viewer that do not depend on any
windowing system. It needs only the standard library.

## Modules

- `imgview.geometry` provides `Point`, `Rect` and `Corner` for window-space
  arithmetic. `Point` supports `abs`, `sign`, `round` (halves away from zero)
  and `distance_squared`. `Rect` supports `corner`, `inflate`, `contains` and
  `translated`.
- `imgview.selection` provides `SelectionRect`, a rubber-band selection that
  can be drawn, moved, and resized by a corner or an edge. You drive it with
  `set_selection(operation, position)`, using the `Operation` enum, and you
  can replace it with `update_selection(rect)`. An optional callback receives
  the rectangle and whether it is visible. `opposite_corner` returns the
  diagonally opposite `Corner`.
- `imgview.autoscroll` computes scroll steps from the distance between the
  cursor and an anchor point. `scroll_amount(delta, elapsed_ms, metrics)`
  computes one step, and `ScrollMetrics` tunes the dead zone, the speed curve
  and the maximum speed. `AutoScroll` has `toggle()` and `perform()`. When
  `interval_ms` is set, it runs a background timer thread. `close()` stops
  that thread.
- `imgview.motion` provides `AdaptiveMotion`. Its `add(amount)` returns a
  velocity that grows while input keeps arriving in the same direction.
- `imgview.multiclick` provides `MultiClickHandler`, which groups button
  presses into `ClickEvent`s that carry a click count. Feed it with
  `set_button_state` (`ButtonState`) and `set_mouse_delta`. Call
  `process_pending()` once `due_in_ms` milliseconds have passed.
- `imgview.commands` provides `CommandManager`, `Command`, `CommandGroup`,
  `CommandArgs`, `CommandRequest` and `CommandResult`. Together they hold
  named commands and predefined argument sets.
- `imgview.configuration` provides `load_command_groups(path)`,
  `load_key_bindings(path)` and `load_settings(path)`, which read JSON
  configuration files. A badly structured commands or key-bindings file
  raises `ConfigurationError`. `load_settings` flattens nested sections into
  `"section/name"` keys. It returns an empty mapping when the file is missing
  or unreadable.
- `imgview.file_sorter` provides `FileSorter`, which orders paths by name,
  extension or modification date (`SortType`). Each sort type keeps its own
  `SortDirection`. By default, date sorting is descending and the other two
  are ascending.
- `imgview.texel` provides `Channel`, `TexelInfo`, `ChannelSemantic` and
  `ChannelDataType`, which describe texel layouts.
- `imgview.message_formatter` builds the coloured overlay text.
  `format_number` adds comma thousands separators. `format_meta_text` lays
  out aligned, dotted key/value columns from `FormatArgs`. The module also
  has `format_file_path`, `decompose_path`, `format_texel_info` and related
  helpers.
- `imgview.pixels` provides `count_unique_values`, which counts the distinct
  texel values in a raw, row-major image buffer.

## Example

```python
from imgview.commands import CommandArgs
from imgview.message_formatter import format_number

args = CommandArgs.from_string("amount=10;direction=left")
args.get("direction")          # "left"

format_number(1234567.891, 2)  # "1,234,567.89"
```

## What it does not do

The package does not decode, convert or render images, and it does not open
windows. It also has no command-line program. It supplies the logic that a
viewer application calls into.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```