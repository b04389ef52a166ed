# gridstate

`gridstate` holds the editor-side state that a graphical front end needs
when it draws a Neovim instance through the external UI protocol. It takes
the `redraw` notifications Neovim sends, already decoded from msgpack into
Python lists, dicts, strings and numbers, and turns them into windows,
character grids, a cursor and batches of draw commands that a renderer can
use.

## Modules

- **`gridstate.events`**: `parse_redraw_event` turns one decoded `redraw`
  batch, such as `["grid_line", [1, 0, 0, [["a"]]]]`, into a list of typed
  events. Every argument list after the name gives one event. Unknown event
  names and `set_icon` are skipped. Input that is not well formed raises
  `ParseError`. `unpack_color` turns a packed `0xRRGGBB` integer into a
  `Color4f`. `parse_channel_list`, `parse_channel_info`,
  `parse_client_info`, `parse_client_version`, `parse_client_type`,
  `parse_channel_mode` and `parse_channel_stream_type` read the result of
  `nvim_list_chans`.
- **`gridstate.event_types`**: the event classes (`SetTitle`, `GridLine`,
  `CursorGoto`, `Scroll`, `WindowFloatPosition`, `MessageShow`, `Flush`,
  ...), all subclasses of `RedrawEvent`. Also `ParseError`, `GridLineCell`,
  `GuiOption`, and the enums `MessageKind`, `WindowAnchor` (with
  `modified_top_left`) and `EditorMode`. The channel description types are
  `ChannelInfo`, `ClientInfo`, `ClientVersion`, `ClientType`, `ChannelMode`
  and `ChannelStreamType`.
- **`gridstate.style`**: `Color4f`, `Colors` and `Style`. `Style.foreground`,
  `Style.background` and `Style.special` fall back to default colours and
  take `reverse` into account.
- **`gridstate.cursor`**: `CursorShape`, `CursorMode` and `Cursor`. Use
  `Cursor.change_mode` to apply a mode.
- **`gridstate.grid`**: `CharacterGrid`, a row-major grid of `(text, style)`
  cells. Its methods are `resize`, which keeps the overlapping region,
  `clear`, `get_cell`, `set_cell`, `set_all_characters` and `row`.
  `default_cell()` returns an empty cell.
- **`gridstate.window`**: `Window` applies grid lines (split into grapheme
  clusters), scrolls regions, resizes and repositions. Each change is queued
  as a `WindowDrawCommand` wrapped in a `WindowDraw`. Also `AnchorInfo` and
  `WindowType`.
- **`gridstate.draw_commands`**: the window draw commands are `Position`,
  `DrawLine` (a list of `LineFragment`s), `ScrollRegion`, `ClearWindow`,
  `ShowWindow`, `HideWindow`, `CloseWindowCommand` and `Viewport`. The
  renderer commands are `CloseWindow`, `WindowDraw`, `UpdateCursor`,
  `FontChanged`, `DefaultStyleChanged` and `ModeChanged`. The application
  window commands are `TitleChanged` and `SetMouseEnabled`. The module also
  has `DrawCommandBatcher`: `queue` adds a command, and `send_batch` sends
  everything pending as one list.
- **`gridstate.editor`**: `Editor.handle_redraw_event` passes each event to
  the right window. It tracks highlight styles and cursor modes, and it
  places floating and message windows relative to their anchors. On every
  `Flush` it queues the cursor, sends the batch and queues the next frame on
  the redraw scheduler. `start_editor` runs an editor on a daemon thread
  that reads events from a `queue.Queue` until `None` arrives, and it
  returns the thread.
- **`gridstate.ui_commands`**: the serial commands are `Keyboard`,
  `MouseButton`, `MouseScroll` and `MouseDrag`. The parallel commands are
  `Quit`, `ResizeUi` (never smaller than 10×3), `FileDrop`, `FocusLost` and
  `FocusGained`. Each one `execute`s against an async client that has
  `input`, `input_mouse`, `command` and `ui_try_resize`.
  `run_ui_command_handler` reads commands from an `asyncio.Queue` until it
  gets `None`. It runs serial commands one at a time in order and each
  parallel command in its own task.
- **`gridstate.redraw_scheduler`**: `RedrawScheduler` has `schedule`,
  `queue_next_frame` and `should_draw`. A shared instance is available as
  `REDRAW_SCHEDULER`.
- **`gridstate.channels`**: `LoggingSender` wraps any object that has
  `put_nowait`, such as `queue.Queue` or `asyncio.Queue`. It logs each
  message at debug level before sending it.

## Example

```python
import queue

from gridstate.channels import LoggingSender
from gridstate.editor import Editor
from gridstate.events import parse_redraw_event

batches = queue.Queue()
window_commands = queue.Queue()
editor = Editor(
    LoggingSender(batches, "batched_draw_command"),
    LoggingSender(window_commands, "window_command"),
)

for raw in (
    ["grid_resize", [1, 80, 24]],
    ["grid_line", [1, 0, 0, [["h"], ["i"]]]],
    ["grid_cursor_goto", [1, 0, 2]],
    ["flush", []],
):
    for event in parse_redraw_event(raw):
        editor.handle_redraw_event(event)

draw_commands = batches.get_nowait()  # a list of DrawCommand objects
```

## What it does not do

`gridstate` is the state layer only. It does not start Neovim, connect to
it, or speak msgpack-RPC. You supply the decoded notifications and, for UI
commands, an async client object. It draws nothing on screen and opens no
windows. It has no command-line program, and reading settings or arguments
is left to the caller.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest and pytest-asyncio
pytest
```