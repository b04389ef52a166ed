import asyncio

import pytest

from gridstate.ui_commands import (
    FileDrop,
    FocusGained,
    FocusLost,
    Keyboard,
    MouseButton,
    MouseDrag,
    MouseScroll,
    Quit,
    ResizeUi,
    run_ui_command_handler,
)


class FakeNvim:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    async def input(self, keys):
        self.calls.append(("input", keys))

    async def input_mouse(self, button, action, modifier, grid, row, col):
        self.calls.append(("input_mouse", button, action, modifier, grid, row, col))

    async def command(self, command):
        self.calls.append(("command", command))
        if self.fail:
            raise RuntimeError("boom")

    async def ui_try_resize(self, width, height):
        self.calls.append(("resize", width, height))


@pytest.mark.asyncio
async def test_keyboard_sends_input():
    nvim = FakeNvim()
    await Keyboard("<Esc>").execute(nvim)
    assert nvim.calls == [("input", "<Esc>")]


@pytest.mark.asyncio
async def test_mouse_button_swaps_position_to_row_col():
    nvim = FakeNvim()
    await MouseButton("left", "press", 2, (5, 7), "C").execute(nvim)
    assert nvim.calls == [("input_mouse", "left", "press", "C", 2, 7, 5)]


@pytest.mark.asyncio
async def test_scroll_uses_wheel():
    nvim = FakeNvim()
    await MouseScroll("up", 1, (3, 4), "").execute(nvim)
    assert nvim.calls == [("input_mouse", "wheel", "up", "", 1, 4, 3)]


@pytest.mark.asyncio
async def test_drag_uses_drag_action():
    nvim = FakeNvim()
    await MouseDrag("left", 1, (0, 2), "S").execute(nvim)
    assert nvim.calls == [("input_mouse", "left", "drag", "S", 1, 2, 0)]


@pytest.mark.asyncio
async def test_resize_clamps_minimum():
    nvim = FakeNvim()
    await ResizeUi(2, 1).execute(nvim)
    await ResizeUi(80, 24).execute(nvim)
    assert nvim.calls == [("resize", 10, 3), ("resize", 80, 24)]


@pytest.mark.asyncio
async def test_quit_ignores_failure():
    nvim = FakeNvim(fail=True)
    await Quit().execute(nvim)
    assert nvim.calls == [("command", "qa!")]


@pytest.mark.asyncio
async def test_file_drop_opens_file():
    nvim = FakeNvim()
    await FileDrop("/tmp/notes.txt").execute(nvim)
    assert nvim.calls == [("command", "e /tmp/notes.txt")]


@pytest.mark.asyncio
async def test_focus_commands():
    nvim = FakeNvim()
    await FocusLost().execute(nvim)
    await FocusGained().execute(nvim)
    assert nvim.calls == [
        ("command", "if exists('#FocusLost') | doautocmd <nomodeline> FocusLost | endif"),
        ("command", "if exists('#FocusGained') | doautocmd <nomodeline> FocusGained | endif"),
    ]


@pytest.mark.asyncio
async def test_focus_lost_failure_propagates():
    with pytest.raises(RuntimeError):
        await FocusLost().execute(FakeNvim(fail=True))


@pytest.mark.asyncio
async def test_handler_keeps_serial_order_and_runs_parallel():
    nvim = FakeNvim()
    receiver = asyncio.Queue()
    for command in [Keyboard("a"), ResizeUi(80, 24), Keyboard("b"), Keyboard("c"), None]:
        receiver.put_nowait(command)
    await asyncio.wait_for(run_ui_command_handler(receiver, nvim), timeout=5)
    inputs = [call[1] for call in nvim.calls if call[0] == "input"]
    assert inputs == ["a", "b", "c"]
    assert ("resize", 80, 24) in nvim.calls


@pytest.mark.asyncio
async def test_handler_rejects_unknown_command():
    receiver = asyncio.Queue()
    receiver.put_nowait("not a command")
    with pytest.raises(TypeError):
        await asyncio.wait_for(run_ui_command_handler(receiver, FakeNvim()), timeout=5)