import queue

from gridstate.channels import LoggingSender
from gridstate.cursor import Cursor
from gridstate.draw_commands import (
    ClearWindow,
    CloseWindow,
    DrawCommandBatcher,
    FontChanged,
    ModeChanged,
    UpdateCursor,
    WindowDraw,
)
from gridstate.event_types import EditorMode


def make_batcher():
    receiver = queue.Queue()
    batcher = DrawCommandBatcher(LoggingSender(receiver, "batched_draw_command"))
    return receiver, batcher


def test_send_batch_preserves_order():
    receiver, batcher = make_batcher()
    commands = [CloseWindow(3), FontChanged("Mono:h12"), ModeChanged(EditorMode.INSERT)]
    for command in commands:
        batcher.queue(command)
    batcher.send_batch()
    assert receiver.get_nowait() == commands


def test_empty_batch_is_sent_as_empty_list():
    receiver, batcher = make_batcher()
    batcher.send_batch()
    assert receiver.get_nowait() == []


def test_batches_do_not_repeat_commands():
    receiver, batcher = make_batcher()
    batcher.queue(CloseWindow(1))
    batcher.send_batch()
    batcher.queue(CloseWindow(2))
    batcher.send_batch()
    assert receiver.get_nowait() == [CloseWindow(1)]
    assert receiver.get_nowait() == [CloseWindow(2)]
    assert receiver.empty()


def test_window_draw_and_cursor_commands_round_trip():
    receiver, batcher = make_batcher()
    cursor = Cursor(character="x")
    batcher.queue(WindowDraw(grid_id=4, command=ClearWindow()))
    batcher.queue(UpdateCursor(cursor))
    batcher.send_batch()
    batch = receiver.get_nowait()
    assert batch[0].grid_id == 4
    assert batch[0].command == ClearWindow()
    assert batch[1].cursor.character == "x"