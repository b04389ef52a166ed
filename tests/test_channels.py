import asyncio
import logging
import queue

import pytest

from gridstate.channels import LoggingSender


def test_send_delivers_message_in_order():
    q = queue.Queue()
    sender = LoggingSender(q, "redraw_event")
    sender.send("first")
    sender.send("second")
    assert q.get_nowait() == "first"
    assert q.get_nowait() == "second"
    assert q.empty()


def test_send_logs_channel_name_and_message(caplog):
    q = queue.Queue()
    sender = LoggingSender(q, "ui_command")
    with caplog.at_level(logging.DEBUG, logger="gridstate.channels"):
        sender.send({"key": 1})
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["ui_command {'key': 1}"]


def test_send_to_full_queue_raises():
    q = queue.Queue(maxsize=1)
    sender = LoggingSender(q, "window_command")
    sender.send(1)
    with pytest.raises(queue.Full):
        sender.send(2)


def test_send_to_asyncio_queue():
    q = asyncio.Queue()
    sender = LoggingSender(q, "batched_draw_command")
    sender.send([1, 2])
    assert q.get_nowait() == [1, 2]


def test_copies_share_the_queue():
    q = queue.Queue()
    sender = LoggingSender(q, "redraw_event")
    other = LoggingSender(sender.sender, sender.channel_name)
    other.send("x")
    assert other == sender
    assert q.get_nowait() == "x"