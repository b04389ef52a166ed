"""Draw commands produced by the editor state and the batcher that groups them."""

from __future__ import annotations

from dataclasses import dataclass, field
from queue import Empty, SimpleQueue
from typing import Any, Optional

from .cursor import Cursor
from .event_types import EditorMode
from .style import Style


@dataclass
class LineFragment:
    """A run of cells in one row sharing a style, ready to be drawn."""

    text: str
    window_left: int
    window_top: int
    width: int
    style: Optional[Style] = None


class WindowDrawCommand:
    """Base class of commands addressed to a single window."""

    __slots__ = ()


@dataclass
class Position(WindowDrawCommand):
    grid_position: tuple[float, float]
    grid_size: tuple[int, int]
    floating_order: Optional[int] = None


@dataclass
class DrawLine(WindowDrawCommand):
    fragments: list[LineFragment] = field(default_factory=list)


@dataclass
class ScrollRegion(WindowDrawCommand):
    top: int
    bottom: int
    left: int
    right: int
    rows: int
    cols: int


@dataclass
class ClearWindow(WindowDrawCommand):
    pass


@dataclass
class ShowWindow(WindowDrawCommand):
    pass


@dataclass
class HideWindow(WindowDrawCommand):
    pass


@dataclass
class CloseWindowCommand(WindowDrawCommand):
    pass


@dataclass
class Viewport(WindowDrawCommand):
    top_line: float
    bottom_line: float


class DrawCommand:
    """Base class of commands sent to the renderer in batches."""

    __slots__ = ()


@dataclass
class CloseWindow(DrawCommand):
    grid_id: int


@dataclass
class WindowDraw(DrawCommand):
    grid_id: int
    command: WindowDrawCommand


@dataclass
class UpdateCursor(DrawCommand):
    cursor: Cursor


@dataclass
class FontChanged(DrawCommand):
    font: str


@dataclass
class DefaultStyleChanged(DrawCommand):
    style: Style


@dataclass
class ModeChanged(DrawCommand):
    mode: EditorMode


class WindowCommand:
    """Base class of commands for the top-level application window."""

    __slots__ = ()


@dataclass
class TitleChanged(WindowCommand):
    title: str


@dataclass
class SetMouseEnabled(WindowCommand):
    enabled: bool


class DrawCommandBatcher:
    """Collects draw commands and forwards everything pending as one list."""

    def __init__(self, batched_draw_command_sender: Any) -> None:
        self._pending: SimpleQueue[DrawCommand] = SimpleQueue()
        self._sender = batched_draw_command_sender

    def queue(self, draw_command: DrawCommand) -> None:
        """Add a command to the current batch."""
        self._pending.put(draw_command)

    def send_batch(self) -> None:
        """Send every command queued so far, in order, as a single list."""
        batch: list[DrawCommand] = []
        while True:
            try:
                batch.append(self._pending.get_nowait())
            except Empty:
                break
        self._sender.send(batch)