"""Editor state: applies redraw events to windows and emits draw commands."""

from __future__ import annotations

import copy
import logging
import queue
import threading
from typing import Any, Optional

from .cursor import Cursor, CursorMode
from .draw_commands import (
    CloseWindow,
    DefaultStyleChanged,
    DrawCommandBatcher,
    FontChanged,
    ModeChanged,
    SetMouseEnabled,
    TitleChanged,
    UpdateCursor,
    WindowCommand,
)
from .event_types import (
    BusyStart,
    BusyStop,
    Clear,
    CursorGoto,
    DefaultColorsSet,
    Destroy,
    Flush,
    GridLine,
    GuiOption,
    HighlightAttributesDefine,
    MessageSetPosition,
    ModeChange,
    ModeInfoSet,
    MouseOff,
    MouseOn,
    OptionSet,
    RedrawEvent,
    Resize,
    Scroll,
    SetTitle,
    WindowAnchor,
    WindowClose,
    WindowFloatPosition,
    WindowHide,
    WindowPosition,
    WindowViewport,
)
from .redraw_scheduler import REDRAW_SCHEDULER, RedrawScheduler
from .style import Style
from .window import AnchorInfo, Window, WindowType

logger = logging.getLogger(__name__)

_BASE_GRID = 1
_MESSAGE_SORT_ORDER = 2**64 - 1


class Editor:
    """Holds every window, the cursor and the defined highlight styles."""

    def __init__(
        self,
        batched_draw_command_sender: Any,
        window_command_sender: Any,
        scheduler: RedrawScheduler = REDRAW_SCHEDULER,
    ) -> None:
        self.windows: dict[int, Window] = {}
        self.cursor = Cursor()
        self.defined_styles: dict[int, Style] = {}
        self.mode_list: list[CursorMode] = []
        self.draw_command_batcher = DrawCommandBatcher(batched_draw_command_sender)
        self.window_command_sender = window_command_sender
        self._scheduler = scheduler

    def _send_window_command(self, command: WindowCommand) -> None:
        try:
            self.window_command_sender.send(command)
        except queue.Full:
            logger.debug("Window command dropped: %r", command)

    def handle_redraw_event(self, event: RedrawEvent) -> None:
        """Apply one redraw event to the editor state."""
        match event:
            case SetTitle(title=title):
                self._send_window_command(TitleChanged(title))
            case ModeInfoSet(cursor_modes=cursor_modes):
                self.mode_list = cursor_modes
            case OptionSet(gui_option=gui_option):
                self._set_option(gui_option)
            case ModeChange(mode=mode, mode_index=mode_index):
                if 0 <= mode_index < len(self.mode_list):
                    self.cursor.change_mode(self.mode_list[mode_index], self.defined_styles)
                self.draw_command_batcher.queue(ModeChanged(mode))
            case MouseOn():
                self._send_window_command(SetMouseEnabled(True))
            case MouseOff():
                self._send_window_command(SetMouseEnabled(False))
            case BusyStart():
                logger.debug("Cursor off")
                self.cursor.enabled = False
            case BusyStop():
                logger.debug("Cursor on")
                self.cursor.enabled = True
            case Flush():
                logger.debug("Image flushed")
                self._send_cursor_info()
                try:
                    self.draw_command_batcher.send_batch()
                except queue.Full:
                    logger.debug("Draw command batch dropped")
                self._scheduler.queue_next_frame()
            case DefaultColorsSet(colors=colors):
                self.draw_command_batcher.queue(DefaultStyleChanged(Style(colors=colors)))
            case HighlightAttributesDefine(id=style_id, style=style):
                self.defined_styles[style_id] = style
            case CursorGoto(grid=grid, row=row, column=column):
                self._set_cursor_position(grid, column, row)
            case Resize(grid=grid, width=width, height=height):
                self._resize_window(grid, width, height)
            case GridLine(grid=grid, row=row, column_start=column_start, cells=cells):
                window = self.windows.get(grid)
                if window is not None:
                    window.draw_grid_line(row, column_start, cells, self.defined_styles)
            case Clear(grid=grid):
                window = self.windows.get(grid)
                if window is not None:
                    window.clear()
            case Destroy(grid=grid) | WindowClose(grid=grid):
                self._close_window(grid)
            case Scroll(
                grid=grid, top=top, bottom=bottom, left=left, right=right, rows=rows, columns=columns
            ):
                window = self.windows.get(grid)
                if window is not None:
                    window.scroll_region(top, bottom, left, right, rows, columns)
            case WindowPosition(
                grid=grid, start_row=start_row, start_column=start_column, width=width, height=height
            ):
                self._set_window_position(grid, start_column, start_row, width, height)
            case WindowFloatPosition():
                self._set_window_float_position(
                    event.grid,
                    event.anchor_grid,
                    event.anchor,
                    event.anchor_column,
                    event.anchor_row,
                    event.sort_order,
                )
            case WindowHide(grid=grid):
                window = self.windows.get(grid)
                if window is not None:
                    window.hide()
            case MessageSetPosition(grid=grid, row=row):
                self._set_message_position(grid, row)
            case WindowViewport(grid=grid, top_line=top_line, bottom_line=bottom_line):
                window = self.windows.get(grid)
                if window is not None:
                    window.update_viewport(top_line, bottom_line)
                else:
                    logger.debug("viewport event received before window initialized")
            case _:
                pass

    def _close_window(self, grid: int) -> None:
        window = self.windows.pop(grid, None)
        if window is not None:
            window.close()
            self.draw_command_batcher.queue(CloseWindow(grid))

    def _resize_window(self, grid: int, width: int, height: int) -> None:
        window = self.windows.get(grid)
        if window is not None:
            window.resize((width, height))
        else:
            self.windows[grid] = Window(
                grid,
                WindowType.EDITOR,
                None,
                (0.0, 0.0),
                (width, height),
                self.draw_command_batcher,
            )

    def _set_window_position(
        self, grid: int, start_left: int, start_top: int, width: int, height: int
    ) -> None:
        position = (float(start_left), float(start_top))
        window = self.windows.get(grid)
        if window is not None:
            window.position(None, (width, height), position)
            window.show()
        else:
            self.windows[grid] = Window(
                grid, WindowType.EDITOR, None, position, (width, height), self.draw_command_batcher
            )

    def _set_window_float_position(
        self,
        grid: int,
        anchor_grid: int,
        anchor_type: WindowAnchor,
        anchor_left: float,
        anchor_top: float,
        sort_order: Optional[int],
    ) -> None:
        parent_position = self._get_window_top_left(anchor_grid)
        window = self.windows.get(grid)
        if window is None:
            logger.error("Attempted to float window that does not exist.")
            return
        width, height = window.width, window.height
        left, top = anchor_type.modified_top_left(anchor_left, anchor_top, width, height)
        if parent_position is not None:
            left += parent_position[0]
            top += parent_position[1]
        window.position(
            AnchorInfo(
                anchor_grid_id=anchor_grid,
                anchor_type=anchor_type,
                anchor_left=anchor_left,
                anchor_top=anchor_top,
                sort_order=grid if sort_order is None else sort_order,
            ),
            (width, height),
            (left, top),
        )
        window.show()

    def _set_message_position(self, grid: int, grid_top: int) -> None:
        parent = self.windows.get(_BASE_GRID)
        parent_width = parent.width if parent is not None else 1
        anchor_info = AnchorInfo(
            anchor_grid_id=_BASE_GRID,
            anchor_type=WindowAnchor.NORTH_WEST,
            anchor_left=0.0,
            anchor_top=float(grid_top),
            sort_order=_MESSAGE_SORT_ORDER,
        )
        position = (0.0, float(grid_top))
        window = self.windows.get(grid)
        if window is not None:
            window.window_type = WindowType.MESSAGE
            window.position(anchor_info, (parent_width, window.height), position)
            window.show()
        else:
            self.windows[grid] = Window(
                grid,
                WindowType.MESSAGE,
                anchor_info,
                position,
                (parent_width, 1),
                self.draw_command_batcher,
            )

    def _get_window_top_left(self, grid: int) -> Optional[tuple[float, float]]:
        window = self.windows.get(grid)
        if window is None:
            return None
        anchor_info = window.anchor_info
        if anchor_info is None:
            return window.grid_position
        parent = self._get_window_top_left(anchor_info.anchor_grid_id)
        if parent is None:
            return None
        left, top = anchor_info.anchor_type.modified_top_left(
            anchor_info.anchor_left, anchor_info.anchor_top, window.width, window.height
        )
        return (parent[0] + left, parent[1] + top)

    def _set_cursor_position(self, grid: int, grid_left: int, grid_top: int) -> None:
        window = self.windows.get(grid)
        if window is not None and window.window_type is WindowType.MESSAGE:
            # Only column 1 (right after ":") is an intentional move into a message grid.
            intentional = grid_left == 1
            already_there = self.cursor.parent_window_id == grid
            if not intentional and not already_there:
                logger.debug(
                    "Cursor unexpectedly sent to message buffer %s (%s, %s)",
                    grid,
                    grid_left,
                    grid_top,
                )
                return
        self.cursor.parent_window_id = grid
        self.cursor.grid_position = (grid_left, grid_top)

    def _send_cursor_info(self) -> None:
        grid_left, grid_top = self.cursor.grid_position
        window = self.windows.get(self.cursor.parent_window_id)
        if window is not None:
            character, double_width = window.get_cursor_character(grid_left, grid_top)
        else:
            character, double_width = " ", False
        self.cursor.character = character
        self.cursor.double_width = double_width
        self.draw_command_batcher.queue(UpdateCursor(copy.copy(self.cursor)))

    def _set_option(self, gui_option: GuiOption) -> None:
        logger.debug("Option set %r", gui_option)
        if gui_option.name == "guifont":
            self.draw_command_batcher.queue(FontChanged(gui_option.value))
            for window in self.windows.values():
                window.redraw()


def start_editor(
    redraw_event_receiver: "queue.Queue[Optional[RedrawEvent]]",
    batched_draw_command_sender: Any,
    window_command_sender: Any,
) -> threading.Thread:
    """Run an editor on a background thread until ``None`` arrives on the receiver."""

    def run() -> None:
        editor = Editor(batched_draw_command_sender, window_command_sender)
        while (event := redraw_event_receiver.get()) is not None:
            editor.handle_redraw_event(event)

    thread = threading.Thread(target=run, name="editor", daemon=True)
    thread.start()
    return thread