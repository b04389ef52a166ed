"""Per-grid window state that turns grid updates into draw commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

import regex

from .draw_commands import (
    ClearWindow,
    CloseWindowCommand,
    DrawCommandBatcher,
    DrawLine,
    HideWindow,
    LineFragment,
    Position,
    ScrollRegion,
    ShowWindow,
    Viewport,
    WindowDraw,
    WindowDrawCommand,
)
from .event_types import GridLineCell, WindowAnchor
from .grid import CharacterGrid
from .style import Style

logger = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


@dataclass
class AnchorInfo:
    anchor_grid_id: int
    anchor_type: WindowAnchor
    anchor_left: float
    anchor_top: float
    sort_order: int


class WindowType(Enum):
    EDITOR = "editor"
    MESSAGE = "message"


class Window:
    """A grid plus its placement; every change is queued as a draw command."""

    def __init__(
        self,
        grid_id: int,
        window_type: WindowType,
        anchor_info: Optional[AnchorInfo],
        grid_position: tuple[float, float],
        grid_size: tuple[int, int],
        draw_command_batcher: DrawCommandBatcher,
    ) -> None:
        self.grid_id = grid_id
        self.grid = CharacterGrid(grid_size)
        self.window_type = window_type
        self.anchor_info = anchor_info
        self.grid_position = grid_position
        self._batcher = draw_command_batcher
        self._send_updated_position()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def _send(self, command: WindowDrawCommand) -> None:
        self._batcher.queue(WindowDraw(grid_id=self.grid_id, command=command))

    def _send_updated_position(self) -> None:
        self._send(
            Position(
                grid_position=self.grid_position,
                grid_size=(self.grid.width, self.grid.height),
                floating_order=None if self.anchor_info is None else self.anchor_info.sort_order,
            )
        )

    def get_cursor_character(self, window_left: int, window_top: int) -> tuple[str, bool]:
        """Text under the cursor and whether the next cell marks it double width."""
        cell = self.grid.get_cell(window_left, window_top)
        character = cell[0] if cell is not None else " "
        next_cell = self.grid.get_cell(window_left + 1, window_top)
        double_width = next_cell is not None and next_cell[0] == ""
        return character, double_width

    def position(
        self,
        anchor_info: Optional[AnchorInfo],
        grid_size: tuple[int, int],
        grid_position: tuple[float, float],
    ) -> None:
        self.grid.resize(grid_size)
        self.anchor_info = anchor_info
        self.grid_position = grid_position
        self._send_updated_position()
        self.redraw()

    def resize(self, new_size: tuple[int, int]) -> None:
        self.grid.resize(new_size)
        self._send_updated_position()
        self.redraw()

    def _write_cells(
        self,
        row: int,
        column_start: int,
        cells: Iterable[GridLineCell],
        defined_styles: Mapping[int, Style],
    ) -> None:
        column = column_start
        previous_style: Optional[Style] = None
        for cell in cells:
            if cell.highlight_id == 0:
                style = None
            elif cell.highlight_id is not None:
                style = defined_styles.get(cell.highlight_id)
            else:
                style = previous_style

            text = cell.text if cell.repeat is None else cell.text * cell.repeat
            if not text:
                self.grid.set_cell(column, row, (text, style))
                column += 1
            else:
                for grapheme in _GRAPHEME.findall(text):
                    self.grid.set_cell(column, row, (grapheme, style))
                    column += 1
            previous_style = style

    def _build_line_fragment(self, row_index: int, start: int) -> LineFragment:
        """Fragment from ``start`` up to the next style change or double-width marker."""
        row = self.grid.row(row_index) or []
        style = row[start][1]
        text_parts: list[str] = []
        width = 0
        for character, cell_style in row[start:]:
            if cell_style != style:
                break
            width += 1
            if character == "":
                break
            text_parts.append(character)
        return LineFragment(
            text="".join(text_parts),
            window_left=start,
            window_top=row_index,
            width=width,
            style=style,
        )

    def _redraw_line(self, row: int) -> None:
        fragments: list[LineFragment] = []
        start = 0
        while start < self.grid.width:
            fragment = self._build_line_fragment(row, start)
            start += fragment.width
            fragments.append(fragment)
        self._send(DrawLine(fragments))

    def draw_grid_line(
        self,
        row: int,
        column_start: int,
        cells: Iterable[GridLineCell],
        defined_styles: Mapping[int, Style],
    ) -> None:
        if 0 <= row < self.grid.height:
            self._write_cells(row, column_start, cells, defined_styles)
            self._redraw_line(row)
        else:
            logger.warning("Draw command out of bounds")

    def scroll_region(
        self, top: int, bottom: int, left: int, right: int, rows: int, cols: int
    ) -> None:
        """Queue a scroll and move the grid contents to match it."""
        self._send(
            ScrollRegion(top=top, bottom=bottom, left=left, right=right, rows=rows, cols=cols)
        )
        if rows > 0:
            y_range: Iterable[int] = range(top + rows, bottom)
        else:
            y_range = reversed(range(top, bottom + rows))

        for y in y_range:
            dest_y = y - rows
            if not 0 <= dest_y < self.grid.height:
                continue
            if cols > 0:
                x_range: Iterable[int] = range(left + cols, right)
            else:
                x_range = reversed(range(left, right + cols))
            for x in x_range:
                cell = self.grid.get_cell(x, y)
                if cell is not None:
                    self.grid.set_cell(x - cols, dest_y, cell)

    def clear(self) -> None:
        self.grid.clear()
        self._send(ClearWindow())

    def redraw(self) -> None:
        """Queue a clear followed by every row of the grid."""
        self._send(ClearWindow())
        for row in range(self.grid.height):
            self._redraw_line(row)

    def hide(self) -> None:
        self._send(HideWindow())

    def show(self) -> None:
        self._send(ShowWindow())

    def close(self) -> None:
        self._send(CloseWindowCommand())

    def update_viewport(self, top_line: float, bottom_line: float) -> None:
        self._send(Viewport(top_line=top_line, bottom_line=bottom_line))