"""A fixed-size grid of text cells with optional styles."""

from __future__ import annotations

from typing import Optional

from .style import Style

GridCell = tuple[str, Optional[Style]]


def default_cell() -> GridCell:
    """An empty cell: a single space with no style."""
    return (" ", None)


class CharacterGrid:
    """Row-major storage of ``width * height`` cells."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.width, self.height = size
        self._cells: list[GridCell] = [default_cell()] * (self.width * self.height)

    def resize(self, size: tuple[int, int]) -> None:
        """Change the size, keeping the overlapping top-left region."""
        width, height = size
        new_cells = [default_cell()] * (width * height)
        keep = min(self.width, width)
        for y in range(min(self.height, height)):
            new_cells[y * width : y * width + keep] = self._cells[
                y * self.width : y * self.width + keep
            ]
        self.width, self.height = width, height
        self._cells = new_cells

    def clear(self) -> None:
        self.set_all_characters(default_cell())

    def _index(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + y * self.width

    def get_cell(self, x: int, y: int) -> Optional[GridCell]:
        """The cell at column ``x``, row ``y``, or None when out of bounds."""
        index = self._index(x, y)
        return None if index is None else self._cells[index]

    def set_cell(self, x: int, y: int, cell: GridCell) -> bool:
        """Store a cell; returns False when the position is out of bounds."""
        index = self._index(x, y)
        if index is None:
            return False
        self._cells[index] = cell
        return True

    def set_all_characters(self, value: GridCell) -> None:
        self._cells = [value] * (self.width * self.height)

    def row(self, row_index: int) -> Optional[list[GridCell]]:
        """A copy of one row, or None when the row does not exist."""
        if 0 <= row_index < self.height:
            start = row_index * self.width
            return self._cells[start : start + self.width]
        return None