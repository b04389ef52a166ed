"""Cursor state and the cursor modes announced by the editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .style import Color4f, Colors, Style


class CursorShape(Enum):
    BLOCK = "block"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def from_type_name(cls, name: str) -> Optional["CursorShape"]:
        """Shape for a mode-info ``cursor_shape`` name, or None if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass
class CursorMode:
    shape: Optional[CursorShape] = None
    style_id: Optional[int] = None
    cell_percentage: Optional[float] = None
    blinkwait: Optional[int] = None
    blinkon: Optional[int] = None
    blinkoff: Optional[int] = None


def _require(color: Optional[Color4f], name: str) -> Color4f:
    if color is None:
        raise ValueError(f"default {name} color is not set")
    return color


@dataclass
class Cursor:
    grid_position: tuple[int, int] = (0, 0)
    parent_window_id: int = 0
    shape: CursorShape = CursorShape.BLOCK
    cell_percentage: Optional[float] = None
    blinkwait: Optional[int] = None
    blinkon: Optional[int] = None
    blinkoff: Optional[int] = None
    style: Optional[Style] = None
    enabled: bool = True
    double_width: bool = False
    character: str = " "

    def foreground(self, default_colors: Colors) -> Color4f:
        """Cursor foreground; defaults to the editor background."""
        if self.style is not None and self.style.colors.foreground is not None:
            return self.style.colors.foreground
        return _require(default_colors.background, "background")

    def background(self, default_colors: Colors) -> Color4f:
        """Cursor background; defaults to the editor foreground."""
        if self.style is not None and self.style.colors.background is not None:
            return self.style.colors.background
        return _require(default_colors.foreground, "foreground")

    def change_mode(self, cursor_mode: CursorMode, styles: Mapping[int, Style]) -> None:
        """Apply a cursor mode; shape and style only change when given."""
        if cursor_mode.shape is not None:
            self.shape = cursor_mode.shape
        if cursor_mode.style_id is not None:
            self.style = styles.get(cursor_mode.style_id)
        self.cell_percentage = cursor_mode.cell_percentage
        self.blinkwait = cursor_mode.blinkwait
        self.blinkon = cursor_mode.blinkon
        self.blinkoff = cursor_mode.blinkoff