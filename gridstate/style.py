"""Colours and highlight styles used by grid cells and the cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Color4f:
    """An RGBA colour with float channels in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass
class Colors:
    """Foreground, background and special colours; any of them may be unset."""

    foreground: Optional[Color4f] = None
    background: Optional[Color4f] = None
    special: Optional[Color4f] = None


def _require(color: Optional[Color4f], name: str) -> Color4f:
    if color is None:
        raise ValueError(f"default {name} color is not set")
    return color


@dataclass
class Style:
    """A highlight definition: colours plus text attributes."""

    colors: Colors = field(default_factory=Colors)
    reverse: bool = False
    italic: bool = False
    bold: bool = False
    strikethrough: bool = False
    underline: bool = False
    undercurl: bool = False
    blend: int = 0

    def foreground(self, default_colors: Colors) -> Color4f:
        """Effective foreground colour, honouring ``reverse``."""
        if self.reverse:
            if self.colors.background is not None:
                return self.colors.background
            return _require(default_colors.background, "background")
        if self.colors.foreground is not None:
            return self.colors.foreground
        return _require(default_colors.foreground, "foreground")

    def background(self, default_colors: Colors) -> Color4f:
        """Effective background colour, honouring ``reverse``."""
        if self.reverse:
            if self.colors.foreground is not None:
                return self.colors.foreground
            return _require(default_colors.foreground, "foreground")
        if self.colors.background is not None:
            return self.colors.background
        return _require(default_colors.background, "background")

    def special(self, default_colors: Colors) -> Color4f:
        """Special colour, falling back to the effective foreground."""
        if self.colors.special is not None:
            return self.colors.special
        return self.foreground(default_colors)