import pytest

from gridstate.cursor import Cursor, CursorMode, CursorShape
from gridstate.style import Color4f, Colors, Style


def make_colors():
    return Colors(
        foreground=Color4f(0.1, 0.1, 0.1, 0.1),
        background=Color4f(0.2, 0.1, 0.1, 0.1),
        special=Color4f(0.3, 0.1, 0.1, 0.1),
    )


def make_default_colors():
    return Colors(
        foreground=Color4f(0.1, 0.2, 0.1, 0.1),
        background=Color4f(0.2, 0.2, 0.1, 0.1),
        special=Color4f(0.3, 0.2, 0.1, 0.1),
    )


def test_from_type_name():
    assert CursorShape.from_type_name("block") == CursorShape.BLOCK
    assert CursorShape.from_type_name("horizontal") == CursorShape.HORIZONTAL
    assert CursorShape.from_type_name("vertical") == CursorShape.VERTICAL


def test_from_type_name_unknown():
    assert CursorShape.from_type_name("triangle") is None


def test_foreground():
    defaults = make_default_colors()
    cursor = Cursor()
    assert cursor.foreground(defaults) == defaults.background
    cursor.style = Style(make_colors())
    assert cursor.foreground(defaults) == make_colors().foreground
    cursor.style = Style(Colors())
    assert cursor.foreground(defaults) == defaults.background


def test_background():
    defaults = make_default_colors()
    cursor = Cursor()
    assert cursor.background(defaults) == defaults.foreground
    cursor.style = Style(make_colors())
    assert cursor.background(defaults) == make_colors().background
    cursor.style = Style(Colors())
    assert cursor.background(defaults) == defaults.foreground


def test_foreground_without_defaults_raises():
    with pytest.raises(ValueError):
        Cursor().foreground(Colors())


def test_new_cursor_defaults():
    cursor = Cursor()
    assert cursor.grid_position == (0, 0)
    assert cursor.shape == CursorShape.BLOCK
    assert cursor.enabled is True
    assert cursor.double_width is False
    assert cursor.character == " "


def test_change_mode():
    cursor_mode = CursorMode(
        shape=CursorShape.HORIZONTAL,
        style_id=1,
        cell_percentage=100.0,
        blinkwait=1,
        blinkon=1,
        blinkoff=1,
    )
    styles = {1: Style(make_colors())}
    cursor = Cursor()

    cursor.change_mode(cursor_mode, styles)
    assert cursor.shape == CursorShape.HORIZONTAL
    assert cursor.style == styles.get(1)
    assert cursor.cell_percentage == 100.0
    assert cursor.blinkwait == 1
    assert cursor.blinkon == 1
    assert cursor.blinkoff == 1

    cursor.change_mode(CursorMode(), styles)
    assert cursor.shape == CursorShape.HORIZONTAL
    assert cursor.style == styles.get(1)
    assert cursor.cell_percentage is None
    assert cursor.blinkwait is None
    assert cursor.blinkon is None
    assert cursor.blinkoff is None


def test_change_mode_unknown_style_clears_style():
    cursor = Cursor(style=Style(make_colors()))
    cursor.change_mode(CursorMode(style_id=7), {})
    assert cursor.style is None