import pytest

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


def test_foreground():
    colors = make_colors()
    defaults = make_default_colors()
    style = Style(make_colors())
    assert style.foreground(defaults) == colors.foreground
    style.colors.foreground = None
    assert style.foreground(defaults) == defaults.foreground


def test_foreground_reverse():
    colors = make_colors()
    defaults = make_default_colors()
    style = Style(make_colors())
    style.reverse = True
    assert style.foreground(defaults) == colors.background
    style.colors.background = None
    assert style.foreground(defaults) == defaults.background


def test_background():
    colors = make_colors()
    defaults = make_default_colors()
    style = Style(make_colors())
    assert style.background(defaults) == colors.background
    style.colors.background = None
    assert style.background(defaults) == defaults.background


def test_background_reverse():
    colors = make_colors()
    defaults = make_default_colors()
    style = Style(make_colors())
    style.reverse = True
    assert style.background(defaults) == colors.foreground
    style.colors.foreground = None
    assert style.background(defaults) == defaults.foreground


def test_special():
    colors = make_colors()
    defaults = make_default_colors()
    style = Style(make_colors())
    assert style.special(defaults) == colors.special
    style.colors.special = None
    assert style.special(defaults) == style.foreground(defaults)


def test_new_style_has_default_attributes():
    style = Style(make_colors())
    assert (style.reverse, style.italic, style.bold, style.blend) == (False, False, False, 0)


def test_missing_default_color_raises():
    style = Style(Colors())
    with pytest.raises(ValueError):
        style.foreground(Colors())
    with pytest.raises(ValueError):
        style.background(Colors())


def test_styles_compare_by_value():
    assert Style(make_colors()) == Style(make_colors())
    assert Style(make_colors(), bold=True) != Style(make_colors())