"""Decoding of redraw notifications and channel descriptions from the editor.

Values arrive already unpacked from msgpack: arrays as lists or tuples, maps
as dicts or sequences of key/value pairs, strings as ``str``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from .cursor import CursorMode, CursorShape
from .event_types import (
    BusyStart,
    BusyStop,
    ChannelInfo,
    ChannelMode,
    ChannelStreamType,
    Clear,
    ClientInfo,
    ClientType,
    ClientVersion,
    CommandLineBlockAppend,
    CommandLineBlockHide,
    CommandLineBlockShow,
    CommandLineHide,
    CommandLinePosition,
    CommandLineShow,
    CommandLineSpecialCharacter,
    CursorGoto,
    DefaultColorsSet,
    Destroy,
    EditorMode,
    Flush,
    GridLine,
    GridLineCell,
    GuiOption,
    HighlightAttributesDefine,
    MessageClear,
    MessageHistoryShow,
    MessageKind,
    MessageRuler,
    MessageSetPosition,
    MessageShow,
    MessageShowCommand,
    MessageShowMode,
    ModeChange,
    ModeInfoSet,
    MouseOff,
    MouseOn,
    OptionSet,
    ParseError,
    RedrawEvent,
    Resize,
    Scroll,
    SetTitle,
    StyledContent,
    WindowAnchor,
    WindowClose,
    WindowExternalPosition,
    WindowFloatPosition,
    WindowHide,
    WindowPosition,
    WindowViewport,
)
from .style import Color4f, Colors, Style

logger = logging.getLogger(__name__)

_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def unpack_color(packed_color: int) -> Color4f:
    """Convert a packed ``0xRRGGBB`` integer into an opaque colour."""
    packed = packed_color & 0xFFFFFFFF
    r = (packed & 0x00FF0000) >> 16
    g = (packed & 0xFF00) >> 8
    b = packed & 0xFF
    return Color4f(r / 255.0, g / 255.0, b / 255.0, 1.0)


def _extract(values: list[Any], required: int, optional: int = 0) -> list[Any]:
    """First ``required`` values, then ``optional`` slots padded with None."""
    if required > len(values) or len(values) > required + optional:
        raise ParseError("event", repr(values))
    return list(values) + [None] * (required + optional - len(values))


def _extract_required(values: list[Any], required: int) -> list[Any]:
    if required > len(values):
        raise ParseError("event", repr(values))
    return list(values[:required])


def _parse_array(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ParseError("array", value)


def _parse_map(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, dict):
        return list(value.items())
    if isinstance(value, (list, tuple)) and all(
        isinstance(pair, (list, tuple)) and len(pair) == 2 for pair in value
    ):
        return [(key, item) for key, item in value]
    raise ParseError("map", value)


def _parse_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ParseError("string", value)


def _parse_u64(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _U64_MAX:
        return value
    raise ParseError("u64", value)


def _parse_i64(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and _I64_MIN <= value <= _I64_MAX:
        return value
    raise ParseError("i64", value)


def _parse_f64(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ParseError("f64", value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ParseError("bool", value)


def _parse_set_title(args: list[Any]) -> RedrawEvent:
    (title,) = _extract_required(args, 1)
    return SetTitle(title=_parse_string(title))


def _parse_mode_info_set(args: list[Any]) -> RedrawEvent:
    _cursor_style_enabled, mode_info = _extract_required(args, 2)
    cursor_modes = []
    for mode_info_value in _parse_array(mode_info):
        mode = CursorMode()
        for name, value in _parse_map(mode_info_value):
            key = _parse_string(name)
            if key == "cursor_shape":
                mode.shape = CursorShape.from_type_name(_parse_string(value))
            elif key == "cell_percentage":
                mode.cell_percentage = _parse_u64(value) / 100.0
            elif key == "blinkwait":
                mode.blinkwait = _parse_u64(value)
            elif key == "blinkon":
                mode.blinkon = _parse_u64(value)
            elif key == "blinkoff":
                mode.blinkoff = _parse_u64(value)
            elif key == "attr_id":
                mode.style_id = _parse_u64(value)
        cursor_modes.append(mode)
    return ModeInfoSet(cursor_modes=cursor_modes)


_OPTION_PARSERS: dict[str, Callable[[Any], Any]] = {
    "arabicshape": _parse_bool,
    "ambiwidth": _parse_string,
    "emoji": _parse_bool,
    "guifont": _parse_string,
    "guifontset": _parse_string,
    "guifontwide": _parse_string,
    "linespace": _parse_u64,
    "pumblend": _parse_u64,
    "showtabline": _parse_u64,
    "termguicolors": _parse_bool,
}


def _parse_option_set(args: list[Any]) -> RedrawEvent:
    name_value, value = _extract_required(args, 2)
    name = _parse_string(name_value)
    parser = _OPTION_PARSERS.get(name)
    typed = parser(value) if parser is not None else value
    return OptionSet(gui_option=GuiOption(name=name, value=typed))


def _parse_mode_change(args: list[Any]) -> RedrawEvent:
    mode, mode_index = _extract_required(args, 2)
    return ModeChange(mode=EditorMode(_parse_string(mode)), mode_index=_parse_u64(mode_index))


def _parse_grid_resize(args: list[Any]) -> RedrawEvent:
    grid, width, height = _extract_required(args, 3)
    return Resize(grid=_parse_u64(grid), width=_parse_u64(width), height=_parse_u64(height))


def _parse_default_colors(args: list[Any]) -> RedrawEvent:
    foreground, background, special, _term_fg, _term_bg = _extract_required(args, 5)
    return DefaultColorsSet(
        colors=Colors(
            foreground=unpack_color(_parse_u64(foreground)),
            background=unpack_color(_parse_u64(background)),
            special=unpack_color(_parse_u64(special)),
        )
    )


_STYLE_COLORS = ("foreground", "background", "special")
_STYLE_FLAGS = ("reverse", "italic", "bold", "strikethrough", "underline", "undercurl")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_style(style_map: Any) -> Style:
    style = Style(colors=Colors())
    for name, value in _parse_map(style_map):
        if not isinstance(name, str):
            logger.debug("Invalid attribute format")
            continue
        if name in _STYLE_COLORS and _is_integer(value):
            setattr(style.colors, name, unpack_color(_parse_u64(value)))
        elif name in _STYLE_FLAGS and isinstance(value, bool):
            setattr(style, name, value)
        elif name == "blend" and _is_integer(value):
            style.blend = _parse_u64(value) & 0xFF
        else:
            logger.debug("Ignored style attribute: %s", name)
    return style


def _parse_hl_attr_define(args: list[Any]) -> RedrawEvent:
    highlight_id, attributes, _terminal_attributes, _info = _extract_required(args, 4)
    style = _parse_style(attributes)
    return HighlightAttributesDefine(id=_parse_u64(highlight_id), style=style)


def _parse_grid_line_cell(value: Any) -> GridLineCell:
    contents = _parse_array(value)
    if not contents:
        raise ParseError("event", repr(contents))
    highlight_id = _parse_u64(contents[1]) if len(contents) > 1 else None
    repeat = _parse_u64(contents[2]) if len(contents) > 2 else None
    return GridLineCell(text=_parse_string(contents[0]), highlight_id=highlight_id, repeat=repeat)


def _parse_grid_line(args: list[Any]) -> RedrawEvent:
    grid, row, column_start, cells = _extract_required(args, 4)
    return GridLine(
        grid=_parse_u64(grid),
        row=_parse_u64(row),
        column_start=_parse_u64(column_start),
        cells=[_parse_grid_line_cell(cell) for cell in _parse_array(cells)],
    )


def _parse_grid_clear(args: list[Any]) -> RedrawEvent:
    (grid,) = _extract_required(args, 1)
    return Clear(grid=_parse_u64(grid))


def _parse_grid_destroy(args: list[Any]) -> RedrawEvent:
    (grid,) = _extract_required(args, 1)
    return Destroy(grid=_parse_u64(grid))


def _parse_grid_cursor_goto(args: list[Any]) -> RedrawEvent:
    grid, row, column = _extract_required(args, 3)
    return CursorGoto(grid=_parse_u64(grid), row=_parse_u64(row), column=_parse_u64(column))


def _parse_grid_scroll(args: list[Any]) -> RedrawEvent:
    grid, top, bottom, left, right, rows, columns = _extract_required(args, 7)
    return Scroll(
        grid=_parse_u64(grid),
        top=_parse_u64(top),
        bottom=_parse_u64(bottom),
        left=_parse_u64(left),
        right=_parse_u64(right),
        rows=_parse_i64(rows),
        columns=_parse_i64(columns),
    )


def _parse_win_pos(args: list[Any]) -> RedrawEvent:
    grid, _window, start_row, start_column, width, height = _extract_required(args, 6)
    return WindowPosition(
        grid=_parse_u64(grid),
        start_row=_parse_u64(start_row),
        start_column=_parse_u64(start_column),
        width=_parse_u64(width),
        height=_parse_u64(height),
    )


def _parse_window_anchor(value: Any) -> WindowAnchor:
    text = _parse_string(value)
    try:
        return WindowAnchor(text)
    except ValueError:
        raise ParseError("window anchor", text) from None


def _parse_win_float_pos(args: list[Any]) -> RedrawEvent:
    grid, _window, anchor, anchor_grid, anchor_row, anchor_column, focusable, sort_order = (
        _extract(args, 7, 1)
    )
    parsed_sort_order = _parse_u64(sort_order) if len(args) > 7 else None
    return WindowFloatPosition(
        grid=_parse_u64(grid),
        anchor=_parse_window_anchor(anchor),
        anchor_grid=_parse_u64(anchor_grid),
        anchor_row=_parse_f64(anchor_row),
        anchor_column=_parse_f64(anchor_column),
        focusable=_parse_bool(focusable),
        sort_order=parsed_sort_order,
    )


def _parse_win_external_pos(args: list[Any]) -> RedrawEvent:
    grid, _window = _extract_required(args, 2)
    return WindowExternalPosition(grid=_parse_u64(grid))


def _parse_win_hide(args: list[Any]) -> RedrawEvent:
    (grid,) = _extract_required(args, 1)
    return WindowHide(grid=_parse_u64(grid))


def _parse_win_close(args: list[Any]) -> RedrawEvent:
    (grid,) = _extract_required(args, 1)
    return WindowClose(grid=_parse_u64(grid))


def _parse_msg_set_pos(args: list[Any]) -> RedrawEvent:
    grid, row, scrolled, separator = _extract_required(args, 4)
    return MessageSetPosition(
        grid=_parse_u64(grid),
        row=_parse_u64(row),
        scrolled=_parse_bool(scrolled),
        separator_character=_parse_string(separator),
    )


def _parse_win_viewport(args: list[Any]) -> RedrawEvent:
    grid, _window, top_line, bottom_line, current_line, current_column, line_count = _extract(
        args, 6, 1
    )
    parsed_line_count = _parse_f64(line_count) if len(args) > 6 else None
    return WindowViewport(
        grid=_parse_u64(grid),
        top_line=_parse_f64(top_line),
        bottom_line=_parse_f64(bottom_line),
        current_line=_parse_f64(current_line),
        current_column=_parse_f64(current_column),
        line_count=parsed_line_count,
    )


def _parse_styled_content(line: Any) -> StyledContent:
    content = []
    for chunk in _parse_array(line):
        style_id, text = _extract_required(_parse_array(chunk), 2)
        content.append((_parse_u64(style_id), _parse_string(text)))
    return content


def _parse_cmdline_show(args: list[Any]) -> RedrawEvent:
    content, position, first_character, prompt, indent, level = _extract_required(args, 6)
    return CommandLineShow(
        content=_parse_styled_content(content),
        position=_parse_u64(position),
        first_character=_parse_string(first_character),
        prompt=_parse_string(prompt),
        indent=_parse_u64(indent),
        level=_parse_u64(level),
    )


def _parse_cmdline_pos(args: list[Any]) -> RedrawEvent:
    position, level = _extract_required(args, 2)
    return CommandLinePosition(position=_parse_u64(position), level=_parse_u64(level))


def _parse_cmdline_special_char(args: list[Any]) -> RedrawEvent:
    character, shift, level = _extract_required(args, 3)
    return CommandLineSpecialCharacter(
        character=_parse_string(character), shift=_parse_bool(shift), level=_parse_u64(level)
    )


def _parse_cmdline_block_show(args: list[Any]) -> RedrawEvent:
    (lines,) = _extract_required(args, 1)
    return CommandLineBlockShow(lines=[_parse_styled_content(line) for line in _parse_array(lines)])


def _parse_cmdline_block_append(args: list[Any]) -> RedrawEvent:
    (line,) = _extract_required(args, 1)
    return CommandLineBlockAppend(line=_parse_styled_content(line))


def _parse_msg_show(args: list[Any]) -> RedrawEvent:
    kind, content, replace_last = _extract_required(args, 3)
    return MessageShow(
        kind=MessageKind.parse(_parse_string(kind)),
        content=_parse_styled_content(content),
        replace_last=_parse_bool(replace_last),
    )


def _parse_msg_showmode(args: list[Any]) -> RedrawEvent:
    (content,) = _extract_required(args, 1)
    return MessageShowMode(content=_parse_styled_content(content))


def _parse_msg_showcmd(args: list[Any]) -> RedrawEvent:
    (content,) = _extract_required(args, 1)
    return MessageShowCommand(content=_parse_styled_content(content))


def _parse_msg_ruler(args: list[Any]) -> RedrawEvent:
    (content,) = _extract_required(args, 1)
    return MessageRuler(content=_parse_styled_content(content))


def _parse_msg_history_entry(entry: Any) -> tuple[MessageKind, StyledContent]:
    kind, content = _extract_required(_parse_array(entry), 2)
    return (MessageKind.parse(_parse_string(kind)), _parse_styled_content(content))


def _parse_msg_history_show(args: list[Any]) -> RedrawEvent:
    (entries,) = _extract_required(args, 1)
    return MessageHistoryShow(
        entries=[_parse_msg_history_entry(entry) for entry in _parse_array(entries)]
    )


def _constant(event_type: type[RedrawEvent]) -> Callable[[list[Any]], RedrawEvent]:
    return lambda _args: event_type()


_EVENT_PARSERS: dict[str, Callable[[list[Any]], RedrawEvent]] = {
    "set_title": _parse_set_title,
    "mode_info_set": _parse_mode_info_set,
    "option_set": _parse_option_set,
    "mode_change": _parse_mode_change,
    "mouse_on": _constant(MouseOn),
    "mouse_off": _constant(MouseOff),
    "busy_start": _constant(BusyStart),
    "busy_stop": _constant(BusyStop),
    "flush": _constant(Flush),
    "grid_resize": _parse_grid_resize,
    "default_colors_set": _parse_default_colors,
    "hl_attr_define": _parse_hl_attr_define,
    "grid_line": _parse_grid_line,
    "grid_clear": _parse_grid_clear,
    "grid_destroy": _parse_grid_destroy,
    "grid_cursor_goto": _parse_grid_cursor_goto,
    "grid_scroll": _parse_grid_scroll,
    "win_pos": _parse_win_pos,
    "win_float_pos": _parse_win_float_pos,
    "win_external_pos": _parse_win_external_pos,
    "win_hide": _parse_win_hide,
    "win_close": _parse_win_close,
    "msg_set_pos": _parse_msg_set_pos,
    "win_viewport": _parse_win_viewport,
    "cmdline_show": _parse_cmdline_show,
    "cmdline_pos": _parse_cmdline_pos,
    "cmdline_special_char": _parse_cmdline_special_char,
    "cmdline_hide": _constant(CommandLineHide),
    "cmdline_block_show": _parse_cmdline_block_show,
    "cmdline_block_append": _parse_cmdline_block_append,
    "cmdline_block_hide": _constant(CommandLineBlockHide),
    "msg_show": _parse_msg_show,
    "msg_clear": _constant(MessageClear),
    "msg_showmode": _parse_msg_showmode,
    "msg_showcmd": _parse_msg_showcmd,
    "msg_ruler": _parse_msg_ruler,
    "msg_history_show": _parse_msg_history_show,
}


def parse_redraw_event(event_value: Any) -> list[RedrawEvent]:
    """Parse one ``[name, args...]`` batch of a redraw notification.

    Each argument list yields one event; unknown names (and ``set_icon``) are
    skipped, though their argument lists must still be arrays.
    """
    contents = _parse_array(event_value)
    if not contents:
        raise ParseError("event", repr(contents))
    event_name = _parse_string(contents[0])
    parser = _EVENT_PARSERS.get(event_name)
    parsed_events = []
    for event in contents[1:]:
        parameters = _parse_array(event)
        if parser is not None:
            parsed_events.append(parser(parameters))
    return parsed_events


def parse_channel_stream_type(channel_stream_value: Any) -> ChannelStreamType:
    name = _parse_string(channel_stream_value)
    try:
        return ChannelStreamType(name)
    except ValueError:
        raise ParseError("event", repr(name)) from None


def parse_channel_mode(channel_mode_value: Any) -> ChannelMode:
    name = _parse_string(channel_mode_value)
    try:
        return ChannelMode(name)
    except ValueError:
        raise ParseError("event", repr(name)) from None


def parse_client_type(client_type_value: Any) -> ClientType:
    name = _parse_string(client_type_value)
    try:
        return ClientType(name)
    except ValueError:
        raise ParseError("event", repr(name)) from None


def _string_keyed(pairs: Iterable[tuple[Any, Any]], what: str) -> Iterable[tuple[str, Any]]:
    for name, value in pairs:
        if isinstance(name, str):
            yield name, value
        else:
            logger.debug("Invalid %s format", what)


def parse_client_version(version_value: Any) -> ClientVersion:
    version = ClientVersion()
    for name, value in _string_keyed(_parse_map(version_value), "client version"):
        if name == "major":
            version.major = _parse_u64(value)
        elif name == "minor":
            version.minor = _parse_u64(value)
        elif name == "patch":
            version.patch = _parse_u64(value)
        elif name == "prerelease":
            version.prerelease = _parse_string(value)
        elif name == "commit":
            version.commit = _parse_string(value)
        else:
            logger.debug("Ignored client version property: %s", name)
    return version


def parse_client_info(client_info_value: Any) -> ClientInfo:
    info = ClientInfo()
    for name, value in _string_keyed(_parse_map(client_info_value), "client info"):
        if name == "name":
            info.name = _parse_string(value)
        elif name == "version":
            info.version = parse_client_version(value)
        elif name == "type":
            info.client_type = parse_client_type(value)
        else:
            logger.debug("Ignored client type property: %s", name)
    return info


def parse_channel_info(channel_value: Any) -> ChannelInfo:
    info = ChannelInfo()
    for name, value in _string_keyed(_parse_map(channel_value), "channel info"):
        if name == "id":
            info.id = _parse_u64(value)
        elif name == "stream":
            info.stream = parse_channel_stream_type(value)
        elif name == "mode":
            info.mode = parse_channel_mode(value)
        elif name == "pty":
            info.pty = _parse_string(value)
        elif name == "buffer":
            info.buffer = _parse_string(value)
        elif name == "client":
            info.client = parse_client_info(value)
        else:
            logger.debug("Ignored channel info property: %s", name)
    return info


def parse_channel_list(channel_infos: Iterable[Any]) -> list[ChannelInfo]:
    return [parse_channel_info(channel) for channel in channel_infos]


def _optional(value: Optional[Any]) -> Optional[Any]:
    return value