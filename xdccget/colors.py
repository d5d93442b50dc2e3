"""Conversion between mIRC control codes and bracketed text markup."""

from __future__ import annotations

_BOLD = 1 << 1
_UNDERLINE = 1 << 2
_REVERSE = 1 << 3
_COLOR = 1 << 4

_MAX_COLOR = 15

COLOR_NAMES = (
    "WHITE",
    "BLACK",
    "DARKBLUE",
    "DARKGREEN",
    "RED",
    "BROWN",
    "PURPLE",
    "OLIVE",
    "YELLOW",
    "GREEN",
    "TEAL",
    "CYAN",
    "BLUE",
    "MAGENTA",
    "DARKGRAY",
    "LIGHTGRAY",
)

_DIGITS = "0123456789"

_TOGGLES = {
    "\x02": (_BOLD, "[B]", "[/B]"),
    "\x1f": (_UNDERLINE, "[U]", "[/U]"),
    "\x16": (_REVERSE, "[I]", "[/I]"),
}

_CLOSE_ORDER = (
    (_BOLD, "[/B]"),
    (_UNDERLINE, "[/U]"),
    (_REVERSE, "[/I]"),
    (_COLOR, "[/COLOR]"),
)


class _MarkupWriter:
    """Accumulates markup output and tracks which tags are open."""

    def __init__(self) -> None:
        self.mask = 0
        self.parts: list[str] = []

    def toggle(self, bit: int, start: str, end: str) -> None:
        if self.mask & bit:
            self.mask &= ~bit
            self.parts.append(end)
        else:
            self.mask |= bit
            self.parts.append(start)

    def color(self, color: int, background: int) -> None:
        if background != 0:
            start = f"[COLOR={COLOR_NAMES[color]}/{COLOR_NAMES[background]}]"
        else:
            start = f"[COLOR={COLOR_NAMES[color]}]"
        if self.mask & _COLOR:
            self.parts.append("[/COLOR]")
        self.mask |= _COLOR
        self.parts.append(start)

    def close_all(self) -> None:
        for bit, end in _CLOSE_ORDER:
            if self.mask & bit:
                self.mask &= ~bit
                self.parts.append(end)

    def text(self) -> str:
        return "".join(self.parts)


def _read_number(source: str, pos: int) -> tuple[int, int]:
    """Read one or two digits starting at ``pos``; return (value, next position)."""
    value = int(source[pos])
    pos += 1
    if pos < len(source) and source[pos] in _DIGITS:
        value = value * 10 + int(source[pos])
        pos += 1
    return value, pos


def _irc_to_markup(source: str, strip: bool) -> str:
    writer = _MarkupWriter()
    current_bg = 0
    pos = 0
    length = len(source)

    while pos < length:
        char = source[pos]
        pos += 1

        if char in _TOGGLES:
            if not strip:
                writer.toggle(*_TOGGLES[char])
        elif char == "\x0f":
            if not strip:
                writer.close_all()
        elif char == "\x03":
            if pos < length and source[pos] in _DIGITS:
                color, pos = _read_number(source, pos)
                background = -1
                if (
                    pos + 1 < length
                    and source[pos] == ","
                    and source[pos + 1] in _DIGITS
                ):
                    background, pos = _read_number(source, pos + 1)
                if color <= _MAX_COLOR and background <= _MAX_COLOR and not strip:
                    if background != -1:
                        current_bg = background
                    writer.color(color, current_bg)
        else:
            writer.parts.append(char)

    writer.close_all()
    return writer.text()


def strip_from_mirc(message: str) -> str:
    """Remove all mIRC colour and formatting codes from ``message``."""
    return _irc_to_markup(message, strip=True)


def convert_from_mirc(message: str) -> str:
    """Convert mIRC colour and formatting codes into bracketed markup."""
    return _irc_to_markup(message, strip=False)


def _color_lookup(name: str) -> int:
    try:
        return COLOR_NAMES.index(name)
    except ValueError:
        return -1


def _tag_replacement(tag: str) -> str | None:
    if tag == "/COLOR":
        return "\x0f"
    if tag.startswith("COLOR="):
        spec = tag[6:]
        background = -2
        if "/" in spec:
            spec, bg_name = spec.split("/", 1)
            background = _color_lookup(bg_name)
        color = _color_lookup(spec)
        if color != -1 and background == -2:
            return f"\x03{color:02d}"
        if color != -1 and background >= 0:
            return f"\x03{color:02d},{background:02d}"
        return None
    if tag in ("B", "/B"):
        return "\x02"
    if tag in ("U", "/U"):
        return "\x1f"
    if tag in ("I", "/I"):
        return "\x16"
    return None


def convert_to_mirc(message: str) -> str:
    """Convert bracketed markup such as ``[B]`` or ``[COLOR=RED]`` into mIRC codes."""
    parts: list[str] = []
    cur = 0
    length = len(message)

    while True:
        open_pos = message.find("[", cur)
        if open_pos == -1:
            break

        replacement = None
        close_pos = -1
        if open_pos + 1 < length:
            close_pos = message.find("]", open_pos)
            if close_pos != -1 and 1 < close_pos - open_pos < 31:
                replacement = _tag_replacement(message[open_pos + 1:close_pos])

        if replacement is not None:
            parts.append(message[cur:open_pos])
            parts.append(replacement)
        else:
            if close_pos == -1:
                close_pos = length
            parts.append(message[cur:close_pos + 1])
        cur = close_pos + 1

    parts.append(message[cur:])
    return "".join(parts)