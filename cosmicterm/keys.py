"""Encoding of key presses into the byte sequences a terminal application expects."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Modifiers:
    """Keyboard modifiers held during a key press."""

    shift: bool = False
    alt: bool = False
    control: bool = False
    logo: bool = False

    def number(self) -> int:
        """The xterm modifier parameter: 1 plus the modifier bit mask."""
        mask = 0
        if self.shift:
            mask |= 0b1
        if self.alt:
            mask |= 0b10
        if self.control:
            mask |= 0b100
        if self.logo:
            mask |= 0b1000
        return mask + 1


class NamedKey(Enum):
    """Keys that carry a name rather than a character."""

    INSERT = "insert"
    DELETE = "delete"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_RIGHT = "arrow_right"
    ARROW_LEFT = "arrow_left"
    END = "end"
    HOME = "home"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    SPACE = "space"
    TAB = "tab"
    SHIFT = "shift"
    CONTROL = "control"
    ALT = "alt"
    SUPER = "super"
    CAPS_LOCK = "caps_lock"


class ScrollAction(Enum):
    """A scroll of the terminal's own view, not sent to the application."""

    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class KeyResult:
    """What a key press does.

    ``input`` is sent to the application, after which the view scrolls to the
    bottom. ``scroll`` scrolls the view instead. When ``clears_selection`` is
    set and a selection exists, the caller drops the selection rather than
    sending ``input``. ``captured`` tells whether the event was consumed.
    """

    input: Optional[bytes] = None
    scroll: Optional[ScrollAction] = None
    captured: bool = False
    clears_selection: bool = False


def csi(code: str, suffix: str, modifiers: int) -> bytes:
    """A CSI sequence ``ESC [ code ; modifiers suffix``; plain when unmodified."""
    if modifiers == 1:
        return f"\x1b[{code}{suffix}".encode()
    return f"\x1b[{code};{modifiers}{suffix}".encode()


def csi2(code: str, modifiers: int) -> bytes:
    """A legacy functional key: ``ESC [ code`` or ``ESC [ 1 ; modifiers code``."""
    if modifiers == 1:
        return f"\x1b[{code}".encode()
    return f"\x1b[1;{modifiers}{code}".encode()


def ss3(code: str, modifiers: int) -> bytes:
    """An SS3 sequence ``ESC O code``; the CSI form when modified."""
    if modifiers == 1:
        return f"\x1bO{code}".encode()
    return f"\x1b[1;{modifiers}{code}".encode()


_TILDE_CODES = {
    NamedKey.INSERT: "2",
    NamedKey.DELETE: "3",
    NamedKey.PAGE_UP: "5",
    NamedKey.PAGE_DOWN: "6",
    NamedKey.F5: "15",
    NamedKey.F6: "17",
    NamedKey.F7: "18",
    NamedKey.F8: "19",
    NamedKey.F9: "20",
    NamedKey.F10: "21",
    NamedKey.F11: "23",
    NamedKey.F12: "24",
}

_CURSOR_CODES = {
    NamedKey.ARROW_UP: "A",
    NamedKey.ARROW_DOWN: "B",
    NamedKey.ARROW_RIGHT: "C",
    NamedKey.ARROW_LEFT: "D",
    NamedKey.END: "F",
    NamedKey.HOME: "H",
}

_FUNCTION_SS3_CODES = {
    NamedKey.F1: "P",
    NamedKey.F2: "Q",
    NamedKey.F3: "R",
    NamedKey.F4: "S",
}

_SHIFT_SCROLLS = {
    NamedKey.PAGE_UP: ScrollAction.PAGE_UP,
    NamedKey.PAGE_DOWN: ScrollAction.PAGE_DOWN,
    NamedKey.END: ScrollAction.BOTTOM,
    NamedKey.HOME: ScrollAction.TOP,
}


def _first_char(text: Optional[str]) -> str:
    return text[0] if text else "\0"


def _is_control(character: str) -> bool:
    return unicodedata.category(character) == "Cc"


def encode_named_key(
    key: NamedKey, modifiers: Modifiers, app_cursor: bool, text: Optional[str] = None
) -> KeyResult:
    """Encode a named key press.

    Shift with Page Up, Page Down, Home or End scrolls the view. Cursor keys
    use SS3 sequences in application cursor mode. Backspace, Enter, Escape,
    Space and Tab follow the legacy encoding, prefixed by ESC when Alt is held.
    """
    key = NamedKey(key)
    if modifiers.shift and key in _SHIFT_SCROLLS:
        # Scrolling the view does not consume the event.
        return KeyResult(scroll=_SHIFT_SCROLLS[key])

    mod_no = modifiers.number()
    code: Optional[bytes] = None
    if key in _TILDE_CODES:
        code = csi(_TILDE_CODES[key], "~", mod_no)
    elif key in _CURSOR_CODES:
        letter = _CURSOR_CODES[key]
        code = ss3(letter, mod_no) if app_cursor else csi2(letter, mod_no)
    elif key in _FUNCTION_SS3_CODES:
        code = ss3(_FUNCTION_SS3_CODES[key], mod_no)
    if code is not None:
        return KeyResult(input=code, captured=True)

    alt_prefix = "\x1b" if modifiers.alt else ""
    if key is NamedKey.BACKSPACE:
        body = "\x08" if modifiers.control else "\x7f"
        return KeyResult(input=(alt_prefix + body).encode(), captured=True)
    if key is NamedKey.ENTER:
        return KeyResult(input=(alt_prefix + "\r").encode(), captured=True)
    if key is NamedKey.ESCAPE:
        return KeyResult(
            input=(alt_prefix + "\x1b").encode(), captured=True, clears_selection=True
        )
    if key is NamedKey.SPACE:
        if modifiers.control:
            return KeyResult(input=b"\x00", captured=True)
        # Use the produced text rather than a literal space so dead keys work.
        return KeyResult(input=(alt_prefix + _first_char(text)).encode(), captured=True)
    if key is NamedKey.TAB:
        body = "\x1b[Z" if modifiers.shift else "\t"
        return KeyResult(input=(alt_prefix + body).encode(), captured=True)
    return KeyResult()


def encode_character(key: str, text: Optional[str], modifiers: Modifiers) -> KeyResult:
    """Encode a character key press.

    ``key`` is the key's logical character and ``text`` the text it produced.
    Super is ignored; Alt prefixes ESC; Control passes control characters
    through; Ctrl+Shift+_ sends the unit separator, as Ctrl+Minus would.
    """
    character = _first_char(text)
    control_char = _is_control(character)

    if modifiers.logo:
        return KeyResult()

    if modifiers.control and modifiers.alt:
        if not control_char or ord(character) < 32:
            return KeyResult(input=("\x1b" + character).encode(), captured=True)
        return KeyResult()

    if modifiers.control and not modifiers.shift:
        if control_char:
            return KeyResult(input=character.encode(), captured=True)
        return KeyResult()

    if modifiers.control:
        if key == "_":
            return KeyResult(input=b"\x1f", captured=True)
        return KeyResult()

    if not control_char:
        prefix = "\x1b" if modifiers.alt else ""
        return KeyResult(input=(prefix + character).encode(), captured=True)
    return KeyResult()