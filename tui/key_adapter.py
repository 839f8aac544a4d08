"""Translate Textual input events into the client's Event values."""

from __future__ import annotations

from typing import Optional

from textual import events as textual_events
from textual.keys import key_to_character

from events.event import Event, FOCUS_GAINED, FOCUS_LOST, Key, Mouse, Paste, Resize, UNKNOWN
from events.keys import FUNCTION_KEYS, Char, KeyCode, Modifiers, NamedKey
from events.payloads import MouseButton, MouseEvent, MouseEventKind

# Textual key names that differ from chord tokens
_TEXTUAL_KEYS = {
    'escape': NamedKey.ESC,
    'enter': NamedKey.ENTER,
    'tab': NamedKey.TAB,
    'backspace': NamedKey.BACKSPACE,
    'delete': NamedKey.DELETE,
    'insert': NamedKey.INSERT,
    'home': NamedKey.HOME,
    'end': NamedKey.END,
    'pageup': NamedKey.PAGE_UP,
    'pagedown': NamedKey.PAGE_DOWN,
    'up': NamedKey.UP,
    'down': NamedKey.DOWN,
    'left': NamedKey.LEFT,
    'right': NamedKey.RIGHT,
    'space': Char(' '),
}

_TEXTUAL_MODIFIERS = {
    'ctrl': Modifiers.CTRL,
    'alt': Modifiers.ALT,
    'shift': Modifiers.SHIFT,
    'meta': Modifiers.META,
    'super': Modifiers.SUPER,
    'hyper': Modifiers.HYPER,
}

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}


def _base_code(name: str, character: Optional[str]) -> Optional[KeyCode]:
    code = _TEXTUAL_KEYS.get(name) or FUNCTION_KEYS.get(name)
    if code is not None:
        return code
    if len(name) == 1 and name.isascii():
        return Char(name)
    # Punctuation arrives by name ("backslash", "full_stop"); with ctrl held the
    # character is a control code, so resolve the name first
    named = key_to_character(name)
    if named and len(named) == 1 and named.isascii():
        return Char(named)
    if character and len(character) == 1 and character.isascii() and character.isprintable():
        return Char(character)
    return None


def key_from_textual(key: str, character: Optional[str] = None) -> Event:
    """
    Key event for a Textual key name such as ``ctrl+a``, ``pageup`` or
    ``shift+tab``. Keys with no counterpart (``f20``, non-ASCII) give Unknown.
    """
    *prefix, name = key.split('+')
    modifiers = Modifiers.NONE
    for token in prefix:
        modifiers |= _TEXTUAL_MODIFIERS.get(token, Modifiers.NONE)

    code = _base_code(name, character)
    if code is None:
        return UNKNOWN
    if code is NamedKey.TAB and modifiers & Modifiers.SHIFT:
        code = NamedKey.BACK_TAB
    return Key(code, modifiers)


def mouse_from_fields(kind: MouseEventKind, x: int, y: int, button: int = 0,
                      shift: bool = False, meta: bool = False, ctrl: bool = False) -> MouseEvent:
    modifiers = Modifiers.NONE
    if shift:
        modifiers |= Modifiers.SHIFT
    if meta:
        modifiers |= Modifiers.META
    if ctrl:
        modifiers |= Modifiers.CTRL
    return MouseEvent(kind, int(x), int(y), _BUTTONS.get(button), modifiers)


def _mouse_kind(ev: textual_events.MouseEvent) -> MouseEventKind:
    if isinstance(ev, textual_events.MouseScrollUp):
        return MouseEventKind.SCROLL_UP
    if isinstance(ev, textual_events.MouseScrollDown):
        return MouseEventKind.SCROLL_DOWN
    if isinstance(ev, textual_events.MouseDown):
        return MouseEventKind.DOWN
    # Click fires after the button is released
    if isinstance(ev, (textual_events.MouseUp, textual_events.Click)):
        return MouseEventKind.UP
    if isinstance(ev, textual_events.MouseMove) and ev.button:
        return MouseEventKind.DRAG
    return MouseEventKind.MOVED


def event_from_textual(ev: textual_events.Event) -> Event:
    """Event value for a Textual event; anything unmodelled becomes Unknown."""
    if isinstance(ev, textual_events.Key):
        return key_from_textual(ev.key, ev.character)
    if isinstance(ev, textual_events.Resize):
        return Resize(min(ev.size.width, 0xFFFF), min(ev.size.height, 0xFFFF))
    if isinstance(ev, textual_events.Paste):
        return Paste(ev.text)
    if isinstance(ev, textual_events.AppFocus):
        return FOCUS_GAINED
    if isinstance(ev, textual_events.AppBlur):
        return FOCUS_LOST
    if isinstance(ev, textual_events.MouseEvent):
        return Mouse(mouse_from_fields(_mouse_kind(ev), ev.x, ev.y, ev.button, ev.shift, ev.meta, ev.ctrl))
    return UNKNOWN
