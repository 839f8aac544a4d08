"""
Key chord parsing.

A chord is the textual form of a key binding used in configuration:
``ctrl+shift+page_up``, ``f12``, ``q``. Grammar::

    chord    := (modifier '+')* keyname
    modifier := ctrl | alt | shift | super | meta | hyper
    keyname  := named key | f1..f12 | one ASCII character

Matching is case-sensitive. Unknown modifier tokens are ignored rather than
rejected; use unknown_modifiers() to find them.
"""

from __future__ import annotations

from functools import reduce
from operator import or_
from typing import List, Tuple

from base_classes import InvalidEvent
from events.event import Key
from events.keys import FUNCTION_KEYS, MODIFIER_TOKENS, Char, KeyCode, Modifiers, NamedKey, modifier_bit

SEPARATOR = '+'

_NAMED = {key.token: key for key in NamedKey}


def _split(s: str) -> Tuple[List[str], str]:
    tokens = s.split(SEPARATOR)
    return tokens[:-1], tokens[-1]


def key_code(token: str) -> KeyCode:
    """Map a single key token to its KeyCode or raise InvalidEvent(token)."""
    named = _NAMED.get(token)
    if named is not None:
        return named
    fkey = FUNCTION_KEYS.get(token)
    if fkey is not None:
        return fkey
    if len(token) == 1 and token.isascii():
        return Char(token)
    raise InvalidEvent(token)


def event_with_modifiers(token: str, modifiers: Modifiers) -> Key:
    """Build a Key event for a key token with an already-resolved modifier set."""
    return Key(key_code(token), modifiers)


def parse_chord(s: str) -> Key:
    """
    Parse a chord string into a Key event.

    :param s: chord such as ``ctrl+a``
    :return: Key event
    :raises InvalidEvent: when the key part is not a representable key; the
        error carries the key token only, not the whole chord
    """
    modifier_tokens, key_token = _split(s)
    modifiers = reduce(or_, (modifier_bit(t) for t in modifier_tokens), Modifiers.NONE)
    return event_with_modifiers(key_token, Modifiers(modifiers))


def unknown_modifiers(s: str) -> List[str]:
    """Modifier tokens in ``s`` that parse_chord silently ignores."""
    modifier_tokens, _ = _split(s)
    return [t for t in modifier_tokens if t not in MODIFIER_TOKENS]
