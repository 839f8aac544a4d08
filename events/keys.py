"""Key codes and modifier bit-set used by keyboard events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Dict, Union


class NamedKey(Enum):
    """
    Symbolic keys. The value of each member is the token used for it in
    configured key chords.
    """
    BACKSPACE = 'backspace'
    ENTER = 'enter'
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'
    HOME = 'home'
    END = 'end'
    PAGE_UP = 'page_up'
    PAGE_DOWN = 'page_down'
    TAB = 'tab'
    BACK_TAB = 'back_tab'
    DELETE = 'delete'
    INSERT = 'insert'
    NULL = 'null'
    ESC = 'esc'

    @property
    def token(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. ``PageUp`` for ``PAGE_UP``."""
        return ''.join(part.capitalize() for part in self.name.split('_'))


@dataclass(frozen=True)
class F:
    """Function key F1..F12."""

    n: int

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool) or not 1 <= self.n <= 12:
            raise ValueError(f'function key out of range: {self.n!r}')

    @property
    def token(self) -> str:
        return f'f{self.n}'

    @property
    def label(self) -> str:
        return f'F({self.n})'

    def __repr__(self) -> str:
        return f'F({self.n})'


@dataclass(frozen=True)
class Char:
    """A single ASCII character key."""

    c: str

    def __post_init__(self) -> None:
        if not isinstance(self.c, str) or len(self.c) != 1 or not self.c.isascii():
            raise ValueError(f'Char needs a single ASCII character, got {self.c!r}')

    @property
    def token(self) -> str:
        return self.c

    @property
    def label(self) -> str:
        return self.c

    def __repr__(self) -> str:
        return f'Char({self.c!r})'


KeyCode = Union[NamedKey, F, Char]

FUNCTION_KEYS: Dict[str, F] = {f'f{n}': F(n) for n in range(1, 13)}


def key_label(code: KeyCode) -> str:
    """Char renders as the character itself, everything else by its symbolic name."""
    return code.label


class Modifiers(IntFlag):
    """Keyboard modifier bit-set."""
    NONE = 0
    SHIFT = 0b0000_0001
    CTRL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000

    @property
    def label(self) -> str:
        """Title-case name of a single modifier (``Ctrl``); empty for anything else."""
        return _LABELS.get(int(self), '')


# Bit order, lowest first
SINGLE_MODIFIERS = (
    Modifiers.SHIFT,
    Modifiers.CTRL,
    Modifiers.ALT,
    Modifiers.SUPER,
    Modifiers.HYPER,
    Modifiers.META,
)

ALL_MODIFIERS = 0b0011_1111

_LABELS = {
    int(Modifiers.SHIFT): 'Shift',
    int(Modifiers.CTRL): 'Ctrl',
    int(Modifiers.ALT): 'Alt',
    int(Modifiers.SUPER): 'Super',
    int(Modifiers.HYPER): 'Hyper',
    int(Modifiers.META): 'Meta',
}

MODIFIER_TOKENS: Dict[str, Modifiers] = {
    'ctrl': Modifiers.CTRL,
    'alt': Modifiers.ALT,
    'shift': Modifiers.SHIFT,
    'super': Modifiers.SUPER,
    'meta': Modifiers.META,
    'hyper': Modifiers.HYPER,
}


def modifier_bit(token: str) -> Modifiers:
    """Bit for a chord modifier token; unrecognised tokens map to NONE."""
    return MODIFIER_TOKENS.get(token, Modifiers.NONE)


def describe_modifiers(mods: Modifiers) -> str:
    """Generic debug form of a modifier set, e.g. ``Modifiers(SHIFT | CTRL)``."""
    names = [m.name for m in SINGLE_MODIFIERS if mods & m]
    leftover = int(mods) & ~ALL_MODIFIERS
    if leftover:
        names.append(hex(leftover))
    return f"Modifiers({' | '.join(names) if names else 'NONE'})"
