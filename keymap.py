"""
Key bindings loaded from configuration.

Each option of the keymap section binds an action name to one or more chords::

    [KEYMAP]
    show_help = f1, alt+h

Chords that do not parse are reported and skipped so one bad line never costs
the rest of the keymap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from base_classes import InvalidEvent
from events.chord import parse_chord, unknown_modifiers
from events.event import Event, Key


@dataclass(frozen=True)
class InvalidBinding:
    """A configured chord that was rejected."""

    action: str
    chord: str
    reason: str


def split_chords(value: str) -> List[str]:
    """
    Comma-separated chord list; surrounding whitespace is not part of a chord,
    so the space and comma keys cannot be written here. A blank value binds
    nothing; a blank item inside a list comes back as an empty chord.
    """
    if not (value or '').strip():
        return []
    return [c.strip() for c in value.split(',')]


class Keymap:
    """Maps Key events to action names."""

    def __init__(self, strict: bool = False, logger=None) -> None:
        self.strict = strict
        self._logger = logger
        self._bindings: Dict[Key, str] = {}
        self.invalid: List[InvalidBinding] = []

    @classmethod
    def from_config(cls, config, logger=None, strict: Optional[bool] = None) -> 'Keymap':
        """
        Build a keymap from a ConfigManager.

        :param config: object with get_option() and keymap_entries()
        :param logger: optional LoggingHandler
        :param strict: overrides [TUI].strict_keymap when given
        """
        if strict is None:
            raw_strict = config.get_option('TUI', 'strict_keymap', fallback=False)
            # Anything that is not a recognised boolean leaves strict mode off
            strict = raw_strict if isinstance(raw_strict, bool) else False
        section = config.get_option('TUI', 'keymap_section', fallback='KEYMAP') or 'KEYMAP'
        keymap = cls(strict=strict, logger=logger)
        keymap.load(config.keymap_entries(section))
        if logger:
            logger.keymap_event('keymap_loaded', {
                'section': section,
                'strict': strict,
                'bindings': len(keymap),
                'invalid': len(keymap.invalid),
            })
        return keymap

    def load(self, entries: Iterable[Tuple[str, str]]) -> None:
        for action, value in entries:
            for chord in split_chords(value):
                self.bind(chord, action)

    def bind(self, chord: str, action: str) -> Optional[Key]:
        """
        Bind ``chord`` to ``action``. Returns the Key event, or None when the
        chord was rejected (it is then recorded in ``invalid``).
        """
        if not chord:
            self._reject(action, chord, 'empty chord')
            return None
        try:
            event = parse_chord(chord)
        except InvalidEvent as e:
            self._reject(action, chord, f'unknown key {e.token!r}')
            return None

        unknown = unknown_modifiers(chord)
        if unknown and self.strict:
            self._reject(action, chord, f"unknown modifier {', '.join(repr(m) for m in unknown)}")
            return None

        previous = self._bindings.get(event)
        if previous is not None and previous != action:
            if self._logger:
                self._logger.keymap_event('rebind', {
                    'chord': chord, 'key': str(event), 'from': previous, 'to': action,
                }, severity='warning')
        self._bindings[event] = action
        if self._logger:
            self._logger.keymap_detail('bind', {'chord': chord, 'key': str(event), 'action': action})
        return event

    def _reject(self, action: str, chord: str, reason: str) -> None:
        self.invalid.append(InvalidBinding(action, chord, reason))
        if self._logger:
            self._logger.keymap_event('invalid_binding', {
                'action': action, 'chord': chord, 'reason': reason,
            }, severity='warning')

    def lookup(self, event: Event) -> Optional[str]:
        return self._bindings.get(event) if isinstance(event, Key) else None

    def chords_for(self, action: str) -> List[Key]:
        return [key for key, bound in self._bindings.items() if bound == action]

    def bindings(self) -> List[Tuple[Key, str]]:
        return list(self._bindings.items())

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, event: object) -> bool:
        return event in self._bindings
