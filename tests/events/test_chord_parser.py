from __future__ import annotations

import itertools
import os
import string
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from base_classes import AppError, InvalidEvent
from events.chord import event_with_modifiers, key_code, parse_chord, unknown_modifiers
from events.event import Key
from events.keys import Char, F, Modifiers, NamedKey


NAMED = {
    'backspace': NamedKey.BACKSPACE,
    'enter': NamedKey.ENTER,
    'left': NamedKey.LEFT,
    'right': NamedKey.RIGHT,
    'up': NamedKey.UP,
    'down': NamedKey.DOWN,
    'home': NamedKey.HOME,
    'end': NamedKey.END,
    'page_up': NamedKey.PAGE_UP,
    'page_down': NamedKey.PAGE_DOWN,
    'tab': NamedKey.TAB,
    'back_tab': NamedKey.BACK_TAB,
    'delete': NamedKey.DELETE,
    'insert': NamedKey.INSERT,
    'null': NamedKey.NULL,
    'esc': NamedKey.ESC,
}
NAMED.update({f'f{n}': F(n) for n in range(1, 13)})

MODIFIERS = {
    'ctrl': Modifiers.CTRL,
    'alt': Modifiers.ALT,
    'shift': Modifiers.SHIFT,
    'super': Modifiers.SUPER,
    'meta': Modifiers.META,
    'hyper': Modifiers.HYPER,
}


@pytest.mark.parametrize('chord, expected', [
    ('a', Key(Char('a'), Modifiers.NONE)),
    ('ctrl+a', Key(Char('a'), Modifiers.CTRL)),
    ('ctrl+shift+page_up', Key(NamedKey.PAGE_UP, Modifiers.CTRL | Modifiers.SHIFT)),
    ('f12', Key(F(12), Modifiers.NONE)),
])
def test_concrete_chords(chord, expected):
    assert parse_chord(chord) == expected


@pytest.mark.parametrize('name', sorted(NAMED))
def test_every_named_key_without_modifiers(name):
    assert parse_chord(name) == Key(NAMED[name], Modifiers.NONE)


def test_every_ascii_character_is_a_char_key():
    for i in range(0x80):
        c = chr(i)
        if c == '+':
            continue
        assert parse_chord(c) == Key(Char(c), Modifiers.NONE)


def test_modifier_subsets_in_any_order():
    for size in range(1, len(MODIFIERS) + 1):
        for subset in itertools.combinations(MODIFIERS, size):
            expected_bits = Modifiers.NONE
            for name in subset:
                expected_bits |= MODIFIERS[name]
            for order in itertools.permutations(subset):
                chord = '+'.join(order) + '+enter'
                assert parse_chord(chord) == Key(NamedKey.ENTER, expected_bits)


def test_repeated_modifier_is_idempotent():
    assert parse_chord('ctrl+ctrl+a') == parse_chord('ctrl+a')
    assert parse_chord('alt+shift+alt+x') == parse_chord('shift+alt+x')


def test_non_ascii_character_is_rejected():
    with pytest.raises(InvalidEvent) as ei:
        parse_chord('é')
    assert ei.value.token == 'é'


def test_error_carries_key_token_not_whole_chord():
    with pytest.raises(InvalidEvent) as ei:
        parse_chord('ctrl+shift+nope')
    assert ei.value.token == 'nope'
    assert isinstance(ei.value, AppError)
    assert ei.value.recoverable is True


@pytest.mark.parametrize('chord', ['', 'ctrl+', 'ctrl+shift+'])
def test_empty_key_token_is_rejected(chord):
    with pytest.raises(InvalidEvent) as ei:
        parse_chord(chord)
    assert ei.value.token == ''


@pytest.mark.parametrize('chord', ['ENTER', 'Enter', 'F1', 'pageup', 'f0', 'f13', 'ab'])
def test_named_keys_are_exact_lowercase_matches(chord):
    with pytest.raises(InvalidEvent):
        parse_chord(chord)


def test_single_uppercase_letter_is_a_char():
    assert parse_chord('A') == Key(Char('A'))


def test_unknown_and_uppercase_modifiers_contribute_nothing():
    assert parse_chord('CTRL+a') == Key(Char('a'), Modifiers.NONE)
    assert parse_chord('cmd+ctrl+a') == Key(Char('a'), Modifiers.CTRL)


def test_unknown_modifiers_lists_ignored_tokens():
    assert unknown_modifiers('CTRL+cmd+alt+a') == ['CTRL', 'cmd']
    assert unknown_modifiers('ctrl+a') == []
    assert unknown_modifiers('a') == []


def test_event_with_modifiers_and_key_code():
    assert event_with_modifiers('tab', Modifiers.SHIFT) == Key(NamedKey.TAB, Modifiers.SHIFT)
    assert key_code('z') == Char('z')
    assert key_code('f5') == F(5)
    with pytest.raises(InvalidEvent):
        key_code('space')


def test_parse_result_is_hashable_binding_key():
    bindings = {parse_chord('ctrl+q'): 'quit'}
    assert bindings[parse_chord('ctrl+q')] == 'quit'
    assert parse_chord('ctrl+Q') not in bindings


def test_printable_punctuation_other_than_separator():
    for c in string.punctuation.replace('+', ''):
        assert parse_chord(f'alt+{c}') == Key(Char(c), Modifiers.ALT)
