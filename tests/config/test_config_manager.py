from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config_manager import ConfigManager


def test_defaults_are_loaded():
    cm = ConfigManager()
    assert cm.get_option('TUI', 'keymap_section') == 'KEYMAP'
    assert cm.get_option('TUI', 'strict_keymap') is False
    assert cm.get_option('LOG', 'active') is False
    assert cm.get_option('LOG', 'truncate_chars') == 2000
    assert cm.get_option('NOPE', 'x', fallback='fb') == 'fb'
    assert cm.get_option('TUI', 'missing', fallback=3) == 3


def test_custom_file_overrides_defaults(tmp_path: Path):
    cfg = tmp_path / 'custom.ini'
    cfg.write_text("[TUI]\nstrict_keymap = yes\n\n[KEYMAP]\ntry_quit = ctrl+q\n", encoding='utf-8')
    cm = ConfigManager(str(cfg))
    assert cm.get_option('TUI', 'strict_keymap') is True
    entries = dict(cm.keymap_entries())
    assert entries['try_quit'] == 'ctrl+q'
    # untouched defaults survive the merge
    assert entries['show_help'] == 'f1, alt+h'


def test_missing_custom_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        ConfigManager(str(tmp_path / 'absent.ini'))


def test_keymap_entries_skip_defaults_and_missing_sections():
    cm = ConfigManager()
    actions = [action for action, _ in cm.keymap_entries()]
    assert 'user_config' not in actions
    assert actions[0] == 'try_quit'
    assert cm.keymap_entries('NO_SUCH_SECTION') == []


def test_fix_values():
    fix = ConfigManager.fix_values
    assert fix(' 42 ') == 42
    assert fix('No') is False
    assert fix('"quoted"') == 'quoted'
    assert fix('ctrl+a') == 'ctrl+a'
    assert fix('~/x').startswith(os.path.expanduser('~'))


def test_on_off_are_booleans(tmp_path: Path):
    cfg = tmp_path / 'custom.ini'
    cfg.write_text("[TUI]\nstrict_keymap = off\n\n[LOG]\nactive = On\n", encoding='utf-8')
    cm = ConfigManager(str(cfg))
    assert cm.get_option('TUI', 'strict_keymap') is False
    assert cm.get_option('LOG', 'active') is True
