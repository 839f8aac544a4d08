"""
Event values for the terminal chat client and the key chord codec used to
bind them in configuration.
"""

from events.chord import event_with_modifiers, key_code, parse_chord, unknown_modifiers
from events.event import (
    EVENT_TYPES,
    DeleteMessages,
    EditMessage,
    Event,
    FocusGained,
    FocusLost,
    GetChatHistory,
    GetMe,
    Init,
    Key,
    LoadChats,
    Mouse,
    Paste,
    Render,
    ReplyMessage,
    Resize,
    SendMessage,
    SendMessageEdited,
    Unknown,
    UpdateArea,
    ViewAllMessages,
    format_event,
    format_key,
)
from events.keys import Char, F, KeyCode, Modifiers, NamedKey
from events.payloads import ChatList, MouseButton, MouseEvent, MouseEventKind, Rect, ReplyTarget

__version__ = "1.0.0"
