"""
Event vocabulary of the chat client.

Every stimulus the UI loop reacts to is one of the variant classes below:
terminal input (keys, paste, mouse, resize, focus), lifecycle ticks (init,
render) and outbound application commands (load chats, send, edit, delete).
The set is closed; EVENT_TYPES lists all of it. Values are frozen dataclasses,
so equality and hashing are structural and they can be shared freely.

``str(event)`` gives the display form used in logs and diagnostics. It is not
meant to be parsed back; chords go the other way through events.chord.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from events.keys import ALL_MODIFIERS, Char, F, KeyCode, Modifiers, NamedKey, SINGLE_MODIFIERS, describe_modifiers, key_label
from events.payloads import ChatList, MouseEvent, Rect, ReplyTarget

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class Event:
    """Base of all event variants."""

    def __str__(self) -> str:
        return format_event(self)


# --- Terminal and lifecycle -------------------------------------------------

@dataclass(frozen=True)
class Unknown(Event):
    """Unrecognised stimulus."""


@dataclass(frozen=True)
class Init(Event):
    """Emitted once at startup."""


@dataclass(frozen=True)
class Render(Event):
    """Request to redraw the UI."""


@dataclass(frozen=True)
class Resize(Event):
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ('width', 'height'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _U16_MAX:
                raise ValueError(f'Resize {name} must fit in 16 bits, got {value!r}')


@dataclass(frozen=True)
class FocusLost(Event):
    pass


@dataclass(frozen=True)
class FocusGained(Event):
    pass


@dataclass(frozen=True)
class Key(Event):
    code: KeyCode
    modifiers: Modifiers = Modifiers.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.code, (NamedKey, F, Char)):
            raise TypeError(f'not a key code: {self.code!r}')
        if int(self.modifiers) & ~ALL_MODIFIERS:
            raise ValueError(f'unknown modifier bits: {int(self.modifiers):#x}')
        # Plain ints from callers are normalised so equal sets compare and print alike
        if not isinstance(self.modifiers, Modifiers):
            object.__setattr__(self, 'modifiers', Modifiers(self.modifiers))


@dataclass(frozen=True)
class Paste(Event):
    """Bracketed-paste payload."""

    text: str


@dataclass(frozen=True)
class Mouse(Event):
    event: MouseEvent


@dataclass(frozen=True)
class UpdateArea(Event):
    """Layout region assigned to a component."""

    rect: Rect


@dataclass(frozen=True)
class EditMessage(Event):
    """Start editing ``message_id``; ``text`` is its current content."""

    message_id: int
    text: str


@dataclass(frozen=True)
class ReplyMessage(Event):
    """Start a reply to ``message_id``; ``text`` is the quoted content."""

    message_id: int
    text: str


# --- Application commands ---------------------------------------------------

@dataclass(frozen=True)
class GetMe(Event):
    """Request the current user."""


@dataclass(frozen=True)
class LoadChats(Event):
    chat_list: ChatList
    limit: int


@dataclass(frozen=True)
class SendMessage(Event):
    text: str
    reply_to: Optional[ReplyTarget] = None


@dataclass(frozen=True)
class SendMessageEdited(Event):
    message_id: int
    text: str


@dataclass(frozen=True)
class GetChatHistory(Event):
    """Fetch more scrollback for the open chat."""


@dataclass(frozen=True)
class DeleteMessages(Event):
    """
    Delete messages. With ``revoke`` they are removed for every participant,
    otherwise only for the current user.
    """

    message_ids: Tuple[int, ...] = field(default_factory=tuple)
    revoke: bool = False

    def __post_init__(self) -> None:
        ids: Iterable[int] = self.message_ids
        if not isinstance(ids, tuple):
            object.__setattr__(self, 'message_ids', tuple(ids))


@dataclass(frozen=True)
class ViewAllMessages(Event):
    """Mark the open chat as read."""


EVENT_TYPES = (
    Unknown,
    Init,
    Render,
    Resize,
    FocusLost,
    FocusGained,
    Key,
    Paste,
    Mouse,
    UpdateArea,
    EditMessage,
    ReplyMessage,
    GetMe,
    LoadChats,
    SendMessage,
    SendMessageEdited,
    GetChatHistory,
    DeleteMessages,
    ViewAllMessages,
)

# Payloadless variants compare equal to any other instance, these are for convenience
UNKNOWN = Unknown()
INIT = Init()
RENDER = Render()
FOCUS_LOST = FocusLost()
FOCUS_GAINED = FocusGained()
GET_ME = GetMe()
GET_CHAT_HISTORY = GetChatHistory()
VIEW_ALL_MESSAGES = ViewAllMessages()

_PAYLOADLESS = (Unknown, Init, Render, FocusLost, FocusGained, GetMe, GetChatHistory, ViewAllMessages)


def format_key(code: KeyCode, modifiers: Modifiers = Modifiers.NONE) -> str:
    """
    Render a key press: ``a``, ``Enter``, ``Ctrl+a``. Sets of more than one
    modifier fall back to the debug form, ``Modifiers(SHIFT | CTRL)+PageUp``.
    """
    k = key_label(code)
    if modifiers == Modifiers.NONE:
        return k
    if modifiers in SINGLE_MODIFIERS:
        return f'{Modifiers(modifiers).label}+{k}'
    return f'{describe_modifiers(modifiers)}+{k}'


def format_event(event: Event) -> str:
    """Human-readable form of an event, for logs and diagnostics."""
    kind = type(event)
    if kind not in EVENT_TYPES:
        raise TypeError(f'not an event: {event!r}')
    name = kind.__name__

    if isinstance(event, _PAYLOADLESS):
        return name
    if isinstance(event, Resize):
        return f'{name}({event.width}, {event.height})'
    if isinstance(event, Key):
        return format_key(event.code, event.modifiers)
    if isinstance(event, Paste):
        return f'{name}({event.text})'
    if isinstance(event, Mouse):
        return f'{name}({event.event!r})'
    if isinstance(event, UpdateArea):
        return f'{name}({event.rect!r})'
    if isinstance(event, LoadChats):
        return f'{name}({event.chat_list!r}, {event.limit})'
    if isinstance(event, SendMessage):
        return f'{name}({event.text}, {event.reply_to!r})'
    if isinstance(event, DeleteMessages):
        return f'{name}({list(event.message_ids)!r}, {event.revoke})'
    if isinstance(event, (SendMessageEdited, EditMessage, ReplyMessage)):
        return f'{name}({event.message_id}, {event.text})'
    raise TypeError(f'no display form for {name}')  # pragma: no cover - EVENT_TYPES is exhaustive above
