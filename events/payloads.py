"""
Payload values carried by events but owned by other layers: pointer input and
layout regions from the terminal side, chat lists and reply targets from the
chat backend. Events only need them to be immutable, comparable and printable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from events.keys import Modifiers


@dataclass(frozen=True)
class Rect:
    """Screen region in terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height


class MouseEventKind(Enum):
    DOWN = 'down'
    UP = 'up'
    DRAG = 'drag'
    MOVED = 'moved'
    SCROLL_DOWN = 'scroll_down'
    SCROLL_UP = 'scroll_up'
    SCROLL_LEFT = 'scroll_left'
    SCROLL_RIGHT = 'scroll_right'


class MouseButton(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    MIDDLE = 'middle'


@dataclass(frozen=True)
class MouseEvent:
    """Pointer event at a cell position."""

    kind: MouseEventKind
    column: int
    row: int
    button: Optional[MouseButton] = None
    modifiers: Modifiers = Modifiers.NONE


@dataclass(frozen=True)
class ChatList:
    """Which chat index to page through: main list, archive, or a folder."""

    kind: str = 'main'
    chat_folder_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind not in ('main', 'archive', 'folder'):
            raise ValueError(f'unknown chat list kind: {self.kind!r}')
        if (self.kind == 'folder') != (self.chat_folder_id is not None):
            raise ValueError('chat_folder_id is required for folder lists and only for them')

    @classmethod
    def main(cls) -> 'ChatList':
        return cls('main')

    @classmethod
    def archive(cls) -> 'ChatList':
        return cls('archive')

    @classmethod
    def folder(cls, chat_folder_id: int) -> 'ChatList':
        return cls('folder', chat_folder_id)

    def __repr__(self) -> str:
        if self.kind == 'folder':
            return f'Folder({self.chat_folder_id})'
        return self.kind.capitalize()


@dataclass(frozen=True)
class ReplyTarget:
    """Reference to the message a new message answers."""

    chat_id: int
    message_id: int
    quote: Optional[str] = None
