"""
Shared error types for tgt-events components.
"""

from __future__ import annotations
from typing import Optional, Any, Dict


class AppError(Exception):
    def __init__(self, user_message: str, *, recoverable: bool, debug_info: Optional[Dict[str, Any]] = None):
        super().__init__(user_message)
        self.user_message = user_message
        self.recoverable = recoverable
        self.debug_info = debug_info or {}


class InvalidEvent(AppError):
    """
    A key token that does not name a representable key.

    Only the offending token is kept (``'é'`` for ``ctrl+é``), not the whole
    chord. Callers binding keys from configuration report it and move on.
    """

    def __init__(self, token: str):
        super().__init__(f"Invalid event: {token!r}", recoverable=True, debug_info={'token': token})
        self.token = token

    def __reduce__(self):
        return (type(self), (self.token,))
