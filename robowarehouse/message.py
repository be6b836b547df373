"""Single-slot message boxes between the control node and the robots."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Message:
    """A message carrying robot state to the control node and a command back."""

    row: int = 0
    col: int = 0
    current_payload: int = 0
    required_payload: int = 0
    cmd: int = 0


class EmptyMessageBoxError(LookupError):
    """Raised when receiving from a box that holds no message."""


class MessageBox:
    """A box that holds at most one message at a time."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._message: Optional[Message] = None

    def send(self, message: Message) -> bool:
        """Store a copy of the message; return False if the box is already full."""
        with self._lock:
            if self._message is not None:
                return False
            self._message = replace(message)
            return True

    def has_message(self) -> bool:
        """Return whether a message is waiting in the box."""
        with self._lock:
            return self._message is not None

    def receive(self) -> Message:
        """Take the waiting message out of the box."""
        with self._lock:
            if self._message is None:
                raise EmptyMessageBoxError("message box is empty")
            message, self._message = self._message, None
            return message