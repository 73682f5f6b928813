"""
A single step inside a test case.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from .media import Media
from .models import Status, has_text

DEFAULT_MESSAGE = "No message available."


class LogEntry:
    """
    One timestamped step of a TestCase.

    Status, name and timestamp are fixed at construction. The log ID is
    assigned once by the owning TestCase (see TestCase.add_log); there is
    no public setter for it.
    """

    def __init__(self, status: Status, name: str):
        self._log_id: str | None = None
        self._status = status
        self._name = name
        self._timestamp = datetime.now(timezone.utc)
        self._message = DEFAULT_MESSAGE
        self._media: Media | None = None

    @property
    def log_id(self) -> str | None:
        return self._log_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> Status:
        return self._status

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def message(self) -> str:
        return self._message

    @property
    def media(self) -> Media | None:
        return self._media

    def set_message(self, message: str | None) -> LogEntry:
        """Replace the message. None or blank input is ignored."""
        if has_text(message):
            self._message = message
        return self

    def attach_media(self, media: Media | None) -> LogEntry:
        """Attach media, replacing any previous attachment."""
        self._media = media
        return self

    def _assign_log_id(self, log_id: str) -> None:
        # Only TestCase calls this, right after construction.
        self._log_id = log_id

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "log_id": self._log_id,
            "name": self._name,
            "message": self._message,
            "status": self._status.value if isinstance(self._status, Status) else self._status,
            "timestamp": self._timestamp.isoformat(),
            "media": self._media.to_dict() if self._media else None,
        }

    def __repr__(self) -> str:
        return f"LogEntry(log_id={self._log_id!r}, status={self._status!r}, name={self._name!r})"
