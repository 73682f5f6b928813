"""
Media attachments for log entries.

A Media always holds report-ready data: either an absolute http(s) URL or a
base64 data URI. Instances come only from the three factories below, each of
which validates its input and raises a typed MediaError on failure.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import (
    InvalidInputError,
    MediaNotFoundError,
    MediaReadError,
    MediaUnreadableError,
)
from .models import MediaType

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"
URL_PREFIXES = ("http://", "https://")
DATA_URI_PREFIX = "data:"


@dataclass(frozen=True)
class Media:
    """
    A normalized attachment reference.

    Attributes:
        data: The URL or data URI, exactly as it should be embedded
        media_type: MediaType.URL or MediaType.BASE64

    Example:
        media = Media.from_path("screenshots/login.png")
        media.data  # "data:image/png;base64,iVBORw0..."
    """
    data: str
    media_type: MediaType

    def __post_init__(self) -> None:
        # Also rejects dataclasses.replace(), which goes through __init__
        raise TypeError(
            "Media cannot be constructed directly; use Media.from_path, "
            "Media.from_url or Media.from_base64"
        )

    @classmethod
    def _create(cls, data: str, media_type: MediaType) -> Media:
        media = object.__new__(cls)
        object.__setattr__(media, "data", data)
        object.__setattr__(media, "media_type", media_type)
        return media

    @property
    def is_url(self) -> bool:
        return self.media_type == MediaType.URL

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Media:
        """
        Read a file and embed it as a base64 data URI.

        Args:
            path: Relative or absolute path to the file

        Returns:
            Media with MediaType.BASE64

        Raises:
            InvalidInputError: The path is not a usable path string
            MediaNotFoundError: Nothing exists at the path
            MediaUnreadableError: The path is not a readable regular file
            MediaReadError: The file could not be read
        """
        raw = os.fspath(path) if isinstance(path, (str, os.PathLike)) else None
        if not isinstance(raw, str) or not raw.strip() or "\x00" in raw:
            raise InvalidInputError(f"Invalid media file path: {path!r}")

        file_path = Path(raw)
        try:
            exists = file_path.exists()
        except OSError as e:
            raise InvalidInputError(f"Invalid media file path: {raw}") from e

        if not exists:
            raise MediaNotFoundError(f"Media file does not exist at path: {raw}")
        if not file_path.is_file() or not os.access(file_path, os.R_OK):
            raise MediaUnreadableError(f"Media file is not readable at path: {raw}")

        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise MediaReadError(f"Failed to read media file at path: {raw}") from e

        mime_type = mimetypes.guess_type(file_path.name)[0] or DEFAULT_MIME_TYPE
        encoded = base64.b64encode(content).decode("ascii")
        logger.debug(f"Embedded {len(content)} bytes from {raw} as {mime_type}")

        return cls._create(f"{DATA_URI_PREFIX}{mime_type};base64,{encoded}", MediaType.BASE64)

    @classmethod
    def from_url(cls, url: str) -> Media:
        """
        Reference media by absolute URL. The URL is stored verbatim.

        Raises:
            InvalidInputError: url is not a string starting with http:// or https://
        """
        if not isinstance(url, str) or not url.startswith(URL_PREFIXES):
            raise InvalidInputError(
                f"Invalid media URL. Must start with 'http://' or 'https://'. URL: {url!r}"
            )
        return cls._create(url, MediaType.URL)

    @classmethod
    def from_base64(cls, data_uri: str) -> Media:
        """
        Wrap an existing data URI (e.g. "data:image/png;base64,...").

        The value is trusted and stored unchanged; it is not decoded.

        Raises:
            InvalidInputError: data_uri does not start with "data:"
        """
        if not isinstance(data_uri, str) or not data_uri.strip().startswith(DATA_URI_PREFIX):
            raise InvalidInputError(
                "Invalid Base64 data. Must be a valid data URI "
                "(e.g., 'data:image/png;base64,...')."
            )
        return cls._create(data_uri, MediaType.BASE64)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "type": self.media_type.value,
            "data": self.data,
        }
