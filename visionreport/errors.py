"""
Exceptions raised by VisionReport.

Display fields (titles, messages, tags...) never raise: blank input is
ignored. The errors below cover the fail-fast paths only: report
construction and media ingestion, plus the rendering boundary.
"""


class VisionReportError(Exception):
    """Base exception for all VisionReport failures."""

    pass


class InvalidArgumentError(VisionReportError, ValueError):
    """A mandatory argument was missing or of the wrong kind."""

    pass


class MediaError(VisionReportError):
    """Base exception for media ingestion failures."""

    pass


class InvalidInputError(MediaError, ValueError):
    """Media source is malformed (bad path, non-HTTP URL, not a data URI)."""

    pass


class MediaNotFoundError(MediaError):
    """Nothing exists at the given media path."""

    pass


class MediaUnreadableError(MediaError):
    """Media path exists but is not a readable regular file."""

    pass


class MediaReadError(MediaError):
    """Reading the media file failed. The OS error is chained as __cause__."""

    pass


class GenerationError(VisionReportError):
    """A report generator failed to produce its artifact."""

    pass
