"""
Exception types for SRTKit.

Parsing either succeeds with a (possibly empty) CaptionTrack or raises one
of the errors below. Blocks that are merely incomplete are skipped, not
reported here.
"""

from typing import Optional


class SRTError(Exception):
    """Base class for all SRTKit errors."""


class UnreadableSourceError(SRTError):
    """Raised when the subtitle source cannot be read."""

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        self.reason = reason
        message = f"Could not read subtitle source: {source}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MalformedTimestampError(SRTError, ValueError):
    """Raised when a cue's timing line does not match the SRT timestamp format."""

    def __init__(self, line: int, content: str = ""):
        self.line = line
        self.content = content
        super().__init__(f"Invalid timestamp format at line {line}: {content!r}")
