"""
Shared utility functions for SRTKit.

Timestamp conversion between SRT notation and seconds, plus the timecode
formats used when displaying captions next to a playback clock.
"""

import re
from typing import Tuple

_TIMESTAMP_PATTERN = re.compile(r'^\s*([0-9]+):([0-9]{2}):([0-9]{2})[,.]([0-9]{3})\s*$')


def components_to_seconds(hours: int, minutes: int, seconds: int, milliseconds: int) -> float:
    """Combine timestamp components into seconds."""
    return (hours * 3600 + minutes * 60 + seconds) + milliseconds / 1000.0


def timestamp_to_seconds(timestamp: str) -> float:
    """
    Convert HH:MM:SS,mmm (or HH:MM:SS.mmm) format to seconds.

    Args:
        timestamp: Timestamp string, comma or period before the milliseconds

    Returns:
        Time in seconds as float

    Raises:
        ValueError: If the string is not a valid timestamp

    Example:
        >>> timestamp_to_seconds("00:01:30,500")
        90.5
    """
    match = _TIMESTAMP_PATTERN.match(timestamp)
    if not match:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")
    h, m, s, ms = (int(group) for group in match.groups())
    return components_to_seconds(h, m, s, ms)


def _split_seconds(seconds: float) -> Tuple[str, int, int, int, int]:
    # Round to whole milliseconds first so 3723.456 does not render as .455
    sign = "-" if seconds < 0 else ""
    total_ms = int(round(abs(seconds) * 1000))
    hours, remainder = divmod(total_ms, 3600 * 1000)
    minutes, remainder = divmod(remainder, 60 * 1000)
    secs, milliseconds = divmod(remainder, 1000)
    return sign, hours, minutes, secs, milliseconds


def seconds_to_timestamp(seconds: float, separator: str = ",") -> str:
    """
    Convert seconds to HH:MM:SS,mmm format.

    Args:
        seconds: Time in seconds as float
        separator: Character between seconds and milliseconds (default: ",")

    Returns:
        Timestamp string in HH:MM:SS,mmm format

    Example:
        >>> seconds_to_timestamp(3723.456)
        '01:02:03,456'
    """
    sign, hours, minutes, secs, milliseconds = _split_seconds(seconds)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}{separator}{milliseconds:03d}"


def format_timecode(seconds: float) -> str:
    """
    Format seconds as a playback timecode with hundredths.

    Hours are shown only when non-zero: ``1:02:03.45`` or ``02:03.45``.
    """
    sign, hours, minutes, secs, milliseconds = _split_seconds(seconds)
    hundredths = milliseconds // 10
    if hours > 0:
        return f"{sign}{hours}:{minutes:02d}:{secs:02d}.{hundredths:02d}"
    return f"{sign}{minutes:02d}:{secs:02d}.{hundredths:02d}"


def format_timecode_short(seconds: float) -> str:
    """Format seconds as ``M:SS`` with minutes unbounded."""
    sign, hours, minutes, secs, _ = _split_seconds(seconds)
    return f"{sign}{hours * 60 + minutes}:{secs:02d}"


def format_timecode_compact(seconds: float) -> str:
    """Format seconds as ``H:MM:SS.mmm`` (hours only when non-zero) or ``MM:SS.mmm``."""
    sign, hours, minutes, secs, milliseconds = _split_seconds(seconds)
    if hours > 0:
        return f"{sign}{hours}:{minutes:02d}:{secs:02d}.{milliseconds:03d}"
    return f"{sign}{minutes:02d}:{secs:02d}.{milliseconds:03d}"
