"""
SRTKit - SubRip (SRT) Subtitle Track Engine

A small library for parsing SRT subtitle files into timed captions and
looking captions up by playback time.

Features:
- Parse SRT text or bytes (UTF-8 with Latin-1 fallback)
- Load SRT files from local paths or HTTP(S) URLs
- Find the caption active at any playback time in O(log n)
- Previous/next caption navigation with configurable guards
- Summary statistics and text search for caption lists

Example usage:
    >>> from srtkit import SRTLoader, TimelineIndex
    >>>
    >>> # Load SRT
    >>> loader = SRTLoader()
    >>> track = loader.load("movie.srt")
    >>>
    >>> # Query by playback time
    >>> index = TimelineIndex(track)
    >>> caption = index.active_at(12.5)
    >>> if caption:
    ...     print(caption.text)
"""

import logging

__version__ = "0.1.0"
__author__ = "SRTKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core utility functions
from .utils import (
    timestamp_to_seconds,
    seconds_to_timestamp,
    format_timecode,
    format_timecode_short,
    format_timecode_compact,
)

# SRT parsing (from srt package)
from .srt import (
    parse_srt_content,
    parse_srt,
    parse_timing_line,
    decode_srt_bytes,
    SRTParser,
)

# Main classes
from .timeline import TimelineIndex
from .loader import SRTLoader, load_srt, read_source_bytes, is_remote_source
from .stats import TrackStatistics, compute_statistics, search_captions

# Errors
from .errors import SRTError, UnreadableSourceError, MalformedTimestampError

# Data models
from .models import Caption, CaptionTrack, NavigationConfig, LoadConfig
from .models import DEFAULT_PREVIOUS_GUARD, DEFAULT_NEXT_GUARD

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Core parsing functions
    "parse_srt_content",
    "parse_srt",
    "parse_timing_line",
    "decode_srt_bytes",
    "timestamp_to_seconds",
    "seconds_to_timestamp",
    "format_timecode",
    "format_timecode_short",
    "format_timecode_compact",

    # Main classes
    "SRTParser",
    "SRTLoader",
    "TimelineIndex",

    # Loading
    "load_srt",
    "read_source_bytes",
    "is_remote_source",

    # Host-side helpers
    "TrackStatistics",
    "compute_statistics",
    "search_captions",

    # Errors
    "SRTError",
    "UnreadableSourceError",
    "MalformedTimestampError",

    # Models
    "Caption",
    "CaptionTrack",
    "NavigationConfig",
    "LoadConfig",
    "DEFAULT_PREVIOUS_GUARD",
    "DEFAULT_NEXT_GUARD",
]
