"""
SRT parsing package.

Provides functionality for decoding SubRip files and parsing them into
CaptionTracks sorted by start time.
"""

from .decoding import decode_srt_bytes

from .parser import (
    parse_srt_content,
    parse_srt,
    parse_timing_line,
    normalize_line_endings,
    split_blocks,
    SRTParser,
)

__all__ = [
    # Core parsing functions
    "parse_srt_content",
    "parse_srt",
    "parse_timing_line",
    "normalize_line_endings",
    "split_blocks",
    "decode_srt_bytes",

    # Parser class
    "SRTParser",
]
