"""
SRT parser.

Turns SubRip text into a CaptionTrack. Parsing is lenient about incomplete
cues and strict about timing lines:

- a block with fewer than two lines is skipped
- a block whose first line is not an integer index is skipped
- a block whose second line is not a valid timing line aborts the parse
  with MalformedTimestampError

Skipped blocks are logged at DEBUG level on this module's logger.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..errors import MalformedTimestampError, UnreadableSourceError
from ..models import Caption, CaptionTrack
from ..utils import components_to_seconds
from .decoding import DEFAULT_FALLBACK_ENCODING, decode_srt_bytes

logger = logging.getLogger(__name__)

# Pre-compiled regex patterns
# Hours take any number of digits; minutes and seconds are not range-checked
_TIMING_PATTERN = re.compile(
    r'([0-9]+):([0-9]{2}):([0-9]{2})[,.]([0-9]{3})'
    r'\s*-->\s*'
    r'([0-9]+):([0-9]{2}):([0-9]{2})[,.]([0-9]{3})'
)
_INDEX_PATTERN = re.compile(r'[+-]?[0-9]+')
_LINE_BREAK_PATTERN = re.compile(r'\r\n?')


def normalize_line_endings(content: str) -> str:
    """Replace CRLF and lone CR line endings with LF."""
    return _LINE_BREAK_PATTERN.sub('\n', content)


def split_blocks(content: str) -> Iterator[Tuple[int, List[str]]]:
    """
    Split normalized SRT text into blocks separated by empty lines.

    Args:
        content: Text with LF line endings

    Yields:
        Tuples of (1-based line number of the block's first line, block lines)
    """
    block: List[str] = []
    block_start = 0

    for line_number, line in enumerate(content.split('\n'), start=1):
        if line == '':
            if block:
                yield block_start, block
                block = []
            continue
        if not block:
            block_start = line_number
        block.append(line)

    if block:
        yield block_start, block


def parse_timing_line(line: str) -> Optional[Tuple[float, float]]:
    """
    Parse an SRT timing line.

    Args:
        line: Line such as ``00:00:01,000 --> 00:00:02,500``

    Returns:
        Tuple of (start_seconds, end_seconds), or None if the line does not match

    Example:
        >>> parse_timing_line("01:02:03,456 --> 01:02:04.000")
        (3723.456, 3724.0)
    """
    match = _TIMING_PATTERN.search(line)
    if not match:
        return None

    values = [int(group) for group in match.groups()]
    start = components_to_seconds(*values[:4])
    end = components_to_seconds(*values[4:])
    return start, end


def _parse_index(line: str) -> Optional[int]:
    candidate = line.strip()
    if not _INDEX_PATTERN.fullmatch(candidate):
        return None
    return int(candidate)


def parse_srt_content(content: str) -> CaptionTrack:
    """
    Parse SRT text into a CaptionTrack sorted by start time.

    Args:
        content: SRT file content as string

    Returns:
        CaptionTrack, empty if the content holds no usable cues

    Raises:
        MalformedTimestampError: If a cue's timing line is invalid

    Example:
        >>> track = parse_srt_content("1\\n00:00:01,000 --> 00:00:02,000\\nHello")
        >>> track[0].text
        'Hello'
    """
    content = normalize_line_endings(content.lstrip('\ufeff'))

    captions: List[Caption] = []
    skipped = 0

    for block_start, lines in split_blocks(content):
        if len(lines) < 2:
            logger.debug(f"Skipping block at line {block_start}: fewer than two lines")
            skipped += 1
            continue

        sequence_number = _parse_index(lines[0])
        if sequence_number is None:
            logger.debug(f"Skipping block at line {block_start}: invalid index {lines[0]!r}")
            skipped += 1
            continue

        timing = parse_timing_line(lines[1])
        if timing is None:
            timing_line_number = block_start + 1
            logger.error(f"Invalid timestamp at line {timing_line_number}: {lines[1]!r}")
            raise MalformedTimestampError(timing_line_number, lines[1])

        start, end = timing
        captions.append(Caption(
            sequence_number=sequence_number,
            start=start,
            end=end,
            lines=tuple(lines[2:]),
        ))

    logger.debug(f"Parsed {len(captions)} captions ({skipped} blocks skipped)")
    return CaptionTrack(captions)


def parse_srt(data: Union[bytes, str], fallback_encoding: str = DEFAULT_FALLBACK_ENCODING,
              source: str = "<bytes>") -> CaptionTrack:
    """
    Parse SRT content given as text or raw bytes.

    Bytes are decoded as UTF-8, falling back to ``fallback_encoding``.
    """
    if isinstance(data, bytes):
        data = decode_srt_bytes(data, fallback_encoding=fallback_encoding, source=source)
    return parse_srt_content(data)


class SRTParser:
    """
    Parser for converting SRT files to CaptionTracks.

    Handles the complete parsing pipeline including:
    - Reading the file
    - UTF-8 decoding with single-byte fallback
    - Block parsing and sorting
    """

    def __init__(self, fallback_encoding: str = DEFAULT_FALLBACK_ENCODING):
        """
        Initialize SRT parser.

        Args:
            fallback_encoding: Codec used when file bytes are not valid UTF-8
        """
        self.fallback_encoding = fallback_encoding

    def parse_string(self, content: str) -> CaptionTrack:
        """Parse SRT text."""
        return parse_srt_content(content)

    def parse_bytes(self, data: bytes) -> CaptionTrack:
        """Decode and parse raw SRT bytes."""
        return parse_srt(data, fallback_encoding=self.fallback_encoding)

    def parse_file(self, srt_file: Union[str, Path]) -> CaptionTrack:
        """
        Read and parse an SRT file from the local filesystem.

        Args:
            srt_file: Path to SRT file

        Returns:
            CaptionTrack sorted by start time

        Raises:
            UnreadableSourceError: If the file cannot be read
            MalformedTimestampError: If a cue's timing line is invalid
        """
        logger.info(f"Parsing SRT file: {srt_file}")

        try:
            data = Path(srt_file).read_bytes()
        except OSError as e:
            logger.error(f"Failed to read SRT file {srt_file}: {str(e)}")
            raise UnreadableSourceError(str(srt_file), str(e)) from e

        track = parse_srt(data, fallback_encoding=self.fallback_encoding, source=str(srt_file))
        logger.info(f"SRT parsing complete: {len(track)} captions extracted")
        return track
