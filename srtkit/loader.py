"""
SRT loader for SRTKit.

Reads subtitle bytes from a local path or an HTTP(S) URL and hands them to
the parser. Any failure to obtain the bytes is reported as
UnreadableSourceError; timeouts apply to HTTP sources only.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from .errors import UnreadableSourceError
from .models import CaptionTrack, LoadConfig
from .srt.decoding import DEFAULT_FALLBACK_ENCODING
from .srt.parser import parse_srt
from .timeline import TimelineIndex

logger = logging.getLogger(__name__)


def is_remote_source(source: str) -> bool:
    """
    Check if a source refers to an HTTP(S) URL.

    Args:
        source: Path or URL

    Returns:
        True if source is an http:// or https:// URL, False otherwise
    """
    return source.lower().startswith(('http://', 'https://'))


def read_source_bytes(source: str, timeout: int = 30, verify_ssl: bool = True) -> bytes:
    """
    Read raw subtitle bytes from a path or URL.

    Args:
        source: Local file path or HTTP(S) URL
        timeout: Request timeout in seconds for URLs (default: 30)
        verify_ssl: Whether to verify SSL certificates (default: True)

    Returns:
        File contents as bytes

    Raises:
        UnreadableSourceError: If the source cannot be read
    """
    if is_remote_source(source):
        try:
            logger.info(f"Downloading SRT from: {source[:100]}")
            response = requests.get(source, timeout=timeout, verify=verify_ssl)
            response.raise_for_status()
            return response.content
        except requests.RequestException as e:
            logger.error(f"Failed to download SRT from {source[:100]}: {str(e)}")
            raise UnreadableSourceError(source, str(e)) from e

    try:
        return Path(source).expanduser().read_bytes()
    except OSError as e:
        logger.error(f"Failed to read SRT file {source}: {str(e)}")
        raise UnreadableSourceError(source, str(e)) from e


class SRTLoader:
    """
    Loads SRT files from local paths or HTTP(S) URLs.

    The loader only obtains and decodes bytes; parsing rules live in
    ``srtkit.srt.parser``.
    """

    def __init__(
        self,
        timeout: int = 30,
        verify_ssl: bool = True,
        fallback_encoding: str = DEFAULT_FALLBACK_ENCODING,
    ):
        """
        Initialize SRT loader.

        Args:
            timeout: Request timeout in seconds for URLs (default: 30)
            verify_ssl: Whether to verify SSL certificates (default: True)
            fallback_encoding: Codec used when bytes are not valid UTF-8
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.fallback_encoding = fallback_encoding

    def load(self, source: str) -> CaptionTrack:
        """
        Read and parse an SRT source.

        Args:
            source: Local file path or HTTP(S) URL

        Returns:
            CaptionTrack sorted by start time

        Raises:
            UnreadableSourceError: If the source cannot be read
            MalformedTimestampError: If a cue's timing line is invalid
        """
        data = read_source_bytes(source, timeout=self.timeout, verify_ssl=self.verify_ssl)
        track = parse_srt(data, fallback_encoding=self.fallback_encoding, source=source)
        logger.info(f"Loaded {len(track)} captions from {source[:100]}")
        return track

    def load_into(self, index: TimelineIndex, source: str) -> CaptionTrack:
        """
        Load a source and swap it into a timeline index.

        The index keeps its previous track if reading or parsing fails.
        """
        track = self.load(source)
        index.load(track)
        return track

    @classmethod
    def from_config(cls, config: LoadConfig) -> "SRTLoader":
        return cls(
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            fallback_encoding=config.fallback_encoding,
        )

    def load_from_config(self, config: LoadConfig) -> CaptionTrack:
        """
        Load using a LoadConfig object.

        Settings in the config take precedence over the loader's own.
        """
        return self.from_config(config).load(config.source)


def load_srt(source: str, timeout: int = 30, verify_ssl: bool = True,
             fallback_encoding: Optional[str] = None) -> CaptionTrack:
    """
    Load an SRT file from a path or URL.

    Example:
        >>> track = load_srt("movie.srt")
        >>> print(f"{len(track)} captions")
    """
    loader = SRTLoader(
        timeout=timeout,
        verify_ssl=verify_ssl,
        fallback_encoding=fallback_encoding or DEFAULT_FALLBACK_ENCODING,
    )
    return loader.load(source)
