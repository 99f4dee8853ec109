"""
Byte decoding for SRT files.

SRT files in the wild are mostly UTF-8, but older ones are often written in a
single-byte Western encoding. Decoding tries UTF-8 first and falls back to a
single-byte codec that maps every byte, so it never fails for Latin-1.
"""

import logging

from ..errors import UnreadableSourceError

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODING = "latin-1"


def decode_srt_bytes(data: bytes, fallback_encoding: str = DEFAULT_FALLBACK_ENCODING,
                     source: str = "<bytes>") -> str:
    """
    Decode raw SRT bytes to text.

    Args:
        data: Raw file contents
        fallback_encoding: Codec used when the bytes are not valid UTF-8
        source: Name of the source, used in error messages

    Returns:
        Decoded text, with any UTF-8 byte order mark removed

    Raises:
        UnreadableSourceError: If the fallback codec is unknown or cannot
            decode the bytes either
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning(f"SRT content is not valid UTF-8 ({e.reason} at byte {e.start}), "
                       f"decoding as {fallback_encoding}")

    try:
        return data.decode(fallback_encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.error(f"Failed to decode {source} as {fallback_encoding}: {str(e)}")
        raise UnreadableSourceError(source, f"cannot decode as {fallback_encoding}: {e}") from e
