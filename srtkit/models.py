"""
Data models for SRTKit.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union, overload

from .utils import seconds_to_timestamp

# Navigation guards in seconds. "previous" uses the wider guard so that
# stepping back from inside a caption skips that caption.
DEFAULT_PREVIOUS_GUARD = 0.5
DEFAULT_NEXT_GUARD = 0.1


@dataclass(frozen=True)
class Caption:
    """Represents one SRT cue (subtitle entry)."""
    sequence_number: int
    start: float  # seconds
    end: float    # seconds, may be earlier than start in malformed files
    lines: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.lines, tuple):
            object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def text(self) -> str:
        """Body lines joined with line breaks."""
        return "\n".join(self.lines)

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def formatted_start(self) -> str:
        return seconds_to_timestamp(self.start)

    @property
    def formatted_end(self) -> str:
        return seconds_to_timestamp(self.end)

    @property
    def formatted_duration(self) -> str:
        return seconds_to_timestamp(self.duration)

    def contains(self, time: float) -> bool:
        """True if ``time`` falls within [start, end], both ends inclusive."""
        return self.start <= time <= self.end


class CaptionTrack:
    """
    Ordered, immutable collection of captions sorted by start time.

    Captions with equal start times keep the order they were given in.
    """

    __slots__ = ("_captions",)

    def __init__(self, captions: Iterable[Caption] = ()):
        self._captions: Tuple[Caption, ...] = tuple(sorted(captions, key=lambda c: c.start))

    @property
    def captions(self) -> Tuple[Caption, ...]:
        return self._captions

    @property
    def is_empty(self) -> bool:
        return not self._captions

    def __len__(self) -> int:
        return len(self._captions)

    def __iter__(self) -> Iterator[Caption]:
        return iter(self._captions)

    @overload
    def __getitem__(self, index: int) -> Caption: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Caption, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Caption, Tuple[Caption, ...]]:
        return self._captions[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaptionTrack):
            return NotImplemented
        return self._captions == other._captions

    def __hash__(self) -> int:
        return hash(self._captions)

    def __repr__(self) -> str:
        return f"CaptionTrack({len(self._captions)} captions)"


@dataclass
class NavigationConfig:
    """Guard offsets (seconds) applied by previous/next navigation."""
    previous_guard: float = DEFAULT_PREVIOUS_GUARD
    next_guard: float = DEFAULT_NEXT_GUARD


@dataclass
class LoadConfig:
    """Configuration for loading an SRT file from a path or URL."""
    source: str
    timeout: int = 30  # seconds, HTTP sources only
    verify_ssl: bool = True
    fallback_encoding: str = "latin-1"
