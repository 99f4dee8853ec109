"""
Timeline index for caption lookup during playback.

The index wraps a CaptionTrack and answers point and navigation queries for a
time value supplied by the caller. It keeps no clock and no notion of a
"current" caption; hosts poll ``active_at`` with their playback time and
compare the result with what they showed last.

Loading and clearing build a complete snapshot of the lookup state before
publishing it, so a query running on another thread sees either the old
track or the new one, never a mix.
"""

import logging
import math
import threading
from bisect import bisect_left, bisect_right
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .models import Caption, CaptionTrack, NavigationConfig
from .srt.parser import parse_srt

logger = logging.getLogger(__name__)


class _Snapshot:
    """Immutable lookup state derived from one CaptionTrack."""

    __slots__ = ("track", "starts", "max_ends", "positions")

    def __init__(self, track: CaptionTrack):
        self.track = track
        self.starts: List[float] = [caption.start for caption in track]

        # Running maximum of end times: the first position whose running
        # maximum reaches a time is the first caption that ends at or after it.
        self.max_ends: List[float] = []
        running = float("-inf")
        for caption in track:
            running = max(running, caption.end)
            self.max_ends.append(running)

        self.positions: Dict[int, int] = {id(caption): i for i, caption in enumerate(track)}


class TimelineIndex:
    """
    Caption lookup by playback time.

    The index is either empty (nothing loaded, every query returns None) or
    loaded with a track, which may itself hold zero captions.

    Example:
        >>> index = TimelineIndex()
        >>> index.load_content("1\\n00:00:02,000 --> 00:00:04,000\\nHello")
        >>> index.active_at(3.0).text
        'Hello'
    """

    def __init__(
        self,
        track: Optional[CaptionTrack] = None,
        config: Optional[NavigationConfig] = None,
    ):
        """
        Initialize timeline index.

        Args:
            track: Optional track to load immediately
            config: Navigation guards (default: 0.5s previous, 0.1s next)
        """
        self.config = config or NavigationConfig()
        self._write_lock = threading.Lock()
        self._snapshot: Optional[_Snapshot] = None

        if track is not None:
            self.load(track)

    # State transitions

    def load(self, track: Union[CaptionTrack, Iterable[Caption]]) -> None:
        """
        Replace the current track.

        Args:
            track: CaptionTrack, or any iterable of captions (sorted on load)
        """
        if not isinstance(track, CaptionTrack):
            track = CaptionTrack(track)

        snapshot = _Snapshot(track)
        with self._write_lock:
            self._snapshot = snapshot

        logger.info(f"Timeline loaded with {len(track)} captions")

    def load_content(self, content: Union[str, bytes]) -> None:
        """
        Parse SRT content and load the result.

        If parsing fails the current track is kept and the error propagates.
        """
        self.load(parse_srt(content))

    def clear(self) -> None:
        """Drop the current track and return to the empty state."""
        with self._write_lock:
            self._snapshot = None
        logger.info("Timeline cleared")

    # Read-only access

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def track(self) -> Optional[CaptionTrack]:
        """The loaded track, or None when empty."""
        snapshot = self._snapshot
        return snapshot.track if snapshot is not None else None

    @property
    def captions(self) -> Tuple[Caption, ...]:
        """All captions in start order (empty tuple when nothing is loaded)."""
        snapshot = self._snapshot
        return snapshot.track.captions if snapshot is not None else ()

    @property
    def count(self) -> int:
        return len(self.captions)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Caption]:
        return iter(self.captions)

    # Queries

    def active_at(self, time: float) -> Optional[Caption]:
        """
        Get the caption displayed at ``time``.

        Bounds are inclusive at both ends. If captions overlap, the one that
        comes first in start order wins.

        Args:
            time: Playback position in seconds

        Returns:
            Active caption, or None
        """
        # NaN compares false against every bound, so no caption contains it
        if math.isnan(time):
            return None

        snapshot = self._snapshot
        if snapshot is None:
            return None

        # Candidates are the captions starting at or before time
        candidates = bisect_right(snapshot.starts, time)
        first = bisect_left(snapshot.max_ends, time, 0, candidates)
        if first < candidates:
            return snapshot.track[first]
        return None

    def previous(self, time: float) -> Optional[Caption]:
        """
        Get the caption to jump back to from ``time``.

        Returns the latest caption starting more than ``previous_guard``
        seconds before ``time``. When there is none, returns the first
        caption, so stepping back only dead-ends on an empty track.
        """
        snapshot = self._snapshot
        if snapshot is None or not snapshot.starts:
            return None

        position = bisect_left(snapshot.starts, time - self.config.previous_guard)
        if position > 0:
            return snapshot.track[position - 1]
        return snapshot.track[0]

    def next(self, time: float) -> Optional[Caption]:
        """
        Get the caption to jump forward to from ``time``.

        Returns the earliest caption starting more than ``next_guard``
        seconds after ``time``, or None. There is no wraparound.
        """
        snapshot = self._snapshot
        if snapshot is None:
            return None

        position = bisect_right(snapshot.starts, time + self.config.next_guard)
        if position < len(snapshot.starts):
            return snapshot.track[position]
        return None

    def index_of(self, caption: Caption) -> Optional[int]:
        """
        Get the position of a caption in the current track.

        Captions taken from the current track resolve by identity, so two
        cues with identical fields each keep their own position. Any other
        caption matches the first position whose fields are all equal to it.
        Returns None when nothing in the current track matches, including
        after the track was replaced by different content or cleared.
        """
        snapshot = self._snapshot
        if snapshot is None:
            return None

        position = snapshot.positions.get(id(caption))
        if position is not None and snapshot.track[position] is caption:
            return position

        for position, candidate in enumerate(snapshot.track):
            if candidate == caption:
                return position
        return None
