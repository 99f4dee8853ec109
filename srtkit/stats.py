"""
Host-side helpers over a caption sequence.

Summary statistics for a subtitle list panel and case-insensitive text
search. These are plain reductions and do not depend on index state.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import Caption


@dataclass
class TrackStatistics:
    """Summary of a caption sequence."""
    count: int = 0
    total_duration: float = 0.0    # seconds, sum of caption durations
    average_duration: float = 0.0  # seconds
    coverage: float = 0.0          # fraction of media duration, 0 if unknown


def compute_statistics(captions: Iterable[Caption], media_duration: Optional[float] = None) -> TrackStatistics:
    """
    Compute count, total and average duration, and media coverage.

    Args:
        captions: Captions to summarize
        media_duration: Length of the media in seconds (optional)

    Returns:
        TrackStatistics

    Example:
        >>> stats = compute_statistics(track, media_duration=120.0)
        >>> print(f"{stats.coverage:.0%} covered")
    """
    captions = list(captions)
    if not captions:
        return TrackStatistics()

    total = sum(caption.duration for caption in captions)
    coverage = 0.0
    if media_duration and media_duration > 0:
        coverage = total / media_duration

    return TrackStatistics(
        count=len(captions),
        total_duration=total,
        average_duration=total / len(captions),
        coverage=coverage,
    )


def search_captions(captions: Iterable[Caption], query: str) -> List[Caption]:
    """Filter captions whose text contains ``query``, ignoring case."""
    if not query:
        return list(captions)
    needle = query.casefold()
    return [caption for caption in captions if needle in caption.text.casefold()]
