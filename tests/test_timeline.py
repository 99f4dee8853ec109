import copy
import threading

import pytest

from srtkit.errors import MalformedTimestampError
from srtkit.models import Caption, CaptionTrack, NavigationConfig
from srtkit.srt.parser import parse_srt_content
from srtkit.timeline import TimelineIndex


def _track(*spans):
    return CaptionTrack(
        Caption(sequence_number=i, start=start, end=end, lines=(f"cue {i}",))
        for i, (start, end) in enumerate(spans, start=1)
    )


def test_empty_index_returns_none():
    index = TimelineIndex()
    assert not index.is_loaded
    assert index.track is None
    assert index.captions == ()
    assert len(index) == 0
    assert index.active_at(1.0) is None
    assert index.previous(1.0) is None
    assert index.next(1.0) is None


def test_loaded_empty_track_returns_none():
    index = TimelineIndex(parse_srt_content(""))
    assert index.is_loaded
    assert index.count == 0
    assert index.active_at(0.0) is None
    assert index.previous(10.0) is None
    assert index.next(0.0) is None


def test_active_at_bounds_are_inclusive():
    index = TimelineIndex(_track((2.0, 4.0)))
    assert index.active_at(2.0).sequence_number == 1
    assert index.active_at(4.0).sequence_number == 1
    assert index.active_at(3.0).sequence_number == 1
    assert index.active_at(1.999) is None
    assert index.active_at(4.001) is None


def test_active_at_in_gaps_returns_none():
    index = TimelineIndex(_track((0.0, 1.0), (2.0, 3.0), (5.0, 6.0)))
    assert index.active_at(1.5) is None
    assert index.active_at(4.0) is None
    assert index.active_at(7.0) is None
    assert index.active_at(-1.0) is None
    assert index.active_at(5.5).sequence_number == 3


def test_active_at_overlap_first_in_start_order_wins():
    index = TimelineIndex(_track((0.0, 10.0), (2.0, 3.0)))
    assert index.active_at(2.5).sequence_number == 1
    assert index.active_at(10.0).sequence_number == 1


def test_active_at_finds_long_caption_behind_short_ones():
    # A long early caption is still active after later short captions end
    index = TimelineIndex(_track((0.0, 20.0), (1.0, 2.0), (3.0, 4.0), (5.0, 6.0)))
    assert index.active_at(8.0).sequence_number == 1


def test_active_at_later_caption_when_earlier_one_ended():
    index = TimelineIndex(_track((0.0, 2.0), (1.0, 5.0)))
    assert index.active_at(1.5).sequence_number == 1
    assert index.active_at(3.0).sequence_number == 2


def test_active_at_ignores_negative_duration_captions():
    index = TimelineIndex(_track((5.0, 4.0), (6.0, 7.0)))
    assert index.active_at(4.5) is None
    assert index.active_at(5.0) is None
    assert index.active_at(6.5).sequence_number == 2


def test_active_at_nan_returns_none():
    index = TimelineIndex(_track((2.0, 4.0), (5.0, 6.0)))
    assert index.active_at(float("nan")) is None


def test_active_at_zero_duration_caption():
    index = TimelineIndex(_track((3.0, 3.0)))
    assert index.active_at(3.0).sequence_number == 1
    assert index.active_at(3.001) is None


def test_previous_skips_caption_within_guard():
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0), (10.0, 11.0)))
    assert index.previous(5.3).start == 0.0


def test_previous_returns_caption_outside_guard():
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0), (10.0, 11.0)))
    assert index.previous(5.6).start == 5.0
    assert index.previous(100.0).start == 10.0


def test_previous_guard_boundary_is_strict():
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0), (10.0, 11.0)))
    assert index.previous(5.5).start == 0.0
    assert index.previous(5.5001).start == 5.0


def test_previous_without_guard_excludes_equal_start():
    config = NavigationConfig(previous_guard=0.0)
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0), (10.0, 11.0)), config=config)
    assert index.previous(5.0).start == 0.0


def test_previous_wraps_to_first_caption():
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0)))
    assert index.previous(0.0).start == 0.0
    assert index.previous(-5.0).start == 0.0
    assert index.previous(0.3).start == 0.0


def test_previous_on_equal_starts_returns_last():
    index = TimelineIndex(_track((1.0, 2.0), (1.0, 3.0), (8.0, 9.0)))
    assert index.previous(5.0).sequence_number == 2


def test_next_respects_guard():
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0), (10.0, 11.0)))
    assert index.next(5.3).start == 10.0
    assert index.next(4.95).start == 10.0
    assert index.next(4.8).start == 5.0


def test_next_has_no_wraparound():
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0)))
    assert index.next(5.0) is None
    assert index.next(50.0) is None


def test_next_on_equal_starts_returns_first():
    index = TimelineIndex(_track((0.0, 1.0), (3.0, 4.0), (3.0, 5.0)))
    assert index.next(1.0).sequence_number == 2


def test_custom_navigation_guards():
    config = NavigationConfig(previous_guard=0.0, next_guard=0.0)
    index = TimelineIndex(_track((0.0, 1.0), (5.0, 6.0), (10.0, 11.0)), config=config)
    assert index.previous(5.3).start == 5.0
    assert index.next(5.0).start == 10.0


def test_index_of_current_track():
    track = _track((0.0, 1.0), (2.0, 3.0), (4.0, 5.0))
    index = TimelineIndex(track)
    caption = index.active_at(2.5)
    assert index.index_of(caption) == 1


def test_index_of_distinguishes_duplicate_cues():
    content = (
        "1\n00:00:01,000 --> 00:00:02,000\nSame\n\n"
        "1\n00:00:01,000 --> 00:00:02,000\nSame\n"
    )
    index = TimelineIndex(parse_srt_content(content))
    first, second = index.captions
    assert first == second
    assert index.index_of(first) == 0
    assert index.index_of(second) == 1


def test_index_of_after_reload_with_different_content_returns_none():
    index = TimelineIndex(parse_srt_content("1\n00:00:01,000 --> 00:00:02,000\nHello\n"))
    old_caption = index.active_at(1.5)

    index.load(parse_srt_content("1\n00:00:01,000 --> 00:00:02,000\nGoodbye\n"))
    assert index.index_of(old_caption) is None
    assert index.index_of(index.active_at(1.5)) == 0


def test_index_of_after_reload_with_same_content_matches_by_value():
    content = "1\n00:00:01,000 --> 00:00:02,000\nHello\n"
    index = TimelineIndex(parse_srt_content(content))
    old_caption = index.active_at(1.5)

    index.load(parse_srt_content(content))
    assert index.index_of(old_caption) == 0


def test_index_of_after_clear_returns_none():
    index = TimelineIndex(_track((0.0, 1.0)))
    caption = index.captions[0]
    index.clear()
    assert index.index_of(caption) is None


def test_index_of_value_equal_copy():
    index = TimelineIndex(_track((0.0, 1.0), (2.0, 3.0)))
    assert index.index_of(copy.copy(index.captions[1])) == 1
    assert index.index_of(Caption(1, 0.0, 1.0, ("cue 1",))) == 0


def test_index_of_value_equal_copy_of_duplicate_returns_first():
    duplicate = Caption(1, 1.0, 2.0, ("Same",))
    index = TimelineIndex([duplicate, Caption(1, 1.0, 2.0, ("Same",))])
    assert index.index_of(copy.copy(duplicate)) == 0


def test_index_of_unknown_caption_returns_none():
    index = TimelineIndex(_track((0.0, 1.0)))
    assert index.index_of(Caption(1, 0.0, 1.0, ("other",))) is None


def test_load_accepts_unsorted_iterable():
    captions = [
        Caption(2, 5.0, 6.0, ("b",)),
        Caption(1, 1.0, 2.0, ("a",)),
    ]
    index = TimelineIndex()
    index.load(captions)
    assert [c.text for c in index] == ["a", "b"]


def test_clear_returns_to_empty_state():
    index = TimelineIndex(_track((0.0, 1.0)))
    index.clear()
    assert not index.is_loaded
    assert index.active_at(0.5) is None


def test_failed_load_content_keeps_previous_track():
    index = TimelineIndex()
    index.load_content("1\n00:00:01,000 --> 00:00:02,000\nKeep me\n")

    with pytest.raises(MalformedTimestampError):
        index.load_content("1\nnot a timestamp\nBroken\n")

    assert index.active_at(1.5).text == "Keep me"


def test_failed_load_content_keeps_empty_state():
    index = TimelineIndex()
    with pytest.raises(MalformedTimestampError):
        index.load_content("1\nnot a timestamp\nBroken\n")
    assert not index.is_loaded


def test_load_content_accepts_bytes():
    index = TimelineIndex()
    index.load_content("1\n00:00:01,000 --> 00:00:02,000\nOlá\n".encode("utf-8"))
    assert index.active_at(1.0).text == "Olá"


def test_large_track_lookup():
    spans = [(i * 2.0, i * 2.0 + 1.5) for i in range(10000)]
    index = TimelineIndex(_track(*spans))
    assert index.active_at(12345.0).start == 12344.0
    assert index.active_at(12345.9) is None
    assert index.next(12345.0).start == 12346.0
    assert index.previous(12345.0).start == 12344.0


def test_queries_during_concurrent_reloads():
    small = _track((0.0, 1.0))
    large = _track(*[(float(i), i + 0.5) for i in range(500)])
    index = TimelineIndex(small)
    errors = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            track = index.track
            caption = index.active_at(0.25)
            if caption is None or caption.start != 0.0:
                errors.append(caption)
            if track is not None and len(track) not in (1, 500):
                errors.append(len(track))

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for i in range(200):
        index.load(large if i % 2 == 0 else small)
    stop.set()
    for thread in threads:
        thread.join()

    assert errors == []
