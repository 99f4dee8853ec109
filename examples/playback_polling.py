"""
Playback polling example.

Demonstrates how a host application drives the timeline index from its own
playback clock: it polls active_at() on every tick and only reacts when the
returned caption changes. Navigation jumps use previous()/next().
"""

import logging

from srtkit import TimelineIndex, format_timecode

# Configure logging to see srtkit internal logs
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

SAMPLE_SRT = """1
00:00:01,000 --> 00:00:02,500
First caption

2
00:00:03,000 --> 00:00:05,000
Second caption

3
00:00:05,500 --> 00:00:07,000
Third caption
"""

TICK = 0.05  # seconds between clock updates

def main():
    index = TimelineIndex()
    index.load_content(SAMPLE_SRT)

    # Simulated playback clock
    shown = None
    clock = 0.0
    while clock <= 8.0:
        caption = index.active_at(clock)
        if caption is not shown:
            position = index.index_of(caption) if caption else None
            label = caption.text if caption else "(no caption)"
            print(f"[{format_timecode(clock)}] row={position} {label}")
            shown = caption
        clock = round(clock + TICK, 3)

    # Navigation from the middle of the second caption
    now = 3.2
    previous = index.previous(now)
    upcoming = index.next(now)
    print(f"\nAt {format_timecode(now)}:")
    print(f"  previous -> {previous.formatted_start if previous else None}")
    print(f"  next     -> {upcoming.formatted_start if upcoming else None}")

if __name__ == "__main__":
    main()
