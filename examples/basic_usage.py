"""
Basic SRTKit usage example.

Demonstrates loading an SRT file and printing its captions with statistics.
"""

import sys

from srtkit import SRTLoader, compute_statistics

def main():
    source = sys.argv[1] if len(sys.argv) > 1 else "subtitles.srt"

    # Load SRT file (local path or http(s) URL)
    print(f"Loading {source}...")
    loader = SRTLoader()
    track = loader.load(source)

    for caption in track:
        print(f"#{caption.sequence_number} {caption.formatted_start} --> {caption.formatted_end}")
        print(f"  {caption.text}")

    stats = compute_statistics(track)
    print(f"\nCaptions: {stats.count}")
    print(f"Avg duration: {stats.average_duration:.1f}s")

if __name__ == "__main__":
    main()
