#!/usr/bin/env python3
"""Profile organize format rendering.

Usage:
    python profiling/profile_organizeformat.py "%albumartist/%album/{%track - }%title"

This will profile parsing, tag resolution and path sanitization.
"""

import sys
import cProfile
import pstats
from pathlib import Path
from io import StringIO

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from trackpath.organize import OrganizeFormat
from trackpath.sanitize import SanitizationConfig
from trackpath.song import Song


SONG = Song(
    title="Jóga",
    album="Homogenic",
    artist="Björk",
    year=1997,
    track=2,
    disc=1,
    genre="Electronic",
    length_nanosec=305_000_000_000,
    bitrate=320,
    samplerate=44100,
    url="/music/incoming/02 joga.flac",
)


def profile_organizeformat(format_string: str, iterations: int = 1000):
    """Profile rendering <format_string> with every restriction enabled."""
    print(f"Profiling organize format: {format_string}")
    print(f"Iterations: {iterations}")
    print("=" * 70)

    profiler = cProfile.Profile()
    organize_format = OrganizeFormat(
        format_string,
        SanitizationConfig(
            remove_problematic=True,
            remove_non_fat=True,
            remove_non_ascii=True,
        ),
    )

    profiler.enable()
    try:
        for _ in range(iterations):
            result = organize_format.get_filename_for_song(SONG)
    finally:
        profiler.disable()

    print(f"Result: {result}")

    s = StringIO()
    stats = pstats.Stats(profiler, stream=s)
    print("\n=== Top 30 functions by cumulative time ===")
    stats.sort_stats('cumulative')
    stats.print_stats(30)
    print(s.getvalue())

    s = StringIO()
    stats = pstats.Stats(profiler, stream=s)
    print("\n=== Top 30 functions by total time ===")
    stats.sort_stats('tottime')
    stats.print_stats(30)
    print(s.getvalue())

    output_file = Path(__file__).parent / 'profile_organizeformat.prof'
    profiler.dump_stats(str(output_file))
    print(f"\n✓ Full profile saved to: {output_file}")
    print(f"\nAnalyze with: python -m pstats {output_file}")


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print("Usage: python profile_organizeformat.py <format_string> [iterations]")
        print("\nExamples:")
        print('  python profile_organizeformat.py "%artist/%album/%title"')
        print('  python profile_organizeformat.py "%albumartist/%album{ (Disc %disc)}/{%track - }%title" 5000')
        sys.exit(1)

    format_string = sys.argv[1]
    iterations = int(sys.argv[2]) if len(sys.argv) > 2 else 1000

    profile_organizeformat(format_string, iterations)
