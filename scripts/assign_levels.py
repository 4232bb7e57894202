#!/usr/bin/env python3
"""
Score the difficulty of every song with lyrics and assign levels 1-10.
"""
import argparse

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import db_session
from lyriclearn.core.logging import configure_logging
from lyriclearn.scoring.difficulty import DifficultyScorer, load_idioms
from lyriclearn.scoring.frequency import load_frequency_table
from lyriclearn.services.song_leveling_service import SongLevelingService


def main():
    parser = argparse.ArgumentParser(description="Assign difficulty levels to songs")
    parser.add_argument(
        "--no-recalibrate",
        action="store_true",
        help="Score against the default baselines instead of the corpus statistics"
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level.value, json_format=settings.log_json)

    scorer = DifficultyScorer(
        load_frequency_table(settings.scoring.frequency_table_path),
        idioms=load_idioms(settings.scoring.idioms_path),
    )

    with db_session() as db:
        report = SongLevelingService(db, scorer, settings.extraction).run(
            recalibrate=False if args.no_recalibrate else None
        )

    print(f"\nLeveled {report.songs_scored} songs")
    if report.songs_failed:
        print(f"Skipped {report.songs_failed} songs with malformed or empty lyrics")
    print("Baselines: " + ("recalibrated from corpus" if report.recalibrated else "defaults"))

    print("\nLevel distribution:")
    for level, count in report.level_distribution.items():
        print(f"  Level {level}: {count}")


if __name__ == "__main__":
    main()
