#!/usr/bin/env python3
"""
Rank words across all song lyrics and store the most useful vocabulary.
"""
import argparse

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import db_session
from lyriclearn.core.logging import configure_logging
from lyriclearn.scoring.frequency import load_frequency_table
from lyriclearn.scoring.vocabulary_scoring import VocabularyScorer
from lyriclearn.services.vocabulary_extraction_service import VocabularyExtractionService


def main():
    parser = argparse.ArgumentParser(description="Extract ranked vocabulary from song lyrics")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of words to keep (default from EXTRACTION_VOCABULARY_LIMIT)"
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level.value, json_format=settings.log_json)

    scorer = VocabularyScorer(load_frequency_table(settings.scoring.frequency_table_path))

    with db_session() as db:
        report = VocabularyExtractionService(db, scorer, settings.extraction).run(args.limit)

    print(f"\nStored {report.stored} words from {report.songs_processed} songs "
          f"({report.total_words} words collected)")
    if report.songs_failed:
        print(f"Skipped {report.songs_failed} songs with malformed lyrics")

    if report.top_words:
        print(f"\nTop {len(report.top_words)} words:")
        for i, entry in enumerate(report.top_words, start=1):
            print(f"  {i}. {entry.word} ({entry.part_of_speech.value}) - "
                  f"score {entry.score:.3f}, frequency {entry.frequency:.2f}")


if __name__ == "__main__":
    main()
