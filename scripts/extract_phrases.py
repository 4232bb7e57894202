#!/usr/bin/env python3
"""
Extract useful phrases from every translated song and store them.
"""
import argparse
import logging

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import db_session
from lyriclearn.core.logging import configure_logging
from lyriclearn.scoring.frequency import load_frequency_table
from lyriclearn.scoring.phrase_scoring import PhraseScorer
from lyriclearn.services.phrase_extraction_service import PhraseExtractionService

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Extract useful phrases from song lyrics")
    parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Append to the phrases table instead of clearing it first"
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level.value, json_format=settings.log_json)

    scorer = PhraseScorer(load_frequency_table(settings.scoring.frequency_table_path))

    with db_session() as db:
        service = PhraseExtractionService(db, scorer, settings.extraction)
        report = service.run(clear_existing=not args.keep_existing)

        print(f"\nExtracted {report.total_phrases} phrases from {report.songs_processed} songs")
        if report.songs_failed:
            print(f"Skipped {report.songs_failed} songs with malformed lyrics")

        print("\nPhrases by category:")
        for category, count in sorted(report.category_counts.items()):
            print(f"  {category}: {count}")

        if report.top_phrases:
            print(f"\nTop {len(report.top_phrases)} phrases:")
            for i, phrase in enumerate(report.top_phrases, start=1):
                print(f"  {i}. \"{phrase.original_text}\" -> \"{phrase.translated_text}\"")
                print(f"     Score: {phrase.usefulness_score:.3f} | Category: {phrase.category}")


if __name__ == "__main__":
    main()
