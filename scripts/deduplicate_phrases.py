#!/usr/bin/env python3
"""
Remove phrases whose translation duplicates a better-scoring phrase.
"""
from sqlalchemy import select

from lyriclearn.config.settings import get_settings
from lyriclearn.core.db import db_session
from lyriclearn.core.logging import configure_logging
from lyriclearn.models.phrase import Phrase
from lyriclearn.services.phrase_dedup_service import PhraseDeduplicationService


def main():
    settings = get_settings()
    configure_logging(settings.log_level.value, json_format=settings.log_json)

    with db_session() as db:
        report = PhraseDeduplicationService(db).run()

        print(f"\nFound {report.total_phrases} phrases, {report.unique_phrases} unique")
        print(f"Deleted {report.deleted} duplicate phrases")

        top_n = settings.extraction.report_top_n
        if top_n:
            top = db.execute(
                select(Phrase).order_by(Phrase.usefulness_score.desc()).limit(top_n)
            ).scalars().all()
            print(f"\nTop {len(top)} phrases after deduplication:")
            for i, phrase in enumerate(top, start=1):
                print(f"  {i}. \"{phrase.translated_text}\"")
                print(f"     Score: {phrase.usefulness_score:.3f} | From: {phrase.song.title}")


if __name__ == "__main__":
    main()
