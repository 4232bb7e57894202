"""
Unit tests for phrase deduplication
"""
from datetime import datetime

from sqlalchemy import select

from lyriclearn.models.phrase import Phrase, PhraseCategoryRecord
from lyriclearn.services.phrase_dedup_service import (
    PhraseDeduplicationService,
    normalize_translation,
)


def _phrase(song, text, score, created_at, category="expressions"):
    return Phrase(
        song_id=song.id,
        original_text="Te quiero",
        translated_text=text,
        line_index=0,
        usefulness_score=score,
        category=category,
        word_count=2,
        created_at=created_at,
    )


def test_normalize_translation():
    assert normalize_translation("  I Love You!?! ") == "i love you"
    assert normalize_translation("Wait... what") == "wait... what"


def test_keeps_best_instance_of_each_phrase(db_session, make_song):
    song = make_song("Canción", "Alguien", ["Te quiero"])
    db_session.add(PhraseCategoryRecord(
        name="expressions", display_name="Common Expressions", icon="message-square", order=3, phrase_count=4,
    ))
    low = _phrase(song, "I love you.", 0.8, datetime(2024, 1, 1))
    best = _phrase(song, "i love you", 0.9, datetime(2024, 1, 2))
    late = _phrase(song, "I love you!", 0.9, datetime(2024, 1, 3))
    other = _phrase(song, "Dance with me", 0.5, datetime(2024, 1, 1))
    db_session.add_all([low, best, late, other])
    db_session.commit()

    report = PhraseDeduplicationService(db_session).run()

    assert report.total_phrases == 4
    assert report.unique_phrases == 2
    assert report.deleted == 2
    assert sorted(report.kept_ids) == sorted([best.id, other.id])

    remaining = db_session.execute(select(Phrase.id)).scalars().all()
    assert sorted(remaining) == sorted([best.id, other.id])

    category = db_session.execute(select(PhraseCategoryRecord)).scalar_one()
    assert category.phrase_count == 2


def test_no_duplicates_is_a_no_op(db_session, make_song):
    song = make_song("Canción", "Alguien", ["Te quiero"])
    db_session.add(_phrase(song, "I love you", 0.9, datetime(2024, 1, 1)))
    db_session.commit()

    report = PhraseDeduplicationService(db_session).run()

    assert report.deleted == 0
    assert report.unique_phrases == 1
