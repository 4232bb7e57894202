"""
Phrase API endpoints - browse extracted phrases by category
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_, select
from sqlalchemy.orm import Session, joinedload

from lyriclearn.core.db import get_db
from lyriclearn.models.phrase import Phrase, PhraseCategoryRecord
from lyriclearn.schemas.base import Envelope
from lyriclearn.schemas.phrase import PhraseCategoryRead, PhraseRead

router = APIRouter(prefix="/phrases", tags=["phrases"])


@router.get("", response_model=Envelope[list[PhraseRead]])
async def list_phrases(
    category: Optional[str] = None,
    search: Optional[str] = None,
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """
    List stored phrases, most useful first

    - **category**: Only phrases in this category
    - **search**: Case-insensitive match on the original or translated text
    - **limit** / **offset**: Pagination
    """
    stmt = select(Phrase).options(joinedload(Phrase.song))

    if category:
        stmt = stmt.where(Phrase.category == category)

    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(or_(
            Phrase.original_text.ilike(pattern),
            Phrase.translated_text.ilike(pattern),
        ))

    stmt = (
        stmt.order_by(Phrase.usefulness_score.desc(), Phrase.category.asc(), Phrase.id.asc())
        .limit(limit)
        .offset(offset)
    )
    phrases = db.execute(stmt).scalars().all()

    return Envelope(
        status="ok",
        data=[PhraseRead.model_validate(phrase) for phrase in phrases]
    )


@router.get("/categories", response_model=Envelope[list[PhraseCategoryRead]])
async def list_phrase_categories(db: Session = Depends(get_db)):
    """Categories that currently hold at least one phrase, in display order"""
    stmt = (
        select(PhraseCategoryRecord)
        .where(PhraseCategoryRecord.phrase_count > 0)
        .order_by(PhraseCategoryRecord.order.asc())
    )
    categories = db.execute(stmt).scalars().all()

    return Envelope(
        status="ok",
        data=[PhraseCategoryRead.model_validate(c) for c in categories]
    )
