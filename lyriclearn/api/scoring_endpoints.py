"""
Scoring API endpoints - phrase and vocabulary usefulness and lyric difficulty on demand
"""
from fastapi import APIRouter, Depends

from lyriclearn.core.dependencies import (
    get_difficulty_scorer,
    get_phrase_scorer,
    get_vocabulary_scorer,
)
from lyriclearn.core.metrics import (
    record_difficulty_latency,
    record_phrase_latency,
    record_ranking_latency,
    record_vocabulary_latency,
)
from lyriclearn.schemas.base import Envelope
from lyriclearn.schemas.difficulty import DifficultyMetricsRead, DifficultyRead, DifficultyRequest
from lyriclearn.schemas.scoring import (
    CategoryRead,
    PhraseFactorsRead,
    PhraseScoreRead,
    PhraseScoreRequest,
    TopVocabularyRequest,
    VocabularyScoreRead,
    VocabularyScoreRequest,
    VocabularyScoreResult,
)
from lyriclearn.scoring.categories import PHRASE_CATEGORIES
from lyriclearn.scoring.difficulty import DifficultyScorer
from lyriclearn.scoring.phrase_scoring import PhraseScorer
from lyriclearn.scoring.vocabulary_scoring import VocabularyScore, VocabularyScorer

router = APIRouter(prefix="/scoring", tags=["scoring"])


def _vocabulary_read(result: VocabularyScore) -> VocabularyScoreRead:
    return VocabularyScoreRead(
        word=result.word,
        score=result.score,
        frequency=result.frequency,
        part_of_speech=result.part_of_speech.value,
        is_useful=result.is_useful,
    )


@router.post("/phrase", response_model=Envelope[PhraseScoreRead])
async def score_phrase(
    payload: PhraseScoreRequest,
    scorer: PhraseScorer = Depends(get_phrase_scorer),
):
    """
    Score a lyric line for learner usefulness

    - **phrase**: Spanish lyric line
    - **verb_tenses**: Optional tenses detected in the line
    """
    with record_phrase_latency():
        result = scorer.score(payload.phrase, payload.verb_tenses)

    return Envelope(
        status="ok",
        data=PhraseScoreRead(
            phrase=payload.phrase.strip(),
            score=result.score,
            factors=PhraseFactorsRead(**result.factors.to_dict()),
            category=result.category.value,
            is_useful=result.is_useful,
        )
    )


@router.post("/vocabulary", response_model=Envelope[VocabularyScoreResult])
async def score_vocabulary(
    payload: VocabularyScoreRequest,
    scorer: VocabularyScorer = Depends(get_vocabulary_scorer),
):
    """
    Score a single word; ineligible words (stopwords, basic verbs, short or
    non-Spanish tokens) come back with ``eligible: false``
    """
    with record_vocabulary_latency():
        result = scorer.score(payload.word)

    if result is None:
        return Envelope(status="ok", data=VocabularyScoreResult(eligible=False))

    return Envelope(
        status="ok",
        data=VocabularyScoreResult(eligible=True, result=_vocabulary_read(result))
    )


@router.post("/vocabulary/top", response_model=Envelope[list[VocabularyScoreRead]])
async def top_vocabulary(
    payload: TopVocabularyRequest,
    scorer: VocabularyScorer = Depends(get_vocabulary_scorer),
):
    """Rank a word list, deduplicated, best first"""
    with record_ranking_latency():
        ranked = scorer.top(payload.words, payload.limit)

    return Envelope(status="ok", data=[_vocabulary_read(r) for r in ranked])


@router.get("/categories", response_model=Envelope[list[CategoryRead]])
async def list_categories():
    categories = [
        CategoryRead(
            id=category.value,
            display_name=info.display_name,
            icon=info.icon,
            order=info.order,
        )
        for category, info in sorted(PHRASE_CATEGORIES.items(), key=lambda item: item[1].order)
    ]
    return Envelope(status="ok", data=categories)


@router.post("/difficulty", response_model=Envelope[DifficultyRead])
async def score_difficulty(
    payload: DifficultyRequest,
    scorer: DifficultyScorer = Depends(get_difficulty_scorer),
):
    """
    Difficulty metrics, score (1-10) and level of a set of lyric lines

    Blank lines are skipped; lyrics with no words are rejected with 422.
    """
    with record_difficulty_latency():
        result = scorer.score_lines(payload.lines)

    return Envelope(
        status="ok",
        data=DifficultyRead(
            metrics=DifficultyMetricsRead(**result.metrics.to_dict()),
            difficulty_score=result.difficulty_score,
            level=result.level,
        )
    )
