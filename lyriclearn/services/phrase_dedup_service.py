"""
Phrase Deduplication Service - collapses phrases whose translations match
"""
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from lyriclearn.models.phrase import Phrase, PhraseCategoryRecord

logger = logging.getLogger(__name__)

_TRAILING_PUNCTUATION = re.compile(r"[.!?]+$")


def normalize_translation(text: str) -> str:
    """Lowercase, trim and drop trailing sentence punctuation."""
    return _TRAILING_PUNCTUATION.sub("", (text or "").lower().strip())


@dataclass
class DeduplicationReport:
    total_phrases: int = 0
    unique_phrases: int = 0
    deleted: int = 0
    kept_ids: List[int] = field(default_factory=list)
    category_counts: Dict[str, int] = field(default_factory=dict)


class PhraseDeduplicationService:
    """Keeps the best instance of each phrase (highest score, earliest row)"""

    def __init__(self, db: Session):
        self.db = db

    def run(self) -> DeduplicationReport:
        phrases = self.db.execute(select(Phrase)).scalars().all()
        report = DeduplicationReport(total_phrases=len(phrases))
        logger.info(f"Found {len(phrases)} total phrases")

        groups: Dict[str, List[Phrase]] = {}
        for phrase in phrases:
            groups.setdefault(normalize_translation(phrase.translated_text), []).append(phrase)

        report.unique_phrases = len(groups)
        logger.info(f"Found {len(groups)} unique phrases after normalization")

        to_delete = []
        for group in groups.values():
            group.sort(key=lambda p: (-p.usefulness_score, p.created_at, p.id))
            report.kept_ids.append(group[0].id)
            to_delete.extend(group[1:])

        if to_delete:
            for phrase in to_delete:
                self.db.delete(phrase)
            self.db.flush()
            logger.info(f"Deleted {len(to_delete)} duplicate phrases")
        report.deleted = len(to_delete)

        counts = Counter(self.db.execute(select(Phrase.category)).scalars())
        for row in self.db.execute(select(PhraseCategoryRecord)).scalars():
            row.phrase_count = counts.get(row.name, 0)
        report.category_counts = dict(counts)

        self.db.commit()
        return report
