"""
Word frequency lookup shared by the phrase and vocabulary scorers.

Frequencies are on the Zipf scale (roughly 0-7, higher is more common).
The table is loaded once and is read-only afterwards, so a single instance
can be shared by every request and worker thread.
"""
import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Optional, Union

from lyriclearn.core.exceptions import FrequencyTableError

logger = logging.getLogger(__name__)

DEFAULT_ASSET = "freq-es.json"


def normalize_word(word: str) -> str:
    return word.lower().strip()


class FrequencyTable(Mapping):
    """Immutable mapping of normalized word -> Zipf frequency."""

    def __init__(self, entries: Optional[Mapping] = None, source: str = "<memory>"):
        normalized = {}
        for word, value in (entries or {}).items():
            normalized[normalize_word(str(word))] = float(value)
        self._entries = MappingProxyType(normalized)
        self.source = source

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "FrequencyTable":
        """
        Load a table from a JSON object of word -> number.

        Raises:
            FrequencyTableError: if the file is missing or malformed
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            raise FrequencyTableError(str(path), "file not found")
        except json.JSONDecodeError as e:
            raise FrequencyTableError(str(path), f"invalid JSON: {e}")
        return cls._from_raw(raw, str(path))

    @classmethod
    def from_package(cls, asset: str = DEFAULT_ASSET) -> "FrequencyTable":
        """Load one of the assets shipped in ``lyriclearn/scoring/data``."""
        resource = resources.files("lyriclearn.scoring") / "data" / asset
        try:
            raw = json.loads(resource.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise FrequencyTableError(asset, "packaged asset not found")
        except json.JSONDecodeError as e:
            raise FrequencyTableError(asset, f"invalid JSON: {e}")
        return cls._from_raw(raw, f"package:{asset}")

    @classmethod
    def _from_raw(cls, raw, source: str) -> "FrequencyTable":
        if not isinstance(raw, dict):
            raise FrequencyTableError(source, "expected a JSON object of word -> frequency")
        for word, value in raw.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise FrequencyTableError(
                    source, f"non-numeric frequency for '{word}': {value!r}"
                )
        table = cls(raw, source=source)
        logger.info(f"Loaded frequency table from {source} ({len(table)} words)")
        return table

    def lookup(self, word: str) -> Optional[float]:
        """Return the Zipf frequency of ``word`` or None when unknown."""
        return self._entries.get(normalize_word(word))

    def __getitem__(self, word: str) -> float:
        return self._entries[normalize_word(word)]

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<FrequencyTable source={self.source!r} words={len(self)}>"


def load_frequency_table(path: Optional[Union[str, Path]] = None) -> FrequencyTable:
    """Load ``path`` if given, otherwise the packaged Spanish table."""
    if path:
        return FrequencyTable.from_json(path)
    return FrequencyTable.from_package()


@lru_cache(maxsize=1)
def get_default_frequency_table() -> FrequencyTable:
    """Packaged table, loaded on first use and shared afterwards."""
    return FrequencyTable.from_package()
