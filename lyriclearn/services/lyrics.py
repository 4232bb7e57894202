"""
Helpers for reading the lyric JSON stored on songs and translations.
"""
import json
from dataclasses import dataclass, field
from typing import List, Optional

from lyriclearn.core.exceptions import LyricsParseError
from lyriclearn.models.song import Song, SongTranslation


@dataclass
class StoredLyrics:
    lines: List[str]
    synced_times: List[Optional[float]] = field(default_factory=list)


def _line_text(line) -> str:
    # Lines are stored as plain strings; older rows wrap them as {"text": ...}
    if isinstance(line, str):
        return line
    if isinstance(line, dict) and isinstance(line.get("text"), str):
        return line["text"]
    return ""


def parse_song_lyrics(song: Song) -> StoredLyrics:
    """
    Parse ``song.lyrics_raw``.

    Raises:
        LyricsParseError: if the stored value is not the expected JSON object
    """
    if not song.lyrics_raw:
        return StoredLyrics(lines=[])

    try:
        data = json.loads(song.lyrics_raw)
    except json.JSONDecodeError as e:
        raise LyricsParseError(song.id, f"invalid JSON: {e}")

    if not isinstance(data, dict):
        raise LyricsParseError(song.id, "expected a JSON object with a 'lines' list")

    lines = data.get("lines") or []
    if not isinstance(lines, list):
        raise LyricsParseError(song.id, "'lines' is not a list")

    synced_block = data.get("synchronized") or {}
    if not isinstance(synced_block, dict):
        raise LyricsParseError(song.id, "'synchronized' is not an object")

    synced = synced_block.get("lines") or []
    times = []
    if isinstance(synced, list):
        for entry in synced:
            time = entry.get("time") if isinstance(entry, dict) else None
            times.append(float(time) if isinstance(time, (int, float)) else None)

    return StoredLyrics(lines=[_line_text(line) for line in lines], synced_times=times)


def parse_translation_lines(translation: SongTranslation) -> List[str]:
    """
    Parse ``translation.lyrics_lines`` (a JSON list of strings).

    Raises:
        LyricsParseError: if the stored value is not a JSON list
    """
    if not translation.lyrics_lines:
        return []

    try:
        data = json.loads(translation.lyrics_lines)
    except json.JSONDecodeError as e:
        raise LyricsParseError(translation.song_id, f"invalid translation JSON: {e}")

    if not isinstance(data, list):
        raise LyricsParseError(translation.song_id, "translation lines are not a list")

    return [_line_text(line) for line in data]


def find_translation(song: Song, target_lang: str) -> Optional[SongTranslation]:
    for translation in song.translations:
        if translation.target_lang == target_lang:
            return translation
    return None
