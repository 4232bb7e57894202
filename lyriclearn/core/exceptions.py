"""
Custom exceptions for the LyricLearn backend.

Phrase and vocabulary scoring never raise for textual input. Difficulty
scoring rejects lyrics with no words. The rest cover the surrounding
layers: loading the frequency asset, reading stored songs and serving HTTP
requests.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Scoring resources
    FREQUENCY_TABLE_UNAVAILABLE = "FREQUENCY_TABLE_UNAVAILABLE"

    # Stored content
    SONG_NOT_FOUND = "SONG_NOT_FOUND"
    LYRICS_PARSE_FAILED = "LYRICS_PARSE_FAILED"
    DIFFICULTY_SCORING_FAILED = "DIFFICULTY_SCORING_FAILED"

    # System errors
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # Generic errors
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class LyricLearnException(Exception):
    """Base exception for the LyricLearn backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class FrequencyTableError(LyricLearnException):
    """Raised when the word frequency asset cannot be loaded."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Frequency table '{path}' could not be loaded: {reason}",
            error_code=ErrorCode.FREQUENCY_TABLE_UNAVAILABLE,
            details={"path": path, "reason": reason},
            status_code=500
        )


class SongNotFoundError(LyricLearnException):
    """Raised when a requested song does not exist."""

    def __init__(self, song_id: int):
        super().__init__(
            message=f"Song {song_id} not found",
            error_code=ErrorCode.SONG_NOT_FOUND,
            details={"song_id": song_id},
            status_code=404
        )


class LyricsParseError(LyricLearnException):
    """Raised when stored lyrics or translation lines are malformed."""

    def __init__(self, song_id: Optional[int], reason: str):
        super().__init__(
            message=f"Stored lyrics for song {song_id} are malformed: {reason}",
            error_code=ErrorCode.LYRICS_PARSE_FAILED,
            details={"song_id": song_id, "reason": reason},
            status_code=422
        )


class ServiceUnavailableError(LyricLearnException):
    """Raised when a service is not ready to handle requests."""

    def __init__(self, service_name: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Service '{service_name}' is temporarily unavailable",
            error_code=ErrorCode.SERVICE_UNAVAILABLE,
            details=details or {"service_name": service_name},
            status_code=503
        )


class DifficultyScoringError(LyricLearnException):
    """Raised when lyrics cannot be scored for difficulty (no lines or no words)."""

    def __init__(self, reason: str, song_id: Optional[int] = None):
        details: Dict[str, Any] = {"reason": reason}
        if song_id is not None:
            details["song_id"] = song_id
        super().__init__(
            message=f"Difficulty could not be scored: {reason}",
            error_code=ErrorCode.DIFFICULTY_SCORING_FAILED,
            details=details,
            status_code=422
        )
