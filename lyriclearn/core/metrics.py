"""Scoring latency metrics.

Collects per-call latency for phrase, vocabulary and difficulty scoring requests.
"""
import time
from contextlib import contextmanager

_phrase_timings_ms: list[float] = []
_vocabulary_timings_ms: list[float] = []
_ranking_timings_ms: list[float] = []
_difficulty_timings_ms: list[float] = []

_MAX_SAMPLES = 5000


def _record(samples: list[float], start: float) -> None:
    samples.append((time.perf_counter() - start) * 1000.0)
    if len(samples) > _MAX_SAMPLES:
        del samples[: len(samples) - _MAX_SAMPLES]


@contextmanager
def record_phrase_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _record(_phrase_timings_ms, start)


@contextmanager
def record_vocabulary_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _record(_vocabulary_timings_ms, start)


@contextmanager
def record_ranking_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _record(_ranking_timings_ms, start)


@contextmanager
def record_difficulty_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _record(_difficulty_timings_ms, start)


def _percentiles(values: list[float]) -> dict:
    if not values:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    vals = sorted(values)
    count = len(vals)

    def _p(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return vals[idx]
    return {"count": count, "p95_ms": _p(0.95), "p99_ms": _p(0.99)}


def snapshot_metrics() -> dict:
    return {
        "phrase": _percentiles(_phrase_timings_ms),
        "vocabulary": _percentiles(_vocabulary_timings_ms),
        "ranking": _percentiles(_ranking_timings_ms),
        "difficulty": _percentiles(_difficulty_timings_ms),
    }


def reset_metrics() -> None:
    _phrase_timings_ms.clear()
    _vocabulary_timings_ms.clear()
    _ranking_timings_ms.clear()
    _difficulty_timings_ms.clear()
