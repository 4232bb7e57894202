#!/usr/bin/env python3
"""
Regenerate the packaged word -> Zipf frequency table from the wordfreq corpus.
"""
import argparse
import json
import logging
import re
import sys
from pathlib import Path

from wordfreq import top_n_list, zipf_frequency

from lyriclearn.core.logging import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "lyriclearn" / "scoring" / "data" / "freq-es.json"

_SPANISH_WORD = re.compile(r"^[a-záéíóúñü]+$")


def build_table(lang: str, size: int, wordlist: str, min_zipf: float) -> dict:
    """Zipf frequencies for the ``size`` most common alphabetic words."""
    table = {}
    for word in top_n_list(lang, size, wordlist=wordlist):
        if not _SPANISH_WORD.match(word):
            continue
        zipf = round(float(zipf_frequency(word, lang, wordlist=wordlist)), 2)
        if zipf >= min_zipf:
            table[word] = zipf
    return table


def main():
    parser = argparse.ArgumentParser(description="Build the Spanish word frequency table")
    parser.add_argument("--lang", default="es", help="wordfreq language code (default: es)")
    parser.add_argument("--size", type=int, default=20000, help="Number of top words to read")
    parser.add_argument("--wordlist", default="best", choices=["small", "large", "best"])
    parser.add_argument("--min-zipf", type=float, default=1.0, help="Drop words rarer than this")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT)
    args = parser.parse_args()

    configure_logging(json_format=False)

    table = build_table(args.lang, args.size, args.wordlist, args.min_zipf)
    if not table:
        logger.error(f"No words produced for language {args.lang!r}")
        sys.exit(1)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(table, f, ensure_ascii=False, indent=0, sort_keys=False)

    logger.info(f"Wrote {len(table)} words to {args.output}")


if __name__ == "__main__":
    main()
