#!/usr/bin/env python3
"""
Stem Indonesian words from the command line.

Usage:
    python scripts/stem_words.py memukul pengupas kebaikannya
    echo "Pembangunan jembatan dimulai" | python scripts/stem_words.py --text
    python scripts/stem_words.py --dictionary my_roots.txt berlari

Prints "word<TAB>stem" per word, or one line of stems per input line
with --text. Reads stdin when no words are given.
"""

import argparse
import logging
import sys
from pathlib import Path

# Allow running from a checkout without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from katadasar import DictionaryLoadError, Stemmer, tokenize  # noqa: E402
from katadasar.config import get_settings  # noqa: E402
from katadasar.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger("stem_words")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reduce Indonesian words to their root form.")
    parser.add_argument("words", nargs="*", help="Words to stem (default: read stdin)")
    parser.add_argument("--dictionary", type=Path, help="Root-word file (default: configured or bundled list)")
    parser.add_argument("--text", action="store_true", help="Treat each input line as running text")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(log_file=settings.log_file, console_level=settings.log_level, stream=sys.stderr)

    try:
        stemmer = Stemmer(args.dictionary or settings.dictionary_path, cache_size=settings.cache_size)
    except DictionaryLoadError as e:
        logger.error(str(e))
        return 1

    lines = [" ".join(args.words)] if args.words else (line.rstrip("\n") for line in sys.stdin)

    for line in lines:
        if args.text:
            print(" ".join(tokenize(line, stemmer=stemmer)))
            continue
        for word in line.split():
            print(f"{word}\t{stemmer.stem(word)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
