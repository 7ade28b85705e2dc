from __future__ import annotations
import argparse
import sys
import time
from pathlib import Path
from typing import Iterator, List

import numpy as np
from tqdm import tqdm

from cistem import stem, tokenize

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
WORDLIST_FILE = DATA_DIR / "de_wordlist_simple.txt"


def load_words(path: Path, text: bool = False) -> Iterator[str]:
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            if text:
                yield from tokenize(line)
                continue
            word = line.strip()
            if word:
                yield word


def stem_lengths(words, case_insensitive: bool = False, writer=None) -> np.ndarray:
    lengths: List[int] = []
    for word in words:
        s = stem(word, case_insensitive)
        # utf-8 bytes
        lengths.append(len(s.encode("utf-8")))
        if writer is not None:
            writer.write(f"{word}\t{s}\n")
    return np.asarray(lengths, dtype=np.int64)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Stem a word list with CISTEM")
    p.add_argument("wordlist", nargs="?", type=Path, default=WORDLIST_FILE, help="one word per line")
    p.add_argument("--case-insensitive", action="store_true", help="always strip a final 't'")
    p.add_argument("--text", action="store_true", help="the file is running text, split it into words")
    p.add_argument("--output", type=Path, default=None, metavar="FILE", help="write word<TAB>stem lines to FILE")
    return p


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if not args.wordlist.exists():
        sys.exit(f"file not found: {args.wordlist}")

    words = tqdm(load_words(args.wordlist, args.text), desc="Stemming", unit=" words")
    start = time.perf_counter()
    if args.output:
        with args.output.open("w", encoding="utf-8", newline="\n") as out:
            lengths = stem_lengths(words, args.case_insensitive, out)
    else:
        lengths = stem_lengths(words, args.case_insensitive)
    elapsed = time.perf_counter() - start

    print(int(lengths.sum()))
    if lengths.size:
        print(f"Words: {lengths.size:,}  mean stem length {lengths.mean():.2f}  median {np.median(lengths):.0f}")
    print(f"Elapsed time: {elapsed:.3f}s")


if __name__ == "__main__":
    try: main()
    except KeyboardInterrupt:
        sys.exit("aborted")
