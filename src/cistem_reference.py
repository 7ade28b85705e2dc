"""
    Reference corpus for the CISTEM stemmer.

    Every line holds a word and the four outputs of the stemmer:
    word, stem_cs, stem_ci, left, right, left_ic, right_ic (tab separated).

"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple

from tqdm import tqdm

from cistem import segment, stem

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "tests" / "data"
REFERENCE_FILE = DATA_DIR / "cistem_reference.txt"

FIELDS = ("word", "stem_cs", "stem_ci", "left", "right", "left_ic", "right_ic")


class ReferenceFormatError(ValueError):
    pass


class ReferenceEntry(NamedTuple):
    word: str
    stem_cs: str
    stem_ci: str
    left: str
    right: str
    left_ic: str
    right_ic: str

    def line(self) -> str:
        return "\t".join(self)


class Mismatch(NamedTuple):
    line_no: int
    expected: str
    actual: str


def compute_entry(word: str) -> ReferenceEntry:
    left, right = segment(word, False)
    left_ic, right_ic = segment(word, True)
    return ReferenceEntry(word, stem(word, False), stem(word, True), left, right, left_ic, right_ic)


def reference_line(word: str) -> str:
    return compute_entry(word).line()


def parse_line(line: str, line_no: int = 0) -> ReferenceEntry | None:
    # trailing columns may be empty, only the line break is dropped
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) < 2:
        return None
    if len(fields) != len(FIELDS):
        raise ReferenceFormatError(f"line {line_no}: expected {len(FIELDS)} columns, got {len(fields)}")
    return ReferenceEntry(*fields)


def read_reference(path: Path) -> Iterator[tuple[int, ReferenceEntry]]:
    with path.open(encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            entry = parse_line(line, line_no)
            if entry is not None:
                yield line_no, entry


def check_reference(path: Path, progress: bool = False) -> List[Mismatch]:
    entries = read_reference(path)
    if progress:
        entries = tqdm(entries, desc="Checking", unit=" words")
    mismatches: List[Mismatch] = []
    for line_no, entry in entries:
        actual = compute_entry(entry.word)
        if actual != entry:
            mismatches.append(Mismatch(line_no, entry.line(), actual.line()))
    return mismatches


def write_reference(words: Iterable[str], path: Path) -> int:
    count = 0
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        for word in words:
            word = word.strip()
            if not word:
                continue
            fh.write(reference_line(word) + "\n")
            count += 1
    return count


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="CISTEM reference corpus")
    sub = p.add_subparsers(dest="command", required=True)
    check = sub.add_parser("check", help="compare the stemmer against a reference file")
    check.add_argument("reference", nargs="?", type=Path, default=REFERENCE_FILE)
    check.add_argument("--show", type=int, default=10, metavar="N", help="print at most N mismatches (default 10)")
    build = sub.add_parser("build", help="write a reference file for a word list")
    build.add_argument("wordlist", type=Path)
    build.add_argument("output", type=Path)
    return p


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "build":
        if not args.wordlist.exists():
            sys.exit(f"file not found: {args.wordlist}")
        with args.wordlist.open(encoding="utf-8") as fh:
            n = write_reference(tqdm(fh, desc="Stemming", unit=" words"), args.output)
        print(f"Wrote {args.output.name}  ({n:,} words)")
        return 0

    if not args.reference.exists():
        sys.exit(f"file not found: {args.reference}")
    try:
        mismatches = check_reference(args.reference, progress=True)
    except ReferenceFormatError as e:
        sys.exit(f"{args.reference}: {e}")
    for m in mismatches[: args.show]:
        print(f"line {m.line_no}:")
        print(f"  expected {m.expected!r}")
        print(f"  actual   {m.actual!r}")
    print(f"Mismatches: {len(mismatches):,}")
    return 1 if mismatches else 0


if __name__ == "__main__":
    try: sys.exit(main())
    except KeyboardInterrupt:
        sys.exit("aborted")
