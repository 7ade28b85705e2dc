"""
    This is the implementation of the german stemmer CISTEM.

    The algorithm has been developed by Leonie Weißweiler and Alexander Fraser
    "Developing a Stemmer for German Based on a Comparative Analysis of Publicly Available Stemmers"
    https://github.com/LeonieWeissweiler/CISTEM .
    The reference corpus of the perl version is used to check the results.

"""
from enum import Enum
from typing import List, Tuple, Union

import regex as re

TOKEN_PATTERN = re.compile(r"\p{L}+")

FOLDS = {"ü": "u", "ö": "o", "ä": "a", "ß": "ss"}

PREFIX = "ge"
PREFIX_MIN_CHARS = 6
MIN_CHARS = 3


class Placeholder(Enum):
    SCH = "sch"
    EI = "ei"
    IE = "ie"
    REPEAT = "*"


# applied one after the other, order matters
DIGRAPHS = (
    ("sch", Placeholder.SCH),
    ("ei", Placeholder.EI),
    ("ie", Placeholder.IE),
)

Unit = Union[str, Placeholder]


def normalize(word: str) -> Tuple[str, int, bool]:
    if not word:
        return "", 0, False
    upper = word[0].isupper()

    out: List[str] = []
    num_chars = 0
    for ch in word:
        num_chars += 1
        for c in ch.lower():
            if c == "ß":
                # "ss" is worth two characters further down
                num_chars += 1
            out.append(FOLDS.get(c, c))
    return "".join(out), num_chars, upper


def trim_prefix(buffer: str, num_chars: int) -> Tuple[str, int, int]:
    if buffer.startswith(PREFIX) and num_chars >= PREFIX_MIN_CHARS:
        return buffer[len(PREFIX):], num_chars - len(PREFIX), len(PREFIX)
    return buffer, num_chars, 0


def _replace(units: List[Unit], pattern: str, placeholder: Placeholder) -> Tuple[List[Unit], int]:
    out: List[Unit] = []
    hits = 0
    size = len(pattern)
    target = list(pattern)
    i = 0
    while i < len(units):
        if units[i:i + size] == target:
            out.append(placeholder)
            hits += 1
            i += size
        else:
            out.append(units[i])
            i += 1
    return out, hits


def substitute_digraphs(chars: str, num_chars: int) -> Tuple[List[Unit], int]:
    units: List[Unit] = list(chars)
    for pattern, placeholder in DIGRAPHS:
        units, hits = _replace(units, pattern, placeholder)
        num_chars -= hits * (len(pattern) - 1)
    return units, num_chars


def collapse_repeats(units: List[Unit]) -> List[Unit]:
    out: List[Unit] = []
    for unit in units:
        if out and out[-1] == unit:
            out.append(Placeholder.REPEAT)
        else:
            out.append(unit)
    return out


def _ends_with(units: List[Unit], suffix: str) -> bool:
    return len(units) >= len(suffix) and units[len(units) - len(suffix):] == list(suffix)


def reduce(chars: str, num_chars: int, upper: bool, case_insensitive: bool = False) -> Tuple[List[Unit], int]:
    """Strip suffixes from an already normalized word.

    Returns the retained units and the number of trailing characters of
    ``chars`` that were removed. Every rule removes literal characters
    only, so ``chars[:len(chars) - removed]`` is the retained stem.
    """
    units, num_chars = substitute_digraphs(chars, num_chars)
    units = collapse_repeats(units)

    removed = 0
    while num_chars > MIN_CHARS:
        if num_chars > 5 and any(_ends_with(units, s) for s in ("em", "er", "nd")):
            strip = 2
        elif (not upper or case_insensitive) and _ends_with(units, "t"):
            strip = 1
        elif any(_ends_with(units, s) for s in ("e", "s", "n")):
            strip = 1
        else:
            break
        del units[-strip:]
        removed += strip
        num_chars -= strip
    return units, removed


def restore(units: List[Unit]) -> str:
    out: List[str] = []
    previous = ""
    for unit in units:
        if unit is Placeholder.REPEAT:
            text = previous
        elif isinstance(unit, Placeholder):
            text = unit.value
        else:
            text = unit
        out.append(text)
        previous = text
    return "".join(out)


def stem(word: str, case_insensitive: bool = False) -> str:
    """Return the stem of ``word``.

    Case-insensitive stemming only pays off when words in the text may be
    wrongly upper case; for correctly cased text use the default.

    >>> stem("schönes")
    'schon'
    """
    if not word:
        return ""
    normalized, num_chars, upper = normalize(word)
    normalized, num_chars, _ = trim_prefix(normalized, num_chars)
    units, _ = reduce(normalized, num_chars, upper, case_insensitive)
    return restore(units)


def segment(word: str, case_insensitive: bool = False) -> Tuple[str, str]:
    """Split ``word`` into stem and removed ending.

    Only lowercasing is applied, so the two parts always concatenate to
    ``word.lower()``.

    >>> segment("schönes")
    ('schön', 'es')
    """
    if not word:
        return "", ""
    upper = word[0].isupper()
    lowered = word.lower()
    _, removed = reduce(lowered, len(lowered), upper, case_insensitive)
    end = len(lowered) - removed
    return lowered[:end], lowered[end:]


class Cistem:
    def __init__(self, case_insensitive: bool = False):
        self.case_insensitive = case_insensitive

    def stem(self, word: str) -> str:
        return stem(word, self.case_insensitive)

    def segment(self, word: str) -> Tuple[str, str]:
        return segment(word, self.case_insensitive)


def tokenize(text: str) -> List[str]:
    return TOKEN_PATTERN.findall(text)


def stem_text(text: str, case_insensitive: bool = False) -> List[str]:
    return [stem(tok, case_insensitive) for tok in tokenize(text)]


_cistem = Cistem()


def cistem_token(token: str) -> str:
    """Return the stem of a single word."""
    return _cistem.stem(token)


def cistem_tokens(tokens: List[str]) -> List[str]:
    """Stem every token in a list."""
    return [cistem_token(t) for t in tokens]
