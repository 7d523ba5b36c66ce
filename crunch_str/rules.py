"""
Shortening rules: the substitution table and the character patterns.

Every rule answers the same question for a single word: "which span of
this text can go next?" The Word class tries them in a fixed order and
applies the first that matches.

Letters are ASCII letters. Anything else (digits, accented letters,
symbols) is neither vowel nor consonant and only goes away through
punctuation removal, substitution, or the initial/acronym fallbacks.
"""

import re
import string


# ── Tunables ────────────────────────────────────────────────────────────────

SUBSTITUTION_BONUS = 10     # substitutable words jump ahead of same-length words
INITIAL_THRESHOLD = 2       # at or below this length a stuck word becomes an initial


# ── Substitution table ──────────────────────────────────────────────────────
# Whole lowercase words -> shorter casual forms. Consulted before any
# character-level rule; a hit is usually the cheapest readable saving.

SUBSTITUTIONS = {
    # numbers
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",

    # text speak
    "and": "&",
    "are": "r",
    "be": "b",
    "for": "4",
    "our": "r",
    "to": "2",
    "why": "y",
    "you": "u",
    "your": "ur",

    # misc
    "make": "mk",
}


# ── Character patterns ──────────────────────────────────────────────────────

DOUBLE_LETTER_RE = re.compile(
    "|".join(c * 2 for c in string.ascii_lowercase),
    flags=re.IGNORECASE,
)

# Lazy leading run: the leftmost candidate with a letter on both sides wins.
INNER_VOWEL_RE = re.compile(r"\b[a-zA-Z]+?([aeiouyAEIOUY])[a-zA-Z]+\b")
TRAILING_VOWEL_RE = re.compile(r"\b[a-zA-Z]+?([aeiouAEIOU])\b")
INNER_CONSONANT_RE = re.compile(
    r"\b[a-zA-Z]+?([bcdfghjklmnpqrstvwxzBCDFGHJKLMNPQRSTVWXZ])[a-zA-Z]+\b"
)

PUNCTUATION_RE = re.compile(r"[.,!?:]")


# ── Measuring ───────────────────────────────────────────────────────────────
# Lengths are UTF-8 bytes. Case changes touch ASCII only, so they never
# change a length.

def byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def ascii_upper(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


def find_double_letter(text: str):
    """Span of the first doubled letter's second half, or None."""
    match = DOUBLE_LETTER_RE.search(text)
    if match is None:
        return None
    return match.start() + 1, match.end()


def _captured_span(pattern, text):
    match = pattern.search(text)
    if match is None:
        return None
    return match.span(1)


def find_inner_vowel(text: str):
    return _captured_span(INNER_VOWEL_RE, text)


def find_trailing_vowel(text: str):
    return _captured_span(TRAILING_VOWEL_RE, text)


def find_inner_consonant(text: str):
    return _captured_span(INNER_CONSONANT_RE, text)


def find_punctuation(text: str):
    match = PUNCTUATION_RE.search(text)
    if match is None:
        return None
    return match.span()


# Character rules in the order Word.shorten tries them.
CHARACTER_RULES = (
    ("double_letter", find_double_letter),
    ("inner_vowel", find_inner_vowel),
    ("trailing_vowel", find_trailing_vowel),
    ("inner_consonant", find_inner_consonant),
    ("punctuation", find_punctuation),
)


def build_substitutions(extra=None):
    """Merge extra substitutions over the built-in table.

    Keys are lowercased. A replacement must be strictly shorter than the
    word it replaces, otherwise substitution could grow a word or cycle
    forever, so such entries raise ValueError.

    Returns:
        dict mapping lowercase word -> replacement
    """
    table = dict(SUBSTITUTIONS)
    if not extra:
        return table

    for word, replacement in extra.items():
        if not isinstance(word, str) or not isinstance(replacement, str):
            raise ValueError(f"substitution entries must be strings: {word!r} -> {replacement!r}")
        key = word.lower()
        if not key or byte_len(replacement) >= byte_len(key):
            raise ValueError(
                f"substitution for {word!r} must be shorter than the word, got {replacement!r}"
            )
        table[key] = replacement
    return table
