"""
Top-level crunching interface.

Shortens a string until it fits a target length, spending the cheapest
readability first:
    1. Substitutions (whole words -> casual short forms)
    2. Character removal (double letters, vowels, consonants, punctuation)
       longest-word-first, on the theory that a long word survives a
       missing letter better than a short one
    3. Initials, then an acronym of the whole string as a last resort

The result compresses text the way startups get named. It reads well on
strings you already know; maybe not so well on ones you see for the first
time.
"""

import heapq
import itertools
import logging
import re
from dataclasses import dataclass

from .rules import ascii_upper, build_substitutions, byte_len
from .word import Word

logger = logging.getLogger(__name__)

# A run of non-whitespace plus the whitespace after it. Leading whitespace
# becomes its own token with empty text.
TOKEN_RE = re.compile(r"\S+\s*|\s+")


@dataclass
class CrunchResult:
    """Result of a crunch with the numbers behind it."""
    text: str
    original_length: int
    crunched_length: int
    target: int
    used_acronym: bool = False

    @property
    def bytes_saved(self) -> int:
        return self.original_length - self.crunched_length

    @property
    def fits(self) -> bool:
        return self.crunched_length <= self.target

    @property
    def savings_pct(self) -> float:
        if not self.original_length:
            return 0.0
        return round(self.bytes_saved / self.original_length * 100, 1)


def tokenize(text: str, substitutions=None):
    """Split text into Words, keeping each token's trailing whitespace."""
    return [
        Word.from_token(token, order, substitutions)
        for order, token in enumerate(TOKEN_RE.findall(text))
    ]


def acronym(text: str) -> str:
    """First letter of every whitespace-separated token, ASCII uppercased."""
    return "".join(ascii_upper(token[0]) for token in text.split())


def crunch_with_stats(text: str, target: int, extra_substitutions=None) -> CrunchResult:
    """Crunch text down to target bytes and report how it went.

    Args:
        text: Input string (may be empty)
        target: Desired maximum length in UTF-8 bytes (non-negative)
        extra_substitutions: Optional {word: shorter_form} mapping layered
                             over the built-in substitution table

    Returns:
        CrunchResult. `fits` is False when even the acronym is too long.
    """
    if not isinstance(text, str):
        raise TypeError(f"crunch expects a string, got {type(text).__name__}")
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")

    original_length = byte_len(text)
    if original_length <= target:
        return CrunchResult(text, original_length, original_length, target)

    substitutions = build_substitutions(extra_substitutions)

    # Max-heap on priority; the push counter breaks ties first-in first-out.
    queue = []
    counter = itertools.count()

    def push(word):
        heapq.heappush(queue, (-word.priority(), next(counter), word))

    for word in tokenize(text, substitutions):
        push(word)

    finished = []
    total_size = original_length
    steps = 0

    # total_size only drops by what shorten() reports. Collapsing to an
    # initial clears whitespace without lowering it, so the loop keeps going
    # until every word is an initial even if the real text already fits.
    # The acronym outputs rely on this.
    while total_size > target and queue:
        _, _, word = heapq.heappop(queue)
        removed = word.shorten()
        steps += 1
        if removed > 0:
            total_size -= removed
            push(word)
        elif len(word) > 0:
            finished.append(word)

    finished.extend(entry[2] for entry in queue)
    finished.sort(key=lambda w: w.order)
    candidate = "".join(w.render() for w in finished)
    crunched_length = byte_len(candidate)

    used_acronym = False
    if crunched_length > target:
        candidate = acronym(candidate)
        crunched_length = byte_len(candidate)
        used_acronym = True

    logger.debug(
        "crunched %d -> %d bytes (target %d) in %d steps%s",
        original_length, crunched_length, target, steps,
        ", acronym fallback" if used_acronym else "",
    )

    return CrunchResult(
        text=candidate,
        original_length=original_length,
        crunched_length=crunched_length,
        target=target,
        used_acronym=used_acronym,
    )


def crunch(text: str, target: int, extra_substitutions=None) -> str:
    """Crunch a string: make it as short as it needs to be to fit target.

    Examples:
        >>> crunch("bookkeeper", 4)
        'bkpr'
        >>> crunch("how are your metrics?", 15)
        'how r ur mtrcs?'
        >>> crunch("'Twas brillig, and the slithy toves", 23)
        "'Ts blg, & the sthy tvs"
        >>> crunch("a very long string with a lot of words", 9)
        'AVLSWALOW'
    """
    return crunch_with_stats(text, target, extra_substitutions).text


def measure(text: str, targets, extra_substitutions=None) -> list:
    """Crunch the same text at several targets.

    Useful for picking a display width: shows how readable the text stays
    as the budget tightens.

    Returns:
        list of dicts, one per target, in the order given
    """
    rows = []
    for target in targets:
        result = crunch_with_stats(text, target, extra_substitutions)
        rows.append({
            "target": target,
            "text": result.text,
            "length": result.crunched_length,
            "bytes_saved": result.bytes_saved,
            "savings_pct": result.savings_pct,
            "fits": result.fits,
            "used_acronym": result.used_acronym,
        })
    return rows
