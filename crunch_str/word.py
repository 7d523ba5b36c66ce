"""
A single token of crunchable text.

A Word owns one whitespace-delimited token and shrinks it one unit of
meaning per shorten() call. The trailing whitespace that followed the
token in the input is held aside so it never counts as shortenable
content but still comes back verbatim when the text is reassembled.
"""

from .rules import (
    CHARACTER_RULES,
    INITIAL_THRESHOLD,
    SUBSTITUTION_BONUS,
    SUBSTITUTIONS,
    ascii_upper,
    byte_len,
)


class Word:
    """One token plus its position in the input and its trailing whitespace.

    Usage:
        word = Word.from_token("bookkeeper ", order=0)
        word.shorten()   # -> 1, text is now "bokkeeper"
        str(word)        # -> "bokkeeper "
    """

    __slots__ = ("text", "order", "trailing_whitespace", "substitutions")

    def __init__(self, text: str, order: int, trailing_whitespace: str = "", substitutions=None):
        self.text = text
        self.order = order
        self.trailing_whitespace = trailing_whitespace
        self.substitutions = SUBSTITUTIONS if substitutions is None else substitutions

    @classmethod
    def from_token(cls, token: str, order: int, substitutions=None) -> "Word":
        """Split a raw token into its text and trailing whitespace."""
        text = token.rstrip()
        return cls(text, order, token[len(text):], substitutions)

    def __len__(self) -> int:
        """Length of the text in UTF-8 bytes, trailing whitespace excluded."""
        return byte_len(self.text)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Word({self.text!r}, order={self.order}, trailing_whitespace={self.trailing_whitespace!r})"

    def render(self) -> str:
        return self.text + self.trailing_whitespace

    def can_substitute(self) -> bool:
        return self.text.lower() in self.substitutions

    def priority(self) -> int:
        """Queue priority: current length, plus a bonus if a substitution applies."""
        if self.can_substitute():
            return len(self) + SUBSTITUTION_BONUS
        return len(self)

    def shorten(self) -> int:
        """Remove the least meaningful unit this word still has.

        Tries, in order: whole-word substitution, double-letter collapse,
        inner vowel, trailing vowel, inner consonant, punctuation. The first
        rule that matches is applied and the number of bytes removed is
        returned.

        When nothing matches and the word is short enough, it collapses to
        its initial (ASCII uppercased) and drops its trailing whitespace. That is
        terminal and reports 0, as does a word nothing can touch.
        """
        if not self.text:
            return 0

        replacement = self.substitutions.get(self.text.lower())
        if replacement is not None:
            saved = len(self) - byte_len(replacement)
            self.text = replacement
            return saved

        for _, find in CHARACTER_RULES:
            span = find(self.text)
            if span is not None:
                start, end = span
                removed = byte_len(self.text[start:end])
                self.text = self.text[:start] + self.text[end:]
                return removed

        if len(self) <= INITIAL_THRESHOLD:
            self.text = ascii_upper(self.text[0])
            self.trailing_whitespace = ""

        return 0
