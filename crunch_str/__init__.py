"""
crunch-str: shorten strings to a target length, least meaningful letters first.

Substitutions, double letters, vowels, consonants and punctuation go in
that order, longest word first, with initials and an acronym as the last
resort. Built for squeezing descriptions into status bars and reports.
"""

__version__ = "0.1.0"

from .rules import SUBSTITUTIONS, build_substitutions
from .word import Word
from .substitution_pack import load_substitution_pack
from .crunch import crunch, crunch_with_stats, acronym, measure, CrunchResult
