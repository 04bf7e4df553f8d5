"""Predicates for telling Latin binomials apart from Swedish free text."""

import re

# Genus (either case initial) + lowercase epithet, nothing else
_LATIN_BINOMIAL = re.compile(r"^[A-Za-z]+ [a-z]+$")

# Capital-initial two-word prefix, the shape users type when entering a Latin name
_LATIN_SHAPED_INPUT = re.compile(r"^[A-Z][a-z]+ [a-z]+")

SWEDISH_LETTERS = frozenset("åäöÅÄÖ")


def is_valid_latin_name(candidate: str) -> bool:
    """Check whether a string is a well-formed two-word Latin species name.

    Swedish letters are rejected so that two-word Swedish names such as
    "blåfotad sula" are never mistaken for a binomial.

    Args:
        candidate: Name to check

    Returns:
        True if the trimmed candidate is "Genus species" and free of å/ä/ö
    """
    if any(letter in SWEDISH_LETTERS for letter in candidate):
        return False
    return _LATIN_BINOMIAL.match(candidate.strip()) is not None


def looks_like_latin_name(candidate: str) -> bool:
    """Check whether user input is shaped like a Latin name ("Sula nebouxii")."""
    return _LATIN_SHAPED_INPUT.match(candidate.strip()) is not None
