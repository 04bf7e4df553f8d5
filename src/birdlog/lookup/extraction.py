"""Latin-name extraction from encyclopedia introductions.

Used only when a page has no usable Wikidata item. Rules are tried in order
and the first one whose match passes the Latin-name validator wins; later
rules are never consulted.
"""

import re
from dataclasses import dataclass

from birdlog.lookup.validation import is_valid_latin_name


@dataclass(frozen=True)
class LatinNameRule:
    """A named pattern whose first group captures a candidate binomial."""

    name: str
    pattern: re.Pattern[str]

    def extract(self, text: str) -> str | None:
        """Return the validated candidate at the first match, if any."""
        match = self.pattern.search(text)
        if match and is_valid_latin_name(match.group(1)):
            return match.group(1)
        return None


LATIN_NAME_RULES: tuple[LatinNameRule, ...] = (
    # "Knölsvan (Cygnus olor) är en ..."
    LatinNameRule("parenthetical", re.compile(r"\(([A-Z][a-z]+ [a-z]+(?:\s+[a-z]+)?)\)")),
    # "knölsvan, Cygnus olor, ..."
    LatinNameRule("comma_separated", re.compile(r",\s*([A-Z][a-z]+ [a-z]+)")),
    LatinNameRule(
        "scientific_marker_sv",
        re.compile(r"vetenskapliga namnet?\s*[:\s]*([A-Z][a-z]+ [a-z]+)", re.IGNORECASE),
    ),
    LatinNameRule(
        "latin_marker",
        re.compile(r"latin(?:skt)?\s*[:\s]*([A-Z][a-z]+ [a-z]+)", re.IGNORECASE),
    ),
    LatinNameRule(
        "scientific_marker_en",
        re.compile(r"scientific name[:\s]+([A-Z][a-z]+ [a-z]+)", re.IGNORECASE),
    ),
    # Bare binomials, keyed on common genus endings
    LatinNameRule("genus_us", re.compile(r"\b([A-Z][a-z]+us\s+[a-z]+)\b")),
    LatinNameRule("genus_a", re.compile(r"\b([A-Z][a-z]+a\s+[a-z]+)\b")),
    LatinNameRule("genus_is", re.compile(r"\b([A-Z][a-z]+is\s+[a-z]+)\b")),
)


def extract_latin_name(
    text: str, rules: tuple[LatinNameRule, ...] = LATIN_NAME_RULES
) -> str | None:
    """Extract a Latin binomial from plain text.

    Args:
        text: Introductory plain-text extract of an encyclopedia page
        rules: Ordered rules to try

    Returns:
        Lower-cased binomial from the first matching rule, or None
    """
    for rule in rules:
        candidate = rule.extract(text)
        if candidate:
            return candidate.lower()
    return None
