#!/usr/bin/env python3
"""Combined pattern builder.

Builds one capturing alternation over the enabled notations so a single
``re.split`` segments raw text. Alternatives are offered in the fixed order
shortcode, unicode, ascii; the regex engine tries them left to right, which
decides ties on overlapping literals.
"""

import logging
import re
from re import Pattern

from ..cache import MISSING, InsertOnlyCache
from .library import PatternLibrary

logger = logging.getLogger(__name__)

# Compiles, never matches: all-disabled conversion degrades to passthrough
NEVER_MATCH = "(?!)"


def pattern_key(enable_unicode: bool, enable_ascii: bool, enable_shortcode: bool) -> int:
    """3-bit cache key: unicode=1, ascii=2, shortcode=4."""
    return (1 if enable_unicode else 0) + (2 if enable_ascii else 0) + (4 if enable_shortcode else 0)


def build_combined_pattern(
    library: PatternLibrary, enable_unicode: bool, enable_ascii: bool, enable_shortcode: bool
) -> Pattern:
    """Compile the alternation for one combination of notations."""
    parts = [
        library.shortcode_pattern if enable_shortcode else "",
        library.unicode_pattern if enable_unicode else "",
        library.ascii_pattern if enable_ascii else "",
    ]
    alternation = "|".join(part for part in parts if part) or NEVER_MATCH
    return re.compile(f"({alternation})")


class CombinedPatternBuilder:
    """Lazily builds and caches combined patterns (at most 8)."""

    def __init__(self, library: PatternLibrary, cache: InsertOnlyCache[Pattern] | None = None):
        self.library = library
        self.cache: InsertOnlyCache[Pattern] = (
            cache if cache is not None else InsertOnlyCache("combined_pattern", max_entries=8)
        )

    def get_pattern(self, enable_unicode: bool, enable_ascii: bool, enable_shortcode: bool) -> Pattern:
        key = pattern_key(enable_unicode, enable_ascii, enable_shortcode)
        cached = self.cache.lookup(key)
        if cached is not MISSING:
            return cached

        pattern = build_combined_pattern(self.library, enable_unicode, enable_ascii, enable_shortcode)
        logger.debug(
            f"Compiled combined pattern {key:03b} "
            f"(shortcode={enable_shortcode}, unicode={enable_unicode}, ascii={enable_ascii})"
        )
        return self.cache.insert_if_absent(key, pattern)
