"""Whole-fragment ASCII emoticon matching with memoization."""

from __future__ import annotations

from .cache import MISSING, InsertOnlyCache
from .patterns.library import PatternLibrary


class AsciiMatcher:
    """Decide whether a fragment is exactly one ASCII emoticon.

    Results, including confirmed misses, are cached by the exact fragment.
    The cache is unbounded: it grows with every distinct fragment seen.
    """

    def __init__(self, library: PatternLibrary, cache: InsertOnlyCache[str | None] | None = None):
        self.library = library
        self.cache: InsertOnlyCache[str | None] = cache if cache is not None else InsertOnlyCache("ascii_match")

    def match(self, fragment: str | None) -> str | None:
        """Return canonical codepoints for ``fragment`` or None."""
        if not fragment:
            return None

        cached = self.cache.lookup(fragment)
        if cached is not MISSING:
            return cached

        result = None
        for rule in self.library.ascii_rules:
            if rule.matches_whole(fragment):
                result = rule.codepoints
                break

        return self.cache.insert_if_absent(fragment, result)
