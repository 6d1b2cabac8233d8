#!/usr/bin/env python3
"""Read-only pattern library over the three emoji notations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern
from types import MappingProxyType
from typing import Iterable, Mapping

from .components import (
    ASCII_EMOTICONS,
    EMOJI_SEQUENCES,
    SHORTCODE_PATTERN,
    SHORTCODES,
    build_unicode_table,
    codepoints_to_unicode,
    create_alternation_pattern,
)


@dataclass(frozen=True)
class EmoticonRule:
    """One ASCII emoticon and the canonical codepoints it stands for."""

    emoticon: str
    codepoints: str
    pattern: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", re.compile(re.escape(self.emoticon)))

    def matches_whole(self, fragment: str) -> bool:
        """True only when the fragment is exactly one instance of the emoticon."""
        return self.pattern.fullmatch(fragment) is not None


class PatternLibrary:
    """Static emoji tables plus the alternation strings derived from them.

    Tables are assumed pre-validated: unique keys, no empty codepoints.
    ``sequences`` adds unicode spellings (text to canonical codepoints) beyond
    those derived from the shortcode and emoticon tables.
    """

    def __init__(
        self,
        shortcodes: Mapping[str, str],
        ascii_emoticons: Iterable[tuple[str, str]],
        shortcode_pattern: str = SHORTCODE_PATTERN,
        sequences: Mapping[str, str] | None = None,
    ):
        self.shortcodes: Mapping[str, str] = MappingProxyType(dict(shortcodes))
        self.ascii_rules: tuple[EmoticonRule, ...] = tuple(
            EmoticonRule(emoticon, codepoints) for emoticon, codepoints in ascii_emoticons
        )

        canonical = list(dict.fromkeys([*self.shortcodes.values(), *(r.codepoints for r in self.ascii_rules)]))
        unicodes = build_unicode_table(canonical)
        for sequence, codepoints in (sequences or {}).items():
            unicodes.setdefault(sequence, codepoints)
        self.unicodes: Mapping[str, str] = MappingProxyType(unicodes)

        # First shortcode listed for a sequence is its display name
        names: dict[str, str] = {}
        for shortcode, codepoints in self.shortcodes.items():
            names.setdefault(codepoints, shortcode)
        self._names: Mapping[str, str] = MappingProxyType(names)

        self.shortcode_pattern = shortcode_pattern if self.shortcodes else ""
        self.unicode_pattern = create_alternation_pattern(self.unicodes)
        self.ascii_pattern = create_alternation_pattern(rule.emoticon for rule in self.ascii_rules)

    @classmethod
    def from_tables(
        cls,
        shortcodes: Mapping[str, str],
        ascii_emoticons: Iterable[tuple[str, str]] = (),
        sequences: Mapping[str, str] | None = None,
    ) -> "PatternLibrary":
        return cls(shortcodes, ascii_emoticons, sequences=sequences)

    @property
    def unicode_sequences(self) -> frozenset[str]:
        return frozenset(self.unicodes)

    def shortcode_for(self, codepoints: str) -> str | None:
        """Primary shortcode for a canonical sequence, if one is known."""
        return self._names.get(codepoints)

    def shortcode_to_unicode(self, shortcode: str) -> str | None:
        codepoints = self.shortcodes.get(shortcode)
        return codepoints_to_unicode(codepoints) if codepoints else None

    def __repr__(self) -> str:
        return (
            f"PatternLibrary(shortcodes={len(self.shortcodes)}, "
            f"unicodes={len(self.unicodes)}, ascii_rules={len(self.ascii_rules)})"
        )


_DEFAULT_LIBRARY: PatternLibrary | None = None


def default_library() -> PatternLibrary:
    """Process-wide library over the emoji package data and the bundled emoticons."""
    global _DEFAULT_LIBRARY
    if _DEFAULT_LIBRARY is None:
        _DEFAULT_LIBRARY = PatternLibrary(SHORTCODES, ASCII_EMOTICONS, sequences=EMOJI_SEQUENCES)
    return _DEFAULT_LIBRARY
