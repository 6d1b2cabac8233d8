#!/usr/bin/env python3
"""Segmentation and per-fragment classification.

Text is split against the combined pattern so notation matches stay in place
between literal fragments. Each fragment is then classified in order:

1. ASCII emoticon, only when whitespace context makes it eligible
2. Shortcode (exact table key)
3. Unicode sequence (exact table key)
4. Literal text

ASCII emoticons collide with ordinary punctuation far more often than the
other notations, so they must stand as their own "word": bounded by
whitespace or by the string edges.
"""

from re import Pattern
from typing import List, Sequence

from .ascii_matcher import AsciiMatcher
from .options import EmojifyOptions
from .patterns.library import PatternLibrary
from .types import Notation, Token


def split_fragments(text: str, pattern: Pattern) -> List[str]:
    """Split ``text`` keeping captured matches, dropping empty pieces."""
    return [fragment for fragment in pattern.split(text) if fragment]


def _starts_with_space(fragment: str) -> bool:
    return fragment[:1].isspace()


def _ends_with_space(fragment: str) -> bool:
    return fragment[-1:].isspace()


def is_ascii_eligible(fragments: Sequence[str], index: int) -> bool:
    """Check the whitespace context of the fragment at ``index``."""
    if len(fragments) == 1:
        # The whole input is the candidate
        return True
    if index == 0:
        return _starts_with_space(fragments[1])
    if index == len(fragments) - 1:
        return _ends_with_space(fragments[index - 1])
    return _ends_with_space(fragments[index - 1]) and _starts_with_space(fragments[index + 1])


class Segmenter:
    """Split text into classified tokens."""

    def __init__(self, library: PatternLibrary, ascii_matcher: AsciiMatcher):
        self.library = library
        self.ascii_matcher = ascii_matcher

    def classify(self, fragments: Sequence[str], index: int, options: EmojifyOptions) -> Token:
        fragment = fragments[index]

        if options.convert_ascii and is_ascii_eligible(fragments, index):
            codepoints = self.ascii_matcher.match(fragment)
            if codepoints:
                return Token(fragment, index, Notation.ASCII, codepoints)

        if options.convert_shortnames and fragment in self.library.shortcodes:
            return Token(fragment, index, Notation.SHORTCODE, self.library.shortcodes[fragment])

        if options.convert_unicode and fragment in self.library.unicodes:
            return Token(fragment, index, Notation.UNICODE, self.library.unicodes[fragment])

        return Token(fragment, index)

    def segment(self, text: str, pattern: Pattern, options: EmojifyOptions) -> List[Token]:
        fragments = split_fragments(text, pattern)
        return [self.classify(fragments, index, options) for index in range(len(fragments))]
