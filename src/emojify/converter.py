#!/usr/bin/env python3
"""Emoji conversion orchestrator.

This module provides the EmojiConverter class which drives the pipeline:

1. Merge options over the documented defaults
2. Fetch the combined pattern for the enabled notations (cached)
3. Segment and classify the text (ASCII results cached)
4. Hand each emoji token to the renderer and assemble the output

Nothing in the pipeline raises on text input; anything unrecognized passes
through as literal text.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from .ascii_matcher import AsciiMatcher
from .cache import InsertOnlyCache
from .options import EmojifyOptions
from .patterns.builders import CombinedPatternBuilder
from .patterns.library import PatternLibrary, default_library
from .renderers import Renderer, get_renderer
from .segmenter import Segmenter
from .types import Token

logger = logging.getLogger(__name__)

OptionsLike = Union[EmojifyOptions, Mapping[str, Any], None]


class EmojiConverter:
    """Converts text into literal strings and rendered emoji.

    The converter owns its two caches (combined patterns and ASCII matches);
    converters sharing a library can still be given separate caches.
    """

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        pattern_cache: Optional[InsertOnlyCache] = None,
        ascii_cache: Optional[InsertOnlyCache] = None,
    ):
        self.library = library or default_library()
        self.pattern_builder = CombinedPatternBuilder(self.library, pattern_cache)
        self.ascii_matcher = AsciiMatcher(self.library, ascii_cache)
        self.segmenter = Segmenter(self.library, self.ascii_matcher)

    def tokenize(self, text: Optional[str], options: OptionsLike = None, **overrides: Any) -> List[Token]:
        """Classify ``text`` without rendering."""
        merged = EmojifyOptions.merge(options, **overrides)
        if not text:
            return []
        return self._segment(text, merged)

    def convert(
        self,
        text: Optional[str],
        options: OptionsLike = None,
        renderer: Optional[Renderer] = None,
        **overrides: Any,
    ) -> Union[List[Any], str]:
        """Convert ``text`` into a rendered sequence, or a string for unicode output.

        Args:
            text: Text to convert
            options: EmojifyOptions or a mapping of option overrides
            renderer: Callable ``(codepoints, key) -> unit``; built from the
                options when omitted
            **overrides: Individual option overrides applied last

        """
        merged = EmojifyOptions.merge(options, **overrides)

        if not text:
            return "" if merged.wants_unicode else []

        tokens = self._segment(text, merged)
        render = renderer or get_renderer(merged, self.library)

        parts: List[Any] = [render(token.codepoints, token.key) if token.is_emoji else token.text for token in tokens]

        if merged.wants_unicode:
            return "".join(str(part) for part in parts)
        return parts

    def cache_info(self) -> dict[str, dict[str, Any]]:
        return {
            "patterns": self.pattern_builder.cache.info(),
            "ascii": self.ascii_matcher.cache.info(),
        }

    def _segment(self, text: str, options: EmojifyOptions) -> List[Token]:
        pattern = self.pattern_builder.get_pattern(
            options.convert_unicode, options.convert_ascii, options.convert_shortnames
        )
        tokens = self.segmenter.segment(text, pattern, options)
        logger.debug(
            f"Segmented {len(text)} chars into {len(tokens)} fragments ({sum(t.is_emoji for t in tokens)} emoji)"
        )
        return tokens


_DEFAULT_CONVERTER: Optional[EmojiConverter] = None


def get_default_converter() -> EmojiConverter:
    """Process-wide converter over the bundled pattern library."""
    global _DEFAULT_CONVERTER
    if _DEFAULT_CONVERTER is None:
        _DEFAULT_CONVERTER = EmojiConverter()
    return _DEFAULT_CONVERTER


def emojify(
    text: Optional[str], options: OptionsLike = None, renderer: Optional[Renderer] = None, **overrides: Any
) -> Union[List[Any], str]:
    """Convenience wrapper around the default converter."""
    return get_default_converter().convert(text, options, renderer, **overrides)
