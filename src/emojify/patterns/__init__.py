#!/usr/bin/env python3
"""Public API for emoji patterns.

Re-exports the data tables and helpers (components), the read-only
library over them (library) and the combined alternation builder
(builders).
"""

# ==============================================================================
# COMPONENTS - Data constants and helpers
# ==============================================================================
from .components import (
    ASCII_EMOTICONS,
    EMOJI_SEQUENCES,
    EMOJIONE_SHORTCODES,
    SHORTCODE_PATTERN,
    SHORTCODES,
    build_sequence_table,
    build_shortcode_table,
    build_unicode_table,
    codepoints_to_unicode,
    create_alternation_pattern,
    strip_variation_selectors,
    unicode_to_codepoints,
)

# ==============================================================================
# LIBRARY - Read-only views over the tables
# ==============================================================================
from .library import EmoticonRule, PatternLibrary, default_library

# ==============================================================================
# BUILDERS - Combined alternation patterns
# ==============================================================================
from .builders import CombinedPatternBuilder, build_combined_pattern, pattern_key

__all__ = [
    # Components
    "ASCII_EMOTICONS",
    "EMOJI_SEQUENCES",
    "EMOJIONE_SHORTCODES",
    "SHORTCODE_PATTERN",
    "SHORTCODES",
    "build_sequence_table",
    "build_shortcode_table",
    "build_unicode_table",
    "codepoints_to_unicode",
    "create_alternation_pattern",
    "strip_variation_selectors",
    "unicode_to_codepoints",
    # Library
    "EmoticonRule",
    "PatternLibrary",
    "default_library",
    # Builders
    "CombinedPatternBuilder",
    "build_combined_pattern",
    "pattern_key",
]
