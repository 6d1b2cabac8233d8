"""Unit tests for the pattern library and its data helpers."""

import re

import pytest

from emoji.unicode_codes import STATUS

from emojify.patterns import (
    ASCII_EMOTICONS,
    SHORTCODES,
    build_sequence_table,
    build_shortcode_table,
    PatternLibrary,
    build_unicode_table,
    codepoints_to_unicode,
    create_alternation_pattern,
    strip_variation_selectors,
    unicode_to_codepoints,
)


class TestCodepointHelpers:
    """Test conversions between codepoint sequences and unicode text."""

    def test_single_codepoint(self):
        """Test a single-codepoint emoji."""
        assert codepoints_to_unicode("1f600") == "\U0001f600"
        assert unicode_to_codepoints("\U0001f600") == "1f600"

    def test_keycap_padded_to_four_digits(self):
        """Test that short codepoints are zero-padded like the emojione names."""
        assert unicode_to_codepoints("#\ufe0f\u20e3") == "0023-fe0f-20e3"

    def test_flag_sequence(self):
        """Test a regional indicator pair."""
        assert codepoints_to_unicode("1f1fa-1f1f8") == "\U0001f1fa\U0001f1f8"
        assert unicode_to_codepoints("\U0001f1fa\U0001f1f8") == "1f1fa-1f1f8"

    def test_strip_variation_selectors(self):
        """Test that FE0F is removed from qualified sequences."""
        assert strip_variation_selectors("2764-fe0f") == "2764"
        assert strip_variation_selectors("1f3f3-fe0f-200d-1f308") == "1f3f3-200d-1f308"
        assert strip_variation_selectors("1f600") == "1f600"


class TestUnicodeTable:
    """Test unicode table construction."""

    def test_qualified_and_unqualified_share_canonical_form(self):
        """Both spellings of the heart normalize to the qualified sequence."""
        table = build_unicode_table(["2764-fe0f"])
        assert table["\u2764\ufe0f"] == "2764-fe0f"
        assert table["\u2764"] == "2764-fe0f"

    def test_plain_sequence_has_one_entry(self):
        """Test that sequences without FE0F get a single entry."""
        table = build_unicode_table(["1f600"])
        assert table == {"\U0001f600": "1f600"}


class TestAlternationPattern:
    """Test the literal alternation helper."""

    def test_longest_alternative_wins(self):
        """Longer literals are offered before their prefixes."""
        pattern = re.compile(f"({create_alternation_pattern([':)', ':-)', '>:)'])})")
        assert pattern.findall(">:) :-) :)") == [">:)", ":-)", ":)"]

    def test_special_characters_are_escaped(self):
        """Regex metacharacters in literals match literally."""
        pattern = re.compile(create_alternation_pattern(["*\\0/*", "#\u20e3"]))
        assert pattern.fullmatch("*\\0/*")
        assert pattern.fullmatch("#\u20e3")
        assert not pattern.fullmatch("**0/*")

    def test_deterministic_order(self):
        """Same items in any order build the same alternation."""
        assert create_alternation_pattern(["b", "a", "cc"]) == create_alternation_pattern(["cc", "a", "b"])

    def test_empty_items_skipped(self):
        """Test that empty strings never become alternatives."""
        assert create_alternation_pattern(["", "x"]) == "x"
        assert create_alternation_pattern([]) == ""


class TestBundledTables:
    """Test properties of the bundled data."""

    def test_no_empty_codepoints(self):
        """No entry maps to an empty canonical sequence."""
        assert all(SHORTCODES.values())
        assert all(codepoints for _, codepoints in ASCII_EMOTICONS)

    def test_ascii_emoticons_unique(self):
        """Test that each emoticon appears once."""
        emoticons = [emoticon for emoticon, _ in ASCII_EMOTICONS]
        assert len(emoticons) == len(set(emoticons))

    def test_every_shortcode_has_a_unicode_spelling(self, library):
        """Every shortcode target is also reachable from unicode text."""
        unicode_targets = set(library.unicodes.values())
        for shortcode, codepoints in library.shortcodes.items():
            assert codepoints in unicode_targets, shortcode

    def test_ascii_emoticons_have_titles(self, library):
        """Emoticon targets resolve to a display name."""
        for rule in library.ascii_rules:
            assert library.shortcode_for(rule.codepoints) is not None, rule.emoticon


class TestPatternLibrary:
    """Test PatternLibrary views and lookups."""

    def test_tables_are_read_only(self, library):
        """Test that the table views reject mutation."""
        with pytest.raises(TypeError):
            library.shortcodes[":new:"] = "1f600"

    def test_primary_shortcode_wins_reverse_lookup(self, library):
        """Aliases never replace the primary display name."""
        assert library.shortcode_for("1f44d") == ":thumbsup:"
        assert library.shortcodes[":+1:"] == "1f44d"

    def test_shortcode_to_unicode(self, library):
        """Test shortcode to unicode conversion."""
        assert library.shortcode_to_unicode(":fire:") == "\U0001f525"
        assert library.shortcode_to_unicode(":not_an_emoji:") is None

    def test_ascii_rules_keep_table_order(self, library):
        """Test that rules follow the emoticon table order."""
        assert [rule.emoticon for rule in library.ascii_rules] == [e for e, _ in ASCII_EMOTICONS]

    def test_rule_matches_whole_fragment_only(self, library):
        """An emoticon rule never accepts a fragment that merely contains it."""
        smile = next(rule for rule in library.ascii_rules if rule.emoticon == ":)")
        assert smile.matches_whole(":)")
        assert not smile.matches_whole(":))")
        assert not smile.matches_whole("x:)")
        assert not smile.matches_whole(":) ")

    def test_unicode_sequences_view(self, library):
        """Test the set of literal sequences used for pattern construction."""
        sequences = library.unicode_sequences
        assert "\U0001f469\u200d\U0001f4bb" in sequences
        assert "\u2764" in sequences

    def test_custom_tables(self):
        """Test building a library from caller-supplied tables."""
        custom = PatternLibrary.from_tables({":wave:": "1f44b"}, [("o/", "1f44b")])
        assert custom.unicodes == {"\U0001f44b": "1f44b"}
        assert custom.shortcode_for("1f44b") == ":wave:"
        assert re.fullmatch(custom.ascii_pattern, "o/")

    def test_empty_tables_have_no_patterns(self):
        """Test that empty tables contribute nothing to the alternations."""
        empty = PatternLibrary.from_tables({}, [])
        assert empty.shortcode_pattern == ""
        assert empty.unicode_pattern == ""
        assert empty.ascii_pattern == ""


FAKE_EMOJI_DATA = {
    "\u2764\ufe0f": {"en": ":red_heart:", "status": STATUS["fully_qualified"], "alias": [":heart:"]},
    "\u2764": {"en": ":red_heart:", "status": STATUS["unqualified"]},
    "\U0001f3fd": {"en": ":medium_skin_tone:", "status": STATUS["component"]},
    "#\ufe0f\u20e3": {"en": ":keycap_#:", "status": STATUS["fully_qualified"]},
    "\U0001f40d": {"en": ":snake:", "status": STATUS["fully_qualified"]},
}


class TestEmojiData:
    """Test the tables built from emoji package data."""

    def test_shortcodes_from_names_and_aliases(self):
        """Both the name and its aliases map to the qualified sequence."""
        table = build_shortcode_table(FAKE_EMOJI_DATA, preferred={})
        assert table[":red_heart:"] == "2764-fe0f"
        assert table[":heart:"] == "2764-fe0f"
        assert table[":snake:"] == "1f40d"
        assert table[":medium_skin_tone:"] == "1f3fd"

    def test_inexpressible_names_skipped(self):
        """Names outside the shortcode notation never enter the table."""
        table = build_shortcode_table(FAKE_EMOJI_DATA, preferred={})
        assert ":keycap_#:" not in table

    def test_preferred_names_win(self):
        """Preferred entries keep their codepoints and come first."""
        table = build_shortcode_table(FAKE_EMOJI_DATA, preferred={":heart:": "1f496"})
        assert table[":heart:"] == "1f496"
        assert next(iter(table)) == ":heart:"

    def test_sequences_resolve_to_qualified_form(self):
        """Unqualified spellings map to the fully-qualified codepoints."""
        table = build_sequence_table(FAKE_EMOJI_DATA)
        assert table["\u2764"] == "2764-fe0f"
        assert table["\u2764\ufe0f"] == "2764-fe0f"
        assert table["#\ufe0f\u20e3"] == "0023-fe0f-20e3"

    def test_default_library_covers_emoji_package(self, library):
        """Emoji outside the emojione display names still resolve."""
        assert library.shortcodes[":snake:"] == "1f40d"
        assert library.unicodes["\U0001f40d"] == "1f40d"

    def test_skin_tone_and_zwj_sequences(self, library):
        """Modifier and ZWJ sequences are single unicode entries."""
        assert library.unicodes["\U0001f44d\U0001f3fd"] == "1f44d-1f3fd"
        assert library.unicodes["\U0001f469\U0001f3fd\u200d\U0001f4bb"] == "1f469-1f3fd-200d-1f4bb"
        assert library.shortcode_for("1f44d-1f3fd") == ":thumbsup_tone3:"

    def test_library_with_extra_sequences(self):
        """Extra spellings join the unicode table without replacing derived ones."""
        custom = PatternLibrary.from_tables(
            {":heart:": "2764-fe0f"}, sequences={"\u2764": "1f494", "\u2763": "2763-fe0f"}
        )
        assert custom.unicodes["\u2764"] == "2764-fe0f"
        assert custom.unicodes["\u2763"] == "2763-fe0f"
