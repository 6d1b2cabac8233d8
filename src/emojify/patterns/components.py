#!/usr/bin/env python3
"""Data constants and helper functions for emoji patterns.

Shortcodes and unicode sequences come from ``EMOJI_DATA`` of the ``emoji``
package, with emojione display names layered on top so rendered titles keep
the emojione spelling. The ASCII emoticon table is bundled here. This is the
foundation layer with no regex pattern compilation.

Canonical codepoint sequences are lowercase hex codepoints joined with
``-``, e.g. ``"1f600"`` or ``"1f1fa-1f1f8"``.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from emoji.unicode_codes import EMOJI_DATA, STATUS

VARIATION_SELECTOR_16 = "fe0f"


# ==============================================================================
# SHORTCODES
# ==============================================================================

# emojione display names; they win over the emoji package's names, and the
# first name listed for a sequence is its title
EMOJIONE_SHORTCODES: Dict[str, str] = {
    # Smileys
    ":smile:": "1f604",
    ":slight_smile:": "1f642",
    ":upside_down:": "1f643",
    ":rofl:": "1f923",
    ":money_mouth:": "1f911",
    ":hugging:": "1f917",
    ":thinking:": "1f914",
    ":zipper_mouth:": "1f910",
    ":rolling_eyes:": "1f644",
    ":nerd:": "1f913",
    ":confused:": "1f615",
    ":slight_frown:": "1f641",
    ":frowning2:": "2639-fe0f",
    ":head_bandage:": "1f915",
    ":thermometer_face:": "1f912",
    ":poop:": "1f4a9",
    ":clown:": "1f921",
    ":robot:": "1f916",
    # People & gestures
    ":wave:": "1f44b",
    ":thumbsup:": "1f44d",
    ":thumbsup_tone1:": "1f44d-1f3fb",
    ":thumbsup_tone3:": "1f44d-1f3fd",
    ":thumbsdown:": "1f44e",
    ":metal:": "1f918",
    ":man_technologist:": "1f468-200d-1f4bb",
    ":woman_technologist:": "1f469-200d-1f4bb",
    ":family_mwg:": "1f468-200d-1f469-200d-1f467",
    # Symbols
    ":heart:": "2764-fe0f",
    ":fire:": "1f525",
    ":x:": "274c",
    ":hash:": "0023-fe0f-20e3",
    ":asterisk:": "002a-fe0f-20e3",
    ":one:": "0031-fe0f-20e3",
    # Animals & food
    ":t_rex:": "1f996",
    ":unicorn:": "1f984",
    ":pizza:": "1f355",
    ":tada:": "1f389",
    # Flags
    ":flag_us:": "1f1fa-1f1f8",
    ":flag_gb:": "1f1ec-1f1e7",
    ":rainbow_flag:": "1f3f3-fe0f-200d-1f308",
    # Aliases
    ":+1:": "1f44d",
    ":-1:": "1f44e",
    ":thumbup:": "1f44d",
    ":thumbdown:": "1f44e",
    ":shit:": "1f4a9",
    ":us:": "1f1fa-1f1f8",
    ":gb:": "1f1ec-1f1e7",
}

# Shortcode notation: a colon-wrapped word, also allowing "+1"/"-1" style names
SHORTCODE_PATTERN = r":[\w+-]+:"


# ==============================================================================
# ASCII EMOTICONS
# ==============================================================================

# (emoticon, canonical codepoints); table order decides ties
ASCII_EMOTICONS: List[Tuple[str, str]] = [
    ("<3", "2764-fe0f"),
    ("</3", "1f494"),
    (":')", "1f602"),
    (":'-)", "1f602"),
    (":D", "1f603"),
    (":-D", "1f603"),
    ("=D", "1f603"),
    (":)", "1f642"),
    (":-)", "1f642"),
    ("=]", "1f642"),
    ("=)", "1f642"),
    (":]", "1f642"),
    ("':)", "1f605"),
    ("':-)", "1f605"),
    ("'=)", "1f605"),
    ("':D", "1f605"),
    ("'=D", "1f605"),
    (">:)", "1f606"),
    (">;)", "1f606"),
    (">:-)", "1f606"),
    (">=)", "1f606"),
    (";)", "1f609"),
    (";-)", "1f609"),
    ("*-)", "1f609"),
    ("*)", "1f609"),
    (";-]", "1f609"),
    (";]", "1f609"),
    (";D", "1f609"),
    (";^)", "1f609"),
    ("':(", "1f613"),
    ("':-(", "1f613"),
    ("'=(", "1f613"),
    (":*", "1f618"),
    (":-*", "1f618"),
    ("=*", "1f618"),
    (":^*", "1f618"),
    (">:P", "1f61c"),
    ("X-P", "1f61c"),
    (">:[", "1f61e"),
    (":-(", "1f61e"),
    (":(", "1f61e"),
    (":-[", "1f61e"),
    (":[", "1f61e"),
    ("=(", "1f61e"),
    (">:(", "1f620"),
    (">:-(", "1f620"),
    (":@", "1f620"),
    (":'(", "1f622"),
    (":'-(", "1f622"),
    (";(", "1f622"),
    (";-(", "1f622"),
    (">.<", "1f623"),
    ("D:", "1f628"),
    (":$", "1f633"),
    ("=$", "1f633"),
    ("#-)", "1f635"),
    ("#)", "1f635"),
    ("%-)", "1f635"),
    ("%)", "1f635"),
    ("X)", "1f635"),
    ("X-)", "1f635"),
    ("*\\0/*", "1f646"),
    ("\\0/", "1f646"),
    ("*\\O/*", "1f646"),
    ("\\O/", "1f646"),
    ("O:-)", "1f607"),
    ("0:-3", "1f607"),
    ("0:3", "1f607"),
    ("0:-)", "1f607"),
    ("0:)", "1f607"),
    ("0;^)", "1f607"),
    ("O:)", "1f607"),
    ("O;-)", "1f607"),
    ("O=)", "1f607"),
    ("0;-)", "1f607"),
    ("O:-3", "1f607"),
    ("O:3", "1f607"),
    ("B-)", "1f60e"),
    ("B)", "1f60e"),
    ("8)", "1f60e"),
    ("8-)", "1f60e"),
    ("B-D", "1f60e"),
    ("8-D", "1f60e"),
    ("-_-", "1f611"),
    ("-__-", "1f611"),
    ("-___-", "1f611"),
    (">:\\", "1f615"),
    (">:/", "1f615"),
    (":-/", "1f615"),
    (":-.", "1f615"),
    (":/", "1f615"),
    (":\\", "1f615"),
    ("=/", "1f615"),
    ("=\\", "1f615"),
    (":L", "1f615"),
    ("=L", "1f615"),
    (":P", "1f61b"),
    (":-P", "1f61b"),
    ("=P", "1f61b"),
    (":-p", "1f61b"),
    (":p", "1f61b"),
    ("=p", "1f61b"),
    (":b", "1f61b"),
    (":-b", "1f61b"),
    (">:O", "1f62e"),
    (":-O", "1f62e"),
    (":O", "1f62e"),
    (":-o", "1f62e"),
    (":o", "1f62e"),
    ("O_O", "1f62e"),
    (":-X", "1f636"),
    (":X", "1f636"),
    (":-#", "1f636"),
    (":#", "1f636"),
    ("=X", "1f636"),
    ("=x", "1f636"),
    (":x", "1f636"),
    (":-x", "1f636"),
    ("=#", "1f636"),
    (":|", "1f610"),
    (":-|", "1f610"),
]


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def codepoints_to_unicode(codepoints: str) -> str:
    """Turn ``"1f1fa-1f1f8"`` into the literal emoji string."""
    return "".join(chr(int(part, 16)) for part in codepoints.split("-"))


def unicode_to_codepoints(text: str) -> str:
    """Turn a literal emoji string into its hyphen-joined hex codepoints."""
    return "-".join(f"{ord(char):04x}" for char in text)


def strip_variation_selectors(codepoints: str) -> str:
    """Drop U+FE0F from a codepoint sequence (the unqualified form)."""
    return "-".join(part for part in codepoints.split("-") if part != VARIATION_SELECTOR_16)


def build_unicode_table(canonical_sequences: Iterable[str]) -> Dict[str, str]:
    """Map literal unicode sequences to their canonical codepoints.

    Fully-qualified sequences also get their unqualified variant so both
    spellings normalize to one canonical form.
    """
    table: Dict[str, str] = {}
    for codepoints in canonical_sequences:
        table.setdefault(codepoints_to_unicode(codepoints), codepoints)
        unqualified = strip_variation_selectors(codepoints)
        if unqualified and unqualified != codepoints:
            table.setdefault(codepoints_to_unicode(unqualified), codepoints)
    return table


def create_alternation_pattern(items: Iterable[str]) -> str:
    """Create a regex alternation from literal strings, longest first."""
    ordered = sorted({item for item in items if item}, key=lambda item: (-len(item), item))
    escaped_items = [re.escape(item) for item in ordered]
    return "|".join(escaped_items)


# ==============================================================================
# EMOJI DATA
# ==============================================================================

FULLY_QUALIFIED = STATUS["fully_qualified"]

_SHORTCODE_RE = re.compile(SHORTCODE_PATTERN)


def build_shortcode_table(
    emoji_data: Mapping[str, Mapping[str, Any]], preferred: Mapping[str, str] = EMOJIONE_SHORTCODES
) -> Dict[str, str]:
    """Map shortcodes to canonical codepoints.

    ``preferred`` names come first. Then every fully-qualified (or component)
    entry contributes its ``en`` name and its aliases. Names the shortcode
    notation cannot express, such as ``:keycap_#:``, are skipped.
    """
    table = dict(preferred)
    for sequence, data in emoji_data.items():
        if data["status"] > FULLY_QUALIFIED:
            continue
        codepoints = unicode_to_codepoints(sequence)
        for name in (data["en"], *data.get("alias", ())):
            if _SHORTCODE_RE.fullmatch(name):
                table.setdefault(name, codepoints)
    return table


def build_sequence_table(emoji_data: Mapping[str, Mapping[str, Any]]) -> Dict[str, str]:
    """Map every spelling in ``emoji_data`` to its fully-qualified codepoints.

    Minimally-qualified and unqualified entries share the ``en`` name of
    their fully-qualified form, which is how they are resolved.
    """
    qualified = {data["en"]: sequence for sequence, data in emoji_data.items() if data["status"] <= FULLY_QUALIFIED}

    table: Dict[str, str] = {}
    for sequence, data in emoji_data.items():
        canonical = sequence if data["status"] <= FULLY_QUALIFIED else qualified.get(data["en"], sequence)
        table[sequence] = unicode_to_codepoints(canonical)
    return table


SHORTCODES: Dict[str, str] = build_shortcode_table(EMOJI_DATA)
EMOJI_SEQUENCES: Dict[str, str] = build_sequence_table(EMOJI_DATA)
