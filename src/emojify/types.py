"""Token types produced by the segmenter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Notation(str, Enum):
    """How a fragment was written in the source text."""

    LITERAL = "literal"
    SHORTCODE = "shortcode"
    UNICODE = "unicode"
    ASCII = "ascii"


# Renderer key prefixes per emoji notation
KEY_PREFIXES = {
    Notation.ASCII: "a",
    Notation.SHORTCODE: "s",
    Notation.UNICODE: "u",
}


@dataclass(frozen=True)
class Token:
    """One classified fragment of the input text.

    ``index`` is the fragment's position in the split sequence, not a
    character offset.
    """

    text: str
    index: int
    notation: Notation = Notation.LITERAL
    codepoints: str | None = None

    @property
    def is_emoji(self) -> bool:
        return self.notation is not Notation.LITERAL

    @property
    def key(self) -> str | None:
        """Stable per-call key handed to the renderer (e.g. ``"a-1"``)."""
        prefix = KEY_PREFIXES.get(self.notation)
        if prefix is None:
            return None
        return f"{prefix}-{self.index}"

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "index": self.index,
            "notation": self.notation.value,
            "codepoints": self.codepoints,
            "key": self.key,
        }
