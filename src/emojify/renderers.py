#!/usr/bin/env python3
"""Renderers turn a canonical codepoint sequence into an output unit.

A renderer is any callable ``(codepoints, key) -> unit``. The converter
receives one per call and never builds output units itself. ``key`` is
unique within a call (``"a-1"``, ``"s-0"``) so it can serve as an identity
key for UI reconciliation.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from .options import EmojifyOptions
from .patterns.components import codepoints_to_unicode
from .patterns.library import PatternLibrary, default_library

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Renderer(Protocol):
    def __call__(self, codepoints: str, key: str) -> Any: ...


def css_property(name: str) -> str:
    """``backgroundImage`` -> ``background-image``."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


@dataclass(frozen=True)
class EmojiElement:
    """Structured emoji unit, the equivalent of a styled ``<span>``."""

    codepoints: str
    unicode: str
    key: str
    title: str | None = None
    class_name: str = ""
    style: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)
    on_click: Callable[..., Any] | None = field(default=None, hash=False, compare=False)

    def to_html(self) -> str:
        attrs = [f'class="{html.escape(self.class_name)}"']
        if self.title:
            attrs.append(f'title="{html.escape(self.title)}"')
        if self.style:
            css = "; ".join(f"{css_property(name)}: {value}" for name, value in self.style.items())
            attrs.append(f'style="{html.escape(css)}"')
        return f"<span {' '.join(attrs)}>{html.escape(self.unicode)}</span>"

    def __str__(self) -> str:
        return self.unicode


class UnicodeRenderer:
    """Renders the canonical unicode string itself."""

    def __call__(self, codepoints: str, key: str) -> str:
        return codepoints_to_unicode(codepoints)


class EmojiRenderer:
    """Renders :class:`EmojiElement` units closing over the call's options."""

    def __init__(self, options: EmojifyOptions, library: PatternLibrary | None = None):
        self.options = options
        self.library = library or default_library()

    def __call__(self, codepoints: str, key: str) -> EmojiElement:
        return EmojiElement(
            codepoints=codepoints,
            unicode=codepoints_to_unicode(codepoints),
            key=key,
            title=self.library.shortcode_for(codepoints),
            class_name=f"emojione emojione-{codepoints}",
            style=dict(self.options.style),
            on_click=self.options.on_click,
        )


def get_renderer(options: EmojifyOptions, library: PatternLibrary | None = None) -> Renderer:
    """Pick the renderer for the requested output mode."""
    if options.wants_unicode:
        return UnicodeRenderer()
    return EmojiRenderer(options, library)
