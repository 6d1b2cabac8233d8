"""Emojify: turn shortcodes, unicode emoji and ASCII emoticons into emoji tokens."""

import logging

from .converter import EmojiConverter, emojify, get_default_converter
from .errors import ConfigError, EmojifyError
from .options import EmojifyOptions
from .patterns import PatternLibrary, default_library
from .renderers import EmojiElement, EmojiRenderer, Renderer, UnicodeRenderer, get_renderer
from .types import Notation, Token

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "EmojiConverter",
    "EmojiElement",
    "EmojiRenderer",
    "EmojifyError",
    "EmojifyOptions",
    "Notation",
    "PatternLibrary",
    "Renderer",
    "Token",
    "UnicodeRenderer",
    "default_library",
    "emojify",
    "get_default_converter",
    "get_renderer",
]
