#!/usr/bin/env python3
"""Custom exceptions for Emojify.

Conversion itself never raises on text input; these cover the
configuration surface around it.
"""


class EmojifyError(Exception):
    """Base exception for Emojify errors."""


class ConfigError(EmojifyError):
    """Exception for unreadable or invalid configuration."""
