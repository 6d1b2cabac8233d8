"""
Pytest configuration shared by all Emojify tests.

Keeps log files and user configuration out of the way before any emojify
module is imported.
"""

import os
import tempfile

import pytest

os.environ["EMOJIFY_LOG_DIR"] = tempfile.mkdtemp(prefix="emojify-test-logs-")
os.environ["EMOJIFY_CONFIG"] = os.path.join(os.environ["EMOJIFY_LOG_DIR"], "missing-config.toml")


@pytest.fixture
def converter():
    """A converter with its own empty caches."""
    from emojify.converter import EmojiConverter

    return EmojiConverter()


@pytest.fixture
def library():
    from emojify.patterns import default_library

    return default_library()
