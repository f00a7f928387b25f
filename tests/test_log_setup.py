import logging

import pytest

from utils.log_setup import resolve_level


def test_resolve_level_accepts_names_and_ints():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_resolve_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        resolve_level("chatty")
