"""Shared pytest fixtures."""

import pytest

from uri_utils.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Give every test a configuration built from its own environment."""
    reset_config()
    yield
    reset_config()
