"""Shared fixtures for formatsignals tests."""

import pytest

import formatsignals


@pytest.fixture(scope="session")
def analyzer():
    """Build the default analyzer once for all tests."""
    return formatsignals.load()
