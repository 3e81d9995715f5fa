"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.factories import SampleUsers

__all__ = [
    "SampleUsers",
]
