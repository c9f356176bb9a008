"""Test doubles for swappable providers."""

from .container import build_test_container
from .persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
