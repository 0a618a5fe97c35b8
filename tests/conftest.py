"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxscan.scanner import tokenize
from loxscan.tokens import Kind, Token


@pytest.fixture
def scan():
    """Return a helper that scans source and returns the token list."""

    def _scan(source: str) -> list[Token]:
        return tokenize(source, "test.lox")

    return _scan


def assert_kinds(tokens: list[Token], expected: list[Kind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token payloads match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
