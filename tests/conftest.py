# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest

from depot_gbk.classifier import ClassifierContext


@pytest.fixture
def ctx() -> ClassifierContext:
    """A fresh per-call classifier context."""
    return ClassifierContext()


@pytest.fixture
def german_text() -> str:
    return (
        "Die Größe des Gebäudes überraschte die Besucher. "
        "Natürlich können wir das ändern."
    )


@pytest.fixture
def chinese_text() -> str:
    return "我们在这个问题上有很多不同的看法，但是大家都认为中国的发展很重要。"  # noqa: RUF001
