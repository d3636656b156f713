"""Byte statistics classifier stages and shared types."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Classification:
    """A single classifier verdict.

    Frozen dataclass holding the charset name, confidence score, and
    language returned by one stage of the classifier.  ``language`` stays
    ``None`` until the orchestrator fills it in.
    """

    charset: str
    confidence: float
    language: str | None


@dataclasses.dataclass(slots=True)
class ClassifierContext:
    """Per-call mutable state for a single classification.

    Created once at the start of ``run_pipeline()`` and passed down the call
    chain, so concurrent calls never share caches.
    """

    truncated: bool = False
    analysis_cache: dict[str, tuple[float, int, int]] = dataclasses.field(
        default_factory=dict
    )
    non_ascii_count: int = -1
