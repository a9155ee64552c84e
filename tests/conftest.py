"""Shared test fixtures for harmony FCP tests."""

from __future__ import annotations

import pytest

from fcp_core import EventLog, ParsedOp as GenericParsedOp, parse_op

from fcp_harmony.adapter import HarmonyAdapter
from fcp_harmony.model.progression import Progression


@pytest.fixture
def adapter() -> HarmonyAdapter:
    return HarmonyAdapter()


@pytest.fixture
def log() -> EventLog:
    return EventLog()


@pytest.fixture
def progression(adapter: HarmonyAdapter) -> Progression:
    """Empty progression in C major."""
    return adapter.create_empty("Test Progression", {})


@pytest.fixture
def progression_with_chords(
    adapter: HarmonyAdapter, progression: Progression, log: EventLog,
) -> Progression:
    """C Am F G7, four beats each, in C major."""
    for raw in ("chord C", "chord Am", "chord F", "chord G7"):
        op = parse_op(raw)
        assert isinstance(op, GenericParsedOp)
        result = adapter.dispatch_op(op, progression, log)
        assert result.success, f"Failed to add chord: {result.message}"
    return progression
