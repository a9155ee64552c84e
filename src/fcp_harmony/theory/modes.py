"""Mode derivation and mode pitch classes."""

from __future__ import annotations

from collections.abc import Sequence

from fcp_harmony.lib.mode_library import MODE_TEMPLATES, ModeFamily, ModeType


def derive_mode(parent_intervals: Sequence[int], degree: int) -> list[int]:
    """Rotate *parent_intervals* to start on the 1-based *degree*.

    Offsets are re-measured from the new first tone, mod 12, so
    ``derive_mode(major, 2)`` yields the dorian intervals.
    """
    n = len(parent_intervals)
    offset = parent_intervals[degree - 1]
    return [(parent_intervals[(i + degree - 1) % n] - offset) % 12 for i in range(n)]


def mode_pitch_classes(root: int, mode: ModeType) -> list[int]:
    return [(root + i) % 12 for i in MODE_TEMPLATES[mode].intervals]


def get_modes_by_parent() -> dict[ModeFamily, list[ModeType]]:
    """Group every mode type under its parent family, in declaration order."""
    groups: dict[ModeFamily, list[ModeType]] = {family: [] for family in ModeFamily}
    for mode, template in MODE_TEMPLATES.items():
        groups[template.parent].append(mode)
    return groups
