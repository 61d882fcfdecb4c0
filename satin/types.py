"""Shared result structures used across the solvers and the report writer."""

from __future__ import annotations

from typing import NamedTuple

SATURATION_SWEEP = tuple(range(10_000, 25_001, 1_000))  # [W/cm2]


class GaussianResult(NamedTuple):
    """Output power for one (input power, saturation intensity) pair."""

    input_power: int
    saturation_intensity: int
    output_power: float


class RunOutcome(NamedTuple):
    """Completed against expected (device, input power) units of a run."""

    completed: int
    expected: int

    @property
    def success(self) -> bool:
        return self.completed == self.expected

    def __bool__(self) -> bool:
        return self.success
