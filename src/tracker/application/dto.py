"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyTotalDTO:
    """Output: the resolved date and what was spent on it."""

    date: str
    total: float


@dataclass(frozen=True)
class ExportResultDTO:
    """Output: where the export went and how many orders it holds."""

    filepath: str
    row_count: int
