"""Derived views over an in-memory entry snapshot.

Pure functions with no I/O. They are recomputed on every state change;
personal logs are small enough that nothing is cached.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Literal

from domain.entities.entry import VolunteerEntry

ALL_YEARS: Literal["all"] = "all"

YearFilter = int | Literal["all"]

DEFAULT_PER_PAGE = 10


def distinct_years(entries: Iterable[VolunteerEntry]) -> set[int]:
    """Calendar years that have at least one entry."""
    return {entry.year for entry in entries}


def filter_by_year(
    entries: Iterable[VolunteerEntry], year: YearFilter
) -> list[VolunteerEntry]:
    if year == ALL_YEARS:
        return list(entries)
    return [entry for entry in entries if entry.year == year]


def sort_by_date_desc(entries: Iterable[VolunteerEntry]) -> list[VolunteerEntry]:
    """Newest first. Stable: entries sharing a date keep their input order."""
    # Fixed-width ISO dates compare chronologically as strings.
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


def paginate(
    entries: Sequence[VolunteerEntry], page: int, per_page: int = DEFAULT_PER_PAGE
) -> list[VolunteerEntry]:
    """Return the 1-based ``page``; pages outside the range are empty."""
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")
    if page < 1:
        return []
    start = (page - 1) * per_page
    return list(entries[start : start + per_page])


def total_pages(count: int, per_page: int = DEFAULT_PER_PAGE) -> int:
    """Number of pages for ``count`` items, never less than 1."""
    if per_page < 1:
        raise ValueError(f"per_page must be positive, got {per_page}")
    return max(1, math.ceil(count / per_page))


def sum_hours(entries: Iterable[VolunteerEntry]) -> float:
    # fsum is exactly rounded, so the total does not depend on entry order.
    return math.fsum(entry.hours for entry in entries)


def hours_by_year(entries: Iterable[VolunteerEntry]) -> dict[int, float]:
    """Per-year hour totals, newest year first."""
    grouped: dict[int, list[float]] = {}
    for entry in entries:
        grouped.setdefault(entry.year, []).append(entry.hours)
    return {year: math.fsum(grouped[year]) for year in sorted(grouped, reverse=True)}
