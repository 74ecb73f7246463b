"""Waterfall bar range transform.

This module converts labeled contributions into floating bar ranges.
Each incremental bar starts where the running total ended, while total
bars are anchored at zero and never move the running total.
"""

from __future__ import annotations

from typing import Iterable

from core.types import BarRange, RawEntry, WaterfallDatum


def compute_waterfall_ranges(entries: Iterable[RawEntry]) -> list[WaterfallDatum]:
    """Compute one bar range per entry in a single left-to-right pass.

    Args:
        entries: Ordered raw entries.

    Returns:
        Computed bars in input order, one per entry.
    """
    running_total: float = 0
    computed: list[WaterfallDatum] = []
    for entry in entries:
        if entry.is_total:
            bar_range = _total_range(entry.value)
        else:
            bar_range = _step_range(running_total, entry.value)
            running_total += entry.value
        computed.append(
            WaterfallDatum(
                name=entry.name,
                value=entry.value,
                range=bar_range,
                is_total=entry.is_total,
            )
        )
    return computed


def final_running_total(entries: Iterable[RawEntry | WaterfallDatum]) -> float:
    """Return the running total after every incremental entry.

    Args:
        entries: Raw entries or computed bars.

    Returns:
        Sum of all non-total values.
    """
    running_total: float = 0
    for entry in entries:
        if not entry.is_total:
            running_total += entry.value
    return running_total


def _total_range(value: float) -> BarRange:
    """Anchor a total bar at zero.

    Args:
        value: Absolute level of the total.

    Returns:
        Range spanning zero and the value.
    """
    if value < 0:
        return BarRange(bottom=value, top=0)
    return BarRange(bottom=0, top=value)


def _step_range(running_total: float, value: float) -> BarRange:
    """Float an incremental bar from the running total.

    Args:
        running_total: Sum of incremental values before this entry.
        value: Signed contribution of this entry.

    Returns:
        Range between the running total before and after the entry.
    """
    if value >= 0:
        return BarRange(bottom=running_total, top=running_total + value)
    return BarRange(bottom=running_total + value, top=running_total)
