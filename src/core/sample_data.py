"""Demonstration dataset for waterfall charts."""

from __future__ import annotations

from core.types import RawEntry

DEMO_ENTRIES: tuple[RawEntry, ...] = (
    RawEntry(name="Revenue", value=420),
    RawEntry(name="Services", value=210),
    RawEntry(name="Fixed costs", value=-170),
    RawEntry(name="Variable costs", value=-120),
    RawEntry(name="Taxes", value=-60),
    RawEntry(name="Profit", value=280, is_total=True),
)
