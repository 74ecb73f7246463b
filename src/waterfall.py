"""Public SDK surface for waterfall range computation.

This module provides a stable import path for library users.
It re-exports the typed records and the primary operations.
"""

from __future__ import annotations

from core.config import WaterfallConfig
from core.sample_data import DEMO_ENTRIES
from core.types import BarRange, RawEntry, WaterfallDatum
from ingest.entry_reader import parse_raw_entry, read_raw_entries
from store.range_export import build_export_payload, write_ranges_file
from transforms.waterfall_ranges import compute_waterfall_ranges, final_running_total

__all__ = [
    "BarRange",
    "DEMO_ENTRIES",
    "RawEntry",
    "WaterfallConfig",
    "WaterfallDatum",
    "build_export_payload",
    "compute_waterfall_ranges",
    "final_running_total",
    "parse_raw_entry",
    "read_raw_entries",
    "write_ranges_file",
]
