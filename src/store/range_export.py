"""Computed range export helpers.

This module serializes computed waterfall bars for downstream renderers.
It writes one JSON document per export and formats terminal rows.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from core.constants import (
    DEFAULT_JSON_INDENT,
    ENTRIES_PAYLOAD_KEY,
    STEP_ROW_KIND,
    TOTAL_ROW_KIND,
)
from core.errors import WaterfallExportError
from core.logging_config import get_logger
from core.types import WaterfallDatum
from transforms.waterfall_ranges import final_running_total

_LOGGER = get_logger(__name__)


def datum_to_payload(datum: WaterfallDatum) -> dict[str, Any]:
    """Convert one computed bar into a JSON-ready mapping.

    Args:
        datum: Computed bar.

    Returns:
        Mapping with name, value, range, and is_total keys.
    """
    return {
        "name": datum.name,
        "value": datum.value,
        "range": [datum.range.bottom, datum.range.top],
        "is_total": datum.is_total,
    }


def build_export_payload(data: Sequence[WaterfallDatum]) -> dict[str, Any]:
    """Build the full export document for computed bars.

    Args:
        data: Computed bars in display order.

    Returns:
        Export document with entries, count, and final running total.
    """
    return {
        ENTRIES_PAYLOAD_KEY: [datum_to_payload(datum) for datum in data],
        "entry_count": len(data),
        "final_running_total": final_running_total(data),
    }


def write_ranges_file(
    output_path: str,
    data: Sequence[WaterfallDatum],
    indent: int = DEFAULT_JSON_INDENT,
) -> Path:
    """Write computed bars as a JSON document.

    Args:
        output_path: Destination file path.
        data: Computed bars.
        indent: JSON indentation width.

    Returns:
        Resolved path of the written file.

    Raises:
        WaterfallExportError: If values are not JSON-encodable or writing fails.
    """
    target_path = Path(output_path).expanduser().resolve()
    payload = build_export_payload(data)
    try:
        encoded = json.dumps(payload, indent=indent, allow_nan=False)
    except ValueError as error:
        raise WaterfallExportError(
            f"Failed to encode ranges for {target_path}: {error}. "
            "Remove NaN or infinite values before exporting."
        ) from error
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(encoded + "\n", encoding="utf-8")
    except OSError as error:
        raise WaterfallExportError(
            f"Failed to write ranges to {target_path}: {error}. "
            "Check directory permissions and retry."
        ) from error
    _LOGGER.info("ranges_written", output_path=str(target_path), entry_count=len(data))
    return target_path


def format_range_rows(data: Sequence[WaterfallDatum]) -> list[str]:
    """Format computed bars as tab-separated terminal rows.

    Args:
        data: Computed bars.

    Returns:
        One ``name value bottom top kind`` row per bar.
    """
    return [
        f"{datum.name}\t"
        f"{datum.value}\t"
        f"{datum.range.bottom}\t"
        f"{datum.range.top}\t"
        f"{TOTAL_ROW_KIND if datum.is_total else STEP_ROW_KIND}"
        for datum in data
    ]

