"""Entry file readers for range computation.

This module loads raw waterfall entries from JSON, JSONL, or YAML files.
It validates each entry into a typed record before transforms see it.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Mapping, Sequence, cast

from core.config import WaterfallConfig
from core.constants import (
    ENTRIES_PAYLOAD_KEY,
    ENTRY_NAME_KEY,
    ENTRY_TOTAL_KEYS,
    ENTRY_VALUE_KEY,
    JSON_EXTENSION,
    JSONL_EXTENSION,
    SUPPORTED_ENTRY_EXTENSIONS,
    YAML_EXTENSIONS,
)
from core.errors import WaterfallDependencyError, WaterfallInputError
from core.logging_config import get_logger
from core.types import RawEntry

_LOGGER = get_logger(__name__)


def read_raw_entries(source_path: str, config: WaterfallConfig) -> tuple[RawEntry, ...]:
    """Load raw entries from a local file.

    Args:
        source_path: Path to a JSON, JSONL, or YAML entry file.
        config: Runtime configuration controlling value strictness.

    Returns:
        Ordered raw entries.

    Raises:
        WaterfallInputError: If the file is missing, unsupported, or invalid.
        WaterfallDependencyError: If a YAML file is read without PyYAML.
    """
    file_path = Path(source_path).expanduser()
    if not file_path.is_file():
        raise WaterfallInputError(
            f"Failed to read entries at {file_path}: file does not exist. "
            "Provide an existing entry file."
        )
    suffix = file_path.suffix.lower()
    if suffix == JSONL_EXTENSION:
        entries = _read_jsonl_entries(file_path, config.strict_values)
    elif suffix == JSON_EXTENSION:
        payload = _parse_json_text(file_path, _read_text(file_path))
        entries = _entries_from_payload(payload, file_path, config.strict_values)
    elif suffix in YAML_EXTENSIONS:
        payload = _load_yaml_payload(file_path)
        entries = _entries_from_payload(payload, file_path, config.strict_values)
    else:
        raise WaterfallInputError(
            f"Unsupported entry file extension '{file_path.suffix}' for {file_path}. "
            f"Supported extensions: {SUPPORTED_ENTRY_EXTENSIONS}."
        )
    _LOGGER.info("entries_loaded", source_path=str(file_path), entry_count=len(entries))
    return entries


def parse_raw_entry(payload: object, context: str, strict_values: bool = True) -> RawEntry:
    """Validate one decoded entry object.

    Args:
        payload: Decoded mapping with name, value, and optional total flag.
        context: Human-readable location used in error messages.
        strict_values: Reject NaN and infinite values when true.

    Returns:
        Typed raw entry.

    Raises:
        WaterfallInputError: If the entry shape or field types are invalid.
    """
    if not isinstance(payload, Mapping):
        raise WaterfallInputError(
            f"Invalid {context}: expected object mapping, got {type(payload).__name__}."
        )
    allowed_keys = {ENTRY_NAME_KEY, ENTRY_VALUE_KEY, *ENTRY_TOTAL_KEYS}
    unknown_keys = sorted(str(key) for key in payload if key not in allowed_keys)
    if unknown_keys:
        raise WaterfallInputError(
            f"Invalid {context}: unknown fields {', '.join(unknown_keys)}. "
            f"Allowed fields: {', '.join(sorted(allowed_keys))}."
        )
    name = payload.get(ENTRY_NAME_KEY)
    if not isinstance(name, str):
        raise WaterfallInputError(
            f"Invalid {context}: field '{ENTRY_NAME_KEY}' must be a string. "
            "Fix the entry and retry."
        )
    value = _parse_value(payload.get(ENTRY_VALUE_KEY), context, strict_values)
    is_total = _parse_total_flag(payload, context)
    return RawEntry(name=name, value=value, is_total=is_total)


def _parse_value(raw_value: object, context: str, strict_values: bool) -> float:
    """Validate the numeric value of one entry.

    Args:
        raw_value: Decoded value field.
        context: Human-readable location used in error messages.
        strict_values: Reject values that are not finite floats when true.

    Returns:
        The numeric value unchanged.

    Raises:
        WaterfallInputError: If the value is not a number or is not finite.
    """
    if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
        raise WaterfallInputError(
            f"Invalid {context}: field '{ENTRY_VALUE_KEY}' must be a number. "
            "Fix the entry and retry."
        )
    if not strict_values:
        return raw_value
    try:
        is_finite = math.isfinite(raw_value)
    except OverflowError as error:
        raise WaterfallInputError(
            f"Invalid {context}: field '{ENTRY_VALUE_KEY}' must be finite, "
            "got an integer too large for a float. Fix the entry and retry."
        ) from error
    if not is_finite:
        raise WaterfallInputError(
            f"Invalid {context}: field '{ENTRY_VALUE_KEY}' must be finite, got {raw_value}. "
            "Fix the entry or disable strict values."
        )
    return raw_value


def _parse_total_flag(payload: Mapping[object, object], context: str) -> bool:
    """Read the optional total flag under either accepted spelling.

    Args:
        payload: Decoded entry mapping.
        context: Human-readable location used in error messages.

    Returns:
        Whether the entry is a total bar.

    Raises:
        WaterfallInputError: If both spellings are set or the flag is not boolean.
    """
    present_keys = [key for key in ENTRY_TOTAL_KEYS if key in payload]
    if len(present_keys) > 1:
        raise WaterfallInputError(
            f"Invalid {context}: use only one of {', '.join(ENTRY_TOTAL_KEYS)}."
        )
    if not present_keys:
        return False
    raw_flag = payload[present_keys[0]]
    if raw_flag is None:
        return False
    if not isinstance(raw_flag, bool):
        raise WaterfallInputError(
            f"Invalid {context}: field '{present_keys[0]}' must be a boolean."
        )
    return raw_flag


def _entries_from_payload(
    payload: object,
    file_path: Path,
    strict_values: bool,
) -> tuple[RawEntry, ...]:
    """Extract entries from a decoded JSON or YAML document.

    Args:
        payload: Decoded document, a list or a mapping with an entries list.
        file_path: Source file for error context.
        strict_values: Reject non-finite values when true.

    Returns:
        Ordered raw entries.

    Raises:
        WaterfallInputError: If the document shape is invalid.
    """
    if isinstance(payload, Mapping):
        if set(payload) != {ENTRIES_PAYLOAD_KEY}:
            raise WaterfallInputError(
                f"Invalid entry document {file_path}: expected a list or a mapping "
                f"with only '{ENTRIES_PAYLOAD_KEY}'."
            )
        payload = payload[ENTRIES_PAYLOAD_KEY]
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes, bytearray)):
        raise WaterfallInputError(
            f"Invalid entry document {file_path}: expected list of entries, "
            f"got {type(payload).__name__}."
        )
    return tuple(
        parse_raw_entry(entry_payload, f"entry #{index} in {file_path}", strict_values)
        for index, entry_payload in enumerate(payload, 1)
    )


def _read_jsonl_entries(file_path: Path, strict_values: bool) -> tuple[RawEntry, ...]:
    """Read one entry per non-blank JSONL line.

    Args:
        file_path: Path to JSONL file.
        strict_values: Reject non-finite values when true.

    Returns:
        Ordered raw entries.

    Raises:
        WaterfallInputError: If a line is invalid JSON or an invalid entry.
    """
    entries: list[RawEntry] = []
    for line_number, line in enumerate(_read_text(file_path).splitlines(), 1):
        if not line.strip():
            continue
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as error:
            raise WaterfallInputError(
                f"Failed to parse JSONL entry at {file_path}:{line_number}: "
                f"{error.msg}. Fix the JSON syntax and retry."
            ) from error
        except ValueError as error:
            raise WaterfallInputError(
                f"Failed to parse JSONL entry at {file_path}:{line_number}: "
                f"{error}. Fix the value and retry."
            ) from error
        context = f"entry at {file_path}:{line_number}"
        entries.append(parse_raw_entry(payload, context, strict_values))
    return tuple(entries)


def _parse_json_text(file_path: Path, text: str) -> object:
    """Decode a JSON entry document.

    Args:
        file_path: Source file for error context.
        text: Raw file text.

    Returns:
        Decoded JSON payload.

    Raises:
        WaterfallInputError: If the text is not valid JSON.
    """
    try:
        return cast(object, json.loads(text))
    except json.JSONDecodeError as error:
        raise WaterfallInputError(
            f"Failed to parse JSON entries at {file_path}: {error.msg} "
            f"(line {error.lineno}). Fix the JSON syntax and retry."
        ) from error
    except ValueError as error:
        raise WaterfallInputError(
            f"Failed to parse JSON entries at {file_path}: {error}. Fix the value and retry."
        ) from error


def _load_yaml_payload(file_path: Path) -> object:
    """Decode a YAML entry document.

    Args:
        file_path: Path to YAML file.

    Returns:
        Decoded YAML payload.

    Raises:
        WaterfallDependencyError: If PyYAML is unavailable.
        WaterfallInputError: If the text is not valid YAML.
    """
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise WaterfallDependencyError(
            "YAML entry files require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    try:
        return cast(object, yaml.safe_load(_read_text(file_path)))
    except (yaml.YAMLError, ValueError) as error:
        raise WaterfallInputError(
            f"Failed to parse YAML entries at {file_path}: {error}. Fix YAML syntax and retry."
        ) from error


def _read_text(file_path: Path) -> str:
    """Read an entry file as UTF-8 text.

    Args:
        file_path: Path to entry file.

    Returns:
        File contents.

    Raises:
        WaterfallInputError: If the file cannot be read.
    """
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as error:
        raise WaterfallInputError(
            f"Failed to read entries at {file_path}: {error}. Check file permissions and retry."
        ) from error
