"""Unit tests for entry file readers."""

from __future__ import annotations

import math

import pytest

from core.config import WaterfallConfig
from core.errors import WaterfallInputError
from core.sample_data import DEMO_ENTRIES
from core.types import RawEntry
from ingest.entry_reader import parse_raw_entry, read_raw_entries
from tests.fixture_paths import fixture_path

_STRICT = WaterfallConfig(strict_values=True)
_PERMISSIVE = WaterfallConfig(strict_values=False)


def test_read_json_list_parses_entries() -> None:
    """JSON list files should parse into ordered raw entries."""
    entries = read_raw_entries(str(fixture_path("entries/profit_report.json")), _STRICT)

    assert entries == DEMO_ENTRIES


def test_read_yaml_mapping_matches_json() -> None:
    """YAML files with an entries mapping should parse like JSON lists."""
    entries = read_raw_entries(str(fixture_path("entries/profit_report.yaml")), _STRICT)

    assert entries == DEMO_ENTRIES


def test_read_jsonl_skips_blank_lines_and_accepts_camel_case_total() -> None:
    """JSONL rows should parse one entry per non-blank line."""
    entries = read_raw_entries(str(fixture_path("entries/quarter_steps.jsonl")), _STRICT)

    assert entries == (
        RawEntry(name="Q1", value=100),
        RawEntry(name="Q2", value=-40),
        RawEntry(name="Half year", value=60, is_total=True),
    )


def test_read_json_mapping_accepts_is_total_alias() -> None:
    """The isTotal spelling should be accepted as the total flag."""
    entries = read_raw_entries(str(fixture_path("entries/camel_case_total.json")), _STRICT)

    assert entries[0].is_total is True and entries[1].is_total is False


def test_read_empty_list_returns_no_entries() -> None:
    """An empty entry list should be valid."""
    assert read_raw_entries(str(fixture_path("entries/empty_list.json")), _STRICT) == ()


def test_read_rejects_unknown_fields() -> None:
    """Unknown entry fields should be rejected."""
    with pytest.raises(WaterfallInputError, match="color"):
        read_raw_entries(str(fixture_path("entries/unknown_field.json")), _STRICT)


def test_read_rejects_boolean_value() -> None:
    """Boolean values should not be read as numbers."""
    with pytest.raises(WaterfallInputError):
        read_raw_entries(str(fixture_path("entries/boolean_value.json")), _STRICT)


def test_read_strict_rejects_nan_value() -> None:
    """Strict reading should reject NaN values."""
    with pytest.raises(WaterfallInputError, match="finite"):
        read_raw_entries(str(fixture_path("entries/non_finite_value.json")), _STRICT)


def test_read_permissive_passes_nan_value_through() -> None:
    """Permissive reading should keep NaN values for the transform."""
    entries = read_raw_entries(str(fixture_path("entries/non_finite_value.json")), _PERMISSIVE)

    assert math.isnan(entries[0].value)


def test_read_missing_file_raises_error() -> None:
    """Missing entry files should raise an input error."""
    with pytest.raises(WaterfallInputError, match="does not exist"):
        read_raw_entries(str(fixture_path("entries/missing.json")), _STRICT)


def test_read_unsupported_extension_raises_error() -> None:
    """Unsupported file extensions should be rejected."""
    with pytest.raises(WaterfallInputError, match="Unsupported"):
        read_raw_entries(str(fixture_path("entries/profit_report.csv")), _STRICT)


def test_read_invalid_json_raises_error(tmp_path) -> None:
    """Malformed JSON should raise an input error."""
    broken_file = tmp_path / "broken.json"
    broken_file.write_text('[{"name": "A", "value": 1}', encoding="utf-8")

    with pytest.raises(WaterfallInputError):
        read_raw_entries(str(broken_file), _STRICT)


def test_read_mapping_with_extra_root_keys_raises_error(tmp_path) -> None:
    """Root mappings should only hold the entries list."""
    entry_file = tmp_path / "extra.yaml"
    entry_file.write_text("title: Profit\nentries: []\n", encoding="utf-8")

    with pytest.raises(WaterfallInputError):
        read_raw_entries(str(entry_file), _STRICT)


def test_parse_raw_entry_requires_string_name() -> None:
    """Entries without a string name should be rejected."""
    with pytest.raises(WaterfallInputError, match="name"):
        parse_raw_entry({"value": 3}, "entry #1")


def test_parse_raw_entry_rejects_both_total_spellings() -> None:
    """Entries should not set both is_total and isTotal."""
    with pytest.raises(WaterfallInputError):
        parse_raw_entry({"name": "A", "value": 1, "is_total": True, "isTotal": True}, "entry #1")


@pytest.mark.parametrize(
    ("file_name", "file_text"),
    [
        ("huge.json", '[{"name": "Revenue", "value": 1' + "0" * 400 + "}]"),
        ("huge.jsonl", '{"name": "Revenue", "value": 1' + "0" * 400 + "}\n"),
        ("huge.yaml", "- name: Revenue\n  value: 1" + "0" * 400 + "\n"),
    ],
)
def test_read_strict_rejects_integer_too_large_for_float(
    tmp_path,
    file_name: str,
    file_text: str,
) -> None:
    """Integers that overflow a float should be rejected as non-finite."""
    entry_file = tmp_path / file_name
    entry_file.write_text(file_text, encoding="utf-8")

    with pytest.raises(WaterfallInputError, match="finite"):
        read_raw_entries(str(entry_file), _STRICT)


def test_read_json_integer_literal_beyond_parser_limit_raises_error(tmp_path) -> None:
    """Integer literals the JSON parser refuses should raise an input error."""
    entry_file = tmp_path / "oversized.json"
    entry_file.write_text('[{"name": "Revenue", "value": 1' + "0" * 5000 + "}]", encoding="utf-8")

    with pytest.raises(WaterfallInputError):
        read_raw_entries(str(entry_file), _STRICT)
