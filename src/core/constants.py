"""Core constants used across waterfall modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

STRICT_VALUES_ENV_VAR = "WATERFALL_STRICT_VALUES"
JSON_INDENT_ENV_VAR = "WATERFALL_JSON_INDENT"
DEFAULT_STRICT_VALUES = True
DEFAULT_JSON_INDENT = 2
JSON_EXTENSION = ".json"
JSONL_EXTENSION = ".jsonl"
YAML_EXTENSIONS = (".yaml", ".yml")
SUPPORTED_ENTRY_EXTENSIONS = (JSON_EXTENSION, JSONL_EXTENSION, *YAML_EXTENSIONS)
ENTRIES_PAYLOAD_KEY = "entries"
ENTRY_NAME_KEY = "name"
ENTRY_VALUE_KEY = "value"
ENTRY_TOTAL_KEYS = ("is_total", "isTotal")
TOTAL_ROW_KIND = "total"
STEP_ROW_KIND = "step"
TRUE_ENV_VALUES = ("1", "true", "yes", "on")
FALSE_ENV_VALUES = ("0", "false", "no", "off")
