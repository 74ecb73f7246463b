"""Runtime configuration model for waterfall tooling.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_STRICT_VALUES,
    FALSE_ENV_VALUES,
    JSON_INDENT_ENV_VAR,
    STRICT_VALUES_ENV_VAR,
    TRUE_ENV_VALUES,
)
from core.errors import WaterfallConfigError


@dataclass(frozen=True)
class WaterfallConfig:
    """Validated runtime configuration.

    Attributes:
        strict_values: Reject NaN and infinite values when reading entry files.
        json_indent: Indentation used for exported JSON files.
    """

    strict_values: bool = DEFAULT_STRICT_VALUES
    json_indent: int = DEFAULT_JSON_INDENT

    @classmethod
    def from_env(cls) -> "WaterfallConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            WaterfallConfigError: If environment values are invalid.
        """
        strict_value = os.getenv(STRICT_VALUES_ENV_VAR)
        indent_value = os.getenv(JSON_INDENT_ENV_VAR)
        return cls(
            strict_values=(
                DEFAULT_STRICT_VALUES if strict_value is None else _parse_bool(strict_value)
            ),
            json_indent=(
                DEFAULT_JSON_INDENT if indent_value is None else _parse_json_indent(indent_value)
            ),
        )


def _parse_bool(raw_value: str) -> bool:
    """Parse the strict-values environment flag.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        WaterfallConfigError: If value is not a recognized boolean word.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in TRUE_ENV_VALUES:
        return True
    if normalized_value in FALSE_ENV_VALUES:
        return False
    raise WaterfallConfigError(
        f"Invalid {STRICT_VALUES_ENV_VAR} value: "
        f"expected one of {TRUE_ENV_VALUES + FALSE_ENV_VALUES}, got '{raw_value}'. "
        f"Set {STRICT_VALUES_ENV_VAR} to true or false."
    )


def _parse_json_indent(raw_value: str) -> int:
    """Parse the JSON indent environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed non-negative indent.

    Raises:
        WaterfallConfigError: If value is not a non-negative integer.
    """
    try:
        indent = int(raw_value)
    except ValueError as error:
        raise WaterfallConfigError(
            f"Invalid {JSON_INDENT_ENV_VAR} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {JSON_INDENT_ENV_VAR} to a numeric value."
        ) from error
    if indent < 0:
        raise WaterfallConfigError(
            f"Invalid {JSON_INDENT_ENV_VAR} value: expected >= 0, got {indent}."
        )
    return indent
