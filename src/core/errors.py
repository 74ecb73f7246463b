"""Waterfall exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class WaterfallError(Exception):
    """Base exception for all waterfall failures."""


class WaterfallConfigError(WaterfallError):
    """Raised for invalid runtime configuration."""


class WaterfallInputError(WaterfallError):
    """Raised for entry file parsing and validation failures."""


class WaterfallTransformError(WaterfallError):
    """Raised for range computation contract violations."""


class WaterfallExportError(WaterfallError):
    """Raised for computed range export failures."""


class WaterfallDependencyError(WaterfallError):
    """Raised when an optional runtime dependency is missing."""
