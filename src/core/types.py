"""Shared typed models.

This module defines immutable data models passed between the entry
reader, the range transform, and the exporter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from core.errors import WaterfallTransformError


@dataclass(frozen=True)
class RawEntry:
    """One labeled contribution before range computation.

    Attributes:
        name: Display label of the bar.
        value: Signed contribution, or the absolute level for totals.
        is_total: Whether the bar is a checkpoint anchored at zero.
    """

    name: str
    value: float
    is_total: bool = False


@dataclass(frozen=True)
class BarRange:
    """Vertical extent of one bar.

    Attributes:
        bottom: Lower bound in value units.
        top: Upper bound in value units.
    """

    bottom: float
    top: float

    def __post_init__(self) -> None:
        if self.bottom > self.top:
            raise WaterfallTransformError(
                f"Invalid bar range: bottom {self.bottom} is above top {self.top}."
            )

    def __iter__(self) -> Iterator[float]:
        yield self.bottom
        yield self.top

    @property
    def height(self) -> float:
        """Return the vertical size of the bar."""
        return self.top - self.bottom

    def as_tuple(self) -> tuple[float, float]:
        """Return the range as a ``(bottom, top)`` pair."""
        return (self.bottom, self.top)


@dataclass(frozen=True)
class WaterfallDatum:
    """Computed bar for one input entry.

    Attributes:
        name: Label copied from the input entry.
        value: Raw signed value copied from the input entry.
        range: Bar extent to draw.
        is_total: Total flag copied from the input entry.
    """

    name: str
    value: float
    range: BarRange
    is_total: bool
