"""Price Series DTO"""

from typing import TypedDict


class PriceBarDTO(TypedDict):
    """Daily bar as delivered by a price provider (before cleaning)"""

    date: str  # YYYY-MM-DD format
    close: float | None
    high: float | None
    low: float | None


class PriceSeriesDTO(TypedDict):
    """Cleaned daily price series, oldest first

    Invariant: close/high/low have equal length, every entry > 0
    """

    close: list[float]
    high: list[float]
    low: list[float]
