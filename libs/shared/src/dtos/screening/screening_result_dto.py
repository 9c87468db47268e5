"""Screening Result DTO"""

from typing import NotRequired, TypedDict

from libs.shared.src.dtos.screening.screening_criteria_dto import (
    ScreeningCriteriaDTO,
)
from libs.shared.src.dtos.screening.verdict_dto import VerdictDTO


class ScreenedStockDTO(TypedDict):
    """Ranked row of the screening report"""

    rank: int
    symbol: str
    name: str
    score: float
    volatility: float
    sharpe_ratio: float
    verdict: VerdictDTO


class ExcludedStockDTO(TypedDict):
    """Stock dropped by the mandatory health stage"""

    symbol: str
    reasons: list[str]


class UnavailableStockDTO(TypedDict):
    """Stock skipped because inputs could not be fetched"""

    symbol: str
    reason: str


class ScreeningResultDTO(TypedDict):
    """Result of one screening run"""

    screened_at: str  # ISO 8601
    criteria: ScreeningCriteriaDTO
    scanned: int
    qualified: int
    targets: list[ScreenedStockDTO]
    excluded: list[ExcludedStockDTO]
    unavailable: list[UnavailableStockDTO]
    saved_to: NotRequired[str | None]
