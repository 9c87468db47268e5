"""Screening Verdict DTO"""

from typing import NotRequired, TypedDict

from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.dtos.screening.price_series_dto import PriceSeriesDTO
from libs.shared.src.dtos.screening.stage_result_dto import StageResultDTO
from libs.shared.src.dtos.screening.technical_indicators_dto import (
    TechnicalIndicatorsDTO,
)


class ScreeningCandidateDTO(TypedDict):
    """Input of the ranking pipeline"""

    symbol: str
    name: NotRequired[str]
    metrics: FundamentalMetricsDTO
    series: PriceSeriesDTO
    quote: NotRequired[float | None]  # External quote overrides latest close


class VerdictDTO(TypedDict):
    """Screening verdict of one candidate

    Only stage1 decides membership; stage2/stage3 are advisory.
    score is None when stage1 fails.
    """

    symbol: str
    name: str
    metrics: FundamentalMetricsDTO
    indicators: TechnicalIndicatorsDTO
    stage1: StageResultDTO
    stage2: StageResultDTO
    stage3: StageResultDTO
    score: float | None
