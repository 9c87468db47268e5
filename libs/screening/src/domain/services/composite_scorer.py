"""Composite Score Calculator

Weighted sum of capped fundamental terms (max 80) and flat technical
bonuses (max 30). With every term at its cap the total reaches 110, so the
score is a ranking key rather than a percentage.

The debt-ratio term is linear and uncapped: a debt ratio above 100%
makes it negative. Every other fundamental term is capped at 1.0.
"""

from libs.shared.src.constants.screening_thresholds import (
    KD_BUY_ZONE_HIGH,
    KD_BUY_ZONE_LOW,
    SCORE_D_GOLDEN_ZONE_BONUS,
    SCORE_DEBT_RATIO_WEIGHT,
    SCORE_DIVIDEND_YEARS_CAP,
    SCORE_DIVIDEND_YEARS_WEIGHT,
    SCORE_EPS_CAP,
    SCORE_EPS_GROWTH_CAP,
    SCORE_EPS_GROWTH_WEIGHT,
    SCORE_EPS_WEIGHT,
    SCORE_K_GOLDEN_ZONE_BONUS,
    SCORE_PRICE_ABOVE_MA_BONUS,
    SCORE_REVENUE_GROWTH_CAP,
    SCORE_REVENUE_GROWTH_WEIGHT,
    SCORE_ROE_CAP,
    SCORE_ROE_WEIGHT,
    SCORE_YOY_GROWTH_CAP,
    SCORE_YOY_GROWTH_WEIGHT,
)
from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.dtos.screening.technical_indicators_dto import (
    TechnicalIndicatorsDTO,
)


def capped_term(value: float, cap: float, weight: float) -> float:
    """min(value / cap, 1) × weight"""
    return min(value / cap, 1.0) * weight


def fundamental_score(metrics: FundamentalMetricsDTO) -> float:
    """Fundamental part of the composite score (max 80)"""
    return (
        capped_term(metrics["roe"], SCORE_ROE_CAP, SCORE_ROE_WEIGHT)
        + capped_term(
            metrics["revenue_growth"],
            SCORE_REVENUE_GROWTH_CAP,
            SCORE_REVENUE_GROWTH_WEIGHT,
        )
        + capped_term(
            metrics["yoy_growth"], SCORE_YOY_GROWTH_CAP, SCORE_YOY_GROWTH_WEIGHT
        )
        + capped_term(
            metrics["eps_growth"], SCORE_EPS_GROWTH_CAP, SCORE_EPS_GROWTH_WEIGHT
        )
        + capped_term(metrics["eps"], SCORE_EPS_CAP, SCORE_EPS_WEIGHT)
        + (1.0 - metrics["debt_ratio"] / 100.0) * SCORE_DEBT_RATIO_WEIGHT
        + capped_term(
            metrics["dividend_years"],
            SCORE_DIVIDEND_YEARS_CAP,
            SCORE_DIVIDEND_YEARS_WEIGHT,
        )
    )


def technical_score(indicators: TechnicalIndicatorsDTO) -> float:
    """Technical bonuses: price above MA60, %K / %D in the golden zone"""
    score = 0.0
    if indicators["price"] > indicators["ma60"]:
        score += SCORE_PRICE_ABOVE_MA_BONUS
    if KD_BUY_ZONE_LOW <= indicators["k"] <= KD_BUY_ZONE_HIGH:
        score += SCORE_K_GOLDEN_ZONE_BONUS
    if KD_BUY_ZONE_LOW <= indicators["d"] <= KD_BUY_ZONE_HIGH:
        score += SCORE_D_GOLDEN_ZONE_BONUS
    return score


def score(
    metrics: FundamentalMetricsDTO, indicators: TechnicalIndicatorsDTO
) -> float:
    """
    Composite score used for ranking

    Only meaningful for stocks that passed stage 1.
    """
    return fundamental_score(metrics) + technical_score(indicators)
