"""Three-Stage Screening Evaluator

Stage 1: mandatory health (hard exclusion)
Stage 2: quality scoring, 7 checks (advisory, passes at >= 60%)
Stage 3: technical timing, 3 checks (advisory, passes at >= 50%)
"""

from libs.screening.src.domain.services.tier_classifier import (
    BandTable,
    TierTable,
    classify_at_least,
    classify_at_most,
    classify_band,
)
from libs.shared.src.constants.screening_thresholds import (
    DEBT_RATIO_ACCEPTABLE,
    DEBT_RATIO_EXCELLENT,
    DIVIDEND_YEARS_ACCEPTABLE,
    DIVIDEND_YEARS_EXCELLENT,
    EPS_GROWTH_ACCEPTABLE,
    KD_BUY_ZONE_HIGH,
    KD_BUY_ZONE_LOW,
    KD_WATCH_HIGH,
    KD_WATCH_LOW,
    PRICE_MA_HOLDING_PCT,
    PRICE_MA_STRONG_PCT,
    REVENUE_GROWTH_ACCEPTABLE,
    REVENUE_GROWTH_EXCELLENT,
    ROE_ACCEPTABLE,
    ROE_EXCELLENT,
    STAGE1_MAX_DEBT_RATIO,
    STAGE1_MIN_EPS,
    STAGE1_MIN_EPS_GROWTH,
    STAGE1_MIN_REVENUE_GROWTH,
    STAGE1_MIN_ROE,
    STAGE1_MIN_YOY_GROWTH,
    STAGE2_PASS_RATIO,
    STAGE2_TOTAL_CHECKS,
    STAGE3_PASS_RATIO,
    STAGE3_TOTAL_CHECKS,
    YOY_GROWTH_ACCEPTABLE,
)
from libs.shared.src.dtos.screening.fundamental_metrics_dto import (
    FundamentalMetricsDTO,
)
from libs.shared.src.dtos.screening.screening_criteria_dto import (
    ScreeningCriteriaDTO,
)
from libs.shared.src.dtos.screening.stage_result_dto import (
    StageCheckDTO,
    StageResultDTO,
)
from libs.shared.src.dtos.screening.technical_indicators_dto import (
    TechnicalIndicatorsDTO,
)
from libs.shared.src.enums.quality_tier import QualityTier

EXCELLENT = QualityTier.EXCELLENT
ACCEPTABLE = QualityTier.ACCEPTABLE

ROE_TIERS: TierTable = ((ROE_EXCELLENT, EXCELLENT), (ROE_ACCEPTABLE, ACCEPTABLE))
REVENUE_GROWTH_TIERS: TierTable = (
    (REVENUE_GROWTH_EXCELLENT, EXCELLENT),
    (REVENUE_GROWTH_ACCEPTABLE, ACCEPTABLE),
)
DEBT_RATIO_TIERS: TierTable = (
    (DEBT_RATIO_EXCELLENT, EXCELLENT),
    (DEBT_RATIO_ACCEPTABLE, ACCEPTABLE),
)
DIVIDEND_YEARS_TIERS: TierTable = (
    (DIVIDEND_YEARS_EXCELLENT, EXCELLENT),
    (DIVIDEND_YEARS_ACCEPTABLE, ACCEPTABLE),
)
PRICE_MA_TIERS: TierTable = (
    (PRICE_MA_STRONG_PCT, EXCELLENT),
    (PRICE_MA_HOLDING_PCT, ACCEPTABLE),
)
KD_ZONES: BandTable = (
    (KD_BUY_ZONE_LOW, KD_BUY_ZONE_HIGH, True, EXCELLENT),
    (KD_WATCH_LOW, KD_WATCH_HIGH, False, ACCEPTABLE),
)

QUALITY_LABELS = {EXCELLENT: "優", ACCEPTABLE: "可", QualityTier.FAIL: "不合格"}
PRICE_MA_LABELS = {EXCELLENT: "強勢", ACCEPTABLE: "守住季線", QualityTier.FAIL: "跌破季線"}
KD_LABELS = {EXCELLENT: "買進區", ACCEPTABLE: "觀察區", QualityTier.FAIL: "超出區間"}


def yoy_growth_tiers(criteria: ScreeningCriteriaDTO) -> TierTable:
    return (
        (criteria["min_yoy_growth"], EXCELLENT),
        (YOY_GROWTH_ACCEPTABLE, ACCEPTABLE),
    )


def eps_growth_tiers(criteria: ScreeningCriteriaDTO) -> TierTable:
    return (
        (criteria["min_eps_growth"], EXCELLENT),
        (EPS_GROWTH_ACCEPTABLE, ACCEPTABLE),
    )


def eps_tiers(criteria: ScreeningCriteriaDTO) -> TierTable:
    return ((criteria["min_eps"], EXCELLENT),)


def _check(
    metric: str, value: float, tier: QualityTier, labels: dict[QualityTier, str]
) -> StageCheckDTO:
    return {
        "metric": metric,
        "value": float(value),
        "tier": tier.value,
        "label": labels[tier],
    }


def _stage_result(
    checks: list[StageCheckDTO],
    reasons: list[str],
    total_checks: int,
    pass_ratio: float,
) -> StageResultDTO:
    pass_count = sum(1 for c in checks if QualityTier(c["tier"]).passed)
    ratio = pass_count / total_checks
    return {
        "passed": ratio >= pass_ratio,
        "pass_count": pass_count,
        "total_checks": total_checks,
        "ratio": ratio,
        "checks": checks,
        "reasons": reasons,
    }


def evaluate_stage1(metrics: FundamentalMetricsDTO) -> StageResultDTO:
    """
    Mandatory health check

    Any violated rule excludes the stock. Each violation adds one reason;
    the stage passes iff no reasons were collected.
    """
    rules = [
        (
            "roe",
            metrics["roe"] <= STAGE1_MIN_ROE,
            f"ROE {metrics['roe']:.2f}% 未大於 {STAGE1_MIN_ROE:.0f}",
        ),
        (
            "debt_ratio",
            metrics["debt_ratio"] >= STAGE1_MAX_DEBT_RATIO,
            f"負債比 {metrics['debt_ratio']:.2f}% 達 {STAGE1_MAX_DEBT_RATIO:.0f}% 以上",
        ),
        (
            "revenue_growth",
            metrics["revenue_growth"] <= STAGE1_MIN_REVENUE_GROWTH,
            f"營收成長 {metrics['revenue_growth']:.2f}% 衰退逾 {-STAGE1_MIN_REVENUE_GROWTH:.0f}%",
        ),
        (
            "yoy_growth",
            metrics["yoy_growth"] <= STAGE1_MIN_YOY_GROWTH,
            f"年增率 {metrics['yoy_growth']:.2f}% 衰退逾 {-STAGE1_MIN_YOY_GROWTH:.0f}%",
        ),
        (
            "eps_growth",
            metrics["eps_growth"] <= STAGE1_MIN_EPS_GROWTH,
            f"EPS 成長 {metrics['eps_growth']:.2f}% 衰退逾 {-STAGE1_MIN_EPS_GROWTH:.0f}%",
        ),
        (
            "eps",
            metrics["eps"] <= STAGE1_MIN_EPS,
            f"EPS {metrics['eps']:.2f} 未大於 {STAGE1_MIN_EPS:.0f}",
        ),
    ]

    checks: list[StageCheckDTO] = []
    reasons: list[str] = []
    for metric, violated, reason in rules:
        tier = QualityTier.FAIL if violated else QualityTier.EXCELLENT
        checks.append(
            {
                "metric": metric,
                "value": float(metrics[metric]),
                "tier": tier.value,
                "label": "剔除" if violated else "通過",
            }
        )
        if violated:
            reasons.append(reason)

    return {
        "passed": not reasons,
        "pass_count": len(rules) - len(reasons),
        "total_checks": len(rules),
        "ratio": (len(rules) - len(reasons)) / len(rules),
        "checks": checks,
        "reasons": reasons,
    }


def evaluate_stage2(
    metrics: FundamentalMetricsDTO, criteria: ScreeningCriteriaDTO
) -> StageResultDTO:
    """
    Quality scoring over 7 fundamentals

    Excellent and acceptable tiers both count as a pass.
    """
    table: list[tuple[str, str, QualityTier]] = [
        ("roe", "ROE", classify_at_least(metrics["roe"], ROE_TIERS)),
        (
            "revenue_growth",
            "營收成長",
            classify_at_least(metrics["revenue_growth"], REVENUE_GROWTH_TIERS),
        ),
        (
            "yoy_growth",
            "年增率",
            classify_at_least(metrics["yoy_growth"], yoy_growth_tiers(criteria)),
        ),
        (
            "eps_growth",
            "EPS 成長",
            classify_at_least(metrics["eps_growth"], eps_growth_tiers(criteria)),
        ),
        ("eps", "EPS", classify_at_least(metrics["eps"], eps_tiers(criteria))),
        (
            "debt_ratio",
            "負債比",
            classify_at_most(metrics["debt_ratio"], DEBT_RATIO_TIERS),
        ),
        (
            "dividend_years",
            "連續配息年數",
            classify_at_least(metrics["dividend_years"], DIVIDEND_YEARS_TIERS),
        ),
    ]

    checks: list[StageCheckDTO] = []
    reasons: list[str] = []
    for metric, title, tier in table:
        value = metrics[metric]
        checks.append(_check(metric, value, tier, QUALITY_LABELS))
        if tier is QualityTier.FAIL:
            reasons.append(f"{title} {value:g} 未達標準")

    return _stage_result(checks, reasons, STAGE2_TOTAL_CHECKS, STAGE2_PASS_RATIO)


def evaluate_stage3(indicators: TechnicalIndicatorsDTO) -> StageResultDTO:
    """
    Technical timing over price-vs-MA60, %K and %D

    The MA60 check is skipped when price or MA60 is not positive; the
    denominator stays at 3 regardless.
    """
    checks: list[StageCheckDTO] = []
    reasons: list[str] = []

    price = indicators["price"]
    ma60 = indicators["ma60"]
    if price > 0 and ma60 > 0:
        pct = (price - ma60) / ma60 * 100
        tier = classify_at_least(pct, PRICE_MA_TIERS)
        checks.append(_check("price_vs_ma60", pct, tier, PRICE_MA_LABELS))
        if tier is QualityTier.FAIL:
            reasons.append(f"股價低於季線 {pct:.2f}%")

    for metric, title in (("k", "K值"), ("d", "D值")):
        value = indicators[metric]
        tier = classify_band(value, KD_ZONES)
        checks.append(_check(metric, value, tier, KD_LABELS))
        if tier is QualityTier.FAIL:
            reasons.append(f"{title} {value:.1f} 不在 30-90 區間")

    return _stage_result(checks, reasons, STAGE3_TOTAL_CHECKS, STAGE3_PASS_RATIO)


def evaluate(
    metrics: FundamentalMetricsDTO,
    indicators: TechnicalIndicatorsDTO,
    criteria: ScreeningCriteriaDTO,
) -> tuple[StageResultDTO, StageResultDTO, StageResultDTO]:
    """
    Run all three stages

    Returns:
        tuple: (stage1, stage2, stage3)
    """
    return (
        evaluate_stage1(metrics),
        evaluate_stage2(metrics, criteria),
        evaluate_stage3(indicators),
    )
