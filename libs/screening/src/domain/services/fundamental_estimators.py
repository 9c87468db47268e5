"""Fundamental Estimator Chains

Prioritized estimator strategies for metrics that are not always
reported directly. Each estimator returns an optional value; the first
non-None result wins. The screening engine never sees which estimator
supplied a value.
"""

from typing import Callable, Sequence

from libs.shared.src.constants.fundamental_defaults import (
    PE_TIER_FALLBACK_ROE,
    PE_TIER_ROE,
)
from libs.shared.src.dtos.screening.estimator_inputs_dto import EstimatorInputsDTO

Estimator = Callable[[EstimatorInputsDTO], float | None]
EstimatorChain = Sequence[tuple[str, Estimator]]


# ========================================
# ROE
# ========================================


def roe_from_statements(inputs: EstimatorInputsDTO) -> float | None:
    """ROE = trailing net income / shareholder equity × 100"""
    net_income = inputs.get("net_income_ttm")
    equity = inputs.get("equity")
    if net_income is None or equity is None or equity <= 0:
        return None
    return net_income / equity * 100


def roe_from_valuation_ratios(inputs: EstimatorInputsDTO) -> float | None:
    """ROE = (P/B) / (P/E) × 100, since E/B = (P/B) / (P/E)"""
    pe = inputs.get("pe_ratio")
    pb = inputs.get("pb_ratio")
    if pe is None or pb is None or pe <= 0 or pb <= 0:
        return None
    return pb / pe * 100


def roe_from_pe_tier(inputs: EstimatorInputsDTO) -> float | None:
    """Coarse ROE guess from the P/E tier (last resort)"""
    pe = inputs.get("pe_ratio")
    if pe is None:
        return None
    if pe > 0:
        for upper, roe in PE_TIER_ROE:
            if pe < upper:
                return roe
    return PE_TIER_FALLBACK_ROE


ROE_ESTIMATORS: EstimatorChain = (
    ("statements", roe_from_statements),
    ("valuation_ratios", roe_from_valuation_ratios),
    ("pe_tier", roe_from_pe_tier),
)


# ========================================
# Debt ratio
# ========================================


def debt_ratio_from_liabilities(inputs: EstimatorInputsDTO) -> float | None:
    """Debt ratio = liabilities / total assets × 100"""
    liabilities = inputs.get("liabilities")
    total_assets = inputs.get("total_assets")
    if liabilities is None or total_assets is None or total_assets <= 0:
        return None
    return liabilities / total_assets * 100


def debt_ratio_from_equity(inputs: EstimatorInputsDTO) -> float | None:
    """Debt ratio = (1 - equity / total assets) × 100"""
    equity = inputs.get("equity")
    total_assets = inputs.get("total_assets")
    if equity is None or total_assets is None or total_assets <= 0:
        return None
    return (1 - equity / total_assets) * 100


DEBT_RATIO_ESTIMATORS: EstimatorChain = (
    ("liabilities", debt_ratio_from_liabilities),
    ("equity", debt_ratio_from_equity),
)


def estimate_first(
    inputs: EstimatorInputsDTO, estimators: EstimatorChain
) -> tuple[float, str] | None:
    """
    Try estimators in order

    Returns:
        tuple: (value, estimator name) of the first estimator that produced
        a value, or None when all of them gave up
    """
    for name, estimator in estimators:
        value = estimator(inputs)
        if value is not None:
            return value, name
    return None
