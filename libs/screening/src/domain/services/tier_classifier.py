"""Tier Classifier

Ordered (threshold, tier) tables evaluated top-down.
The first matching row wins; no match means QualityTier.FAIL.
"""

from typing import Sequence

from libs.shared.src.enums.quality_tier import QualityTier

TierTable = Sequence[tuple[float, QualityTier]]

# (low, high, high_inclusive, tier)
BandTable = Sequence[tuple[float, float, bool, QualityTier]]


def classify_at_least(value: float, table: TierTable) -> QualityTier:
    """Higher is better: first row with value >= threshold"""
    for threshold, tier in table:
        if value >= threshold:
            return tier
    return QualityTier.FAIL


def classify_at_most(value: float, table: TierTable) -> QualityTier:
    """Lower is better: first row with value <= threshold"""
    for threshold, tier in table:
        if value <= threshold:
            return tier
    return QualityTier.FAIL


def classify_band(value: float, table: BandTable) -> QualityTier:
    """Range check: first row with low <= value < high (or <= high)"""
    for low, high, high_inclusive, tier in table:
        below_high = value <= high if high_inclusive else value < high
        if value >= low and below_high:
            return tier
    return QualityTier.FAIL
