"""分級表單元測試"""

from libs.screening.src.domain.services.tier_classifier import (
    classify_at_least,
    classify_at_most,
    classify_band,
)
from libs.shared.src.enums.quality_tier import QualityTier

TABLE = ((15.0, QualityTier.EXCELLENT), (10.0, QualityTier.ACCEPTABLE))
BANDS = (
    (50.0, 80.0, True, QualityTier.EXCELLENT),
    (30.0, 90.0, False, QualityTier.ACCEPTABLE),
)


class TestClassifyAtLeast:
    """越高越好"""

    def test_thresholds_are_inclusive(self) -> None:
        assert classify_at_least(15.0, TABLE) is QualityTier.EXCELLENT
        assert classify_at_least(10.0, TABLE) is QualityTier.ACCEPTABLE

    def test_below_all_rows_fails(self) -> None:
        assert classify_at_least(9.99, TABLE) is QualityTier.FAIL

    def test_empty_table_fails(self) -> None:
        assert classify_at_least(100.0, ()) is QualityTier.FAIL


class TestClassifyAtMost:
    """越低越好"""

    def test_first_matching_row_wins(self) -> None:
        table = ((30.0, QualityTier.EXCELLENT), (50.0, QualityTier.ACCEPTABLE))
        assert classify_at_most(30.0, table) is QualityTier.EXCELLENT
        assert classify_at_most(30.01, table) is QualityTier.ACCEPTABLE
        assert classify_at_most(50.01, table) is QualityTier.FAIL


class TestClassifyBand:
    """區間判定"""

    def test_inclusive_upper_bound(self) -> None:
        assert classify_band(80.0, BANDS) is QualityTier.EXCELLENT
        assert classify_band(50.0, BANDS) is QualityTier.EXCELLENT

    def test_exclusive_upper_bound(self) -> None:
        assert classify_band(89.99, BANDS) is QualityTier.ACCEPTABLE
        assert classify_band(90.0, BANDS) is QualityTier.FAIL

    def test_lower_bound(self) -> None:
        assert classify_band(30.0, BANDS) is QualityTier.ACCEPTABLE
        assert classify_band(29.99, BANDS) is QualityTier.FAIL

    def test_tier_passed_property(self) -> None:
        assert QualityTier.EXCELLENT.passed
        assert QualityTier.ACCEPTABLE.passed
        assert not QualityTier.FAIL.passed
