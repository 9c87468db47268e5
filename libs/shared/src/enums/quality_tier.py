"""Screening Check Tier"""

from enum import Enum


class QualityTier(Enum):
    """Outcome tier of a single screening check"""

    EXCELLENT = "EXCELLENT"  # Full pass
    ACCEPTABLE = "ACCEPTABLE"  # Partial pass
    FAIL = "FAIL"

    @property
    def passed(self) -> bool:
        return self is not QualityTier.FAIL
