"""Stage Result DTO"""

from typing import TypedDict


class StageCheckDTO(TypedDict):
    """Outcome of one metric check inside a stage"""

    metric: str
    value: float
    tier: str  # QualityTier value
    label: str  # Human readable tier label


class StageResultDTO(TypedDict):
    """Outcome of one screening stage"""

    passed: bool
    pass_count: int
    total_checks: int
    ratio: float
    checks: list[StageCheckDTO]
    reasons: list[str]
