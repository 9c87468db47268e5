"""Screening Criteria Builder"""

from libs.shared.src.dtos.screening.screening_criteria_dto import (
    ScreeningCriteriaDTO,
)

DEFAULT_SCREENING_CRITERIA: ScreeningCriteriaDTO = {
    "min_yoy_growth": 20.0,
    "min_eps_growth": 100.0,
    "min_eps": 2.0,
}


def build_screening_criteria(
    min_yoy_growth: float | None = None,
    min_eps_growth: float | None = None,
    min_eps: float | None = None,
) -> ScreeningCriteriaDTO:
    """
    Merge overrides into the default criteria

    None keeps the default value.
    """
    criteria: ScreeningCriteriaDTO = {**DEFAULT_SCREENING_CRITERIA}
    if min_yoy_growth is not None:
        criteria["min_yoy_growth"] = float(min_yoy_growth)
    if min_eps_growth is not None:
        criteria["min_eps_growth"] = float(min_eps_growth)
    if min_eps is not None:
        criteria["min_eps"] = float(min_eps)
    return criteria
