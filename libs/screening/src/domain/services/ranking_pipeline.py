"""Screening Ranking Pipeline

price series → indicators → stages → (stage 1 passed) score → ranking
Stage 1 failures are dropped; stages 2 and 3 only annotate.
"""

from libs.screening.src.domain.services.composite_scorer import score
from libs.screening.src.domain.services.indicator_calculator import compute
from libs.screening.src.domain.services.stage_evaluator import evaluate
from libs.shared.src.dtos.screening.screening_criteria_dto import (
    ScreeningCriteriaDTO,
)
from libs.shared.src.dtos.screening.verdict_dto import (
    ScreeningCandidateDTO,
    VerdictDTO,
)


def screen_candidate(
    candidate: ScreeningCandidateDTO, criteria: ScreeningCriteriaDTO
) -> VerdictDTO:
    """
    Evaluate one candidate

    Returns:
        VerdictDTO with score None when stage 1 fails
    """
    metrics = candidate["metrics"]
    indicators = compute(candidate["series"], candidate.get("quote"))
    stage1, stage2, stage3 = evaluate(metrics, indicators, criteria)

    return {
        "symbol": candidate["symbol"],
        "name": candidate.get("name", ""),
        "metrics": metrics,
        "indicators": indicators,
        "stage1": stage1,
        "stage2": stage2,
        "stage3": stage3,
        "score": score(metrics, indicators) if stage1["passed"] else None,
    }


def rank_verdicts(verdicts: list[VerdictDTO]) -> list[VerdictDTO]:
    """
    Keep stage-1 survivors, sorted by score descending

    sorted() is stable with reverse=True, so ties keep input order.
    """
    survivors = [v for v in verdicts if v["stage1"]["passed"]]
    return sorted(survivors, key=lambda v: v["score"], reverse=True)


def rank(
    candidates: list[ScreeningCandidateDTO], criteria: ScreeningCriteriaDTO
) -> list[VerdictDTO]:
    """
    Screen and rank a collection of candidates

    Args:
        candidates: Fundamentals + price series per stock
        criteria: Tunable stage-2 thresholds

    Returns:
        list[VerdictDTO]: Stage-1 survivors, best score first
    """
    return rank_verdicts([screen_candidate(c, criteria) for c in candidates])
