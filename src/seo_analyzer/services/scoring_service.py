# src/seo_analyzer/services/scoring_service.py
import math
from typing import Dict, List, Tuple

from seo_analyzer.constants import SCORE_EXCELLENT, SCORE_GOOD, SCORE_OK, WARNING_MULTIPLIER
from seo_analyzer.model import Check

STATUS_MULTIPLIERS: Dict[str, float] = {
    "pass": 1.0,
    "warning": WARNING_MULTIPLIER,
    "fail": 0.0,
}


def level_for(score: int) -> str:
    if score >= SCORE_EXCELLENT:
        return "excellent"
    if score >= SCORE_GOOD:
        return "good"
    if score >= SCORE_OK:
        return "ok"
    return "poor"


def score_checks(checks: List[Check]) -> Tuple[int, str]:
    """
    Weighted aggregate of check outcomes on a 0-100 scale.

    A pass earns its full weight, a warning half of it, a fail nothing.
    Halves round up (82.5 -> 83).
    """
    possible = sum(c.weight for c in checks)
    if possible <= 0:
        return 0, level_for(0)

    earned = sum(c.weight * STATUS_MULTIPLIERS[c.status] for c in checks)
    score = int(math.floor(earned / possible * 100 + 0.5))
    score = max(0, min(100, score))
    return score, level_for(score)


def apply_weight_overrides(checks: List[Check], overrides: Dict[str, float]) -> List[Check]:
    """Returns copies of the checks with the weight of each overridden group replaced."""
    if not overrides:
        return list(checks)
    return [
        c.model_copy(update={"weight": overrides[c.group]}) if c.group in overrides else c
        for c in checks
    ]
