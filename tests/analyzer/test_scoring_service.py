# tests/analyzer/test_scoring_service.py
import pytest

from seo_analyzer.model import Check
from seo_analyzer.services.scoring_service import apply_weight_overrides, level_for, score_checks


def make_check(status, weight=1, group="title", check_id="x"):
    return Check(
        id=check_id, label="Label", status=status, message="Bericht", category="important", weight=weight,
        group=group,
    )


@pytest.mark.parametrize("score, level", [
    (0, "poor"), (40, "poor"), (41, "ok"), (70, "ok"), (71, "good"), (90, "good"), (91, "excellent"),
    (100, "excellent"),
])
def test_level_for(score, level):
    assert level_for(score) == level


def test_no_checks_scores_zero():
    assert score_checks([]) == (0, "poor")


def test_all_pass_scores_hundred():
    assert score_checks([make_check("pass", 3), make_check("pass", 1)]) == (100, "excellent")


def test_statuses_are_weighted():
    """Pass telt volledig, warning half, fail niets."""
    checks = [make_check("pass", 2), make_check("warning", 2), make_check("fail", 4)]
    # (2 + 1 + 0) / 8 = 37.5 -> 38
    assert score_checks(checks) == (38, "poor")


def test_halves_round_up():
    # 1 pass + 1 warning + 2 fails met gewicht 1 -> 1.5 / 4 = 37.5%
    checks = [make_check("pass"), make_check("warning"), make_check("fail"), make_check("fail")]
    assert score_checks(checks)[0] == 38
    # 5 pass uit 8 -> 62.5 -> 63 (niet 62 zoals bij bankers rounding)
    checks = [make_check("pass")] * 5 + [make_check("fail")] * 3
    assert score_checks(checks) == (63, "ok")


def test_weight_overrides_replace_group_weights():
    checks = [make_check("pass", 3, "title"), make_check("fail", 2, "images")]
    overridden = apply_weight_overrides(checks, {"images": 6})
    assert [c.weight for c in overridden] == [3, 6]
    # Originelen blijven onveranderd
    assert checks[1].weight == 2
    assert score_checks(overridden) == (33, "poor")


def test_empty_overrides_keep_checks():
    checks = [make_check("pass")]
    assert apply_weight_overrides(checks, {}) == checks
