# tests/analyzer/test_engine.py
import logging
import time

import pytest
from pydantic import ValidationError

from seo_analyzer.engine import AnalysisEngine, analyze, get_engine
from seo_analyzer.model import AnalyzerConfig, PageInput
from seo_analyzer.rules.registry import RuleRegistry

EMPTY_PAGE = {"metaTitle": "", "metaDescription": "", "slug": ""}


def statuses(result):
    return {c.id: c.status for c in result.checks}


@pytest.mark.parametrize("data", [None, "een string", 42, ["metaTitle"]])
def test_non_mapping_input_scores_zero(data, caplog):
    with caplog.at_level(logging.WARNING, logger="seo_analyzer.engine"):
        result = analyze(data)
    assert result.score == 0
    assert result.level == "poor"
    assert result.checks == []
    assert "Cannot analyze input" in caplog.text


def test_empty_page():
    result = analyze(EMPTY_PAGE)
    assert result.score == 58
    assert result.level == "ok"
    ids = statuses(result)
    assert ids["title-missing"] == "fail"
    assert ids["meta-desc-missing"] == "fail"
    assert ids["slug-missing"] == "fail"
    # Te weinig woorden voor de leesbaarheidsregels
    assert not any(c.group == "readability" for c in result.checks)


def test_full_page_scores_good(full_page):
    result = analyze(full_page())
    assert 71 <= result.score <= 90
    assert result.level == "good"
    assert result.score > analyze(EMPTY_PAGE).score


def test_checks_follow_group_order(full_page):
    order = RuleRegistry.get_group_names()
    groups = [c.group for c in analyze(full_page()).checks]
    positions = [order.index(g) for g in groups]
    assert positions == sorted(positions)


def test_check_ids_are_unique(full_page):
    result = analyze(full_page(isCornerstone=True, isProduct=True, focusKeywords=["création site", "seo"]))
    ids = [c.id for c in result.checks]
    assert len(ids) == len(set(ids))


def test_analysis_is_deterministic(full_page):
    data = full_page()
    assert analyze(data) == analyze(data)


def test_snake_case_and_page_input_are_accepted(full_page):
    camel = analyze(full_page())
    snake = analyze({
        "meta_title": "Agence Web à Ussel en Corrèze | Mon Site",
        "slug": "agence-web-ussel",
        "focus_keyword": "agence web ussel",
    })
    assert statuses(snake)["title-keyword"] == "pass"

    page = PageInput.model_validate(full_page())
    assert analyze(page).score == camel.score


def test_disabled_group_only_removes_its_checks(full_page):
    data = full_page()
    baseline = analyze(data)
    result = analyze(data, {"disabledRules": ["readability"]})

    assert not any(c.group == "readability" for c in result.checks)
    remaining = [c for c in baseline.checks if c.group != "readability"]
    assert result.checks == remaining


def test_weight_override(full_page):
    result = analyze(full_page(), AnalyzerConfig(override_weights={"title": 10}))
    assert all(c.weight == 10 for c in result.checks if c.group == "title")
    assert any(c.weight != 10 for c in result.checks if c.group != "title")


def test_conditional_groups_join_when_flagged(full_page):
    baseline = {c.group for c in analyze(full_page()).checks}
    assert not {"cornerstone", "ecommerce", "secondary-keywords"} & baseline

    flagged = {c.group for c in analyze(full_page(isCornerstone=True, isProduct=True)).checks}
    assert {"cornerstone", "ecommerce"} <= flagged

    with_secondary = {c.group for c in analyze(full_page(focusKeywords=["création site"])).checks}
    assert "secondary-keywords" in with_secondary


def test_freshness_uses_reference_date(full_page):
    config = {"referenceDate": "2025-06-01T00:00:00Z"}
    updated = "2024-04-27T00:00:00Z"  # 400 dagen eerder

    generic = analyze(full_page(slug="nos-realisations", updatedAt=updated), config)
    legal = analyze(full_page(slug="mentions-legales", updatedAt=updated), config)
    assert statuses(generic)["freshness-age"] == "fail"
    assert statuses(legal)["freshness-age"] == "pass"


def test_camel_case_config(full_page):
    result = analyze(full_page(), {"disabledRules": ["title"], "locale": "en-GB"})
    assert not any(c.group == "title" for c in result.checks)


@pytest.mark.parametrize("config", [
    {"overrideWeights": {"title": -1}},
    {"localSeoPattern": "("},
    {"maxRecursionDepth": 0},
])
def test_invalid_config_raises(config):
    with pytest.raises(ValidationError):
        analyze(EMPTY_PAGE, config)


def test_engine_is_shared():
    assert get_engine() is get_engine()
    assert [d.group for d in AnalysisEngine().definitions] == RuleRegistry.get_group_names()


SYLLABLES = ("ba", "de", "fi", "go", "lu", "ma", "ne", "pi", "ro", "su", "ta", "ve", "zo", "ka", "li", "mu")


def unique_word(n):
    """Elk getal onder 4096 geeft een ander woord van drie lettergrepen."""
    return "".join(SYLLABLES[(n >> shift) & 15] for shift in (8, 4, 0))


def test_long_unique_article_is_fast(paragraph):
    sentences = [
        " ".join(unique_word(i) for i in range(start, start + 10)).capitalize() + "."
        for start in range(0, 4000, 10)
    ]
    blocks = [" ".join(sentences[i:i + 10]) for i in range(0, len(sentences), 10)]
    data = {"metaTitle": "Un long article", "slug": "long-article", "content": paragraph(*blocks)}

    started = time.perf_counter()
    result = analyze(data)
    elapsed = time.perf_counter() - started

    assert {c.id: c.status for c in result.checks}["quality-no-duplicate"] == "pass"
    assert elapsed < 3.0
