# src/seo_analyzer/rules/groups/freshness.py
import re
from datetime import datetime
from typing import List, Optional

from seo_analyzer.constants import (
    EVERGREEN_PAGE_TYPES,
    FRESHNESS_EVERGREEN_DAYS,
    FRESHNESS_FAIL_DAYS,
    FRESHNESS_WARN_DAYS,
    REVIEW_WARN_DAYS,
    THIN_AGING_MIN_WORDS,
)
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.utils.wordlists import EVERGREEN_PAGE_SLUGS

GROUP = "freshness"
make = CheckFactory(GROUP)

_YEAR = re.compile(r"\b(20[0-2][0-9])\b")


def days_since(moment: Optional[datetime], now: datetime) -> Optional[int]:
    """Whole days elapsed, or None when the date is unknown."""
    if moment is None:
        return None
    return (now - moment).days


def is_evergreen(page: PageInput, ctx: AnalysisContext) -> bool:
    """Legal and contact pages rarely need updates; neither do slugs on the evergreen allow-list."""
    if ctx.page_type in EVERGREEN_PAGE_TYPES:
        return True
    slug = (page.slug or "").strip("/")
    return any(slug == s or slug.endswith(f"/{s}") for s in EVERGREEN_PAGE_SLUGS)


def _age_check(days: int, evergreen: bool) -> Check:
    if evergreen:
        if days > FRESHNESS_EVERGREEN_DAYS:
            return make(
                "freshness-age", "Content age", "warning", f"Last updated {days} days ago.", "bonus", 1,
                tip="Even stable pages deserve a check every couple of years.",
            )
        return make("freshness-age", "Content age", "pass", f"Updated {days} days ago.", "bonus", 1)

    if days > FRESHNESS_FAIL_DAYS:
        return make(
            "freshness-age", "Content age", "fail", f"Not updated for {days} days.", "important", 3,
            tip="Refresh facts, figures and examples; stale pages lose rankings.",
        )
    if days > FRESHNESS_WARN_DAYS:
        return make(
            "freshness-age", "Content age", "warning", f"Last updated {days} days ago.", "important", 3,
            tip="Plan a content review soon.",
        )
    return make("freshness-age", "Content age", "pass", f"Updated {days} days ago.", "important", 3)


@check_spec(ids=["freshness-age", "freshness-reviewed", "freshness-year-ref", "freshness-thin-aging"])
def check_freshness(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    evergreen = is_evergreen(page, ctx)
    now = ctx.now

    age = days_since(page.updated_at, now)
    if age is not None:
        checks.append(_age_check(age, evergreen))

    reviewed = days_since(page.content_last_reviewed, now)
    if reviewed is not None:
        if reviewed > REVIEW_WARN_DAYS:
            checks.append(make(
                "freshness-reviewed", "Content review", "warning", f"Last reviewed {reviewed} days ago.", "bonus", 2,
                tip="Re-read the page and confirm it is still accurate.",
            ))
        else:
            checks.append(make(
                "freshness-reviewed", "Content review", "pass", f"Reviewed {reviewed} days ago.", "bonus", 2,
            ))

    # --- Year mentions ---
    current_year = now.year
    last_year = current_year - 1
    years = [int(y) for y in _YEAR.findall(ctx.full_text)]
    mentions_current = str(current_year) in ctx.full_text
    mentions_last = str(last_year) in ctx.full_text
    older = [y for y in years if y < last_year]

    if older and not mentions_current and not mentions_last:
        checks.append(make(
            "freshness-year-ref", "Year references", "warning",
            f"The content mentions {min(older)} but neither {last_year} nor {current_year}.", "important", 2,
            tip="Update dated statements or drop the year.",
        ))
    elif mentions_current:
        checks.append(make(
            "freshness-year-ref", "Year references", "pass", f"The content mentions {current_year}.", "important", 2,
        ))

    # Unknown age never counts as old
    if not evergreen and age is not None and ctx.word_count < THIN_AGING_MIN_WORDS and age > FRESHNESS_WARN_DAYS:
        checks.append(make(
            "freshness-thin-aging", "Thin and outdated", "fail",
            f"Only {ctx.word_count} words and not updated for {age} days.", "important", 3,
            tip="Expand and refresh this page, or merge it into a stronger one.",
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_freshness, order=140)
