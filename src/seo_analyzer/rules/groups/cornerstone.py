# src/seo_analyzer/rules/groups/cornerstone.py
from typing import List

from seo_analyzer.constants import CORNERSTONE_MIN_INTERNAL_LINKS, CORNERSTONE_MIN_WORDS
from seo_analyzer.document.link_fields import is_internal_url
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec

GROUP = "cornerstone"
make = CheckFactory(GROUP)


def is_cornerstone(page: PageInput, ctx: AnalysisContext) -> bool:
    return page.is_cornerstone


@check_spec(ids=[
    "cornerstone-wordcount", "cornerstone-internal-links", "cornerstone-focus-keyword",
    "cornerstone-meta-description",
])
def check_cornerstone(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    """Pillar pages are held to stricter floors than regular content."""
    checks: List[Check] = []
    thresholds = ctx.config.thresholds

    if ctx.word_count >= CORNERSTONE_MIN_WORDS:
        checks.append(make(
            "cornerstone-wordcount", "Pillar content length", "pass",
            f"{ctx.word_count} words: comprehensive enough for a pillar page.", "important", 4,
        ))
    else:
        checks.append(make(
            "cornerstone-wordcount", "Pillar content length", "warning",
            f"{ctx.word_count} words: pillar pages should reach {CORNERSTONE_MIN_WORDS}.", "important", 4,
            tip="Cover the topic in depth; this page should be the reference on it.",
        ))

    internal = sum(1 for link in ctx.links if is_internal_url(link.url))
    if internal >= CORNERSTONE_MIN_INTERNAL_LINKS:
        checks.append(make(
            "cornerstone-internal-links", "Pillar internal links", "pass", f"{internal} internal links.",
            "important", 4,
        ))
    else:
        checks.append(make(
            "cornerstone-internal-links", "Pillar internal links", "warning",
            f"Only {internal} internal link(s); pillar pages need at least {CORNERSTONE_MIN_INTERNAL_LINKS}.",
            "important", 4, tip="Link out to the supporting articles of this topic.",
        ))

    if ctx.normalized_keyword:
        checks.append(make(
            "cornerstone-focus-keyword", "Pillar focus keyword", "pass", "A focus keyword is set.", "critical", 5,
        ))
    else:
        checks.append(make(
            "cornerstone-focus-keyword", "Pillar focus keyword", "fail", "Pillar pages must have a focus keyword.",
            "critical", 5, tip="Choose the keyword this page should rank for.",
        ))

    length = len(page.meta_description or "")
    if thresholds.meta_desc_length_min <= length <= thresholds.meta_desc_length_max:
        checks.append(make(
            "cornerstone-meta-description", "Pillar meta description", "pass",
            f"The description is well sized ({length} characters).", "critical", 5,
        ))
    elif length > 0:
        checks.append(make(
            "cornerstone-meta-description", "Pillar meta description", "warning",
            f"The description is {length} characters; aim for {thresholds.meta_desc_length_min}-"
            f"{thresholds.meta_desc_length_max}.",
            "critical", 5, tip="Polish the description of your most important pages.",
        ))
    else:
        checks.append(make(
            "cornerstone-meta-description", "Pillar meta description", "fail",
            "Pillar pages must have a meta description.", "critical", 5,
            tip="Write a description that sells the page in search results.",
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_cornerstone, order=130, enabled=is_cornerstone)
