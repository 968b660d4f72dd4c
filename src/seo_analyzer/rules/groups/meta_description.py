# src/seo_analyzer/rules/groups/meta_description.py
import re
from typing import List

from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import keyword_matches, normalize
from seo_analyzer.utils.wordlists import CTA_NUMBER_PATTERNS, CTA_QUESTION_PATTERNS, for_locale, get_action_verbs

GROUP = "meta-description"
make = CheckFactory(GROUP)


def has_call_to_action(description: str, locale: str) -> bool:
    """Action verb, numbered promise ('5 tips') or a question opener all count as a CTA."""
    lower = description.lower()
    if any(re.search(rf"\b{re.escape(verb)}\b", lower) for verb in get_action_verbs(locale)):
        return True
    if for_locale(CTA_NUMBER_PATTERNS, locale).search(description):
        return True
    return for_locale(CTA_QUESTION_PATTERNS, locale).search(description) is not None


@check_spec(ids=["meta-desc-missing", "meta-desc-length", "meta-desc-keyword", "meta-desc-cta"])
def check_meta_description(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    description = page.meta_description or ""
    thresholds = ctx.config.thresholds

    if not description:
        checks.append(make(
            "meta-desc-missing", "Meta description", "fail", "No meta description is set.", "critical", 3,
            tip="Summarise the page in one or two sentences; search engines show it under the title.",
        ))
        return checks

    length = len(description)
    if length < thresholds.meta_desc_length_min:
        checks.append(make(
            "meta-desc-length", "Description length", "warning",
            f"Description is too short ({length} characters, aim for {thresholds.meta_desc_length_min}-"
            f"{thresholds.meta_desc_length_max}).",
            "critical", 3, tip="Add a benefit or a call to action.",
        ))
    elif length > thresholds.meta_desc_length_max:
        checks.append(make(
            "meta-desc-length", "Description length", "warning",
            f"Description is too long ({length} characters) and will be cut off.",
            "critical", 3, tip=f"Stay under {thresholds.meta_desc_length_max} characters.",
        ))
    else:
        checks.append(make(
            "meta-desc-length", "Description length", "pass", f"Description length is good ({length} characters).",
            "critical", 3,
        ))

    if ctx.normalized_keyword:
        if keyword_matches(ctx.normalized_keyword, normalize(description)):
            checks.append(make(
                "meta-desc-keyword", "Keyword in description", "pass",
                "The focus keyword appears in the description.", "critical", 3,
            ))
        else:
            checks.append(make(
                "meta-desc-keyword", "Keyword in description", "warning",
                "The focus keyword is missing from the description.", "critical", 3,
                tip="Search engines bold matching terms, which draws the eye.",
            ))

    if has_call_to_action(description, ctx.locale):
        checks.append(make(
            "meta-desc-cta", "Call to action", "pass", "The description invites the reader to act.", "important", 2,
        ))
    else:
        checks.append(make(
            "meta-desc-cta", "Call to action", "warning", "The description has no call to action.", "important", 2,
            tip="Start with an action verb ('Discover', 'Get', 'Compare') or ask a question.",
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_meta_description, order=20)
