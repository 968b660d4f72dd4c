# src/seo_analyzer/rules/groups/headings.py
from typing import List

from seo_analyzer.constants import WORDS_PER_HEADING
from seo_analyzer.document.models import Heading
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import keyword_matches, normalize

GROUP = "headings"
make = CheckFactory(GROUP)


def check_heading_hierarchy(headings: List[Heading]) -> bool:
    """
    True when heading levels never skip: the deepest level seen so far may
    only grow by one at a time (h1 -> h3 is a skip, h3 -> h2 is fine).
    """
    max_level = 0
    for heading in headings:
        level = heading.level
        if max_level > 0 and level > max_level + 1:
            return False
        if level > max_level:
            max_level = level
    return True


@check_spec(ids=[
    "h1-missing", "h1-unique", "h1-keyword", "heading-hierarchy", "h2-keyword", "heading-frequency",
    "h1-title-different",
])
def check_headings(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    keyword = ctx.normalized_keyword
    h1s = [h for h in ctx.headings if h.tag == "h1"]
    h2s = [h for h in ctx.headings if h.tag == "h2"]

    # --- Single H1 ---
    if not h1s:
        checks.append(make(
            "h1-missing", "H1 heading", "fail", "The page has no H1 heading.", "important", 2,
            tip="Add one H1 that states the main topic of the page.",
        ))
    elif len(h1s) > 1:
        checks.append(make(
            "h1-unique", "H1 heading", "warning", f"The page has {len(h1s)} H1 headings.", "important", 2,
            tip="Keep a single H1 and turn the others into H2.",
        ))
    else:
        checks.append(make(
            "h1-unique", "H1 heading", "pass", "The page has exactly one H1.", "important", 2,
        ))

    if keyword:
        h1_text = " ".join(normalize(h.text) for h in h1s)
        if keyword_matches(keyword, h1_text):
            checks.append(make(
                "h1-keyword", "Keyword in H1", "pass", "The H1 contains the focus keyword.", "important", 2,
            ))
        else:
            checks.append(make(
                "h1-keyword", "Keyword in H1", "warning", "The H1 does not contain the focus keyword.",
                "important", 2, tip="Work the focus keyword into the main heading.",
            ))

    if check_heading_hierarchy(ctx.headings):
        checks.append(make(
            "heading-hierarchy", "Heading hierarchy", "pass", "Heading levels follow each other in order.",
            "important", 2,
        ))
    else:
        checks.append(make(
            "heading-hierarchy", "Heading hierarchy", "warning", "A heading level is skipped (e.g. H1 -> H3).",
            "important", 2, tip="Nest headings one level at a time so screen readers and crawlers follow the outline.",
        ))

    if keyword and h2s:
        if any(keyword_matches(keyword, normalize(h.text)) for h in h2s):
            checks.append(make(
                "h2-keyword", "Keyword in H2", "pass", "At least one H2 contains the focus keyword.", "important", 2,
            ))
        else:
            checks.append(make(
                "h2-keyword", "Keyword in H2", "warning", "No H2 contains the focus keyword.", "important", 2,
                tip="Use the keyword or a close variant in one subheading.",
            ))

    if ctx.word_count > WORDS_PER_HEADING:
        expected = ctx.word_count // WORDS_PER_HEADING
        subheadings = len(ctx.headings) - len(h1s)
        if subheadings >= expected:
            checks.append(make(
                "heading-frequency", "Subheading frequency", "pass",
                f"{subheadings} subheadings for {ctx.word_count} words.", "bonus", 1,
            ))
        else:
            checks.append(make(
                "heading-frequency", "Subheading frequency", "warning",
                f"Only {subheadings} subheadings for {ctx.word_count} words (expected {expected}).", "bonus", 1,
                tip=f"Add a subheading roughly every {WORDS_PER_HEADING} words.",
            ))

    if page.meta_title and h1s:
        if normalize(h1s[0].text) == normalize(page.meta_title):
            checks.append(make(
                "h1-title-different", "H1 vs title", "warning", "The H1 is identical to the meta title.",
                "important", 1, tip="Vary the wording to cover more search intents.",
            ))
        else:
            checks.append(make(
                "h1-title-different", "H1 vs title", "pass", "The H1 and the meta title differ.", "important", 1,
            ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_headings, order=40)
