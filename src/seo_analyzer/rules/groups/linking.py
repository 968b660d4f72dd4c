# src/seo_analyzer/rules/groups/linking.py
from typing import List

from seo_analyzer.document.link_fields import is_external_url, is_internal_url
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.utils.wordlists import GENERIC_ANCHOR_TEXTS, for_locale

GROUP = "linking"
make = CheckFactory(GROUP)

# Outbound links are not expected on these pages.
EXTERNAL_OPTIONAL_TYPES = ("contact", "legal", "form")


@check_spec(ids=["linking-internal", "linking-external", "linking-generic-anchors", "linking-empty"])
def check_linking(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    links = ctx.links
    internal = [link for link in links if is_internal_url(link.url)]
    external = [link for link in links if is_external_url(link.url)]

    if not internal:
        checks.append(make(
            "linking-internal", "Internal links", "warning", "The page links to no other page of the site.",
            "important", 2, tip="Link to related pages so visitors and crawlers can keep exploring.",
        ))
    else:
        checks.append(make(
            "linking-internal", "Internal links", "pass", f"{len(internal)} internal link(s).", "important", 2,
        ))

    if ctx.page_type in EXTERNAL_OPTIONAL_TYPES:
        checks.append(make(
            "linking-external", "External links", "pass", "External links are not expected on this page.",
            "bonus", 1,
        ))
    elif not external:
        checks.append(make(
            "linking-external", "External links", "warning", "The page cites no external source.", "bonus", 1,
            tip="Linking to authoritative sources adds credibility.",
        ))
    else:
        checks.append(make(
            "linking-external", "External links", "pass", f"{len(external)} external link(s).", "bonus", 1,
        ))

    generic_anchors = for_locale(GENERIC_ANCHOR_TEXTS, ctx.locale)
    generic = [link for link in links if link.text.strip().lower() in generic_anchors]
    if generic:
        checks.append(make(
            "linking-generic-anchors", "Anchor text", "warning",
            f"{len(generic)} link(s) use a generic anchor such as '{generic[0].text.strip()}'.", "important", 2,
            tip="Describe the destination in the anchor text instead of 'click here'.",
        ))
    elif links:
        checks.append(make(
            "linking-generic-anchors", "Anchor text", "pass", "Link anchors are descriptive.", "important", 2,
        ))

    empty = [link for link in links if link.url.strip() in ("", "#")]
    if empty:
        checks.append(make(
            "linking-empty", "Empty links", "warning", f"{len(empty)} link(s) point nowhere ('#').", "important", 2,
            tip="Set a real destination or remove the link.",
        ))
    elif links:
        checks.append(make(
            "linking-empty", "Empty links", "pass", "Every link has a destination.", "important", 2,
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_linking, order=70)
