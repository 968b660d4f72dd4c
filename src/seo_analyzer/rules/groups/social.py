# src/seo_analyzer/rules/groups/social.py
from typing import List

from seo_analyzer.constants import SOCIAL_DESC_MAX, SOCIAL_TITLE_MAX
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec

GROUP = "social"
make = CheckFactory(GROUP)


def has_preview_image(meta_image) -> bool:
    """An uploaded image reference is either a populated document (dict) or a bare id."""
    if isinstance(meta_image, bool):
        return False
    return bool(meta_image) and isinstance(meta_image, (int, str, dict))


@check_spec(ids=["social-og-image", "social-title-truncation", "social-desc-length"])
def check_social(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []

    if has_preview_image(page.meta_image):
        checks.append(make(
            "social-og-image", "Sharing image", "pass", "A social sharing image is set.", "important", 2,
        ))
    else:
        checks.append(make(
            "social-og-image", "Sharing image", "warning", "No social sharing image is set.", "important", 2,
            tip="Shared links without an image get far fewer clicks; use 1200x630 pixels.",
        ))

    title = page.meta_title or ""
    if len(title) > SOCIAL_TITLE_MAX:
        checks.append(make(
            "social-title-truncation", "Sharing title", "warning",
            f"The title ({len(title)} characters) will be cut off on social networks.", "bonus", 1,
            tip=f"Keep it under {SOCIAL_TITLE_MAX} characters.",
        ))
    elif title:
        checks.append(make(
            "social-title-truncation", "Sharing title", "pass", "The title fits social previews.", "bonus", 1,
        ))

    description = page.meta_description or ""
    if len(description) > SOCIAL_DESC_MAX:
        checks.append(make(
            "social-desc-length", "Sharing description", "warning",
            f"The description ({len(description)} characters) will be cut off on social networks.", "bonus", 1,
            tip=f"Keep it under {SOCIAL_DESC_MAX} characters.",
        ))
    elif description:
        checks.append(make(
            "social-desc-length", "Sharing description", "pass", "The description fits social previews.",
            "bonus", 1,
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_social, order=80)
