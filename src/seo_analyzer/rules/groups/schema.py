# src/seo_analyzer/rules/groups/schema.py
from typing import List

from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec

GROUP = "schema"
make = CheckFactory(GROUP)


@check_spec(ids=["schema-readiness"])
def check_schema(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    """Structured data needs a name, a description and an image to be generated."""
    missing = []
    if not page.meta_title:
        missing.append("title")
    if not page.meta_description:
        missing.append("description")
    if ctx.image_stats.total == 0:
        missing.append("image")

    if missing:
        return [make(
            "schema-readiness", "Structured data", "warning",
            f"Structured data cannot be generated: missing {', '.join(missing)}.", "bonus", 1,
            tip="Fill in the title, the description and at least one image.",
        )]
    return [make(
        "schema-readiness", "Structured data", "pass", "The page has everything needed for structured data.",
        "bonus", 1,
    )]


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_schema, order=90)
