# src/seo_analyzer/rules/groups/secondary_keywords.py
from typing import List

from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import count_occurrences, normalize

GROUP = "secondary-keywords"
make = CheckFactory(GROUP)


def has_secondary_keywords(page: PageInput, ctx: AnalysisContext) -> bool:
    return bool(ctx.secondary_keywords)


@check_spec(ids=[
    "secondary-kw-title-{i}", "secondary-kw-desc-{i}", "secondary-kw-content-{i}", "secondary-kw-heading-{i}",
])
def check_secondary_keywords(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    """Four light checks per secondary keyword; misses are warnings, never failures."""
    checks: List[Check] = []
    title = normalize(page.meta_title or "")
    description = normalize(page.meta_description or "")
    subheadings = [normalize(h.text) for h in ctx.headings if h.tag in ("h2", "h3")]
    many = len(ctx.secondary_keywords) > 1

    for i, (original, keyword) in enumerate(ctx.secondary_keywords):
        suffix = f" (#{i + 1})" if many else ""

        if keyword in title:
            checks.append(make(
                f"secondary-kw-title-{i}", f"Secondary keyword in title{suffix}", "pass",
                f'"{original}" appears in the title.', "bonus", 1,
            ))
        else:
            checks.append(make(
                f"secondary-kw-title-{i}", f"Secondary keyword in title{suffix}", "warning",
                f'"{original}" is not in the title.', "bonus", 1,
            ))

        if keyword in description:
            checks.append(make(
                f"secondary-kw-desc-{i}", f"Secondary keyword in description{suffix}", "pass",
                f'"{original}" appears in the meta description.', "bonus", 1,
            ))
        else:
            checks.append(make(
                f"secondary-kw-desc-{i}", f"Secondary keyword in description{suffix}", "warning",
                f'"{original}" is not in the meta description.', "bonus", 1,
            ))

        occurrence = count_occurrences(keyword, ctx.normalized_text, ctx.word_count)
        if occurrence.exact_count > 0 and ctx.word_count > 0:
            checks.append(make(
                f"secondary-kw-content-{i}", f"Secondary keyword in content{suffix}", "pass",
                f'"{original}" appears {occurrence.exact_count} time(s) ({occurrence.estimated_density:.1f}%).',
                "bonus", 1,
            ))
        else:
            checks.append(make(
                f"secondary-kw-content-{i}", f"Secondary keyword in content{suffix}", "warning",
                f'"{original}" does not appear in the content.', "bonus", 1,
            ))

        if any(keyword in heading for heading in subheadings):
            checks.append(make(
                f"secondary-kw-heading-{i}", f"Secondary keyword in a subheading{suffix}", "pass",
                f'"{original}" appears in an H2 or H3.', "bonus", 1,
            ))
        else:
            checks.append(make(
                f"secondary-kw-heading-{i}", f"Secondary keyword in a subheading{suffix}", "warning",
                f'Add "{original}" to an H2 or H3 subheading.', "bonus", 1,
            ))

    return checks


DEFINITION = RuleDefinition(
    group=GROUP, evaluator=check_secondary_keywords, order=120, enabled=has_secondary_keywords,
)
