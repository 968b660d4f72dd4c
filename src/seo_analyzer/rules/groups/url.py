# src/seo_analyzer/rules/groups/url.py
import re
from typing import List

from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import significant_words, slugify
from seo_analyzer.utils.wordlists import UTILITY_PAGE_SLUGS, get_stop_words, is_stop_word_in_compound

GROUP = "url"
make = CheckFactory(GROUP)

_INVALID_SLUG_CHARS = re.compile(r"[^a-z0-9\-/]")


def is_utility_slug(slug: str) -> bool:
    return any(slug == u or slug.endswith(f"/{u}") for u in UTILITY_PAGE_SLUGS)


@check_spec(ids=["slug-missing", "slug-length", "slug-format", "slug-keyword", "slug-stopwords"])
def check_url(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    slug = page.slug or ""
    max_length = ctx.config.thresholds.slug_max_length

    if not slug:
        checks.append(make(
            "slug-missing", "URL slug", "fail", "The page has no slug.", "important", 2,
            tip="Set a short, descriptive slug made of lowercase words separated by hyphens.",
        ))
        return checks

    if len(slug) > max_length:
        checks.append(make(
            "slug-length", "Slug length", "warning", f"The slug is long ({len(slug)} characters).", "important", 2,
            tip=f"Keep slugs under {max_length} characters; drop filler words.",
        ))
    else:
        checks.append(make(
            "slug-length", "Slug length", "pass", f"Slug length is fine ({len(slug)} characters).", "important", 2,
        ))

    if slug != slug.lower() or _INVALID_SLUG_CHARS.search(slug):
        checks.append(make(
            "slug-format", "Slug format", "warning",
            "The slug contains uppercase letters, accents or special characters.", "important", 2,
            tip="Use only lowercase letters, digits and hyphens.",
        ))
    else:
        checks.append(make(
            "slug-format", "Slug format", "pass", "The slug only uses safe characters.", "important", 2,
        ))

    keyword = ctx.normalized_keyword
    if keyword:
        if is_utility_slug(slug):
            checks.append(make(
                "slug-keyword", "Keyword in slug", "pass",
                "Utility page: a keyword in the slug is not expected.", "bonus", 1,
            ))
        else:
            keyword_slug = slugify(keyword)
            words = significant_words(keyword)
            if keyword_slug in slug or (words and all(w in slug for w in words)):
                checks.append(make(
                    "slug-keyword", "Keyword in slug", "pass", "The slug contains the focus keyword.",
                    "important", 2,
                ))
            else:
                checks.append(make(
                    "slug-keyword", "Keyword in slug", "warning", "The slug does not contain the focus keyword.",
                    "important", 2, tip=f"Consider a slug such as '{keyword_slug}'.",
                ))

    parts = slug.lower().split("-")
    stop_words = get_stop_words(ctx.locale)
    compounds = ctx.config.stop_word_compounds
    found = sorted({
        part for idx, part in enumerate(parts)
        if part in stop_words and not is_stop_word_in_compound(parts, idx, compounds)
    })
    if found:
        checks.append(make(
            "slug-stopwords", "Stop words in slug", "warning",
            f"The slug contains stop words: {', '.join(found)}.", "bonus", 1,
            tip="Remove articles and prepositions to keep the slug short.",
        ))
    else:
        checks.append(make(
            "slug-stopwords", "Stop words in slug", "pass", "No stop words in the slug.", "bonus", 1,
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_url, order=30)
