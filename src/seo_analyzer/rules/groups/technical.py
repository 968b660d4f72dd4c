# src/seo_analyzer/rules/groups/technical.py
from typing import List
from urllib.parse import urlparse

from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec

GROUP = "technical"
make = CheckFactory(GROUP)


def same_origin(url: str, site_url: str) -> bool:
    """Scheme and host must match; a trailing path on the site URL is ignored."""
    a, b = urlparse(url), urlparse(site_url)
    return (a.scheme.lower(), a.netloc.lower()) == (b.scheme.lower(), b.netloc.lower())


def _canonical_check(canonical: str, site_url) -> Check:
    canonical = canonical.strip()
    if not canonical:
        return make(
            "canonical-missing", "Canonical URL", "warning", "The canonical URL is empty.", "important", 2,
            tip="Point the canonical to the preferred address of this page.",
        )
    if not canonical.lower().startswith(("http://", "https://")):
        return make(
            "canonical-invalid", "Canonical URL", "warning", f"'{canonical}' is not an absolute URL.",
            "important", 2, tip="Use a full URL including https://.",
        )
    if site_url and not same_origin(canonical, site_url):
        return make(
            "canonical-external", "Canonical URL", "warning", "The canonical URL points to another site.",
            "important", 2, tip="Only do this on purpose, for syndicated content.",
        )
    return make("canonical-ok", "Canonical URL", "pass", "The canonical URL is valid.", "important", 2)


@check_spec(ids=[
    "canonical-missing", "canonical-invalid", "canonical-external", "canonical-ok",
    "robots-noindex", "robots-nofollow", "robots-ok",
])
def check_technical(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    """Fields the host does not expose (None) are skipped, not penalised."""
    checks: List[Check] = []

    if page.canonical_url is not None:
        checks.append(_canonical_check(page.canonical_url, ctx.config.site_url))

    if page.robots_meta is not None:
        robots = page.robots_meta.strip().lower()
        noindex = "noindex" in robots
        nofollow = "nofollow" in robots

        if noindex:
            if ctx.page_type in ctx.config.acceptable_noindex_types:
                checks.append(make(
                    "robots-noindex", "Indexing", "warning",
                    f"The page is excluded from search results, which is acceptable for a {ctx.page_type} page.",
                    "critical", 3, tip="Make sure this is intended.",
                ))
            else:
                checks.append(make(
                    "robots-noindex", "Indexing", "fail", "The page is excluded from search results (noindex).",
                    "critical", 3, tip="Remove 'noindex' unless the page must stay hidden.",
                ))
        if nofollow:
            checks.append(make(
                "robots-nofollow", "Link following", "warning", "Search engines are told not to follow links.",
                "important", 2, tip="Remove 'nofollow' so link equity flows to your other pages.",
            ))
        if not noindex and not nofollow:
            checks.append(make(
                "robots-ok", "Robots directive", "pass", "The page can be indexed and its links followed.",
                "important", 2,
            ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_technical, order=150)
