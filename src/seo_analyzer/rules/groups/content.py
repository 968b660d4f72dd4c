# src/seo_analyzer/rules/groups/content.py
import re
from typing import List

from seo_analyzer.constants import (
    DISTRIBUTION_MIN_WORDS,
    KEYWORD_DENSITY_WARN,
    KEYWORD_INTRO_CHARS,
    LISTS_MIN_WORDS,
    MIN_WORDS_FORM,
    MIN_WORDS_LEGAL,
    MIN_WORDS_THIN,
)
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import count_occurrences, keyword_matches, normalize
from seo_analyzer.utils.wordlists import PLACEHOLDER_PATTERNS

GROUP = "content"
make = CheckFactory(GROUP)

# A period only ends a sentence when followed by whitespace or the end ('site.fr' stays whole).
_INTRO_SENTENCE_SPLIT = re.compile(r"\.(?=\s|$)|\n")


def minimum_words(page_type: str, ctx: AnalysisContext) -> int:
    thresholds = ctx.config.thresholds
    if page_type == "blog":
        return thresholds.min_words_post
    if page_type in ("form", "contact"):
        return MIN_WORDS_FORM
    if page_type == "legal":
        return MIN_WORDS_LEGAL
    return thresholds.min_words_generic


def keyword_thirds(keyword: str, text: str) -> int:
    """How many of the three equal slices of the text mention the keyword."""
    third = len(text) // 3
    if third == 0:
        return 0
    slices = (text[:third], text[third:third * 2], text[third * 2:])
    return sum(1 for part in slices if keyword_matches(keyword, part))


@check_spec(ids=[
    "content-wordcount", "content-keyword-intro", "content-keyword-density", "content-no-placeholder",
    "content-thin", "content-keyword-distribution", "content-has-lists",
])
def check_content(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    words = ctx.word_count
    keyword = ctx.normalized_keyword
    thresholds = ctx.config.thresholds

    # --- Word count ---
    floor = minimum_words(ctx.page_type, ctx)
    if words < MIN_WORDS_THIN:
        checks.append(make(
            "content-wordcount", "Word count", "fail", f"Only {words} words of content.", "important", 2,
            tip=f"Pages of this type should reach at least {floor} words.",
        ))
    elif words < floor:
        checks.append(make(
            "content-wordcount", "Word count", "warning", f"{words} words, below the {floor} recommended.",
            "important", 2, tip="Expand the answers to the questions your visitors ask.",
        ))
    else:
        checks.append(make(
            "content-wordcount", "Word count", "pass", f"{words} words of content.", "important", 2,
        ))

    # --- Keyword in introduction ---
    if keyword and ctx.full_text.strip():
        opening = normalize(ctx.full_text.strip()[:KEYWORD_INTRO_CHARS])
        intro = " ".join(_INTRO_SENTENCE_SPLIT.split(opening)[:2])
        if keyword_matches(keyword, intro):
            checks.append(make(
                "content-keyword-intro", "Keyword in introduction", "pass",
                "The focus keyword appears in the opening sentences.", "important", 2,
            ))
        else:
            checks.append(make(
                "content-keyword-intro", "Keyword in introduction", "warning",
                "The focus keyword is missing from the opening sentences.", "important", 2,
                tip="Mention the topic in the first two sentences.",
            ))

    # --- Density ---
    if keyword and words > 0:
        occurrence = count_occurrences(keyword, ctx.normalized_text, words)
        density = round(occurrence.estimated_density, 1)
        if occurrence.estimated_density > thresholds.keyword_density_max:
            checks.append(make(
                "content-keyword-density", "Keyword density", "fail",
                f"Keyword density is {density}%, which reads as keyword stuffing.", "critical", 3,
                tip="Replace some repetitions with synonyms or pronouns.",
            ))
        elif occurrence.estimated_density > KEYWORD_DENSITY_WARN:
            checks.append(make(
                "content-keyword-density", "Keyword density", "warning",
                f"Keyword density is high ({density}%).", "important", 2,
                tip="Stay below 2.5%.",
            ))
        elif occurrence.estimated_density >= thresholds.keyword_density_min:
            checks.append(make(
                "content-keyword-density", "Keyword density", "pass",
                f"Keyword density is {density}% ({occurrence.exact_count} exact matches).", "important", 2,
            ))
        elif occurrence.word_level_match or occurrence.exact_count > 0:
            checks.append(make(
                "content-keyword-density", "Keyword density", "warning",
                f"The keyword is present but rare ({density}%).", "important", 2,
                tip="Use the keyword a few more times where it reads naturally.",
            ))
        else:
            checks.append(make(
                "content-keyword-density", "Keyword density", "fail", "The focus keyword never appears in the content.",
                "important", 2, tip="Use the focus keyword in the body text.",
            ))

    # --- Placeholders ---
    if any(pattern.search(ctx.full_text) for pattern in PLACEHOLDER_PATTERNS):
        checks.append(make(
            "content-no-placeholder", "Placeholder text", "fail", "The content still contains placeholder text.",
            "critical", 3, tip="Replace lorem ipsum, TODO and similar markers before publishing.",
        ))
    else:
        checks.append(make(
            "content-no-placeholder", "Placeholder text", "pass", "No placeholder text found.", "critical", 3,
        ))

    # --- Thin content ---
    if 0 < words <= MIN_WORDS_THIN:
        checks.append(make(
            "content-thin", "Thin content", "warning", f"The page is thin ({words} words).", "important", 2,
            tip="Thin pages rarely rank; merge or expand them.",
        ))
    elif words > MIN_WORDS_THIN:
        checks.append(make(
            "content-thin", "Thin content", "pass", "The page is not thin.", "important", 2,
        ))

    # --- Distribution ---
    if keyword and words >= DISTRIBUTION_MIN_WORDS:
        thirds = keyword_thirds(keyword, ctx.normalized_text)
        if thirds >= 2:
            checks.append(make(
                "content-keyword-distribution", "Keyword distribution", "pass",
                f"The keyword appears in {thirds}/3 parts of the text.", "important", 2,
            ))
        elif thirds == 1:
            checks.append(make(
                "content-keyword-distribution", "Keyword distribution", "warning",
                "The keyword only appears in one part of the text.", "important", 2,
                tip="Mention the topic at the start, the middle and the end.",
            ))
        else:
            checks.append(make(
                "content-keyword-distribution", "Keyword distribution", "fail",
                "The keyword does not appear in any part of the text.", "important", 2,
                tip="Mention the topic at the start, the middle and the end.",
            ))

    # --- Lists ---
    if words > LISTS_MIN_WORDS:
        if ctx.lists:
            checks.append(make(
                "content-has-lists", "Lists", "pass", f"The content uses {len(ctx.lists)} list(s).", "bonus", 1,
            ))
        else:
            checks.append(make(
                "content-has-lists", "Lists", "warning", "Long content without any list.", "bonus", 1,
                tip="Bullet or numbered lists make long pages easier to scan.",
            ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_content, order=50)
