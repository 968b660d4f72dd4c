# src/seo_analyzer/rules/groups/title.py
import re
from typing import List

from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import keyword_matches, normalize, significant_words
from seo_analyzer.utils.wordlists import QUESTION_WORDS, SENTIMENT_WORDS, for_locale, get_power_words

GROUP = "title"
make = CheckFactory(GROUP)

_BRAND_SEPARATORS = re.compile(r"\s+[|–—]\s+|\s+-\s+")
_WORDS = re.compile(r"[\w'-]+")
_DIGIT = re.compile(r"\d")


def _keyword_position(title: str, keyword: str) -> int:
    """Index of the keyword in the title; first significant word when there is no exact hit."""
    idx = title.find(keyword)
    if idx != -1:
        return idx
    positions = [title.find(w) for w in significant_words(keyword) if w in title]
    return min(positions) if positions else -1


def _site_name_count(normalized_title: str, site_name) -> int:
    """How often the configured site name appears as a whole phrase in the title."""
    name = normalize(site_name or "").strip()
    if not name:
        return 0
    return len(re.findall(rf"(?<!\w){re.escape(name)}(?!\w)", normalized_title))


def _contains_any(words, vocabulary) -> bool:
    """Word match that also accepts simple plurals ('astuces' -> 'astuce')."""
    return any(w in vocabulary or (w.endswith("s") and w[:-1] in vocabulary) for w in words)


def _is_question(title: str, locale: str) -> bool:
    if title.endswith("?"):
        return True
    words = "|".join(re.escape(w) for w in for_locale(QUESTION_WORDS, locale))
    return re.match(rf"^(?:{words})[\s-]", title) is not None


@check_spec(ids=[
    "title-missing", "title-length", "title-keyword", "title-keyword-position", "title-duplicate-brand",
    "title-power-words", "title-has-number", "title-is-question", "title-sentiment",
])
def check_title(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    title = page.meta_title or ""
    thresholds = ctx.config.thresholds
    keyword = ctx.normalized_keyword

    if not title:
        checks.append(make(
            "title-missing", "Meta title", "fail", "No meta title is set.", "critical", 3,
            tip="Write a unique title that states the page topic and includes the focus keyword.",
        ))
        return checks

    # --- Length ---
    length = len(title)
    if length < thresholds.title_length_min:
        checks.append(make(
            "title-length", "Title length", "warning",
            f"Title is too short ({length} characters, aim for {thresholds.title_length_min}-"
            f"{thresholds.title_length_max}).",
            "critical", 3, tip="Add a qualifier, a location or your brand to use the available space.",
        ))
    elif length > thresholds.title_length_max:
        checks.append(make(
            "title-length", "Title length", "warning",
            f"Title is too long ({length} characters) and will be truncated in search results.",
            "critical", 3, tip=f"Keep the title under {thresholds.title_length_max} characters.",
        ))
    else:
        checks.append(make(
            "title-length", "Title length", "pass", f"Title length is good ({length} characters).", "critical", 3,
        ))

    normalized_title = normalize(title)

    # --- Keyword ---
    if keyword:
        if keyword_matches(keyword, normalized_title):
            checks.append(make(
                "title-keyword", "Keyword in title", "pass", "The focus keyword appears in the title.",
                "critical", 3,
            ))
            position = _keyword_position(normalized_title, keyword)
            if 0 <= position < len(normalized_title) // 2:
                checks.append(make(
                    "title-keyword-position", "Keyword position", "pass",
                    "The focus keyword is in the first half of the title.", "important", 2,
                ))
            else:
                checks.append(make(
                    "title-keyword-position", "Keyword position", "warning",
                    "The focus keyword appears late in the title.", "important", 2,
                    tip="Move the keyword towards the start of the title.",
                ))
        else:
            checks.append(make(
                "title-keyword", "Keyword in title", "warning", "The focus keyword is missing from the title.",
                "critical", 3, tip="Include the focus keyword, ideally near the start.",
            ))

    # --- Duplicate brand segments ---
    segments = [s.strip().lower() for s in _BRAND_SEPARATORS.split(title) if s.strip()]
    if len(segments) != len(set(segments)) or _site_name_count(normalized_title, ctx.config.site_name) > 1:
        checks.append(make(
            "title-duplicate-brand", "Repeated segment", "warning",
            "The title repeats the same segment (often the brand name twice).", "important", 2,
            tip="Check the title template: the site name may be appended automatically.",
        ))
    else:
        checks.append(make(
            "title-duplicate-brand", "Repeated segment", "pass", "No repeated segment in the title.",
            "important", 2,
        ))

    # --- Bonus signals ---
    title_words = set(_WORDS.findall(normalized_title))

    if _contains_any(title_words, get_power_words(ctx.locale)):
        checks.append(make(
            "title-power-words", "Power words", "pass", "The title contains a power word.", "bonus", 1,
        ))
    else:
        checks.append(make(
            "title-power-words", "Power words", "warning", "The title has no power word.", "bonus", 1,
            tip="Words like 'guide', 'complete' or 'free' can raise the click-through rate.",
        ))

    if _DIGIT.search(title):
        checks.append(make(
            "title-has-number", "Number in title", "pass", "The title contains a number.", "bonus", 1,
        ))
    else:
        checks.append(make(
            "title-has-number", "Number in title", "warning", "The title contains no number.", "bonus", 1,
            tip="Figures ('7 tips', '2025') tend to attract clicks.",
        ))

    if _is_question(normalized_title, ctx.locale):
        checks.append(make(
            "title-is-question", "Question title", "pass", "The title is phrased as a question.", "bonus", 1,
        ))
    else:
        checks.append(make(
            "title-is-question", "Question title", "warning", "The title is not phrased as a question.",
            "bonus", 1, tip="A question mirrors how people search and can match voice queries.",
        ))

    if _contains_any(title_words, for_locale(SENTIMENT_WORDS, ctx.locale)):
        checks.append(make(
            "title-sentiment", "Emotional words", "pass", "The title carries an emotional word.", "bonus", 1,
        ))
    else:
        checks.append(make(
            "title-sentiment", "Emotional words", "warning", "The title carries no emotional word.", "bonus", 1,
            tip="A positive or negative sentiment word can make the title stand out.",
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_title, order=10)
