# src/seo_analyzer/text/normalizer.py
import re
import unicodedata
from typing import List

from pydantic import BaseModel

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_SLUG_INVALID = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")

SIGNIFICANT_WORD_MIN_LENGTH = 4


class KeywordOccurrence(BaseModel):
    """Result of counting a keyword phrase inside a text."""
    exact_count: int = 0
    word_level_match: bool = False
    estimated_density: float = 0.0


def normalize(text: str) -> str:
    """
    Lowercases, strips diacritics and trims a string for accent-insensitive comparison.
    'Réalité Augmentée ' -> 'realite augmentee'
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()


def slugify(keyword: str) -> str:
    """Turns a keyword into the slug form it would have in a URL."""
    slug = _SLUG_INVALID.sub("", normalize(keyword))
    slug = _WHITESPACE.sub("-", slug)
    return _HYPHEN_RUNS.sub("-", slug)


def count_words(text: str) -> int:
    if not text:
        return 0
    return len(text.split())


def significant_words(keyword: str) -> List[str]:
    """Words of a keyword long enough to carry meaning (articles and prepositions are skipped)."""
    return [w for w in keyword.split() if len(w) >= SIGNIFICANT_WORD_MIN_LENGTH]


def keyword_matches(keyword: str, text: str) -> bool:
    """
    Fuzzy keyword match on already normalized strings.

    An exact substring wins. Otherwise a multi-word keyword matches when every
    significant word appears somewhere in the text, which tolerates inserted
    articles ('agence web ussel' vs 'agence web a ussel').
    """
    if not keyword or not text:
        return False
    if keyword in text:
        return True

    words = significant_words(keyword)
    if len(words) >= 2:
        return all(w in text for w in words)
    return False


def _count_substring(needle: str, haystack: str) -> int:
    count = 0
    idx = haystack.find(needle)
    while idx != -1:
        count += 1
        idx = haystack.find(needle, idx + 1)
    return count


def count_occurrences(keyword: str, text: str, total_words: int) -> KeywordOccurrence:
    """
    Counts keyword occurrences in normalized text and estimates its density (%).

    Exact phrase hits are preferred. When there are none, each significant word
    is counted separately and the minimum count is used as a conservative estimate.
    """
    if not keyword or not text:
        return KeywordOccurrence()

    exact_count = _count_substring(keyword, text)
    keyword_words = count_words(keyword)

    if exact_count > 0 or total_words == 0:
        density = (exact_count * keyword_words / total_words * 100) if total_words > 0 else 0.0
        return KeywordOccurrence(exact_count=exact_count, word_level_match=True, estimated_density=density)

    words = significant_words(keyword)
    if len(words) < 2:
        return KeywordOccurrence()

    min_count = min(_count_substring(w, text) for w in words)
    if min_count == 0:
        return KeywordOccurrence()

    return KeywordOccurrence(
        exact_count=0,
        word_level_match=True,
        estimated_density=min_count / total_words * 100,
    )
