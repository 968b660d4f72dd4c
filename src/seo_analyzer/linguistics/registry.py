# src/seo_analyzer/linguistics/registry.py
import logging
from typing import Dict, List, Optional

from seo_analyzer.constants import DEFAULT_LOCALE
from .base import LocaleStrategy
from .english import EnglishStrategy
from .french import FrenchStrategy

logger = logging.getLogger(__name__)

_STRATEGIES: Dict[str, LocaleStrategy] = {
    strategy.code: strategy for strategy in (FrenchStrategy(), EnglishStrategy())
}


def resolve_locale(locale: Optional[str] = None) -> str:
    """
    Maps any locale tag to a supported analysis locale.
    'fr', 'fr-FR', 'fr_CA' -> 'fr'; 'en-US' -> 'en'; anything else -> default.
    """
    if not locale:
        return DEFAULT_LOCALE
    prefix = locale.strip().lower()[:2]
    if prefix in _STRATEGIES:
        return prefix
    logger.debug("Unsupported locale '%s', falling back to '%s'.", locale, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


def get_strategy(locale: Optional[str] = None) -> LocaleStrategy:
    return _STRATEGIES[resolve_locale(locale)]


def available_locales() -> List[str]:
    return sorted(_STRATEGIES)


# --- Convenience facade ---

def split_sentences(text: str, locale: str = DEFAULT_LOCALE) -> List[str]:
    return get_strategy(locale).split_sentences(text)


def count_syllables(word: str, locale: str = DEFAULT_LOCALE) -> int:
    return get_strategy(locale).count_syllables(word)


def readability_score(text: str, locale: str = DEFAULT_LOCALE) -> int:
    return get_strategy(locale).readability_score(text)


def detect_passive_voice(sentence: str, locale: str = DEFAULT_LOCALE) -> bool:
    return get_strategy(locale).detect_passive_voice(sentence)


def has_transition_word(sentence: str, locale: str = DEFAULT_LOCALE) -> bool:
    return get_strategy(locale).has_transition_word(sentence)
