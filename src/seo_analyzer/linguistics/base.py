# src/seo_analyzer/linguistics/base.py
import math
import re
from abc import ABC, abstractmethod
from typing import FrozenSet, List, NamedTuple, Pattern, Tuple

from seo_analyzer.text.normalizer import count_words

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
# Stand-in for an abbreviation's period while sentences are split.
_MASKED_PERIOD = "\u2024"


class FleschCoefficients(NamedTuple):
    base: float
    sentence_length: float
    syllables_per_word: float


class FleschThresholds(NamedTuple):
    passing: int
    warning: int


class ReadabilityThresholds(NamedTuple):
    long_sentence_words: int
    passive_max_ratio: float
    transitions_min_ratio: float


class LocaleStrategy(ABC):
    """
    Linguistic capabilities for one language.

    Subclasses supply the language tables (abbreviations, passive-voice pattern,
    connectives, Flesch coefficients) and a syllable heuristic; the shared
    algorithms below are driven by those tables only.
    """

    code: str = ""
    abbreviations: Tuple[str, ...] = ()
    flesch: FleschCoefficients
    flesch_thresholds: FleschThresholds
    readability_thresholds: ReadabilityThresholds
    passive_pattern: Pattern
    passive_exclusions: FrozenSet[str] = frozenset()
    transition_words: Tuple[str, ...] = ()

    def __init__(self):
        self._abbreviation_pattern = self._compile_abbreviations(self.abbreviations)
        self._transition_patterns = tuple(
            re.compile(rf"(?:^|, ){re.escape(word)}(?!\w)| {re.escape(word)} ") for word in self.transition_words
        )

    @staticmethod
    def _compile_abbreviations(abbreviations: Tuple[str, ...]) -> Pattern:
        # Longest first so 'Mme.' is tried before 'M.'
        ordered = sorted(abbreviations, key=len, reverse=True)
        alternatives = "|".join(re.escape(a.rstrip(".")) for a in ordered)
        return re.compile(rf"\b({alternatives})\.(?=\s)")

    @abstractmethod
    def count_syllables(self, word: str) -> int:
        """Heuristic syllable count of a single word, never below 1."""

    def split_sentences(self, text: str) -> List[str]:
        if not text or not text.strip():
            return []

        masked = self._abbreviation_pattern.sub(
            lambda m: m.group(1).replace(".", _MASKED_PERIOD) + _MASKED_PERIOD, text
        )
        sentences = []
        for part in _SENTENCE_BOUNDARY.split(masked):
            sentence = part.replace(_MASKED_PERIOD, ".").strip()
            if sentence:
                sentences.append(sentence)
        return sentences

    def readability_score(self, text: str) -> int:
        """Flesch reading ease for this language, clamped to 0-100."""
        sentences = self.split_sentences(text)
        words = text.split() if text else []
        if not sentences or not words:
            return 0

        syllables = sum(self.count_syllables(w) for w in words)
        avg_sentence_length = len(words) / len(sentences)
        avg_syllables = syllables / len(words)

        score = (
            self.flesch.base
            - self.flesch.sentence_length * avg_sentence_length
            - self.flesch.syllables_per_word * avg_syllables
        )
        return int(math.floor(max(0.0, min(100.0, score)) + 0.5))

    def detect_passive_voice(self, sentence: str) -> bool:
        """True when an auxiliary is followed by a past-participle-shaped word that is not an exclusion."""
        if not sentence:
            return False
        for match in self.passive_pattern.finditer(sentence):
            if match.group("participle").lower() not in self.passive_exclusions:
                return True
        return False

    def has_transition_word(self, sentence: str) -> bool:
        lower = sentence.lower().strip() if sentence else ""
        if not lower:
            return False
        return any(pattern.search(lower) for pattern in self._transition_patterns)

    def long_sentence_ratio(self, sentences: List[str]) -> Tuple[int, float]:
        if not sentences:
            return 0, 0.0
        limit = self.readability_thresholds.long_sentence_words
        long_count = sum(1 for s in sentences if count_words(s) > limit)
        return long_count, long_count / len(sentences)
