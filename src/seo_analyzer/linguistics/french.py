# src/seo_analyzer/linguistics/french.py
import re

from .base import FleschCoefficients, FleschThresholds, LocaleStrategy, ReadabilityThresholds

_VOWELS = "aeiouyàâäéèêëïîôùûüÿæœ"
_LETTERS = re.compile(r"[^a-zàâäéèêëïîôùûüÿæœ]")
_VOWEL_GROUPS = re.compile(rf"[{_VOWELS}]+")
_SILENT_E = re.compile(rf"[^{_VOWELS}]e$")
_TRIPLE_VOWELS = re.compile(r"(?:eau|oeu|aie|oui)")

# Être-verbs build their passé composé with the same auxiliary as the passive voice.
_ETRE_PARTICIPLES = frozenset({
    "allé", "allée", "allés", "allées",
    "venu", "venue", "venus", "venues",
    "arrivé", "arrivée", "arrivés", "arrivées",
    "parti", "partie", "partis", "parties",
    "resté", "restée", "restés", "restées",
    "devenu", "devenue", "devenus", "devenues",
    "né", "née", "nés", "nées",
    "mort", "morte", "morts", "mortes",
    "tombé", "tombée", "tombés", "tombées",
    "passé", "passée", "passés", "passées",
    "sorti", "sortie", "sortis", "sorties",
    "entré", "entrée", "entrés", "entrées",
    "monté", "montée", "montés", "montées",
    "descendu", "descendue", "descendus", "descendues",
    "retourné", "retournée", "retournés", "retournées",
    "revenu", "revenue", "revenus", "revenues",
})

TRANSITION_WORDS_FR = (
    # addition
    "de plus", "en outre", "par ailleurs", "également", "aussi", "de même", "d'une part", "d'autre part",
    "qui plus est", "de surcroît", "non seulement",
    # contrast
    "cependant", "néanmoins", "toutefois", "en revanche", "tandis que", "alors que", "bien que", "même si",
    "pourtant", "malgré tout", "au contraire", "or",
    # cause / consequence
    "par conséquent", "en effet", "ainsi", "donc", "car", "puisque", "étant donné que", "en raison de",
    "à cause de", "grâce à", "c'est pourquoi", "de ce fait",
    # purpose
    "afin de", "dans le but de", "pour que", "de manière à",
    # sequence
    "puis", "ensuite", "enfin", "premièrement", "deuxièmement", "troisièmement", "finalement", "en conclusion",
    "tout d'abord", "d'abord", "pour commencer", "pour finir",
    # illustration
    "par exemple", "c'est-à-dire", "autrement dit", "en d'autres termes", "en fait", "en réalité", "surtout",
    "notamment", "en particulier", "à savoir",
    # condition
    "à condition que", "pourvu que", "en cas de", "si",
    # conclusion
    "bref", "en somme", "en résumé", "pour conclure", "en définitive", "somme toute", "tout compte fait",
)


class FrenchStrategy(LocaleStrategy):
    """French rules: Kandel-Moles flavoured Flesch and French passive constructions."""

    code = "fr"
    abbreviations = ("M.", "Mme.", "Mlle.", "Dr.", "etc.", "cf.", "ex.")
    flesch = FleschCoefficients(207.0, 1.015, 73.6)
    flesch_thresholds = FleschThresholds(passing=40, warning=25)
    readability_thresholds = ReadabilityThresholds(
        long_sentence_words=25, passive_max_ratio=0.15, transitions_min_ratio=0.15
    )
    passive_pattern = re.compile(
        r"\b(?:est|sont|a\s+été|ont\s+été|sera|seront|fut|furent|était|étaient|serait|seraient"
        r"|avait\s+été|avaient\s+été)\s+(?P<participle>\w+(?:é|ée|és|ées|i|ie|is|ies|u|ue|us|ues))\b",
        re.IGNORECASE,
    )
    passive_exclusions = _ETRE_PARTICIPLES
    transition_words = TRANSITION_WORDS_FR

    def count_syllables(self, word: str) -> int:
        cleaned = _LETTERS.sub("", word.lower())
        if not cleaned:
            return 1

        count = len(_VOWEL_GROUPS.findall(cleaned))
        if count == 0:
            return 1

        if _SILENT_E.search(cleaned) and count > 1:
            count -= 1

        count -= len(_TRIPLE_VOWELS.findall(cleaned))
        return max(1, count)
