# src/seo_analyzer/utils/wordlists.py
"""
Static word tables used by the rule groups.

Every table is keyed by locale code and holds immutable values (frozensets,
tuples, compiled patterns). Tables are built once at import time and only
read afterwards; use ``for_locale`` to select the entry for a call.
"""
import re
from typing import Dict, FrozenSet, Pattern, Tuple, TypeVar

from seo_analyzer.constants import DEFAULT_LOCALE

T = TypeVar("T")

STOP_WORDS: Dict[str, FrozenSet[str]] = {
    "fr": frozenset({
        "le", "la", "les", "de", "des", "du", "un", "une", "et", "en", "pour", "avec", "dans", "sur", "par", "au",
        "aux", "ce", "ces", "est", "sont", "qui", "que", "dont", "ou", "ne", "pas", "se", "sa", "son", "ses", "nous",
        "vous", "ils", "leur", "leurs",
    }),
    "en": frozenset({
        "a", "an", "the", "and", "or", "of", "to", "in", "on", "for", "with", "at", "by", "from", "is", "are", "was",
        "be", "it", "its", "this", "that", "as", "your", "our", "my", "their", "we", "you", "but", "not", "so",
        "into", "than", "then", "these", "those",
    }),
}

ACTION_VERBS: Dict[str, Tuple[str, ...]] = {
    "fr": (
        "découvrez", "contactez", "obtenez", "profitez", "demandez", "essayez", "téléchargez", "réservez",
        "commandez", "inscrivez", "appelez", "trouvez", "comparez", "calculez", "estimez", "consultez", "visitez",
        "explorez", "lancez", "commencez", "transformez", "optimisez", "améliorez", "boostez", "créez",
        "rejoignez", "bénéficiez", "accédez", "simplifiez", "recevez",
    ),
    "en": (
        "discover", "contact", "get", "try", "download", "book", "order", "register", "call", "find", "compare",
        "calculate", "estimate", "explore", "launch", "start", "transform", "optimize", "improve", "boost",
        "create", "join", "access", "simplify", "receive", "learn", "request", "claim", "save", "shop", "subscribe",
        "visit", "unlock",
    ),
}

# Matched against normalized (accent-free) titles.
POWER_WORDS: Dict[str, FrozenSet[str]] = {
    "fr": frozenset({
        "gratuit", "exclusif", "nouveau", "meilleur", "secret", "ultime", "essentiel", "complet", "rapide",
        "efficace", "simple", "garanti", "prouve", "unique", "incontournable", "revolutionnaire", "indispensable",
        "exceptionnel", "professionnel", "expert", "guide", "conseil", "astuce", "methode", "solution", "resultat",
        "facile", "puissant", "fiable", "premium",
    }),
    "en": frozenset({
        "free", "exclusive", "new", "best", "secret", "ultimate", "essential", "complete", "fast", "effective",
        "simple", "guaranteed", "proven", "unique", "revolutionary", "indispensable", "exceptional",
        "professional", "expert", "guide", "tips", "method", "solution", "results", "easy", "powerful",
        "reliable", "premium", "instant", "step-by-step",
    }),
}

QUESTION_WORDS: Dict[str, Tuple[str, ...]] = {
    "fr": (
        "comment", "pourquoi", "quand", "quel", "quelle", "quels", "quelles", "combien", "ou", "qui", "que",
        "est-ce",
    ),
    "en": (
        "how", "why", "when", "what", "which", "where", "who", "can", "do", "does", "is", "are", "should",
    ),
}

SENTIMENT_WORDS: Dict[str, FrozenSet[str]] = {
    "fr": frozenset({
        "erreur", "secret", "incroyable", "danger", "urgent", "choquant", "terrible", "extraordinaire",
        "fascinant", "etonnant", "surprenant", "impressionnant", "remarquable", "crucial", "vital",
        "indispensable", "interdit", "impossible", "revolutionnaire",
    }),
    "en": frozenset({
        "mistake", "secret", "incredible", "danger", "urgent", "shocking", "terrible", "extraordinary",
        "fascinating", "astonishing", "surprising", "impressive", "remarkable", "crucial", "vital", "essential",
        "forbidden", "impossible", "revolutionary",
    }),
}

GENERIC_ANCHOR_TEXTS: Dict[str, FrozenSet[str]] = {
    "fr": frozenset({
        "cliquez ici", "cliquer ici", "en savoir plus", "ici", "lire la suite", "plus", "voir plus", "lien",
        "click here", "read more", "here", "more",
    }),
    "en": frozenset({
        "click here", "read more", "here", "more", "learn more", "see more", "this link", "link",
        "continue reading", "find out more",
    }),
}

CTA_NUMBER_PATTERNS: Dict[str, Pattern] = {
    "fr": re.compile(
        r"\b\d+\s+(?:raisons?|étapes?|astuces?|conseils?|erreurs?|avantages?|clés?|points?|façons?|méthodes?"
        r"|techniques?|outils?|secrets?)\b",
        re.IGNORECASE,
    ),
    "en": re.compile(
        r"\b\d+\s+(?:reasons?|steps?|tips?|tricks?|mistakes?|benefits?|keys?|points?|ways?|methods?"
        r"|techniques?|tools?|secrets?)\b",
        re.IGNORECASE,
    ),
}

CTA_QUESTION_PATTERNS: Dict[str, Pattern] = {
    "fr": re.compile(r"\b(?:comment|pourquoi|quand|quel|quelle|quels|quelles)\b", re.IGNORECASE),
    "en": re.compile(r"\b(?:how|why|when|what|which)\b", re.IGNORECASE),
}

AVAILABILITY_PATTERNS: Dict[str, Pattern] = {
    "fr": re.compile(
        r"(?:en\s+stock|disponible|rupture\s+de\s+stock|sur\s+commande|livraison|expedition|indisponible"
        r"|pre-?commande|bientôt\s+disponible|delai|disponibilite)",
        re.IGNORECASE,
    ),
    "en": re.compile(
        r"(?:in\s+stock|out\s+of\s+stock|available|availability|back\s*order|pre-?order|ships?\s+(?:in|within)"
        r"|shipping|delivery|made\s+to\s+order)",
        re.IGNORECASE,
    ),
}

# Locale independent tables.

PLACEHOLDER_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(r"lorem ipsum", re.IGNORECASE),
    re.compile(r"\bTODO\b"),
    re.compile(r"\bTBD\b"),
    re.compile(r"\bFIXME\b"),
    re.compile(r"\bplaceholder\b", re.IGNORECASE),
    re.compile(r"\btexte ici\b", re.IGNORECASE),
    re.compile(r"\bcontenu a venir\b", re.IGNORECASE),
    re.compile(r"\ba completer\b", re.IGNORECASE),
    re.compile(r"\bXXX\b"),
)

DUPLICATE_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(r"\b(lorem ipsum|dolor sit amet|consectetur adipiscing)\b", re.IGNORECASE),
    re.compile(r"\b(texte de remplacement|contenu temporaire|texte generique)\b", re.IGNORECASE),
    re.compile(r"\b(titre de la page|description de la page)\b", re.IGNORECASE),
)

PRICE_PATTERN = re.compile(
    r"(?:\d+(?:[.,]\d{1,2})?\s*(?:€|EUR|euros?|\$|USD|£|GBP))"
    r"|(?:(?:€|EUR|euros?|\$|USD|£|GBP)\s*\d+(?:[.,]\d{1,2})?)"
    r"|(?:à\s+partir\s+de\s+\d+)|(?:prix\s*:\s*\d+)|(?:tarif\s*:\s*\d+)"
    r"|(?:from\s+\d+(?:[.,]\d{1,2})?)|(?:price\s*:\s*\d+)",
    re.IGNORECASE,
)

REVIEW_PATTERN = re.compile(
    r"(?:avis|reviews?|note|etoile|stars?|rating|évaluation|témoignage|commentaire\s+client|testimonial)",
    re.IGNORECASE,
)

UTILITY_PAGE_SLUGS: FrozenSet[str] = frozenset({
    "contact", "about", "a-propos", "plan-du-site", "mentions-legales", "politique-de-confidentialite", "cgv",
    "cgu", "blog", "accessibilite", "cookies", "support", "faq", "equipe", "portfolio", "tarifs",
    "about-us", "contact-us", "sitemap", "privacy-policy", "terms-of-service", "pricing", "team",
})

EVERGREEN_PAGE_SLUGS: FrozenSet[str] = frozenset({
    "mentions-legales", "politique-de-confidentialite", "cgv", "cgu", "plan-du-site", "contact",
    "accessibilite", "cookies", "legal-notice", "privacy-policy", "terms-of-service", "terms-and-conditions",
    "cookie-policy", "sitemap", "accessibility",
})

LEGAL_SLUGS: FrozenSet[str] = frozenset({
    "mentions-legales", "politique-confidentialite", "plan-du-site", "conditions-generales-vente",
    "conditions-generales-utilisation", "legal-notice", "privacy-policy", "terms-of-service",
    "terms-and-conditions", "cookie-policy", "sitemap",
})

# Hyphenated word pairs where a stop word belongs to a fixed expression.
STOP_WORD_COMPOUNDS: Tuple[Tuple[str, str], ...] = (
    ("en", "ligne"), ("en", "france"), ("en", "production"), ("en", "pratique"), ("sur", "mesure"),
    ("pour", "tous"), ("de", "site"), ("du", "web"), ("on", "demand"), ("to", "go"),
)

GENERIC_ALT_PATTERN = re.compile(r"^(image|photo|img|picture|screenshot|capture|untitled)\d*$", re.IGNORECASE)
FILE_EXTENSION_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg|avif)$", re.IGNORECASE)
CAMERA_FILENAME_PATTERN = re.compile(
    r"\b(IMG_\d+|DSC_\d+|DCIM|photo-\d+|image-\d+|screenshot-\d+)\b", re.IGNORECASE
)


def for_locale(table: Dict[str, T], locale: str) -> T:
    """Returns the entry of a per-locale table, falling back to the default locale."""
    return table.get(locale, table[DEFAULT_LOCALE])


def get_stop_words(locale: str = DEFAULT_LOCALE) -> FrozenSet[str]:
    return for_locale(STOP_WORDS, locale)


def get_action_verbs(locale: str = DEFAULT_LOCALE) -> Tuple[str, ...]:
    return for_locale(ACTION_VERBS, locale)


def get_power_words(locale: str = DEFAULT_LOCALE) -> FrozenSet[str]:
    return for_locale(POWER_WORDS, locale)


def is_stop_word_in_compound(parts, index: int, extra_compounds=None) -> bool:
    """
    Checks whether parts[index] is one half of a known compound expression
    (e.g. 'sur' in 'sur-mesure'), in which case it should not be flagged.
    """
    compounds = STOP_WORD_COMPOUNDS + tuple(tuple(pair) for pair in (extra_compounds or ()))
    word = parts[index]
    prev_word = parts[index - 1] if index > 0 else None
    next_word = parts[index + 1] if index + 1 < len(parts) else None

    for first, second in compounds:
        if word == first and next_word == second:
            return True
        if word == second and prev_word == first:
            return True
    return False
