# src/seo_analyzer/constants.py
"""Numeric thresholds shared by the rule groups and the scoring service."""

# --- Title & meta description ---
TITLE_LENGTH_MIN = 30
TITLE_LENGTH_MAX = 60
META_DESC_LENGTH_MIN = 120
META_DESC_LENGTH_MAX = 160

# --- Word counts ---
MIN_WORDS_POST = 800
MIN_WORDS_FORM = 150
MIN_WORDS_LEGAL = 200
MIN_WORDS_GENERIC = 300
MIN_WORDS_THIN = 100
QUALITY_WORDS_FAIL = 50
QUALITY_WORDS_WARN = 200
DUPLICATE_BLOCK_MIN_LENGTH = 30
READABILITY_MIN_WORDS = 50
LISTS_MIN_WORDS = 500
DISTRIBUTION_MIN_WORDS = 100
CORNERSTONE_MIN_WORDS = 1500
CORNERSTONE_MIN_INTERNAL_LINKS = 5
THIN_AGING_MIN_WORDS = 500

# --- Keyword density (%) ---
KEYWORD_DENSITY_MAX = 3.0
KEYWORD_DENSITY_WARN = 2.5
KEYWORD_DENSITY_MIN = 0.5
KEYWORD_INTRO_CHARS = 500

# --- Images ---
ALT_TEXT_MIN_RATIO = 0.8
ALT_TEXT_MIN_LENGTH = 20

# --- Structure ---
WORDS_PER_HEADING = 300
LONG_SECTION_THRESHOLD = 400
LONG_PARAGRAPH_WORDS = 150
LONG_SENTENCE_MAX_RATIO = 0.3
CONSECUTIVE_SAME_START_MAX = 3

# --- URL ---
SLUG_MAX_LENGTH = 75

# --- Social previews ---
SOCIAL_TITLE_MAX = 65
SOCIAL_DESC_MAX = 155

# --- Freshness (days) ---
FRESHNESS_EVERGREEN_DAYS = 730
FRESHNESS_FAIL_DAYS = 365
FRESHNESS_WARN_DAYS = 180
REVIEW_WARN_DAYS = 180

# --- Accessibility ---
SHORT_ANCHOR_MAX_LENGTH = 2
LINK_DENSITY_FAIL = 0.5
LINK_DENSITY_WARN = 0.3

# --- E-commerce ---
PRODUCT_MIN_WORDS = 100
PRODUCT_WARN_WORDS = 50
PRODUCT_MIN_IMAGES = 2

# --- Extraction ---
MAX_RECURSION_DEPTH = 50

# --- Scoring ---
SCORE_EXCELLENT = 91
SCORE_GOOD = 71
SCORE_OK = 41
WARNING_MULTIPLIER = 0.5

DEFAULT_LOCALE = "fr"
SUPPORTED_LOCALES = ("fr", "en")
ACCEPTABLE_NOINDEX_TYPES = ("legal", "form", "contact")
EVERGREEN_PAGE_TYPES = ("legal", "contact")
