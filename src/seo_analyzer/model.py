# src/seo_analyzer/model.py
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from seo_analyzer.constants import (
    ACCEPTABLE_NOINDEX_TYPES,
    KEYWORD_DENSITY_MAX,
    KEYWORD_DENSITY_MIN,
    MAX_RECURSION_DEPTH,
    META_DESC_LENGTH_MAX,
    META_DESC_LENGTH_MIN,
    MIN_WORDS_GENERIC,
    MIN_WORDS_POST,
    SLUG_MAX_LENGTH,
    TITLE_LENGTH_MAX,
    TITLE_LENGTH_MIN,
)
from seo_analyzer.document.models import Heading, ImageStats, Link, ListInfo
from seo_analyzer.linguistics.registry import resolve_locale

CheckStatus = Literal["pass", "warning", "fail"]
CheckCategory = Literal["critical", "important", "bonus"]
ScoreLevel = Literal["poor", "ok", "good", "excellent"]
PageType = Literal[
    "legal", "contact", "form", "home", "service", "local-seo", "blog", "agency", "resource", "generic"
]


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Lenient ISO-8601 parsing; naive values are read as UTC, garbage becomes None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


class Check(BaseModel):
    """
    One atomic rule outcome, e.g. 'title-length' -> warning.
    Produced by exactly one rule group and never modified afterwards.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    status: CheckStatus
    message: str
    category: CheckCategory
    weight: float = Field(gt=0)
    group: str
    tip: Optional[str] = None


class AnalysisResult(BaseModel):
    """Final output of one analysis call."""
    score: int = Field(default=0, ge=0, le=100)
    level: ScoreLevel = "poor"
    checks: List[Check] = Field(default_factory=list)


class Thresholds(BaseModel):
    """Numeric limits a site may tune. Unset Flesch threshold means 'use the locale default'."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title_length_min: int = TITLE_LENGTH_MIN
    title_length_max: int = TITLE_LENGTH_MAX
    meta_desc_length_min: int = META_DESC_LENGTH_MIN
    meta_desc_length_max: int = META_DESC_LENGTH_MAX
    min_words_generic: int = MIN_WORDS_GENERIC
    min_words_post: int = MIN_WORDS_POST
    keyword_density_min: float = KEYWORD_DENSITY_MIN
    keyword_density_max: float = KEYWORD_DENSITY_MAX
    flesch_score_pass: Optional[int] = None
    slug_max_length: int = SLUG_MAX_LENGTH


class AnalyzerConfig(BaseModel):
    """
    Per-call analysis configuration. Accepts camelCase keys as sent by a host
    CMS ('disabledRules', 'localSeoSlugs', ...) as well as snake_case names.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    locale: str = "fr"
    disabled_rules: List[str] = Field(default_factory=list)
    override_weights: Dict[str, float] = Field(default_factory=dict)
    local_seo_slugs: List[str] = Field(default_factory=list)
    local_seo_pattern: Optional[str] = None
    stop_word_compounds: List[Tuple[str, str]] = Field(default_factory=list)
    max_recursion_depth: int = Field(default=MAX_RECURSION_DEPTH, ge=1)
    site_url: Optional[str] = None
    site_name: Optional[str] = None
    acceptable_noindex_types: List[str] = Field(default_factory=lambda: list(ACCEPTABLE_NOINDEX_TYPES))
    thresholds: Thresholds = Field(default_factory=Thresholds)
    reference_date: Optional[datetime] = None

    @field_validator("locale", mode="before")
    @classmethod
    def normalize_locale(cls, value: Any) -> str:
        return resolve_locale(value if isinstance(value, str) else None)

    @field_validator("override_weights")
    @classmethod
    def weights_must_be_positive(cls, value: Dict[str, float]) -> Dict[str, float]:
        for group, weight in value.items():
            if weight <= 0:
                raise ValueError(f"Override weight for '{group}' must be positive, got {weight}")
        return value

    @field_validator("local_seo_pattern")
    @classmethod
    def pattern_must_compile(cls, value: Optional[str]) -> Optional[str]:
        if value:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid local SEO pattern: {e}") from e
        return value or None

    @field_validator("reference_date", mode="before")
    @classmethod
    def parse_reference_date(cls, value: Any) -> Optional[datetime]:
        return _parse_datetime(value)

    def resolve_now(self) -> datetime:
        return self.reference_date or datetime.now(timezone.utc)


class PageInput(BaseModel):
    """
    The editable fields of one page as supplied by the host CMS.

    Rich-text fields (hero_rich_text, content, blocks) are raw document trees
    and are only read by the extractors. Malformed scalar values are dropped to
    None rather than rejected so that a half-filled page can still be scored.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")

    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_image: Any = None
    slug: Optional[str] = None
    focus_keyword: Optional[str] = None
    focus_keywords: List[str] = Field(default_factory=list)
    hero_title: Optional[str] = None
    hero_rich_text: Any = None
    hero_links: List[Any] = Field(default_factory=list)
    hero_media: Any = None
    blocks: List[Any] = Field(default_factory=list)
    content: Any = None
    is_post: bool = False
    is_product: bool = False
    is_cornerstone: bool = False
    updated_at: Optional[datetime] = None
    content_last_reviewed: Optional[datetime] = None
    canonical_url: Optional[str] = None
    robots_meta: Optional[str] = None
    collection: Optional[str] = None

    @field_validator(
        "meta_title", "meta_description", "slug", "focus_keyword", "hero_title", "canonical_url", "robots_meta",
        "collection", mode="before",
    )
    @classmethod
    def drop_non_strings(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("focus_keywords", mode="before")
    @classmethod
    def keep_string_keywords(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return []
        keywords = []
        for item in value:
            # Host arrays may hold {'keyword': '...'} rows
            if isinstance(item, dict):
                item = item.get("keyword")
            if isinstance(item, str):
                keywords.append(item)
        return keywords

    @field_validator("hero_links", "blocks", mode="before")
    @classmethod
    def drop_non_lists(cls, value: Any) -> List[Any]:
        return list(value) if isinstance(value, (list, tuple)) else []

    @field_validator("is_post", "is_product", "is_cornerstone", mode="before")
    @classmethod
    def coerce_flags(cls, value: Any) -> bool:
        return value is True

    @field_validator("updated_at", "content_last_reviewed", mode="before")
    @classmethod
    def parse_dates(cls, value: Any) -> Optional[datetime]:
        return _parse_datetime(value)


class AnalysisContext(BaseModel):
    """
    Everything derived once per call from a PageInput, shared read-only by all rule groups.
    """
    model_config = ConfigDict(frozen=True)

    full_text: str = ""
    normalized_text: str = ""
    headings: List[Heading] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)
    image_stats: ImageStats = Field(default_factory=ImageStats)
    lists: List[ListInfo] = Field(default_factory=list)
    sentences: List[str] = Field(default_factory=list)
    word_count: int = 0
    normalized_keyword: str = ""
    # (original spelling, normalized) pairs
    secondary_keywords: List[Tuple[str, str]] = Field(default_factory=list)
    page_type: PageType = "generic"
    locale: str = "fr"
    rich_text_sources: List[Any] = Field(default_factory=list)
    config: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    now: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
