# src/seo_analyzer/services/context_service.py
import logging
from typing import Any, List, Optional, Tuple

from seo_analyzer.document.extractor import (
    extract_headings,
    extract_images,
    extract_links,
    extract_lists,
    extract_text,
    images_in_blocks,
)
from seo_analyzer.document.link_fields import extract_field_link
from seo_analyzer.document.models import Heading, ImageStats, Link, ListInfo
from seo_analyzer.linguistics.registry import get_strategy
from seo_analyzer.model import AnalysisContext, AnalyzerConfig, PageInput
from seo_analyzer.services.page_type_service import classify_page
from seo_analyzer.text.normalizer import count_words, normalize

logger = logging.getLogger(__name__)


class _Accumulator:
    """Mutable scratch space used while walking the page; frozen into an AnalysisContext at the end."""

    def __init__(self):
        self.text_parts: List[str] = []
        self.headings: List[Heading] = []
        self.links: List[Link] = []
        self.lists: List[ListInfo] = []
        self.sources: List[Any] = []

    def add_text(self, text: str) -> None:
        if text:
            self.text_parts.append(text)

    def add_link(self, url: Any, text: Any = "") -> None:
        if isinstance(url, str) and url:
            self.links.append(Link(url=url, text=text if isinstance(text, str) else ""))

    def add_field_link(self, field: Any) -> None:
        resolved = extract_field_link(field)
        if resolved:
            self.add_link(resolved["url"], resolved["label"])

    @property
    def full_text(self) -> str:
        return " ".join(self.text_parts)


class ContextBuilder:
    """
    Builds the AnalysisContext for one page.

    Walks every content-bearing field in a fixed order (hero, hero links,
    layout blocks, body) so that headings and links keep document order.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self.max_depth = self.config.max_recursion_depth
        self.strategy = get_strategy(self.config.locale)

    def build(self, page: PageInput) -> AnalysisContext:
        acc = _Accumulator()

        self._add_rich_text(acc, page.hero_rich_text)
        for hero_link in page.hero_links:
            if isinstance(hero_link, dict):
                acc.add_field_link(hero_link.get("link"))

        for block in page.blocks:
            if isinstance(block, dict):
                self._add_block(acc, block)

        self._add_rich_text(acc, page.content)

        self._inject_post_title_heading(page, acc)

        full_text = acc.full_text
        primary, secondary = self._resolve_keywords(page)
        page_type = "blog" if page.is_post else classify_page(
            page.slug,
            page.collection,
            self.config.local_seo_slugs,
            self.config.local_seo_pattern,
        )

        context = AnalysisContext(
            full_text=full_text,
            normalized_text=normalize(full_text),
            headings=acc.headings,
            links=acc.links,
            image_stats=self._collect_images(page),
            lists=acc.lists,
            sentences=self.strategy.split_sentences(full_text),
            word_count=count_words(full_text),
            normalized_keyword=primary,
            secondary_keywords=secondary,
            page_type=page_type,
            locale=self.strategy.code,
            rich_text_sources=acc.sources,
            config=self.config,
            now=self.config.resolve_now(),
        )
        logger.debug(
            "Context built: type=%s words=%d headings=%d links=%d images=%d",
            context.page_type, context.word_count, len(context.headings), len(context.links),
            context.image_stats.total,
        )
        return context

    # --- Sources ---

    def _add_rich_text(self, acc: _Accumulator, tree: Any) -> None:
        if not tree:
            return
        acc.sources.append(tree)
        acc.add_text(extract_text(tree, 0, self.max_depth))
        acc.links.extend(extract_links(tree, 0, self.max_depth))
        acc.headings.extend(extract_headings(tree, 0, self.max_depth))
        acc.lists.extend(extract_lists(tree, 0, self.max_depth))

    def _add_block(self, acc: _Accumulator, block: dict) -> None:
        columns = block.get("columns") if isinstance(block.get("columns"), list) else []
        for column in columns:
            if isinstance(column, dict):
                self._add_rich_text(acc, column.get("richText"))

        self._add_rich_text(acc, block.get("richText"))

        # Service cards: title + description count as body copy
        if isinstance(block.get("services"), list):
            for service in block["services"]:
                if not isinstance(service, dict):
                    continue
                title = service.get("title") if isinstance(service.get("title"), str) else ""
                acc.add_text(title)
                if isinstance(service.get("description"), str):
                    acc.add_text(service["description"])
                acc.add_link(service.get("link"), title)

        # Call-to-action buttons
        if block.get("blockType") in ("cta", "callToAction") and isinstance(block.get("links"), list):
            for cta in block["links"]:
                if isinstance(cta, dict):
                    acc.add_field_link(cta.get("link"))

        for column in columns:
            if isinstance(column, dict) and column.get("enableLink"):
                acc.add_field_link(column.get("link"))

        if block.get("blockType") == "latestPosts":
            acc.add_link(block.get("ctaLink"), block.get("ctaLabel"))

        if block.get("blockType") == "portfolio" and isinstance(block.get("projects"), list):
            for project in block["projects"]:
                if isinstance(project, dict):
                    acc.add_link(project.get("link"), project.get("title"))

        if isinstance(block.get("testimonials"), list):
            for testimonial in block["testimonials"]:
                if isinstance(testimonial, dict) and isinstance(testimonial.get("quote"), str):
                    acc.add_text(testimonial["quote"])

    def _collect_images(self, page: PageInput) -> ImageStats:
        stats = images_in_blocks(page.blocks, self.max_depth)
        stats = stats.merge(extract_images(page.content, 0, self.max_depth))
        for media in (page.hero_media, page.meta_image):
            if isinstance(media, dict) and (media.get("url") or media.get("filename")):
                stats = stats.add_media(media)
        return stats

    # --- Special cases ---

    @staticmethod
    def _inject_post_title_heading(page: PageInput, acc: _Accumulator) -> None:
        """
        Blog templates render the post title as the page H1 outside the editable
        body. When a post has a title but no H1 of its own, add a virtual one.
        """
        if not page.is_post or not page.hero_title:
            return
        if any(h.tag == "h1" for h in acc.headings):
            return
        acc.headings.insert(0, Heading(tag="h1", text=page.hero_title))
        acc.text_parts.insert(0, page.hero_title)

    @staticmethod
    def _resolve_keywords(page: PageInput) -> Tuple[str, List[Tuple[str, str]]]:
        primary = normalize(page.focus_keyword or "")
        secondary: List[Tuple[str, str]] = []
        seen = set()
        for keyword in page.focus_keywords:
            normalized = normalize(keyword)
            if not normalized or normalized == primary or normalized in seen:
                continue
            seen.add(normalized)
            secondary.append((keyword.strip(), normalized))
        return primary, secondary
