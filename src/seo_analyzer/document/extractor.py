# src/seo_analyzer/document/extractor.py
"""
Read-only walkers over rich-text document trees.

A tree is a nest of plain dicts with a ``type`` discriminant and optional
``children`` list, possibly wrapped in a ``{"root": {...}}`` envelope. Every
walker takes an explicit depth ceiling: anything below it is treated as empty,
so deep or self-referencing trees terminate without raising.
"""
from typing import Any, Iterator, List

from seo_analyzer.constants import MAX_RECURSION_DEPTH
from seo_analyzer.document.models import Heading, ImageStats, Link, ListInfo
from seo_analyzer.text.normalizer import count_words


def _children(node: dict) -> List[Any]:
    children = node.get("children")
    return children if isinstance(children, list) else []


def extract_text(node: Any, depth: int = 0, max_depth: int = MAX_RECURSION_DEPTH) -> str:
    """Concatenates (space-joined) the text leaves of a tree."""
    if depth >= max_depth or not isinstance(node, dict):
        return ""

    if node.get("type") == "text" and isinstance(node.get("text"), str):
        return node["text"]

    if isinstance(node.get("children"), list):
        return " ".join(extract_text(child, depth + 1, max_depth) for child in node["children"])

    if isinstance(node.get("root"), dict):
        return extract_text(node["root"], depth + 1, max_depth)

    return ""


def extract_headings(node: Any, depth: int = 0, max_depth: int = MAX_RECURSION_DEPTH) -> List[Heading]:
    if depth >= max_depth or not isinstance(node, dict):
        return []

    headings: List[Heading] = []
    if node.get("type") == "heading" and isinstance(node.get("tag"), str):
        headings.append(Heading(tag=node["tag"], text=extract_text(node, 0, max_depth - depth)))

    for child in _children(node):
        headings.extend(extract_headings(child, depth + 1, max_depth))

    if isinstance(node.get("root"), dict):
        headings.extend(extract_headings(node["root"], depth + 1, max_depth))

    return headings


def _link_url(node: dict) -> str:
    fields = node.get("fields")
    if isinstance(fields, dict) and isinstance(fields.get("url"), str) and fields["url"]:
        return fields["url"]
    url = node.get("url")
    return url if isinstance(url, str) else ""


def extract_links(node: Any, depth: int = 0, max_depth: int = MAX_RECURSION_DEPTH) -> List[Link]:
    if depth >= max_depth or not isinstance(node, dict):
        return []

    links: List[Link] = []
    if node.get("type") in ("link", "autolink"):
        url = _link_url(node)
        if url:
            links.append(Link(url=url, text=extract_text(node, 0, max_depth - depth)))

    for child in _children(node):
        links.extend(extract_links(child, depth + 1, max_depth))

    if isinstance(node.get("root"), dict):
        links.extend(extract_links(node["root"], depth + 1, max_depth))

    return links


def extract_images(node: Any, depth: int = 0, max_depth: int = MAX_RECURSION_DEPTH) -> ImageStats:
    """Counts ``upload`` nodes and the non-empty alt texts they carry."""
    stats = ImageStats()
    if depth >= max_depth or not isinstance(node, dict):
        return stats

    if node.get("type") == "upload":
        value = node.get("value")
        alt = value.get("alt") if isinstance(value, dict) else None
        if isinstance(alt, str) and alt.strip():
            stats = ImageStats(total=1, with_alt=1, alt_texts=[alt.strip()])
        else:
            stats = ImageStats(total=1)

    for child in _children(node):
        stats = stats.merge(extract_images(child, depth + 1, max_depth))

    if isinstance(node.get("root"), dict):
        stats = stats.merge(extract_images(node["root"], depth + 1, max_depth))

    return stats


def extract_lists(node: Any, depth: int = 0, max_depth: int = MAX_RECURSION_DEPTH) -> List[ListInfo]:
    if depth >= max_depth or not isinstance(node, dict):
        return []

    lists: List[ListInfo] = []
    if node.get("type") == "list":
        list_type = "number" if node.get("listType") == "number" else "bullet"
        lists.append(ListInfo(list_type=list_type, item_count=len(_children(node))))

    for child in _children(node):
        lists.extend(extract_lists(child, depth + 1, max_depth))

    if isinstance(node.get("root"), dict):
        lists.extend(extract_lists(node["root"], depth + 1, max_depth))

    return lists


def _top_level_nodes(node: Any) -> Iterator[dict]:
    if not isinstance(node, dict):
        return
    root = node.get("root") if isinstance(node.get("root"), dict) else node
    for child in _children(root):
        if isinstance(child, dict):
            yield child


def top_level_paragraphs(node: Any, max_depth: int = MAX_RECURSION_DEPTH) -> List[str]:
    """Plain text of every paragraph directly under the root of a tree."""
    return [
        extract_text(child, 0, max_depth)
        for child in _top_level_nodes(node)
        if child.get("type") == "paragraph"
    ]


def count_long_sections(node: Any, threshold: int, max_depth: int = MAX_RECURSION_DEPTH) -> int:
    """
    Counts stretches of paragraphs that run past ``threshold`` words without a heading.
    The running word counter resets on every heading and after each long section.
    """
    long_sections = 0
    words_since_heading = 0

    for child in _top_level_nodes(node):
        kind = child.get("type")
        if kind == "heading":
            words_since_heading = 0
        elif kind == "paragraph":
            words_since_heading += count_words(extract_text(child, 0, max_depth))
            if words_since_heading > threshold:
                long_sections += 1
                words_since_heading = 0

    return long_sections


def images_in_blocks(blocks: Any, max_depth: int = MAX_RECURSION_DEPTH) -> ImageStats:
    """Image stats for layout blocks: media blocks plus images embedded in column rich text."""
    stats = ImageStats()
    if not isinstance(blocks, list):
        return stats

    for block in blocks:
        if not isinstance(block, dict):
            continue

        if block.get("blockType") in ("mediaBlock", "media") and isinstance(block.get("media"), dict):
            stats = stats.add_media(block["media"])

        columns = block.get("columns")
        if isinstance(columns, list):
            for column in columns:
                if isinstance(column, dict) and column.get("richText"):
                    stats = stats.merge(extract_images(column["richText"], 0, max_depth))

    return stats
