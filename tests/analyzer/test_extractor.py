# tests/analyzer/test_extractor.py
from seo_analyzer.document.extractor import (
    count_long_sections,
    extract_headings,
    extract_images,
    extract_links,
    extract_lists,
    extract_text,
    images_in_blocks,
    top_level_paragraphs,
)
from seo_analyzer.document.link_fields import (
    collect_internal_slugs,
    extract_field_link,
    is_external_url,
    is_internal_url,
    normalize_to_slug,
)
from seo_analyzer.document.models import Heading, Link


def _deep_tree(levels: int, text: str = "found") -> dict:
    tree = {"type": "text", "text": text}
    for _ in range(levels):
        tree = {"type": "paragraph", "children": [tree]}
    return {"root": tree}


def _words(n: int) -> str:
    return " ".join(["woord"] * n)


def test_extract_text_simple_tree(paragraph):
    assert extract_text(paragraph("Hello world")) == "Hello world"


def test_extract_text_handles_missing_input():
    """Lege of ongeldige invoer levert een lege string op, geen fout."""
    assert extract_text(None) == ""
    assert extract_text("geen boom") == ""
    assert extract_text({"children": "geen lijst"}) == ""


def test_extract_text_concatenates_leaves():
    node = {"root": {"children": [{"type": "paragraph", "children": [
        {"type": "text", "text": "Bonjour"},
        {"type": "text", "text": "le monde"},
    ]}]}}
    assert extract_text(node) == "Bonjour le monde"


def test_extract_text_respects_max_depth():
    """Een boom van 20 niveaus wordt bij max_depth=5 niet bereikt, standaard wel."""
    tree = _deep_tree(20)
    assert extract_text(tree, max_depth=5) == ""
    assert "found" in extract_text(tree)


def test_extract_text_on_100_level_tree_terminates():
    """Een synthetische boom van 100 niveaus mag niet voorbij het plafond recursen."""
    tree = _deep_tree(100)
    assert extract_text(tree) == ""
    assert extract_headings(tree) == []
    assert extract_links(tree) == []
    assert extract_images(tree).total == 0
    assert "found" in extract_text(tree, max_depth=150)


def test_extract_headings_in_document_order():
    node = {"root": {"children": [
        {"type": "heading", "tag": "h1", "children": [{"type": "text", "text": "Title"}]},
        {"type": "paragraph", "children": [{"type": "text", "text": "Content"}]},
        {"type": "heading", "tag": "h2", "children": [{"type": "text", "text": "Subtitle"}]},
    ]}}
    headings = extract_headings(node)
    assert headings == [Heading(tag="h1", text="Title"), Heading(tag="h2", text="Subtitle")]
    assert headings[1].level == 2


def test_extract_links_prefers_structured_url():
    node = {"root": {"children": [{"type": "paragraph", "children": [
        {"type": "link", "fields": {"url": "/services"}, "url": "/ignored",
         "children": [{"type": "text", "text": "nos services"}]},
        {"type": "autolink", "url": "https://example.com", "children": [{"type": "text", "text": "example"}]},
        {"type": "link", "children": [{"type": "text", "text": "zonder url"}]},
    ]}]}}
    assert extract_links(node) == [
        Link(url="/services", text="nos services"),
        Link(url="https://example.com", text="example"),
    ]


def test_extract_images_counts_alt_texts():
    node = {"root": {"children": [
        {"type": "upload", "value": {"alt": "  Vue de la boutique  "}},
        {"type": "upload", "value": {"alt": "   "}},
        {"type": "upload"},
    ]}}
    stats = extract_images(node)
    assert stats.total == 3
    assert stats.with_alt == 1
    assert stats.alt_texts == ["Vue de la boutique"]


def test_extract_lists():
    node = {"root": {"children": [
        {"type": "list", "listType": "bullet", "children": [{"type": "listitem"}, {"type": "listitem"}]},
        {"type": "list", "listType": "number", "children": [{"type": "listitem"}]},
    ]}}
    lists = extract_lists(node)
    assert [(l.list_type, l.item_count) for l in lists] == [("bullet", 2), ("number", 1)]


def test_top_level_paragraphs(paragraph):
    assert top_level_paragraphs(paragraph("een", "twee")) == ["een", "twee"]


def test_count_long_sections_resets_on_heading():
    """Twee paragrafen van 250 woorden vormen één lange sectie; na een kop begint de teller opnieuw."""
    node = {"root": {"children": [
        {"type": "paragraph", "children": [{"type": "text", "text": _words(250)}]},
        {"type": "paragraph", "children": [{"type": "text", "text": _words(250)}]},
        {"type": "heading", "tag": "h2", "children": [{"type": "text", "text": "Kop"}]},
        {"type": "paragraph", "children": [{"type": "text", "text": _words(300)}]},
        {"type": "heading", "tag": "h2", "children": [{"type": "text", "text": "Kop"}]},
        {"type": "paragraph", "children": [{"type": "text", "text": _words(300)}]},
    ]}}
    assert count_long_sections(node, 400) == 1


def test_images_in_blocks_counts_media_and_columns(paragraph):
    blocks = [
        {"blockType": "mediaBlock", "media": {"url": "/a.jpg", "alt": "Atelier"}},
        {"blockType": "content", "columns": [{"richText": {"root": {"children": [
            {"type": "upload", "value": {"alt": ""}},
        ]}}}]},
        "geen blok",
    ]
    stats = images_in_blocks(blocks)
    assert stats.total == 2
    assert stats.with_alt == 1


def test_extract_field_link_variants():
    assert extract_field_link({"type": "custom", "url": "https://x.fr", "label": "X"}) == {
        "url": "https://x.fr", "label": "X",
    }
    assert extract_field_link({"type": "reference", "reference": {"value": {"slug": "contact"}}}) == {
        "url": "/contact", "label": "",
    }
    assert extract_field_link("niet een veld") is None
    assert extract_field_link({"type": "custom"}) is None


def test_internal_and_external_urls():
    assert is_internal_url("/services")
    assert is_internal_url("#top")
    assert is_internal_url("services/seo")
    assert not is_internal_url("https://example.com")
    assert is_external_url("https://example.com")
    assert not is_external_url("mailto:info@example.com")


def test_normalize_to_slug():
    assert normalize_to_slug("/services/seo/?a=1#top") == "services/seo"
    assert normalize_to_slug("https://www.example.com/blog/", "https://example.com") == "blog"
    assert normalize_to_slug("https://other.com/blog") is None
    assert normalize_to_slug("mailto:a@b.c") is None
    assert collect_internal_slugs([Link(url="/a"), {"url": "/a/"}, {"url": "#x"}]) == ["a"]
