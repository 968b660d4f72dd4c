# tests/analyzer/test_rules_content.py
"""Regelgroepen voor de inhoud: koppen, tekst, afbeeldingen, links, kwaliteit en leesbaarheid."""
import pytest

from seo_analyzer.document.models import Heading
from seo_analyzer.model import AnalyzerConfig
from seo_analyzer.rules.groups.content import check_content, keyword_thirds, minimum_words
from seo_analyzer.rules.groups.headings import check_heading_hierarchy, check_headings
from seo_analyzer.rules.groups.images import check_images
from seo_analyzer.rules.groups.linking import check_linking
from seo_analyzer.rules.groups.quality import check_quality, has_duplicate_content, has_repeated_block
from seo_analyzer.rules.groups.readability import check_readability, longest_same_start_streak

EN = AnalyzerConfig(locale="en")


def text_node(text):
    return {"type": "text", "text": text}


def heading_node(tag, text):
    return {"type": "heading", "tag": tag, "children": [text_node(text)]}


def paragraph_node(text):
    return {"type": "paragraph", "children": [text_node(text)]}


def link_node(url, label):
    return {"type": "link", "fields": {"url": url}, "children": [text_node(label)]}


def upload_node(alt=None):
    return {"type": "upload", "value": {"alt": alt} if alt is not None else {}}


def tree(*nodes):
    return {"root": {"children": list(nodes)}}


def words(count, word="mot"):
    return " ".join([word] * count)


@pytest.fixture
def evaluate(build_context, index_checks):
    def run(evaluator, data, config=None):
        page, ctx = build_context(data, config)
        return index_checks(evaluator(page, ctx))

    return run


# --- Headings ---

@pytest.mark.parametrize("tags, expected", [
    ([], True),
    (["h1", "h2", "h3"], True),
    (["h1", "h3"], False),
    (["h2", "h3", "h2", "h3"], True),
    (["h1", "h2", "h3", "h2", "h4"], True),
    (["h2", "h4"], False),
])
def test_check_heading_hierarchy(tags, expected):
    assert check_heading_hierarchy([Heading(tag=t, text="x") for t in tags]) is expected


def test_well_structured_headings(evaluate):
    content = tree(
        heading_node("h1", "Agence web à Ussel"),
        paragraph_node("Texte."),
        heading_node("h2", "Nos services d'agence web ussel"),
        heading_node("h3", "Création de sites"),
    )
    checks = evaluate(check_headings, {
        "metaTitle": "Agence web à Ussel",
        "focusKeyword": "agence web ussel",
        "content": content,
    })
    assert checks["h1-unique"].status == "pass"
    assert checks["h1-keyword"].status == "pass"
    assert checks["heading-hierarchy"].status == "pass"
    assert checks["h2-keyword"].status == "pass"
    # H1 en titel zijn na normalisatie gelijk
    assert checks["h1-title-different"].status == "warning"
    assert "heading-frequency" not in checks


def test_missing_h1(evaluate, full_page):
    checks = evaluate(check_headings, full_page())
    assert checks["h1-missing"].status == "fail"
    assert checks["h1-keyword"].status == "warning"
    assert "h2-keyword" not in checks
    assert "h1-title-different" not in checks
    # Ruim 800 woorden zonder tussenkoppen
    assert checks["heading-frequency"].status == "warning"


def test_several_h1_and_skipped_level(evaluate):
    content = tree(heading_node("h1", "Un"), heading_node("h1", "Deux"), heading_node("h3", "Trois"))
    checks = evaluate(check_headings, {"content": content, "metaTitle": "Autre chose"})
    assert checks["h1-unique"].status == "warning"
    assert checks["heading-hierarchy"].status == "warning"
    assert checks["h1-title-different"].status == "pass"


def test_subheading_frequency(evaluate):
    content = tree(
        heading_node("h1", "Titre"),
        paragraph_node(words(350)),
        heading_node("h2", "Partie"),
        paragraph_node(words(300)),
    )
    checks = evaluate(check_headings, {"content": content})
    # 652 woorden -> 2 tussenkoppen verwacht, 1 aanwezig
    assert checks["heading-frequency"].status == "warning"


# --- Content ---

def test_minimum_words_per_page_type(build_context):
    _, ctx = build_context({})
    assert minimum_words("blog", ctx) == 800
    assert minimum_words("form", ctx) == 150
    assert minimum_words("contact", ctx) == 150
    assert minimum_words("legal", ctx) == 200
    assert minimum_words("generic", ctx) == 300

    _, ctx = build_context({}, AnalyzerConfig(thresholds={"minWordsPost": 500, "minWordsGeneric": 250}))
    assert minimum_words("blog", ctx) == 500
    assert minimum_words("service", ctx) == 250


def test_content_of_full_page(evaluate, full_page):
    checks = evaluate(check_content, full_page())
    assert checks["content-wordcount"].status == "pass"
    assert checks["content-keyword-intro"].status == "pass"
    # 50 herhalingen van de zin: keyword stuffing
    assert checks["content-keyword-density"].status == "fail"
    assert checks["content-keyword-density"].category == "critical"
    assert checks["content-no-placeholder"].status == "pass"
    assert checks["content-thin"].status == "pass"
    assert checks["content-keyword-distribution"].status == "pass"
    assert checks["content-has-lists"].status == "warning"


def test_empty_page_content(evaluate):
    checks = evaluate(check_content, {})
    assert checks["content-wordcount"].status == "fail"
    assert checks["content-no-placeholder"].status == "pass"
    assert "content-thin" not in checks
    assert "content-keyword-density" not in checks


@pytest.mark.parametrize("count, wordcount, thin", [
    (40, "fail", "warning"),
    (150, "warning", "pass"),
    (320, "pass", "pass"),
])
def test_word_count_bands(evaluate, paragraph, count, wordcount, thin):
    checks = evaluate(check_content, {"content": paragraph(words(count))})
    assert checks["content-wordcount"].status == wordcount
    assert checks["content-thin"].status == thin


@pytest.mark.parametrize("hits, total, status", [
    (10, 100, "fail"),
    (5, 180, "warning"),
    (2, 200, "pass"),
    (1, 300, "warning"),
    (0, 300, "fail"),
])
def test_keyword_density_bands(evaluate, paragraph, hits, total, status):
    text = " ".join(["seo"] * hits + ["mot"] * (total - hits))
    checks = evaluate(check_content, {"focusKeyword": "SEO", "content": paragraph(text)})
    assert checks["content-keyword-density"].status == status


def test_keyword_missing_from_intro(evaluate, paragraph):
    text = "Nous créons des sites. Ils sont rapides. " + words(60) + " seo."
    checks = evaluate(check_content, {"focusKeyword": "seo", "content": paragraph(text)})
    assert checks["content-keyword-intro"].status == "warning"


def test_keyword_intro_needs_body_text(evaluate):
    checks = evaluate(check_content, {
        "metaTitle": "Agence web Ussel", "slug": "agence-web-ussel", "focusKeyword": "agence web",
    })
    assert "content-keyword-intro" not in checks


def test_placeholder_text(evaluate, paragraph):
    checks = evaluate(check_content, {"content": paragraph("Lorem ipsum dolor sit amet.")})
    assert checks["content-no-placeholder"].status == "fail"


def test_keyword_thirds():
    assert keyword_thirds("seo", "seo" + " mot" * 30 + " seo") == 2
    assert keyword_thirds("seo", "seo" + " mot" * 30) == 1
    assert keyword_thirds("seo", "mot" * 30) == 0
    assert keyword_thirds("seo", "se") == 0


def test_keyword_distribution(evaluate, paragraph):
    only_start = "seo " + words(150)
    checks = evaluate(check_content, {"focusKeyword": "seo", "content": paragraph(only_start)})
    assert checks["content-keyword-distribution"].status == "warning"


def test_lists_are_detected(evaluate):
    bullet = {"type": "list", "listType": "bullet", "children": [
        {"type": "listitem", "children": [text_node("Premier point")]},
        {"type": "listitem", "children": [text_node("Second point")]},
    ]}
    checks = evaluate(check_content, {"content": tree(paragraph_node(words(520)), bullet)})
    assert checks["content-has-lists"].status == "pass"


# --- Images ---

def test_page_without_images(evaluate):
    checks = evaluate(check_images, {"slug": "nos-realisations", "focusKeyword": "seo"})
    assert checks["images-present"].status == "warning"
    assert "images-alt" not in checks
    assert "images-alt-keyword" not in checks
    assert "images-quantity" not in checks


def test_images_are_optional_on_legal_pages(evaluate):
    checks = evaluate(check_images, {"slug": "mentions-legales"})
    assert list(checks) == ["images-present"]
    assert checks["images-present"].status == "pass"

    checks = evaluate(check_images, {"slug": "contact", "content": tree(upload_node())})
    assert checks["images-alt"].status == "warning"
    assert checks["images-present"].status == "pass"


@pytest.mark.parametrize("alts, status", [
    (["Bureau", "Equipe"], "pass"),
    (["Un", "Deux", "Trois", "Quatre", None], "warning"),
    (["Un", None], "fail"),
])
def test_alt_ratio(evaluate, alts, status):
    checks = evaluate(check_images, {"content": tree(*[upload_node(a) for a in alts])})
    assert checks["images-alt"].status == status


def test_descriptive_alt_text(evaluate):
    keyword = "agence web ussel"
    checks = evaluate(check_images, {"focusKeyword": keyword, "content": tree(upload_node("Bureau de l'agence"))})
    assert checks["images-alt-keyword"].status == "pass"

    checks = evaluate(check_images, {"focusKeyword": keyword, "content": tree(upload_node("Logo"))})
    assert checks["images-alt-keyword"].status == "warning"

    long_alt = "Une grande salle lumineuse avec des plantes"
    checks = evaluate(check_images, {"focusKeyword": keyword, "content": tree(upload_node(long_alt))})
    assert checks["images-alt-keyword"].status == "pass"


def test_post_images(evaluate):
    checks = evaluate(check_images, {"isPost": True})
    assert checks["images-quantity"].status == "fail"

    checks = evaluate(check_images, {"isPost": True, "heroMedia": {"url": "/a.jpg", "alt": "Une photo"}})
    assert checks["images-quantity"].status == "pass"


# --- Linking ---

def test_links_of_every_kind(evaluate):
    content = tree(paragraph_node("Voir"), {"type": "paragraph", "children": [
        link_node("/services", "Nos services"),
        link_node("https://www.service-public.fr", "Service public"),
        link_node("/contact", "cliquez ici"),
        link_node("#", "Haut de page"),
    ]})
    checks = evaluate(check_linking, {"slug": "nos-realisations", "content": content})
    assert checks["linking-internal"].status == "pass"
    assert checks["linking-external"].status == "pass"
    assert checks["linking-generic-anchors"].status == "warning"
    assert "cliquez ici" in checks["linking-generic-anchors"].message
    assert checks["linking-empty"].status == "warning"


def test_page_without_links(evaluate):
    checks = evaluate(check_linking, {"slug": "nos-realisations"})
    assert checks["linking-internal"].status == "warning"
    assert checks["linking-external"].status == "warning"
    assert "linking-generic-anchors" not in checks
    assert "linking-empty" not in checks


def test_external_links_are_optional_on_contact_pages(evaluate):
    checks = evaluate(check_linking, {"slug": "contact"})
    assert checks["linking-external"].status == "pass"


def test_generic_anchors_follow_locale(evaluate):
    content = tree({"type": "paragraph", "children": [link_node("/guide", "Read more")]})
    assert evaluate(check_linking, {"content": content}, EN)["linking-generic-anchors"].status == "warning"

    content = tree({"type": "paragraph", "children": [link_node("/guide", "Notre guide SEO")]})
    assert evaluate(check_linking, {"content": content}, EN)["linking-generic-anchors"].status == "pass"


# --- Quality ---

def test_has_duplicate_content():
    sentence = "Une phrase suffisamment longue pour etre reperee. "
    assert has_duplicate_content(sentence * 2)
    assert has_duplicate_content("Du lorem ipsum partout.")
    assert not has_duplicate_content("Un texte court et unique.")
    assert not has_duplicate_content("")


def test_has_repeated_block():
    block = "Creation de sites internet a Ussel. "
    assert has_repeated_block(block + block.upper())
    assert has_repeated_block("Intro. " + block * 3 + "Fin.")
    # Herhaling van 29 tekens telt niet
    assert not has_repeated_block("abcdefghijklmnopqrstuvwxyz012" * 2)
    assert has_repeated_block("abcdefghijklmnopqrstuvwxyz0123" * 2)
    # Dezelfde zin verderop in de tekst is geen directe herhaling
    assert not has_repeated_block(block + "Un paragraphe tout a fait different entre les deux. " + block)


def test_quality_of_full_page(evaluate, full_page):
    checks = evaluate(check_quality, full_page())
    assert checks["quality-no-duplicate"].status == "fail"
    assert checks["quality-substantial"].status == "pass"


@pytest.mark.parametrize("count, status", [(10, "fail"), (120, "warning"), (250, "pass")])
def test_substantial_content(evaluate, paragraph, count, status):
    text = " ".join(f"mot{i}" for i in range(count))
    checks = evaluate(check_quality, {"content": paragraph(text)})
    assert checks["quality-no-duplicate"].status == "pass"
    assert checks["quality-substantial"].status == status


# --- Readability ---

GOOD_EN_TEXT = " ".join([
    "We build fast websites for small shops.",
    "However, every shop has different needs.",
    "Our team listens first and writes code later.",
    "Therefore, each project starts with a short call.",
    "Clients get a clear plan within two days.",
    "Then we design the pages together.",
    "Good design helps visitors find what they need.",
    "For example, a bakery needs a simple menu page.",
    "Most sites launch within a month.",
    "After launch, we keep an eye on speed.",
])

HARD_EN_TEXT = " ".join([
    "The site was built by a small team in one week.",
    "The site was built by a small team in one week.",
    "The site was built by a small team in one week.",
    words(25, "word") + ".",
    words(25, "word") + ".",
    "Prices went up.",
])


def test_longest_same_start_streak():
    assert longest_same_start_streak([]) == 0
    assert longest_same_start_streak(["A b.", "C d."]) == 1
    assert longest_same_start_streak(["Le chat.", "le chien.", "Le lapin.", "Un oiseau."]) == 3
    assert longest_same_start_streak(["Il pleut.", "", "Il neige."]) == 1


def test_readability_skipped_for_short_texts(evaluate, paragraph):
    assert evaluate(check_readability, {"content": paragraph("Un texte court.")}) == {}


def test_readable_english_text(evaluate, paragraph):
    checks = evaluate(check_readability, {"content": paragraph(GOOD_EN_TEXT)}, EN)
    assert checks["readability-flesch"].status == "pass"
    assert checks["readability-long-sentences"].status == "pass"
    assert checks["readability-long-paragraphs"].status == "pass"
    assert checks["readability-passive"].status == "pass"
    assert checks["readability-transitions"].status == "pass"
    assert checks["readability-consecutive-starts"].status == "pass"
    # Minder dan 300 woorden: geen sectiecheck
    assert "readability-long-sections" not in checks


def test_hard_english_text(evaluate, paragraph):
    checks = evaluate(check_readability, {"content": paragraph(HARD_EN_TEXT)}, EN)
    assert checks["readability-long-sentences"].status == "warning"
    assert checks["readability-passive"].status == "warning"
    assert checks["readability-transitions"].status == "warning"
    assert checks["readability-consecutive-starts"].status == "warning"
    assert "3 consecutive sentences" in checks["readability-consecutive-starts"].message


def test_hard_french_text_fails_reading_ease(evaluate, paragraph):
    hard = (
        "L'internationalisation des infrastructures informatiques nécessite une administration "
        "particulièrement rigoureuse des configurations hétérogènes interconnectées. "
    )
    checks = evaluate(check_readability, {"content": paragraph(hard * 4)})
    assert checks["readability-flesch"].status == "fail"


def test_flesch_threshold_from_config(evaluate, paragraph):
    config = AnalyzerConfig(locale="en", thresholds={"fleschScorePass": 1})
    checks = evaluate(check_readability, {"content": paragraph(GOOD_EN_TEXT)}, config)
    assert checks["readability-flesch"].status == "pass"


def test_long_paragraphs_and_sections(evaluate):
    content = tree(paragraph_node(words(160) + "."), paragraph_node(words(260) + "."))
    checks = evaluate(check_readability, {"content": content})
    assert checks["readability-long-paragraphs"].status == "warning"
    assert checks["readability-long-sections"].status == "warning"


def test_sections_broken_by_headings(evaluate):
    content = tree(
        paragraph_node(words(140) + "."),
        heading_node("h2", "Suite"),
        paragraph_node(words(140) + "."),
        heading_node("h2", "Fin"),
        paragraph_node(words(140) + "."),
    )
    checks = evaluate(check_readability, {"content": content})
    assert checks["readability-long-paragraphs"].status == "pass"
    assert checks["readability-long-sections"].status == "pass"
