# tests/analyzer/test_normalizer.py
import pytest

from seo_analyzer.text.normalizer import (
    count_occurrences,
    count_words,
    keyword_matches,
    normalize,
    significant_words,
    slugify,
)


def test_normalize_strips_accents_and_case():
    """Test of accenten, hoofdletters en witruimte verdwijnen."""
    assert normalize("  Réalité Augmentée ") == "realite augmentee"
    assert normalize("Corrèze") == "correze"


@pytest.mark.parametrize("text", ["Été à Ussel", "ÇA VA", "", "déjà-vu  ", "naïve café"])
def test_normalize_is_idempotent(text):
    """normalize(normalize(x)) moet gelijk zijn aan normalize(x)."""
    assert normalize(normalize(text)) == normalize(text)


def test_slugify():
    assert slugify("Agence Web à Ussel!") == "agence-web-a-ussel"
    assert slugify("SEO -- local   guide") == "seo-local-guide"


def test_count_words():
    assert count_words("  een  twee drie ") == 3
    assert count_words("") == 0


def test_significant_words_skip_short_words():
    assert significant_words("agence web a ussel") == ["agence", "ussel"]


def test_keyword_matches_exact_substring():
    """Een letterlijke treffer wint altijd."""
    assert keyword_matches("agence web", "notre agence web est la")


def test_keyword_matches_tolerates_inserted_words():
    """Alle significante woorden aanwezig -> match, ook met lidwoorden ertussen."""
    assert keyword_matches("agence web ussel", "notre agence web a ussel")
    assert not keyword_matches("agence web ussel", "notre agence web a tulle")


def test_keyword_matches_empty_inputs():
    assert not keyword_matches("", "tekst")
    assert not keyword_matches("agence", "")


def test_keyword_matches_verbatim_text():
    """Als de tekst het keyword letterlijk bevat, matcht de genormaliseerde vorm altijd."""
    text = "Bienvenue chez Agence Web Ussel, votre partenaire."
    assert keyword_matches(normalize("Agence Web Ussel"), normalize(text))


def test_count_occurrences_exact():
    """Referentievoorbeeld: twee treffers van twee woorden op tien woorden -> 40%."""
    result = count_occurrences("agence web", "agence web a ussel est une agence web de qualite", 10)
    assert result.exact_count == 2
    assert result.word_level_match is True
    assert result.estimated_density == pytest.approx(40.0)


def test_count_occurrences_word_level_fallback():
    """Zonder exacte treffer telt het minimum per significant woord."""
    text = "agence de qualite a ussel, une agence proche de ussel et de tulle"
    result = count_occurrences("agence web ussel", text, 13)
    assert result.exact_count == 0
    assert result.word_level_match is True
    assert result.estimated_density == pytest.approx(2 / 13 * 100)


def test_count_occurrences_no_match():
    result = count_occurrences("agence web ussel", "rien a voir ici", 4)
    assert result.exact_count == 0
    assert result.word_level_match is False
    assert result.estimated_density == 0.0
