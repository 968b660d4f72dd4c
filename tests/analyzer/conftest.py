# tests/analyzer/conftest.py
from datetime import datetime, timezone

import pytest

from seo_analyzer.model import AnalyzerConfig, PageInput
from seo_analyzer.services.context_service import ContextBuilder

REPEATED_SENTENCE = (
    "Notre agence web ussel cree des sites internet modernes et performants pour les entreprises de la region."
)


def make_paragraph_tree(*texts):
    """Een rich-text boom met één paragraaf per tekst, in een 'root' envelop."""
    return {
        "root": {
            "children": [
                {"type": "paragraph", "children": [{"type": "text", "text": text}]}
                for text in texts
            ]
        }
    }


@pytest.fixture
def paragraph():
    return make_paragraph_tree


@pytest.fixture
def full_page():
    """
    Fabriek voor een complete, lokale pagina (agence web Ussel). Velden kunnen
    per test worden overschreven.
    """
    def factory(**overrides):
        data = {
            "metaTitle": "Agence Web à Ussel en Corrèze | Mon Site",
            "metaDescription": (
                "Découvrez notre agence web à Ussel en Corrèze. Création de sites internet, "
                "développement web et référencement SEO. Devis gratuit."
            ),
            "slug": "agence-web-ussel",
            "focusKeyword": "agence web ussel",
            "heroTitle": "Agence Web à Ussel",
            "heroRichText": make_paragraph_tree(
                "Notre agence est votre partenaire web a ussel specialisee dans la creation de sites internet. "
                "En effet, nous proposons des services de developpement web sur mesure."
            ),
            "blocks": [
                {
                    "blockType": "content",
                    "columns": [{"richText": make_paragraph_tree(" ".join([REPEATED_SENTENCE] * 50))}],
                }
            ],
            "metaImage": {"id": 1, "url": "/images/og.jpg", "alt": "Agence web Ussel"},
            "heroMedia": {"url": "/images/hero.jpg", "alt": "Hero agence web Ussel background"},
            "updatedAt": datetime.now(timezone.utc).isoformat(),
        }
        data.update(overrides)
        return data

    return factory


@pytest.fixture
def build_context():
    """Bouwt (page, ctx) uit een dict, met optionele config."""
    def factory(data, config=None):
        page = PageInput.model_validate(data)
        ctx = ContextBuilder(config or AnalyzerConfig()).build(page)
        return page, ctx

    return factory


def by_id(checks):
    return {c.id: c for c in checks}


@pytest.fixture
def index_checks():
    return by_id
