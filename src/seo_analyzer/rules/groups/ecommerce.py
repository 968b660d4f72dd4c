# src/seo_analyzer/rules/groups/ecommerce.py
from typing import List

from seo_analyzer.constants import PRODUCT_MIN_IMAGES, PRODUCT_MIN_WORDS, PRODUCT_WARN_WORDS
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import normalize
from seo_analyzer.utils.wordlists import AVAILABILITY_PATTERNS, PRICE_PATTERN, REVIEW_PATTERN, for_locale

GROUP = "ecommerce"
make = CheckFactory(GROUP)


def is_product(page: PageInput, ctx: AnalysisContext) -> bool:
    return page.is_product


def mentions_price(text: str) -> bool:
    return PRICE_PATTERN.search(text) is not None


@check_spec(ids=[
    "product-price-mentioned", "product-short-description", "product-has-images", "product-title-includes-brand",
    "product-meta-includes-price", "product-review-readiness", "product-availability",
])
def check_ecommerce(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    wc = ctx.word_count
    images = ctx.image_stats.total

    if mentions_price(ctx.full_text):
        checks.append(make(
            "product-price-mentioned", "Price in content", "pass", "The content mentions a price.", "important", 2,
        ))
    else:
        checks.append(make(
            "product-price-mentioned", "Price in content", "warning", "No price found in the content.",
            "important", 2, tip="State the price, or a 'from X' indication.",
        ))

    if wc >= PRODUCT_MIN_WORDS:
        checks.append(make(
            "product-short-description", "Product description", "pass", f"{wc}-word product description.",
            "important", 2,
        ))
    else:
        checks.append(make(
            "product-short-description", "Product description", "warning" if wc >= PRODUCT_WARN_WORDS else "fail",
            f"{wc}-word product description (at least {PRODUCT_MIN_WORDS} recommended).", "important", 2,
            tip="Describe features, benefits, use cases and specifications.",
        ))

    if images >= PRODUCT_MIN_IMAGES:
        checks.append(make(
            "product-has-images", "Product images", "pass", f"{images} product images.", "critical", 3,
        ))
    elif images >= 1:
        checks.append(make(
            "product-has-images", "Product images", "warning",
            f"Only one image ({PRODUCT_MIN_IMAGES}+ recommended).", "critical", 3,
            tip="Show the product from several angles and in use.",
        ))
    else:
        checks.append(make(
            "product-has-images", "Product images", "fail", "The product has no image.", "critical", 3,
            tip="Products without photos hardly sell online.",
        ))

    keyword = ctx.normalized_keyword
    if keyword and keyword in normalize(page.meta_title or ""):
        checks.append(make(
            "product-title-includes-brand", "Product name in title", "pass",
            "The title contains the product name.", "bonus", 1,
        ))
    elif keyword:
        checks.append(make(
            "product-title-includes-brand", "Product name in title", "warning",
            f'The title does not contain "{keyword}".', "bonus", 1,
            tip="Put the product or brand name at the start of the title.",
        ))
    else:
        checks.append(make(
            "product-title-includes-brand", "Product name in title", "warning",
            "No focus keyword is set to check the title against.", "bonus", 1,
            tip="Use the product name as the focus keyword.",
        ))

    if mentions_price(page.meta_description or ""):
        checks.append(make(
            "product-meta-includes-price", "Price in description", "pass",
            "The meta description mentions the price.", "bonus", 1,
        ))
    else:
        checks.append(make(
            "product-meta-includes-price", "Price in description", "warning",
            "The meta description does not mention the price.", "bonus", 1,
            tip="A price in the snippet improves click-through, e.g. 'from 29 EUR'.",
        ))

    if REVIEW_PATTERN.search(ctx.full_text):
        checks.append(make(
            "product-review-readiness", "Reviews", "pass", "The content refers to reviews or ratings.", "bonus", 1,
        ))
    else:
        checks.append(make(
            "product-review-readiness", "Reviews", "warning", "No reviews or ratings are mentioned.", "bonus", 1,
            tip="Add customer reviews; they build trust and enable rating stars.",
        ))

    if for_locale(AVAILABILITY_PATTERNS, ctx.locale).search(ctx.full_text):
        checks.append(make(
            "product-availability", "Availability", "pass", "Availability information found.", "important", 2,
        ))
    else:
        checks.append(make(
            "product-availability", "Availability", "warning", "No availability information found.",
            "important", 2, tip="Say whether the product is in stock, made to order or when it ships.",
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_ecommerce, order=170, enabled=is_product)
