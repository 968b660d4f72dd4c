# src/seo_analyzer/services/page_type_service.py
import re
from typing import Iterable, Optional

from seo_analyzer.utils.wordlists import LEGAL_SLUGS

LEGAL_SUBSTRINGS = (
    "mentions-legales", "politique-de-confidentialite", "politique-confidentialite", "cgv", "cgu",
    "accessibilite", "cookies", "privacy-policy", "terms-of-service", "terms-and-conditions", "cookie-policy",
)
LEGAL_EXACT = ("legal", "privacy", "terms", "tos", "gdpr")

CONTACT_EXACT = ("contact", "contact-us", "get-in-touch")

FORM_KEYWORDS = ("devis", "inscription", "support", "quote", "signup", "register", "apply")

LOCAL_SEO_PREFIX_FR = re.compile(
    r"^(agence-web|creation-site-internet|agence-digitale|agence-communication|creation-logo|webmaster"
    r"|developpeur-web|referencement-seo|zone-intervention)-"
)
LOCAL_SEO_SUBSTRINGS_FR = ("agence-web-", "creation-site-", "developpeur-web-", "zone-intervention")
LOCAL_SEO_PREFIX_EN = re.compile(
    r"^(web-agency|web-design|web-developer|seo-agency|digital-agency|logo-design|webmaster)-"
)
LOCAL_SEO_SUBSTRINGS_EN = ("web-agency-", "web-design-", "web-developer-")

SERVICE_PREFIXES = ("services/", "nos-services", "services-", "our-services")
RESOURCE_PREFIXES = ("ressources/", "ressources-", "resources/", "resources-")
AGENCY_SUBSTRINGS = ("a-propos", "equipe", "portfolio", "about-us")
AGENCY_PREFIXES = ("agence/", "agence-")
AGENCY_EXACT = ("agence", "about")
BLOG_PREFIXES = ("posts/", "blog/")


def _is_legal(slug: str) -> bool:
    return (
        slug in LEGAL_SLUGS
        or any(part in slug for part in LEGAL_SUBSTRINGS)
        or slug in LEGAL_EXACT
    )


def _is_contact(slug: str) -> bool:
    return slug in CONTACT_EXACT or slug.endswith("/contact")


def _is_local_seo(slug: str, extra_slugs: Iterable[str], pattern: Optional[str]) -> bool:
    if slug in extra_slugs:
        return True
    if pattern and re.search(pattern, slug):
        return True
    return bool(
        LOCAL_SEO_PREFIX_FR.match(slug)
        or any(part in slug for part in LOCAL_SEO_SUBSTRINGS_FR)
        or LOCAL_SEO_PREFIX_EN.match(slug)
        or any(part in slug for part in LOCAL_SEO_SUBSTRINGS_EN)
    )


def _is_agency(slug: str) -> bool:
    return (
        any(part in slug for part in AGENCY_SUBSTRINGS)
        or slug.startswith(AGENCY_PREFIXES)
        or slug in AGENCY_EXACT
    )


def classify_page(
        slug: Optional[str],
        collection: Optional[str] = None,
        extra_local_slugs: Optional[Iterable[str]] = None,
        local_pattern: Optional[str] = None,
) -> str:
    """
    Maps a slug (and optional collection hint) to a page type.

    The checks run in a fixed priority order and the first match wins, so e.g.
    'support' is a form page even though it could also read as a service page.
    """
    if collection == "posts":
        return "blog"

    if not slug or slug in ("home", "accueil"):
        return "home"

    slug = slug.lower()
    extra = {s.lower() for s in (extra_local_slugs or ())}

    if _is_legal(slug):
        return "legal"
    if _is_contact(slug):
        return "contact"
    if any(word in slug for word in FORM_KEYWORDS):
        return "form"
    if _is_local_seo(slug, extra, local_pattern):
        return "local-seo"
    if slug.startswith(SERVICE_PREFIXES):
        return "service"
    if slug.startswith(RESOURCE_PREFIXES):
        return "resource"
    if _is_agency(slug):
        return "agency"
    if slug.startswith(BLOG_PREFIXES):
        return "blog"
    return "generic"
