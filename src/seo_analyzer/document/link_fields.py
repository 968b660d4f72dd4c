# src/seo_analyzer/document/link_fields.py
"""Helpers for structured link fields that live outside rich text (buttons, CTAs, cards)."""
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse


def extract_field_link(field: Any) -> Optional[Dict[str, str]]:
    """
    Resolves a structured link field to {'url', 'label'}.

    Supports custom URLs ({'type': 'custom', 'url': ...}) and references to
    other documents ({'type': 'reference', 'reference': {'value': {'slug': ...}}}).
    """
    if not isinstance(field, dict):
        return None

    label = field.get("label") if isinstance(field.get("label"), str) else ""

    if field.get("type") == "custom" and isinstance(field.get("url"), str) and field["url"]:
        return {"url": field["url"], "label": label}

    if field.get("type") == "reference" and isinstance(field.get("reference"), dict):
        reference = field["reference"]
        value = reference.get("value")
        if isinstance(value, dict) and isinstance(value.get("slug"), str):
            return {"url": f"/{value['slug']}", "label": label}
        if isinstance(reference.get("slug"), str):
            return {"url": f"/{reference['slug']}", "label": label}

    if isinstance(field.get("url"), str) and field["url"]:
        return {"url": field["url"], "label": label}

    return None


def _strip_www(netloc: str) -> str:
    netloc = netloc.lower()
    return netloc[4:] if netloc.startswith("www.") else netloc


def normalize_to_slug(url: str, site_url: Optional[str] = None) -> Optional[str]:
    """
    Reduces an internal URL to a bare slug ('/services/seo/?a=1#top' -> 'services/seo').
    Returns None for links that leave the site or are not web links (mailto:, tel:).
    """
    if not url or url.startswith("#"):
        return None

    parsed = urlparse(url)
    if parsed.scheme and parsed.scheme not in ("http", "https"):
        return None

    if parsed.netloc:
        if not site_url:
            return None
        if _strip_www(parsed.netloc) != _strip_www(urlparse(site_url).netloc):
            return None

    return parsed.path.strip("/")


def collect_internal_slugs(links: Iterable[Any], site_url: Optional[str] = None) -> List[str]:
    """Deduplicated internal slugs, in first-seen order, for link-graph consumers."""
    seen: List[str] = []
    for link in links:
        url = getattr(link, "url", None) or (link.get("url") if isinstance(link, dict) else None)
        slug = normalize_to_slug(url or "", site_url)
        if slug is not None and slug not in seen:
            seen.append(slug)
    return seen


def is_internal_url(url: str) -> bool:
    """Relative paths, fragments and scheme-less references stay on the site."""
    if not url:
        return False
    if url.startswith(("/", "#")):
        return True
    return not urlparse(url).scheme


def is_external_url(url: str) -> bool:
    return bool(url) and urlparse(url).scheme in ("http", "https")
