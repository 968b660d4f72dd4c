# src/seoscore_shell/core/handlers/classify_handler.py
import argparse
from typing import List, Optional

from seo_analyzer.services.page_type_service import classify_page
from seoscore_shell.core.managers.config_manager import config_manager


def handle_classify(args: List[str], _stdin: Optional[str] = None) -> int:
    """Prints the page type the analyzer would assign to a slug."""
    parser = argparse.ArgumentParser(prog="seoscore classify", description="Classify a page by its slug.")
    parser.add_argument("slug", help="Page slug, e.g. 'agence-web-ussel' or 'legal/cookies'.")
    parser.add_argument("--collection", help="Collection the document belongs to (e.g. 'posts').")
    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    page_type = classify_page(
        parsed.slug,
        parsed.collection,
        config_manager.get_nested("analyzer.local_seo_slugs", []),
        config_manager.get_nested("analyzer.local_seo_pattern"),
    )
    print(f"{parsed.slug} -> {page_type}")
    return 0
