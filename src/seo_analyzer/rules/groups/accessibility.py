# src/seo_analyzer/rules/groups/accessibility.py
import re
from typing import List

from seo_analyzer.constants import LINK_DENSITY_FAIL, LINK_DENSITY_WARN, SHORT_ANCHOR_MAX_LENGTH
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import normalize
from seo_analyzer.utils.wordlists import CAMERA_FILENAME_PATTERN, FILE_EXTENSION_PATTERN, GENERIC_ALT_PATTERN

GROUP = "accessibility"
make = CheckFactory(GROUP)

_DIGITS_ONLY = re.compile(r"^\d+$")
_UPPERCASE_LETTER = re.compile(r"[A-Z]")


def is_generic_alt(alt: str) -> bool:
    """'image1', 'photo.jpg' or '12345' tell a screen reader user nothing."""
    trimmed = alt.strip()
    return bool(
        GENERIC_ALT_PATTERN.search(trimmed) or FILE_EXTENSION_PATTERN.search(trimmed) or _DIGITS_ONLY.match(trimmed)
    )


def is_camera_filename(alt: str) -> bool:
    trimmed = alt.strip()
    return bool(CAMERA_FILENAME_PATTERN.search(trimmed) or FILE_EXTENSION_PATTERN.search(trimmed))


def is_all_caps(text: str) -> bool:
    trimmed = text.strip()
    return len(trimmed) > 3 and trimmed == trimmed.upper() and _UPPERCASE_LETTER.search(trimmed) is not None


@check_spec(ids=[
    "a11y-short-anchors", "a11y-alt-quality", "a11y-empty-headings", "a11y-duplicate-links", "a11y-all-caps",
    "a11y-link-density", "a11y-image-filename", "a11y-alt-duplicates-context",
])
def check_accessibility(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    links = ctx.links
    alts = ctx.image_stats.alt_texts

    short = [link.text.strip() for link in links if 0 < len(link.text.strip()) <= SHORT_ANCHOR_MAX_LENGTH]
    if short:
        checks.append(make(
            "a11y-short-anchors", "Short link text", "fail",
            f"{len(short)} link(s) have a one or two character label, e.g. '{short[0]}'.", "important", 2,
            tip="Screen readers list links by their text; make each one meaningful.",
        ))
    else:
        checks.append(make(
            "a11y-short-anchors", "Short link text", "pass", "Link labels are long enough.", "important", 2,
        ))

    generic = [alt for alt in alts if is_generic_alt(alt)]
    if generic:
        checks.append(make(
            "a11y-alt-quality", "Alt text quality", "warning",
            f"{len(generic)} alt text(s) are generic, e.g. '{generic[0]}'.", "important", 2,
            tip="Describe what the image shows instead of repeating its file name.",
        ))
    else:
        checks.append(make(
            "a11y-alt-quality", "Alt text quality", "pass", "Alt texts are descriptive.", "important", 2,
        ))

    empty = [h.tag for h in ctx.headings if h.tag != "h1" and not h.text.strip()]
    if empty:
        checks.append(make(
            "a11y-empty-headings", "Empty headings", "fail",
            f"{len(empty)} empty heading(s): {', '.join(empty)}.", "critical", 3,
            tip="Remove empty headings; they break screen reader navigation.",
        ))
    else:
        checks.append(make(
            "a11y-empty-headings", "Empty headings", "pass", "No empty headings.", "critical", 3,
        ))

    adjacent = sum(1 for previous, current in zip(links, links[1:]) if previous.url == current.url)
    if adjacent:
        checks.append(make(
            "a11y-duplicate-links", "Repeated links", "warning",
            f"{adjacent} link(s) repeat the destination of the link right before them.", "bonus", 1,
            tip="Merge adjacent links to the same page into one.",
        ))
    else:
        checks.append(make(
            "a11y-duplicate-links", "Repeated links", "pass", "No adjacent duplicate links.", "bonus", 1,
        ))

    shouting = [h.text.strip() for h in ctx.headings if is_all_caps(h.text)]
    if shouting:
        checks.append(make(
            "a11y-all-caps", "Uppercase headings", "warning",
            f"{len(shouting)} heading(s) are written in capitals, e.g. '{shouting[0]}'.", "bonus", 1,
            tip="Use CSS text-transform for capitals; some screen readers spell them out.",
        ))
    else:
        checks.append(make(
            "a11y-all-caps", "Uppercase headings", "pass", "Headings use normal casing.", "bonus", 1,
        ))

    text_length = len(ctx.full_text)
    if text_length > 0:
        ratio = sum(len(link.text.strip()) for link in links) / text_length
        pct = int(ratio * 100 + 0.5)
        if ratio > LINK_DENSITY_FAIL:
            checks.append(make(
                "a11y-link-density", "Link density", "fail", f"{pct}% of the text is link text.", "important", 2,
                tip="Write running text around your links.",
            ))
        elif ratio > LINK_DENSITY_WARN:
            checks.append(make(
                "a11y-link-density", "Link density", "warning", f"{pct}% of the text is link text.", "important", 2,
                tip="Write running text around your links.",
            ))
        else:
            checks.append(make(
                "a11y-link-density", "Link density", "pass", f"{pct}% of the text is link text.", "important", 2,
            ))
    else:
        checks.append(make(
            "a11y-link-density", "Link density", "pass", "No content to measure link density on.", "important", 2,
        ))

    camera = [alt for alt in alts if is_camera_filename(alt)]
    if camera:
        checks.append(make(
            "a11y-image-filename", "Image file names", "warning",
            f"{len(camera)} alt text(s) look like camera file names, e.g. '{camera[0]}'.", "important", 2,
            tip="Rename files and describe images in plain words.",
        ))
    else:
        checks.append(make(
            "a11y-image-filename", "Image file names", "pass", "No camera file names used as alt text.",
            "important", 2,
        ))

    heading_texts = {normalize(h.text) for h in ctx.headings}
    redundant = [alt for alt in alts if normalize(alt) and normalize(alt) in heading_texts]
    if redundant:
        checks.append(make(
            "a11y-alt-duplicates-context", "Redundant alt text", "warning",
            f"{len(redundant)} alt text(s) repeat a heading, e.g. '{redundant[0]}'.", "bonus", 1,
            tip="Screen readers would read the same words twice; describe the image instead.",
        ))
    else:
        checks.append(make(
            "a11y-alt-duplicates-context", "Redundant alt text", "pass", "Alt texts do not repeat headings.",
            "bonus", 1,
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_accessibility, order=160)
