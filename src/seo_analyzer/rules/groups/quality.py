# src/seo_analyzer/rules/groups/quality.py
from typing import Dict, List

from seo_analyzer.constants import DUPLICATE_BLOCK_MIN_LENGTH, QUALITY_WORDS_FAIL, QUALITY_WORDS_WARN
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.utils.wordlists import DUPLICATE_PATTERNS

GROUP = "quality"
make = CheckFactory(GROUP)


def _repeats_at(text: str, start: int, period: int, step: int) -> bool:
    """True when text[start:start+period] is immediately followed by itself."""
    end = start + period
    if end + period > len(text):
        return False
    for offset in range(0, period, step):
        size = min(step, period - offset)
        if text[start + offset:start + offset + size] != text[end + offset:end + offset + size]:
            return False
    return True


def has_repeated_block(text: str, min_length: int = DUPLICATE_BLOCK_MIN_LENGTH) -> bool:
    """
    True when a block of at least `min_length` characters is directly followed by
    the same block (case-insensitive), e.g. a paragraph pasted twice.

    Only positions that share a `min_length` window are compared.
    """
    folded = text.lower()
    seen: Dict[str, List[int]] = {}
    for pos in range(len(folded) - min_length + 1):
        window = folded[pos:pos + min_length]
        for start in seen.get(window, ()):
            period = pos - start
            if period >= min_length and _repeats_at(folded, start, period, min_length):
                return True
        seen.setdefault(window, []).append(pos)
    return False


def has_duplicate_content(text: str) -> bool:
    """Repeated 30+ character blocks or well-known filler phrases."""
    if not text:
        return False
    return has_repeated_block(text) or any(pattern.search(text) for pattern in DUPLICATE_PATTERNS)


@check_spec(ids=["quality-no-duplicate", "quality-substantial"])
def check_quality(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []

    if has_duplicate_content(ctx.full_text):
        checks.append(make(
            "quality-no-duplicate", "Original content", "fail", "Repeated or boilerplate text was detected.",
            "critical", 3, tip="Remove copy-pasted passages and filler text.",
        ))
    else:
        checks.append(make(
            "quality-no-duplicate", "Original content", "pass", "No repeated or boilerplate text.", "critical", 3,
        ))

    wc = ctx.word_count
    if wc < QUALITY_WORDS_FAIL:
        checks.append(make(
            "quality-substantial", "Substantial content", "fail", f"Only {wc} words: the page is nearly empty.",
            "critical", 3, tip="Write real content that answers the visitor's question.",
        ))
    elif wc < QUALITY_WORDS_WARN:
        checks.append(make(
            "quality-substantial", "Substantial content", "warning", f"{wc} words: the content is light.",
            "critical", 3, tip=f"Aim for at least {QUALITY_WORDS_WARN} words.",
        ))
    else:
        checks.append(make(
            "quality-substantial", "Substantial content", "pass", f"{wc} words of content.", "critical", 3,
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_quality, order=110)
