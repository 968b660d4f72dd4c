# src/seo_analyzer/rules/groups/readability.py
from typing import List

from seo_analyzer.constants import (
    CONSECUTIVE_SAME_START_MAX,
    LONG_PARAGRAPH_WORDS,
    LONG_SECTION_THRESHOLD,
    LONG_SENTENCE_MAX_RATIO,
    READABILITY_MIN_WORDS,
    WORDS_PER_HEADING,
)
from seo_analyzer.document.extractor import count_long_sections, top_level_paragraphs
from seo_analyzer.linguistics.registry import get_strategy
from seo_analyzer.model import AnalysisContext, Check, PageInput
from seo_analyzer.rules.core import CheckFactory, RuleDefinition, check_spec
from seo_analyzer.text.normalizer import count_words

GROUP = "readability"
make = CheckFactory(GROUP)


def longest_same_start_streak(sentences: List[str]) -> int:
    """Length of the longest run of consecutive sentences opening with the same word."""
    longest = current = 0
    previous = None
    for sentence in sentences:
        words = sentence.split()
        first = words[0].lower() if words else ""
        if first and first == previous:
            current += 1
        else:
            current = 1 if first else 0
        previous = first or None
        longest = max(longest, current)
    return longest


def _percent(ratio: float) -> int:
    return int(ratio * 100 + 0.5)


@check_spec(ids=[
    "readability-flesch", "readability-long-sentences", "readability-long-paragraphs", "readability-passive",
    "readability-transitions", "readability-consecutive-starts", "readability-long-sections",
])
def check_readability(page: PageInput, ctx: AnalysisContext) -> List[Check]:
    checks: List[Check] = []
    if ctx.word_count < READABILITY_MIN_WORDS:
        return checks

    strategy = get_strategy(ctx.locale)
    sentences = ctx.sentences
    max_depth = ctx.config.max_recursion_depth
    limits = strategy.readability_thresholds

    # --- Reading ease ---
    score = strategy.readability_score(ctx.full_text)
    passing = ctx.config.thresholds.flesch_score_pass or strategy.flesch_thresholds.passing
    warning = min(strategy.flesch_thresholds.warning, passing)
    if score >= passing:
        checks.append(make(
            "readability-flesch", "Reading ease", "pass", f"Reading ease score: {score}/100.", "important", 2,
        ))
    elif score >= warning:
        checks.append(make(
            "readability-flesch", "Reading ease", "warning", f"The text is fairly hard to read ({score}/100).",
            "important", 2, tip="Shorten sentences and prefer everyday words.",
        ))
    else:
        checks.append(make(
            "readability-flesch", "Reading ease", "fail", f"The text is hard to read ({score}/100).",
            "important", 2, tip="Shorten sentences and prefer everyday words.",
        ))

    # --- Sentence length ---
    if sentences:
        long_count, ratio = strategy.long_sentence_ratio(sentences)
        if ratio > LONG_SENTENCE_MAX_RATIO:
            checks.append(make(
                "readability-long-sentences", "Sentence length", "warning",
                f"{long_count} of {len(sentences)} sentences ({_percent(ratio)}%) exceed "
                f"{limits.long_sentence_words} words.",
                "important", 2, tip="Split long sentences in two.",
            ))
        else:
            checks.append(make(
                "readability-long-sentences", "Sentence length", "pass",
                f"{_percent(ratio)}% of sentences are long.", "important", 2,
            ))

    # --- Paragraph length ---
    has_long_paragraph = any(
        count_words(paragraph) > LONG_PARAGRAPH_WORDS
        for source in ctx.rich_text_sources
        for paragraph in top_level_paragraphs(source, max_depth)
    )
    if has_long_paragraph:
        checks.append(make(
            "readability-long-paragraphs", "Paragraph length", "warning",
            f"At least one paragraph exceeds {LONG_PARAGRAPH_WORDS} words.", "important", 2,
            tip="Break walls of text into shorter paragraphs.",
        ))
    else:
        checks.append(make(
            "readability-long-paragraphs", "Paragraph length", "pass", "Paragraphs have a comfortable length.",
            "important", 2,
        ))

    if sentences:
        # --- Passive voice ---
        passive = sum(1 for s in sentences if strategy.detect_passive_voice(s))
        passive_ratio = passive / len(sentences)
        if passive_ratio > limits.passive_max_ratio:
            checks.append(make(
                "readability-passive", "Passive voice", "warning",
                f"{passive} of {len(sentences)} sentences ({_percent(passive_ratio)}%) use the passive voice.",
                "important", 2, tip="Prefer active sentences: say who does what.",
            ))
        else:
            checks.append(make(
                "readability-passive", "Passive voice", "pass",
                f"Passive voice is used sparingly ({_percent(passive_ratio)}%).", "important", 2,
            ))

        # --- Transition words ---
        transitions = sum(1 for s in sentences if strategy.has_transition_word(s))
        transition_ratio = transitions / len(sentences)
        if transition_ratio < limits.transitions_min_ratio:
            checks.append(make(
                "readability-transitions", "Transition words", "warning",
                f"Only {_percent(transition_ratio)}% of sentences use a transition word.", "bonus", 1,
                tip="Connect ideas with words such as 'however', 'therefore' or 'for example'.",
            ))
        else:
            checks.append(make(
                "readability-transitions", "Transition words", "pass",
                f"{_percent(transition_ratio)}% of sentences use a transition word.", "bonus", 1,
            ))

    # --- Repetitive openings ---
    if len(sentences) >= CONSECUTIVE_SAME_START_MAX:
        streak = longest_same_start_streak(sentences)
        if streak >= CONSECUTIVE_SAME_START_MAX:
            checks.append(make(
                "readability-consecutive-starts", "Sentence openings", "warning",
                f"{streak} consecutive sentences start with the same word.", "bonus", 1,
                tip="Vary how sentences begin.",
            ))
        else:
            checks.append(make(
                "readability-consecutive-starts", "Sentence openings", "pass", "Sentence openings are varied.",
                "bonus", 1,
            ))

    # --- Sections without subheadings ---
    long_sections = sum(
        count_long_sections(source, LONG_SECTION_THRESHOLD, max_depth) for source in ctx.rich_text_sources
    )
    if long_sections > 0:
        checks.append(make(
            "readability-long-sections", "Section length", "warning",
            f"{long_sections} section(s) run past {LONG_SECTION_THRESHOLD} words without a subheading.",
            "important", 2, tip=f"Add a subheading roughly every {WORDS_PER_HEADING} words.",
        ))
    elif ctx.word_count > WORDS_PER_HEADING:
        checks.append(make(
            "readability-long-sections", "Section length", "pass", "Sections are broken up by subheadings.",
            "important", 2,
        ))

    return checks


DEFINITION = RuleDefinition(group=GROUP, evaluator=check_readability, order=100)
