# src/seo_analyzer/engine.py
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from seo_analyzer.model import AnalysisResult, AnalyzerConfig, Check, PageInput
from seo_analyzer.rules.registry import RuleRegistry
from seo_analyzer.services.context_service import ContextBuilder
from seo_analyzer.services.scoring_service import apply_weight_overrides, score_checks

logger = logging.getLogger(__name__)

ConfigLike = Union[AnalyzerConfig, Dict[str, Any], None]


def _as_config(config: ConfigLike) -> AnalyzerConfig:
    if config is None:
        return AnalyzerConfig()
    if isinstance(config, AnalyzerConfig):
        return config
    return AnalyzerConfig.model_validate(config)


class AnalysisEngine:
    """
    Content analysis engine.

    Builds the analysis context of a page once, runs every enabled rule group
    against it in canonical order and aggregates the checks into a score.
    Rule groups are discovered on first construction and shared afterwards.
    """

    def __init__(self):
        """Initializes the engine by discovering and loading all rule groups."""
        RuleRegistry.discover()
        self.definitions = RuleRegistry.get_all()

    def run(self, page: PageInput, config: Optional[AnalyzerConfig] = None) -> AnalysisResult:
        """
        Scores one validated page.

        Args:
            page (PageInput): The page fields to analyze.
            config (AnalyzerConfig): Per-call options; defaults apply when omitted.

        Returns:
            AnalysisResult: Score, level and the ordered list of checks.
        """
        config = config or AnalyzerConfig()
        ctx = ContextBuilder(config).build(page)
        disabled = set(config.disabled_rules)

        checks: List[Check] = []
        for definition in self.definitions:
            if definition.group in disabled:
                logger.debug("Rule group '%s' disabled by configuration", definition.group)
                continue
            if not definition.enabled(page, ctx):
                logger.debug("Rule group '%s' does not apply to this page", definition.group)
                continue
            checks.extend(definition.evaluator(page, ctx))

        checks = apply_weight_overrides(checks, config.override_weights)
        score, level = score_checks(checks)
        logger.debug("Analysis done: %d checks, score %d (%s)", len(checks), score, level)
        return AnalysisResult(score=score, level=level, checks=checks)


_default_engine: Optional[AnalysisEngine] = None


def get_engine() -> AnalysisEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = AnalysisEngine()
    return _default_engine


def analyze(data: Any, config: ConfigLike = None) -> AnalysisResult:
    """
    Public entry point: scores a page given as a dict (camelCase or snake_case keys)
    or as a PageInput.

    Input that is not a mapping or cannot be validated yields a zero score with no
    checks instead of an exception. An invalid configuration is the caller's error
    and raises pydantic.ValidationError.
    """
    analyzer_config = _as_config(config)

    if isinstance(data, PageInput):
        page = data
    elif isinstance(data, dict):
        try:
            page = PageInput.model_validate(data)
        except ValidationError as e:
            logger.warning("Page input rejected: %s", e)
            return AnalysisResult()
    else:
        logger.warning("Cannot analyze input of type %s", type(data).__name__)
        return AnalysisResult()

    return get_engine().run(page, analyzer_config)
