# src/seo_analyzer/rules/core.py
from typing import Callable, List, Optional, Set

from seo_analyzer.model import AnalysisContext, Check, PageInput

Evaluator = Callable[[PageInput, AnalysisContext], List[Check]]
EnabledPredicate = Callable[[PageInput, AnalysisContext], bool]


def check_spec(ids: List[str]):
    """
    Decorator to declare which check ids a rule evaluator can emit.
    Collected by RuleDefinition for listing and documentation.
    """
    def decorator(func):
        func.defined_ids = ids
        return func
    return decorator


def always(page: PageInput, ctx: AnalysisContext) -> bool:
    return True


class CheckFactory:
    """
    Small helper bound to one rule group so evaluators only spell out what varies.

        make = CheckFactory("title")
        make("title-length", "Title length", "pass", "42 characters", "critical", 3)
    """

    def __init__(self, group: str):
        self.group = group

    def __call__(
            self,
            check_id: str,
            label: str,
            status: str,
            message: str,
            category: str,
            weight: float,
            tip: Optional[str] = None,
    ) -> Check:
        return Check(
            id=check_id,
            label=label,
            status=status,
            message=message,
            category=category,
            weight=weight,
            group=self.group,
            # Tips only make sense when there is something to fix
            tip=tip if status != "pass" else None,
        )


class RuleDefinition:
    """
    Configuration object binding a rule group name to its evaluator.

    ``order`` fixes where the group's checks appear in the result; ``enabled``
    lets a group opt out for pages it does not apply to (e.g. non-products).
    """

    def __init__(
            self,
            group: str,
            evaluator: Evaluator,
            order: int,
            enabled: EnabledPredicate = always,
            possible_ids: Optional[List[str]] = None,
    ):
        self.group = group
        self.evaluator = evaluator
        self.order = order
        self.enabled = enabled

        # --- Auto-Discovery of Check Ids ---
        final_ids: Set[str] = set(possible_ids or [])
        if hasattr(evaluator, "defined_ids"):
            final_ids.update(evaluator.defined_ids)
        self.ids = sorted(final_ids)

    def __repr__(self) -> str:
        return f"RuleDefinition(group={self.group!r}, order={self.order})"
