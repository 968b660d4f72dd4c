# src/seo_analyzer/rules/registry.py
import importlib
import logging
import pkgutil
from typing import Dict, List, Optional

from .core import RuleDefinition

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry of rule groups.

    Dynamically discovers RuleDefinition modules in the 'seo_analyzer.rules.groups'
    package. Loaded once per process and read-only afterwards.
    """

    _definitions: Dict[str, RuleDefinition] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Scans `seo_analyzer.rules.groups` for modules exposing a module-level
        `DEFINITION` (instance of `RuleDefinition`) and registers them by group name.
        """
        if cls._loaded:
            return

        try:
            import seo_analyzer.rules.groups as groups_pkg

            for _, name, _ in pkgutil.iter_modules(groups_pkg.__path__):
                full_name = f"seo_analyzer.rules.groups.{name}"
                try:
                    module = importlib.import_module(full_name)
                    definition = getattr(module, "DEFINITION", None)
                    if isinstance(definition, RuleDefinition):
                        cls.register(definition)
                except Exception as e:
                    logger.error("Error loading rule module %s: %s", name, e)

            cls._loaded = True
        except ImportError as e:
            logger.error("Could not find rule groups package: %s", e)

    @classmethod
    def register(cls, definition: RuleDefinition) -> None:
        if definition.group in cls._definitions:
            logger.warning("Rule group '%s' registered twice; keeping the latest.", definition.group)
        cls._definitions[definition.group] = definition
        logger.debug("Rule group loaded: %s (%d check ids)", definition.group, len(definition.ids))

    @classmethod
    def get_all(cls) -> List[RuleDefinition]:
        """Returns every registered group in canonical result order."""
        return sorted(cls._definitions.values(), key=lambda d: d.order)

    @classmethod
    def get(cls, group: str) -> Optional[RuleDefinition]:
        return cls._definitions.get(group)

    @classmethod
    def get_group_names(cls) -> List[str]:
        return [d.group for d in cls.get_all()]

    @classmethod
    def get_all_check_ids(cls) -> List[str]:
        ids = set()
        for definition in cls._definitions.values():
            ids.update(definition.ids)
        return sorted(ids)
