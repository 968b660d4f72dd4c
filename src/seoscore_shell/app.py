# src/seoscore_shell/app.py
import logging
import sys
from typing import Callable, Dict, List, Optional

from seoscore_shell.core.handlers.analyze_handler import analyze_help_text, handle_analyze
from seoscore_shell.core.handlers.classify_handler import handle_classify
from seoscore_shell.core.handlers.config_handler import handle_config
from seoscore_shell.core.managers.config_manager import config_manager
from seoscore_shell.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

COMMANDS: Dict[str, Callable[[List[str]], int]] = {
    "analyze": handle_analyze,
    "classify": handle_classify,
    "config": handle_config,
}

HELP_TEXT = f"""
seoscore - heuristic SEO content scoring

Commands:
{analyze_help_text}
  classify <slug> [--collection NAME]
                      Show the page type detected for a slug.
  config [list | get KEY | set KEY VALUE | reset]
                      Inspect or change settings for this run.
""".strip()


def _init_logging() -> None:
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        config_manager.get_nested("debug.modules", {}),
        config_manager.get_nested("debug.silenced", {}),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the `seoscore` command."""
    args = list(sys.argv[1:] if argv is None else argv)
    _init_logging()

    if not args or args[0] in ("-h", "--help", "help"):
        print(HELP_TEXT)
        return 0 if args else 1

    command, rest = args[0], args[1:]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"❌ Unknown command: '{command}'.")
        print(HELP_TEXT)
        return 1

    logger.debug("Running command %s %s", command, rest)
    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())
