# src/seoscore_shell/core/handlers/config_handler.py
import logging
from typing import List, Optional

from seoscore_shell.core.managers.config_manager import config_manager
from seoscore_shell.core.services.json_service import to_json

logger = logging.getLogger(__name__)

USAGE = """
Usage:
  seoscore config list                Show the current configuration as JSON.
  seoscore config get <key>           Show one value (e.g., analyzer.locale).
  seoscore config set <key> <value>   Set a value for this run (e.g., analyzer.locale en).
  seoscore config reset               Reload the configuration from settings.json.
"""


def handle_config(args: List[str], _stdin: Optional[str] = None) -> int:
    """Handles the 'config' command for viewing and modifying the configuration."""
    if not args:
        print(USAGE)
        return 1

    command = args[0]

    if command == "list":
        print(to_json(config_manager.get_all()))
        return 0

    if command == "get":
        if len(args) < 2:
            print("Usage: seoscore config get <key>")
            return 1
        value = config_manager.get_nested(args[1])
        if value is None:
            print(f"❌ Unknown or unset key '{args[1]}'.")
            return 1
        print(to_json(value) if isinstance(value, (dict, list)) else value)
        return 0

    if command == "set":
        if len(args) < 3:
            print("Usage: seoscore config set <key> <value>")
            return 1
        key_path = args[1]
        value = " ".join(args[2:])

        if value.startswith('"') and value.endswith('"'):
            value = value[1:-1]

        if config_manager.set_nested(key_path, value):
            new_value = config_manager.get_nested(key_path)
            print(f"✅ Config updated: {key_path} = {new_value} (type: {type(new_value).__name__})")
            return 0
        print(f"❌ Error: Failed to set config value for key '{key_path}'.")
        return 1

    if command == "reset":
        config_manager.reset()
        print("✅ Configuration has been reset to the values from settings.json.")
        return 0

    print(f"Unknown command: 'config {command}'.")
    return 1
