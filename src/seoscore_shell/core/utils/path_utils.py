# src/seoscore_shell/core/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and output paths.
    """

    @staticmethod
    def get_shell_package_root() -> Path:
        """Directory of the seoscore_shell package (works for editable and regular installs)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_path() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    @staticmethod
    def get_output_dir(output_dir: Optional[str] = None) -> Path:
        """
        Returns the export directory. Relative paths are taken from the current
        working directory. Creates the directory if it doesn't exist.
        """
        path = Path(output_dir or "seoscore_exports").expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def resolve_export_path(target: str, output_dir: Optional[str] = None) -> Path:
        """
        A bare file name lands in the export directory; anything with a
        directory part is used as given.
        """
        path = Path(target).expanduser()
        if path.is_absolute() or path.parent != Path("."):
            return path
        return PathUtils.get_output_dir(output_dir) / path
