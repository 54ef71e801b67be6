# src/telosys_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important installation and user paths.
    """

    # --- Installation specific paths

    @staticmethod
    def get_shell_package_root() -> Path:
        """
        Returns the absolute path of the installed 'telosys_shell' package.
        This is the installation location, 'settings.json' lives here.
        """
        package_root = Path(__file__).resolve().parents[2]
        if not package_root.is_dir():
            raise FileNotFoundError(f"Could not determine the installation location ({package_root}).")
        return package_root

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_shell_history_file() -> Path:
        """
        Returns the path to the shell history file in the user's home directory.
        (e.g., ~/.telosys_shell_history)
        """
        return Path.home() / ".telosys_shell_history"

    # --- Helper methods ---

    @staticmethod
    def resolve_directory(base_dir: str, directory: str) -> Path:
        """
        Resolves 'directory' against 'base_dir' (unless it is absolute)
        and normalizes '..' and '~' without touching the process working directory.
        """
        path = Path(directory).expanduser()
        if not path.is_absolute():
            path = Path(base_dir) / path
        return path.resolve()
