# src/telosys_shell/core/context/shell_context.py
import logging
import os
import platform
from typing import Any, Optional

from telosys_shell.core.managers.config_manager import config_manager
from telosys_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

DEFAULT_GITHUB_STORE = "telosys-templates-v3"
EDITOR_COMMAND_KEY = "editor.command"


def default_editor_command(os_name: str) -> str:
    """Returns the standard editor command for the given OS name ('$FILE' is the file placeholder)."""
    name = os_name.lower()
    if "windows" in name:
        return "notepad.exe $FILE"
    if "mac" in name or "darwin" in name:
        return "open -t $FILE"
    return "vi $FILE"


class ShellContext:
    """
    Holds the session state of the shell: the (virtual) current directory,
    the home directory and the current model / bundle / GitHub store.

    One instance is created at startup and passed to every command.
    The installation facts (install location, OS, editor command) are
    resolved once here and never change afterwards.
    """

    def __init__(
            self,
            config: Optional[Any] = None,
            install_location: Optional[str] = None,
            os_name: Optional[str] = None,
            original_directory: Optional[str] = None,
    ):
        self._config = config if config is not None else config_manager

        self._install_location = install_location or str(PathUtils.get_shell_package_root())
        self._os_name = os_name or platform.system()
        self._original_directory = original_directory or os.getcwd()
        self._editor_command = self._find_editor_command()

        self._home_directory: Optional[str] = None
        self._current_directory: str = self._original_directory
        self._current_github_store: Optional[str] = DEFAULT_GITHUB_STORE
        self._current_model: Optional[str] = None
        self._current_bundle: Optional[str] = None

        # Shell plumbing
        self.prompt_session: Optional[Any] = None
        self.command_registry: Optional[Any] = None
        self.exit_requested = False

    def _find_editor_command(self) -> str:
        specific = self._config.get_nested(EDITOR_COMMAND_KEY)
        if specific:
            logger.debug("Using editor command from configuration: %s", specific)
            return specific
        return default_editor_command(self._os_name)

    # --- Installation facts (read-only) ---

    @property
    def install_location(self) -> str:
        return self._install_location

    @property
    def os_name(self) -> str:
        return self._os_name

    @property
    def editor_command(self) -> str:
        return self._editor_command

    @property
    def original_directory(self) -> str:
        return self._original_directory

    # --- Home directory ---

    @property
    def home_directory(self) -> Optional[str]:
        return self._home_directory

    def set_home_directory(self, directory: Optional[str] = None) -> None:
        """Sets the home directory, or uses the current directory if none is given."""
        self._home_directory = directory if directory is not None else self._current_directory
        logger.debug("Home directory set to '%s'", self._home_directory)

    # --- Current directory ---

    @property
    def current_directory(self) -> str:
        return self._current_directory

    @current_directory.setter
    def current_directory(self, directory: str) -> None:
        self._current_directory = directory

    def reset_current_directory_to_home_if_defined(self) -> None:
        if self._home_directory is not None:
            self._current_directory = self._home_directory

    # --- Current selections ---

    @property
    def current_github_store(self) -> Optional[str]:
        return self._current_github_store

    @current_github_store.setter
    def current_github_store(self, store: Optional[str]) -> None:
        self._current_github_store = store

    @property
    def current_model(self) -> Optional[str]:
        return self._current_model

    @current_model.setter
    def current_model(self, model_name: Optional[str]) -> None:
        self._current_model = model_name

    @property
    def current_bundle(self) -> Optional[str]:
        return self._current_bundle

    @current_bundle.setter
    def current_bundle(self, bundle_name: Optional[str]) -> None:
        self._current_bundle = bundle_name

    # --- Console input ---

    def read_line(self, prompt: str = "") -> Optional[str]:
        """
        Reads one line from the user and returns it stripped.
        Returns None at end of input (Ctrl-D / Ctrl-C).
        """
        try:
            if self.prompt_session is not None:
                line = self.prompt_session.prompt(prompt)
            else:
                line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            return None
        return line.strip()

    def confirm(self, question: str) -> bool:
        """Asks a yes/no question; only an answer starting with 'y' (any case) is a yes."""
        answer = self.read_line(f"{question} [y/n] ? ")
        return bool(answer) and answer.lower().startswith("y")

    def __repr__(self) -> str:
        return (
            f"<ShellContext cwd={self._current_directory!r} home={self._home_directory!r} "
            f"model={self._current_model!r} bundle={self._current_bundle!r}>"
        )
