# src/telosys_shell/core/commands/config_command.py
import json
import logging
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.managers.config_manager import KNOWN_KEYS, ConfigManager, config_manager
from telosys_shell.core.utils.configure_logging import set_level

logger = logging.getLogger(__name__)

SUBCOMMANDS = ("list", "set", "reset")
LOG_LEVEL_KEY = "debug.level"


class ConfigCommand(Command):
    """
    Views and modifies the session configuration.
    Values read once at startup (e.g. the editor command) are not affected.
    """

    name = "config"
    short_description = "Configuration"
    description = "Shows, sets (for this session) or reloads the settings.json configuration"
    usage = "config list|set <key> <value>|reset"

    def __init__(self, manager: Optional[ConfigManager] = None):
        self.manager = manager if manager is not None else config_manager

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        if len(args) < 2:
            return self.usage_error()

        subcommand = args[1]

        if subcommand == "list":
            print(json.dumps(self.manager.get_all(), indent=2))
            return None

        if subcommand == "set":
            if len(args) < 4:
                return "Usage : config set <key> <value>"
            key_path = args[2]
            value = " ".join(args[3:])
            if value.startswith('"') and value.endswith('"'):
                value = value[1:-1]

            if key_path not in KNOWN_KEYS:
                return f"Unknown key '{key_path}' (known keys: {', '.join(KNOWN_KEYS)})"
            if not self.manager.set_nested(key_path, value):
                return f"Invalid value for '{key_path}': {value}"
            new_value = self.manager.get_nested(key_path)
            if key_path == LOG_LEVEL_KEY:
                set_level(new_value)
            print(f"✅ Config updated: {key_path} = {new_value} (type: {type(new_value).__name__})")
            return None

        if subcommand == "reset":
            self.manager.reset()
            set_level(self.manager.get_nested(LOG_LEVEL_KEY, "WARNING"))
            print("✅ Configuration has been reset to the values from settings.json.")
            return None

        return f"Unknown command: 'config {subcommand}'"
