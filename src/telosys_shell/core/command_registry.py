# src/telosys_shell/core/command_registry.py
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from telosys_shell.core.commands.base import Command
from telosys_shell.core.commands.config_command import ConfigCommand
from telosys_shell.core.commands.core.cls_command import ClsCommand
from telosys_shell.core.commands.core.env_command import EnvCommand
from telosys_shell.core.commands.core.help_command import HelpCommand
from telosys_shell.core.commands.core.quit_command import QuitCommand
from telosys_shell.core.commands.directory_commands import CdCommand, HomeCommand, PwdCommand
from telosys_shell.core.commands.generate_command import GenerateCommand
from telosys_shell.core.commands.list_commands import ListEntitiesCommand, ListTargetsCommand
from telosys_shell.core.commands.selection_commands import BundleCommand, GitHubStoreCommand, ModelCommand
from telosys_shell.core.engine import GenerationEngine

logger = logging.getLogger(__name__)

OTHER_GROUP = "Other"

# Display order of the help text, group by group.
COMMAND_GROUPS: List[Tuple[str, List[str]]] = [
    ("Core", ["help", "env", "config", "cls", "quit"]),
    ("Navigation", ["pwd", "cd", "h"]),
    ("Selection", ["m", "b", "gh"]),
    ("Generation", ["le", "lt", "gen"]),
]

HEADER_HELP_TEXT = """
Telosys Shell - Help

  A ; B               Execute B after A, regardless of the outcome.
  A && B              Execute B only if A was successful.
  A || B              Execute B only if A failed.
""".strip()


class CommandRegistry:
    """
    The catalog of all the shell commands.
    Commands are looked up by their exact name and listed by group for the help.
    """

    def __init__(self, commands: Sequence[Command], groups: Optional[List[Tuple[str, List[str]]]] = None):
        self._commands: Dict[str, Command] = {}
        for command in commands:
            if command.name in self._commands:
                raise ValueError(f"Duplicate command name '{command.name}'")
            self._commands[command.name] = command
            logger.debug("Registered command '%s'", command.name)

        self._groups = self._build_groups(groups if groups is not None else COMMAND_GROUPS)
        logger.debug("Successfully registered %d commands in %d groups.", len(self._commands), len(self._groups))

    def _build_groups(self, groups: List[Tuple[str, List[str]]]) -> List[Tuple[str, List[Command]]]:
        built: List[Tuple[str, List[Command]]] = []
        grouped = set()
        for group_name, names in groups:
            members = []
            for name in names:
                command = self._commands.get(name)
                if command is None:
                    logger.warning("Group '%s' references unknown command '%s'", group_name, name)
                    continue
                members.append(command)
                grouped.add(name)
            if members:
                built.append((group_name, members))

        others = [cmd for name, cmd in self._commands.items() if name not in grouped]
        if others:
            built.append((OTHER_GROUP, others))
        return built

    def find_by_name(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    @property
    def names(self) -> List[str]:
        """Command names in registration order."""
        return list(self._commands.keys())

    @property
    def groups(self) -> List[Tuple[str, List[Command]]]:
        return list(self._groups)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def render_help(self) -> str:
        parts = [HEADER_HELP_TEXT]
        for group_name, commands in self._groups:
            lines = [f"{group_name.upper()}:"]
            for command in commands:
                lines.append(f"  {command.usage:<36} {command.short_description}")
            parts.append("\n".join(lines))
        return "\n\n".join(parts)

    def render_command_help(self, name: str) -> str:
        command = self._commands[name]
        return (
            f"{command.name} : {command.short_description}\n"
            f"  {command.description}\n"
            f"  Usage : {command.usage}"
        )


def build_command_registry(engine: GenerationEngine) -> CommandRegistry:
    """Builds the registry with every shell command."""
    commands: List[Command] = [
        HelpCommand(),
        EnvCommand(),
        ConfigCommand(),
        ClsCommand(),
        QuitCommand(),
        PwdCommand(),
        CdCommand(),
        HomeCommand(),
        ModelCommand(),
        BundleCommand(),
        GitHubStoreCommand(),
        ListEntitiesCommand(engine),
        ListTargetsCommand(engine),
        GenerateCommand(engine),
    ]
    return CommandRegistry(commands)
