# src/telosys_shell/core/xngine.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from telosys_shell.core.command_registry import CommandRegistry
from telosys_shell.core.context.shell_context import ShellContext

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 127
EXIT_QUIT = 130


class ExecuteEngine:
    """
    Runs the command segments produced by the parser against the registry.
    Handles the '&&' / '||' / ';' operators and turns the result of every
    command into an exit code. No exception raised by a command escapes.
    """

    def __init__(
            self,
            *,
            command_registry: CommandRegistry,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._commands = command_registry
        self._log = logger or logging.getLogger(__name__)

    def execute_sequence(
            self,
            commands: List[Tuple[str, List[str], Optional[str]]],
            ctx: ShellContext,
    ) -> int:
        """Executes a sequence of commands and returns the last exit code (130 = quit)."""
        last_exit = EXIT_OK

        for name, args, op in commands:
            if op == "&&" and last_exit != EXIT_OK:
                continue
            if op == "||" and last_exit == EXIT_OK:
                continue

            last_exit = self.execute_command(name, args, ctx)
            if ctx.exit_requested:
                return EXIT_QUIT

        return last_exit

    def execute_command(self, name: str, args: List[str], ctx: ShellContext) -> int:
        command = self._commands.find_by_name(name)
        if command is None:
            print(f"Unknown command '{name}' (type 'help' for the list of commands)")
            return EXIT_NOT_FOUND

        try:
            error = command.execute([name] + list(args), ctx)
        except Exception as e:
            self._log.error("Unexpected error in command '%s': %s", name, e, exc_info=True)
            print(f"Unexpected error in command '{name}': {e}")
            return EXIT_ERROR

        if error:
            print(error)
            return EXIT_ERROR
        return EXIT_OK
