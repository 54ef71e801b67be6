# src/telosys_shell/core/commands/core/quit_command.py
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext


class QuitCommand(Command):
    """Signals the shell to stop."""

    name = "quit"
    short_description = "Quit"
    description = "Exits the shell"
    usage = "quit"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        ctx.exit_requested = True
        return None
