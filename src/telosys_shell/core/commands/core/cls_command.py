# src/telosys_shell/core/commands/core/cls_command.py
import os
import platform
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext


class ClsCommand(Command):
    """
    Clear the terminal screen (like `cls` on Windows or `clear` on Unix).
    """

    name = "cls"
    short_description = "Clear screen"
    description = "Clears the terminal screen"
    usage = "cls"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        system = platform.system().lower()
        exit_code = os.system("cls" if "windows" in system else "clear")
        if exit_code != 0:
            return f"Failed to clear screen (exit code {exit_code})"
        return None
