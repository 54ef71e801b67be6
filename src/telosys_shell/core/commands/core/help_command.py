# src/telosys_shell/core/commands/core/help_command.py
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext


class HelpCommand(Command):

    name = "help"
    short_description = "Help"
    description = "Shows all the commands, or the details of the given command"
    usage = "help [command-name]"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        registry = ctx.command_registry
        if registry is None:
            return "No command registry attached to the shell"
        if len(args) == 1:
            print(registry.render_help())
            return None
        if len(args) != 2:
            return self.usage_error()

        if registry.find_by_name(args[1]) is None:
            return f"Unknown command '{args[1]}'"
        print(registry.render_command_help(args[1]))
        return None
