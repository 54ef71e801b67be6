# src/telosys_shell/core/commands/core/env_command.py
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext


class EnvCommand(Command):

    name = "env"
    short_description = "Environment"
    description = "Shows the shell environment (installation, directories and current selections)"
    usage = "env"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        if len(args) != 1:
            return self.usage_error()

        rows = [
            ("Install location", ctx.install_location),
            ("Operating system", ctx.os_name),
            ("Editor command", ctx.editor_command),
            ("Original directory", ctx.original_directory),
            ("Home directory", ctx.home_directory),
            ("Current directory", ctx.current_directory),
            ("GitHub store", ctx.current_github_store),
            ("Current model", ctx.current_model),
            ("Current bundle", ctx.current_bundle),
        ]
        for label, value in rows:
            print(f"  {label:<20} : {value if value is not None else '(undefined)'}")
        return None
