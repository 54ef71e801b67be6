# src/telosys_shell/core/commands/directory_commands.py
import logging
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class PwdCommand(Command):

    name = "pwd"
    short_description = "Print working directory"
    description = "Prints the current directory"
    usage = "pwd"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        if len(args) != 1:
            return self.usage_error()
        print(ctx.current_directory)
        return None


class CdCommand(Command):
    """
    Changes the shell's current directory.
    Only the session state changes, the process working directory is left as is.
    """

    name = "cd"
    short_description = "Change directory"
    description = "Changes the current directory ('cd' alone goes back to the home directory)"
    usage = "cd [directory]"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        if len(args) == 1:
            ctx.reset_current_directory_to_home_if_defined()
            print(ctx.current_directory)
            return None
        if len(args) != 2:
            return self.usage_error()

        target = PathUtils.resolve_directory(ctx.current_directory, args[1])
        if not target.is_dir():
            return f"Directory not found: {target}"

        ctx.current_directory = str(target)
        logger.debug("Current directory changed to '%s'", target)
        print(ctx.current_directory)
        return None


class HomeCommand(Command):

    name = "h"
    short_description = "Home"
    description = "Prints or sets the home directory ('h .' uses the current directory)"
    usage = "h [directory|.]"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        if len(args) == 1:
            print(ctx.home_directory if ctx.home_directory else "Home not defined")
            return None
        if len(args) != 2:
            return self.usage_error()

        if args[1] == ".":
            ctx.set_home_directory()
        else:
            target = PathUtils.resolve_directory(ctx.current_directory, args[1])
            if not target.is_dir():
                return f"Directory not found: {target}"
            ctx.set_home_directory(str(target))
            ctx.reset_current_directory_to_home_if_defined()

        print(f"Home directory : {ctx.home_directory}")
        return None
