# src/telosys_shell/core/commands/selection_commands.py
import logging
from typing import List, Optional

from telosys_shell.core.commands.base import Command
from telosys_shell.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)


class _SelectionCommand(Command):
    """
    Shows or replaces one selection of the session ('m', 'b', 'gh').
    The value is stored as given; commands using it check that it exists.
    """

    attribute: str = ""
    label: str = ""

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        if len(args) == 1:
            value = getattr(ctx, self.attribute)
            print(f"Current {self.label} : {value if value else '(undefined)'}")
            return None
        if len(args) != 2:
            return self.usage_error()

        setattr(ctx, self.attribute, args[1])
        logger.debug("%s set to '%s'", self.attribute, args[1])
        print(f"Current {self.label} is now '{args[1]}'")
        return None


class ModelCommand(_SelectionCommand):
    name = "m"
    short_description = "Model"
    description = "Prints or sets the current model"
    usage = "m [model-name]"
    attribute = "current_model"
    label = "model"


class BundleCommand(_SelectionCommand):
    name = "b"
    short_description = "Bundle"
    description = "Prints or sets the current bundle of templates"
    usage = "b [bundle-name]"
    attribute = "current_bundle"
    label = "bundle"


class GitHubStoreCommand(_SelectionCommand):
    name = "gh"
    short_description = "GitHub store"
    description = "Prints or sets the current GitHub store (where the bundles are downloaded from)"
    usage = "gh [github-store]"
    attribute = "current_github_store"
    label = "GitHub store"
