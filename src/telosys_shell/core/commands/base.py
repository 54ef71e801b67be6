# src/telosys_shell/core/commands/base.py
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.engine import GenerationEngine
from telosys_shell.model import Model, TargetsDefinitions

logger = logging.getLogger(__name__)


class Command(ABC):
    """
    Base class of every shell command.

    A command is identified by its 'name'. 'execute' receives the full argument
    vector (args[0] is the command name) and returns None on success or an
    error message to be printed by the shell. Constructing a command must not
    have any side effect.
    """

    name: str = ""
    short_description: str = ""
    description: str = ""
    usage: str = ""

    @abstractmethod
    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        ...

    def usage_error(self) -> str:
        return f"Usage : {self.usage}"

    @staticmethod
    def check_model_defined(ctx: ShellContext) -> Optional[str]:
        """Returns an error message if no current model is selected."""
        if not ctx.current_model:
            return "No current model (use 'm' to select a model)"
        return None

    @staticmethod
    def check_bundle_defined(ctx: ShellContext) -> Optional[str]:
        """Returns an error message if no current bundle is selected."""
        if not ctx.current_bundle:
            return "No current bundle (use 'b' to select a bundle)"
        return None

    @staticmethod
    def print_list(items: List[str]) -> None:
        for item in items:
            print(f" . {item}")

    @staticmethod
    def print_error(exc: BaseException) -> None:
        print(f"ERROR: {type(exc).__name__} : {exc}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


class EngineCommand(Command, ABC):
    """A command that needs the generation engine (model loading, bundles, generation)."""

    def __init__(self, engine: GenerationEngine):
        self.engine = engine

    def load_current_model(self, ctx: ShellContext) -> Model:
        """Loads the current model. May raise ToolException."""
        logger.debug("Loading model '%s'", ctx.current_model)
        return self.engine.load_model(ctx.current_model)

    def get_current_targets_definitions(self, ctx: ShellContext) -> TargetsDefinitions:
        """Returns the target definitions of the current bundle. May raise ToolException."""
        logger.debug("Loading targets for bundle '%s'", ctx.current_bundle)
        return self.engine.get_target_definitions(ctx.current_bundle)
