# src/telosys_shell/core/engine.py
import importlib
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from telosys_shell.core.exceptions import ToolException
from telosys_shell.model import GenerationResult, Model, TargetDefinition, TargetsDefinitions

logger = logging.getLogger(__name__)


class GenerationEngine(ABC):
    """
    Boundary with the code generation engine.
    The shell never renders templates itself, it only calls these methods.
    """

    @abstractmethod
    def load_model(self, model_name: str) -> Model:
        """Loads the model with the given name. Raises ToolException on failure."""

    @abstractmethod
    def get_target_definitions(self, bundle_name: str) -> TargetsDefinitions:
        """Returns the templates and resources targets of the given bundle."""

    @abstractmethod
    def launch_generation(
            self,
            model: Model,
            entity_names: List[str],
            bundle_name: str,
            target_definitions: List[TargetDefinition],
            include_resources: bool,
    ) -> GenerationResult:
        """Runs the generation. May raise GeneratorException or ToolException."""


class UnconfiguredEngine(GenerationEngine):
    """Placeholder used when no engine factory is configured."""

    MESSAGE = "No generation engine configured (set 'engine.factory' in settings.json)."

    def load_model(self, model_name: str) -> Model:
        raise ToolException(self.MESSAGE)

    def get_target_definitions(self, bundle_name: str) -> TargetsDefinitions:
        raise ToolException(self.MESSAGE)

    def launch_generation(self, model, entity_names, bundle_name, target_definitions, include_resources):
        raise ToolException(self.MESSAGE)


def load_engine(factory_path: Optional[str]) -> GenerationEngine:
    """
    Builds the engine from a 'package.module:callable' path.
    Falls back to UnconfiguredEngine when no path is given.
    """
    if not factory_path:
        logger.info("No engine factory configured, using UnconfiguredEngine.")
        return UnconfiguredEngine()

    module_name, _, attr_name = factory_path.partition(":")
    if not module_name or not attr_name:
        raise ValueError(f"Invalid engine factory '{factory_path}', expected 'package.module:callable'.")

    module = importlib.import_module(module_name)
    factory = getattr(module, attr_name)
    engine = factory()
    if not isinstance(engine, GenerationEngine):
        raise TypeError(f"Engine factory '{factory_path}' did not return a GenerationEngine.")

    logger.info("Generation engine loaded from '%s'.", factory_path)
    return engine
