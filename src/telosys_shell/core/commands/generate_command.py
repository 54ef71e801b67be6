# src/telosys_shell/core/commands/generate_command.py
import logging
from typing import List, Optional

from telosys_shell.core.commands.base import EngineCommand
from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.exceptions import CancelCommandException, GeneratorException, ToolException
from telosys_shell.core.utils import target_utils
from telosys_shell.model import GenerationResult, Model, TargetDefinition

logger = logging.getLogger(__name__)

ALL = "*"


def build_entity_names(arg: str, model: Model) -> List[str]:
    """
    Builds the list of entity names for the given argument
    ('*', 'Car', 'Car,Driver', ...). Every named entity must exist in the model.
    """
    if arg == ALL:
        return [entity.class_name for entity in model.entities]

    if "," in arg:
        names = [part.strip() for part in arg.split(",") if part.strip()]
    else:
        names = [arg]

    for name in names:
        if model.get_entity_by_class_name(name) is None:
            raise CancelCommandException(f"Unknown entity '{name}'")
    return names


class GenerateCommand(EngineCommand):
    """Generates the given targets for the given entities."""

    name = "gen"
    short_description = "Generate"
    description = "Generates the given targets for the given entities"
    usage = "gen *|entity-name *|template-name"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        error = self.check_model_defined(ctx) or self.check_bundle_defined(ctx)
        if error:
            return error
        if len(args) != 3:
            return self.usage_error()

        try:
            result = self.generate(args[1], args[2], ctx)
            if result is not None:
                self.print_result(result)
        except CancelCommandException as e:
            print(f"Command canceled: {e}")
        except (ToolException, GeneratorException) as e:
            logger.error("Generation failed: %s", e, exc_info=True)
            self.print_error(e)
        except Exception as e:
            logger.error("Unexpected engine error during generation: %s", e, exc_info=True)
            self.print_error(e)
        return None

    def build_targets_list(self, arg: str, ctx: ShellContext) -> List[TargetDefinition]:
        """Returns the template targets of the current bundle matching '*', 'pattern' or 'p1,p2'."""
        targets_definitions = self.get_current_targets_definitions(ctx)
        criteria = target_utils.build_criteria_from_arg(arg)
        return target_utils.filter_targets(targets_definitions.templates_targets, criteria)

    def generate(self, arg_entity_names: str, arg_template_names: str, ctx: ShellContext) -> Optional[GenerationResult]:
        """Returns None when the user declines the generation."""
        model = self.load_current_model(ctx)
        entity_names = build_entity_names(arg_entity_names, model)

        bundle_name = ctx.current_bundle
        target_definitions = self.build_targets_list(arg_template_names, ctx)

        print(f"Entities (model={model.name}) : ")
        self.print_list(entity_names)
        print(f"Templates (bundle={bundle_name}) : ")
        print(target_utils.build_list_as_string(target_definitions))

        if not ctx.confirm("Do you want to launch the generation"):
            print("Generation canceled.")
            return None

        print("Generation in progress...")
        logger.info(
            "Launching generation: model=%s entities=%d bundle=%s targets=%d",
            model.name, len(entity_names), bundle_name, len(target_definitions)
        )
        return self.engine.launch_generation(model, entity_names, bundle_name, target_definitions, False)

    @staticmethod
    def print_result(result: GenerationResult) -> None:
        print("Generation completed.")
        print(f" {result.number_of_files_generated} file(s) generated")
        print(f" {result.number_of_resources_copied} resource(s) copied")
        print(f" {result.number_of_generation_errors} error(s)")
        for i, err in enumerate(result.errors, start=1):
            print(f" - Error #{i}")
            print(f"   Type : {err.error_type}")
            print(f"   Message : {err.message}")
            if err.exception is not None:
                print(f"   Exception : {err.exception.kind} : {err.exception.message}")
                for cause in err.causes:
                    print(f"    Cause : {cause.kind} : {cause.message}")
