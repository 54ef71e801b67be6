# src/telosys_shell/core/commands/list_commands.py
import logging
from typing import List, Optional

from telosys_shell.core.commands.base import EngineCommand
from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.exceptions import ToolException
from telosys_shell.core.utils import target_utils

logger = logging.getLogger(__name__)


class ListEntitiesCommand(EngineCommand):

    name = "le"
    short_description = "List entities"
    description = "Lists the entities of the current model"
    usage = "le"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        error = self.check_model_defined(ctx)
        if error:
            return error
        if len(args) != 1:
            return self.usage_error()

        try:
            model = self.load_current_model(ctx)
        except ToolException as e:
            logger.error("Cannot load model '%s': %s", ctx.current_model, e)
            self.print_error(e)
            return None

        if not model.entities:
            print(f"No entity in model '{model.name}'")
            return None
        print(f"Entities (model={model.name}) : ")
        self.print_list([entity.class_name for entity in model.entities])
        return None


class ListTargetsCommand(EngineCommand):

    name = "lt"
    short_description = "List targets"
    description = "Lists the templates targets of the current bundle (optionally filtered by name patterns)"
    usage = "lt [*|pattern[,pattern]]"

    def execute(self, args: List[str], ctx: ShellContext) -> Optional[str]:
        error = self.check_bundle_defined(ctx)
        if error:
            return error
        if len(args) > 2:
            return self.usage_error()

        criteria = target_utils.build_criteria_from_arg(args[1]) if len(args) == 2 else None
        try:
            targets_definitions = self.get_current_targets_definitions(ctx)
        except ToolException as e:
            logger.error("Cannot get targets for bundle '%s': %s", ctx.current_bundle, e)
            self.print_error(e)
            return None

        targets = target_utils.filter_targets(targets_definitions.templates_targets, criteria)
        print(f"Templates (bundle={ctx.current_bundle}) : ")
        print(target_utils.build_list_as_string(targets))
        return None
