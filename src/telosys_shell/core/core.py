# src/telosys_shell/core/core.py
from __future__ import annotations

import logging

from telosys_shell.core.command_registry import CommandRegistry, build_command_registry
from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.engine import GenerationEngine
from telosys_shell.core.parser import parse_command_line
from telosys_shell.core.xngine import ExecuteEngine

logger = logging.getLogger(__name__)


def create_shell(engine: GenerationEngine, ctx: ShellContext) -> ExecuteEngine:
    """Builds the command registry, attaches it to the context and returns the execution engine."""
    registry: CommandRegistry = build_command_registry(engine)
    ctx.command_registry = registry
    return ExecuteEngine(command_registry=registry, logger=logger)


__all__ = ["create_shell", "parse_command_line"]
