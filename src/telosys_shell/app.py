from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory

from telosys_shell.core.context.shell_context import ShellContext
from telosys_shell.core.core import create_shell, parse_command_line
from telosys_shell.core.engine import GenerationEngine, load_engine
from telosys_shell.core.managers.completion_manager import CompletionManager
from telosys_shell.core.managers.config_manager import LOG_LEVELS, config_manager
from telosys_shell.core.utils.configure_logging import configure_logger
from telosys_shell.core.utils.path_utils import PathUtils
from telosys_shell.core.xngine import EXIT_QUIT

logger = logging.getLogger(__name__)


class PromptToolkitCompleter(Completer):
    """
    A wrapper that uses the CompletionManager to generate suggestions
    in a way that prompt_toolkit expects.
    """

    def __init__(self, manager: CompletionManager):
        self.manager = manager

    def get_completions(self, document: Document, complete_event):
        yield from self.manager.generate_completions(document)


# --- Shell Application ---


def start_shell(engine: Optional[GenerationEngine] = None) -> int:
    """Starts the interactive REPL (Read-Eval-Print Loop) of the Telosys shell."""
    configure_logger(config_manager.get_nested("debug.level", "WARNING"))

    try:
        ctx = ShellContext()
    except FileNotFoundError as e:
        logger.critical("Cannot determine the installation location: %s", e)
        print(f"\nFATAL: {e}. Exiting.")
        return 1

    try:
        if engine is None:
            engine = load_engine(config_manager.get_nested("engine.factory"))
    except Exception as e:
        logger.error("Failed to load the generation engine: %s", e, exc_info=True)
        print("\nFATAL: Could not load the generation engine. Exiting.")
        return 1

    xngine = create_shell(engine, ctx)

    print("Welcome to Telosys Shell (type 'help' for commands)")

    history_path = PathUtils.get_shell_history_file()
    history = FileHistory(str(history_path))

    completion_manager = CompletionManager(ctx.command_registry, history)
    session = PromptSession(
        history=history,
        completer=PromptToolkitCompleter(completion_manager),
        complete_while_typing=True
    )
    ctx.prompt_session = session
    logger.info("Shell startup; history file at: %s", history_path)

    try:
        while True:
            try:
                line = session.prompt(_prompt_text(ctx)).strip()
            except (EOFError, KeyboardInterrupt):
                break

            if not line:
                continue

            commands = parse_command_line(line)
            if not commands:
                continue

            if xngine.execute_sequence(commands, ctx) == EXIT_QUIT:
                break
    finally:
        print("Bye!")
    return 0


def _prompt_text(ctx: ShellContext) -> str:
    if ctx.current_model or ctx.current_bundle:
        return f"Telosys [{ctx.current_model or '-'}/{ctx.current_bundle or '-'}]> "
    return "Telosys> "


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="telosys-shell", description="Telosys interactive shell")
    parser.add_argument("--engine", metavar="MODULE:CALLABLE",
                        help="Generation engine factory (overrides 'engine.factory' in settings.json)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level for this session (overrides 'debug.level')")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for running the shell from the command line."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.engine is not None and not config_manager.set_nested("engine.factory", args.engine):
        parser.error(f"invalid engine factory '{args.engine}' (expected MODULE:CALLABLE)")
    if args.log_level is not None:
        config_manager.set_nested("debug.level", args.log_level)

    return start_shell()


if __name__ == "__main__":
    sys.exit(main())
