# src/telosys_shell/core/managers/completion_manager.py
import logging
import re
from typing import Dict, Iterable, List, Optional

from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import History

from telosys_shell.core.command_registry import CommandRegistry
from telosys_shell.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

# Regex to find the last operator *before* the cursor
OPERATOR_PATTERN = re.compile(r"(\s+(?:&&|\|\||;)\s+)")

SUBCOMMANDS: Dict[str, List[str]] = {
    "config": ["list", "set", "reset"],
}


class CompletionManager:
    """
    Generates completion suggestions for the prompt: command names at the
    start of each segment, known sub-commands and recent history ('!h').
    """

    def __init__(
        self,
        registry: CommandRegistry,
        history: History,
        subcommands: Optional[Dict[str, List[str]]] = None,
    ):
        self.registry = registry
        self.history = history
        self.subcommands = subcommands if subcommands is not None else SUBCOMMANDS

    def generate_completions(self, document: Document) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor

        if text_before_cursor.endswith('!h'):
            yield from self._get_history_completions()
            return

        last_op_match = None
        for match in OPERATOR_PATTERN.finditer(text_before_cursor):
            last_op_match = match

        segment_start_index = last_op_match.end() if last_op_match else 0
        relevant_text = text_before_cursor[segment_start_index:]
        words_in_segment = relevant_text.lstrip().split()
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        ends_with_space = relevant_text.endswith(" ")
        num_words = len(words_in_segment)

        if num_words == 0 or (num_words == 1 and not ends_with_space):
            yield from self._get_command_completions(word_before_cursor)
            return

        is_completing_second_word = (
            (num_words == 1 and ends_with_space) or
            (num_words == 2 and not ends_with_space)
        )
        if is_completing_second_word:
            subcommands = self.subcommands.get(words_in_segment[0])
            if subcommands:
                typed = "" if ends_with_space else words_in_segment[1]
                yield from self._get_sub_command_completions(subcommands, typed)

    def _get_command_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        for name in sorted(self.registry.names):
            if name.startswith(word_before_cursor):
                command = self.registry.find_by_name(name)
                yield Completion(
                    name,
                    start_position=-len(word_before_cursor),
                    display_meta=command.short_description,
                )

    def _get_history_completions(self) -> Iterable[Completion]:
        max_len = config_manager.get_nested("autocomplete.h_max_len", 5)
        logger.debug("History completion (!h) triggered. Max items: %s", max_len)
        recent_commands, seen = [], set()
        for command in reversed(list(self.history.get_strings())):
            command_stripped = command.strip()
            if command_stripped and command_stripped != '!h' and command_stripped not in seen:
                seen.add(command_stripped)
                recent_commands.append(command_stripped)
                if len(recent_commands) >= max_len:
                    break
        for command in recent_commands:
            yield Completion(command, start_position=-2, display_meta="Command History")

    @staticmethod
    def _get_sub_command_completions(subcommands: Iterable[str], word_before_cursor: str) -> Iterable[Completion]:
        start_pos = -len(word_before_cursor)
        for sub in sorted(subcommands):
            if sub.startswith(word_before_cursor):
                yield Completion(sub, start_position=start_pos)
