# src/telosys_shell/core/exceptions.py


class ShellError(Exception):
    """Base class for all errors raised inside the Telosys shell."""


class ToolException(ShellError):
    """Raised by the generation engine for tool level failures (e.g. model not found or unreadable)."""


class GeneratorException(ShellError):
    """Raised by the generation engine while a generation is running."""


class CancelCommandException(ShellError):
    """
    Raised to abort the command in progress, typically when an argument
    references something that does not exist (e.g. an unknown entity).
    """
