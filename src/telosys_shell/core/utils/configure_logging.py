import logging
import sys
from tqdm import tqdm

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


class LogWithTqdm(logging.Handler):
    """Writes records through `tqdm.write()` so they never break the prompt line."""
    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


def set_level(level):
    """Changes the root logger level ('DEBUG', 'info', logging.ERROR, ...)."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.getLogger().setLevel(level)


def configure_logger(level='WARNING'):
    """Replaces the root handlers with a single tqdm-friendly handler (the 'debug.level' setting)."""
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    set_level(level)
