import logging
from typing import Optional

DEFAULT_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> None:
    if fmt is None:
        fmt = DEFAULT_FORMAT
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
    root.setLevel(level)


def level_from_verbosity(verbose: int = 0, quiet: int = 0) -> int:
    """Map -v/-q counts onto a logging level, INFO being the baseline."""
    level = logging.INFO - 10 * verbose + 10 * quiet
    return min(max(level, logging.DEBUG), logging.CRITICAL)


__all__ = ["configure_logging", "level_from_verbosity", "DEFAULT_FORMAT"]
