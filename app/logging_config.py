"""
Logging setup for the registry processes.

Everything goes through the root logger with a single rich console handler;
uvicorn's own loggers are emptied so they propagate there too.
"""
import logging

from rich.logging import RichHandler

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(level="info"):
    """
    Install the console handler on the root logger.

    Args:
        level: level name, case-insensitive ("info", "DEBUG", ...)

    Returns:
        The root logger.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers = []
        uv_logger.propagate = True

    return root
