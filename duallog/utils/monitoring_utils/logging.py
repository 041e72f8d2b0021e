import logging
import coloredlogs
from duallog.utils.config_utils.env_loader import get_env_flag

DIAGNOSTICS_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
ROOT_LOGGER_NAME = "duallog"


# Internal diagnostics logger
def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger for the library's own diagnostics, named under 'duallog'.
    Output is opt-in: with DUALLOG_DEBUG set in the process environment,
    coloredlogs handles the console (stderr) output with colors; otherwise
    records go to a NullHandler. The 'duallog' tree never propagates to the
    root logger, so a root handler feeding a duallog Logger cannot receive
    the library's own records.
    """
    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if not root.handlers:  # Avoid duplicate handlers
        if get_env_flag("DUALLOG_DEBUG"):
            root.setLevel(logging.DEBUG)
            coloredlogs.install(level="DEBUG", logger=root, fmt=DIAGNOSTICS_FORMAT)
        else:
            root.addHandler(logging.NullHandler())
        root.propagate = False

    return logger
