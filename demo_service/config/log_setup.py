"""Root logging setup shared by the service and verifier entrypoints."""

import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def config_configure_logging(log_level: str = "INFO") -> None:
    """Configure the root logger with one stdout handler.

    Repeated calls replace the existing handler instead of stacking new ones.

    Args:
        log_level: Logging level name.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(console_handler)
