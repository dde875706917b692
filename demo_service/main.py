"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
A failure to bind the listening socket makes uvicorn exit non-zero.
"""

import argparse
import logging

import uvicorn

from demo_service.bootstrap import bootstrap_create_application
from demo_service.config import config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the HTTP API until terminated.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised by uvicorn when the server cannot start.
    """

    argument_parser = argparse.ArgumentParser(description="Demo service runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for `APPLICATION_HOST`",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=int,
        help="Optional bind port override for `PORT`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    overrides = {
        field_name: value
        for field_name, value in (("application_host", parsed_arguments.host), ("port", parsed_arguments.port))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    config_configure_logging(settings.log_level)
    application = bootstrap_create_application(settings=settings)

    logger.info("Server starting on port %s", settings.port)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
