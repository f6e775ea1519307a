#!/usr/bin/env python3
"""
navhub server starter.
Builds the Application from configuration, then serves the API with uvicorn.
"""

import logging
import signal
import sys

import uvicorn

from navhub.app import build_application
from navhub.helpers.logging_helper import configure_logging
from navhub.interfaces.api.api_app import create_api_app


def main() -> None:
    application = build_application(bootstrap=True)
    configure_logging(application.log_level)

    def shutdown_handler(signum, frame):
        logging.info(f"Received signal {signum}, shutting down...")
        application.stop()
        sys.exit(0)

    signal.signal(signal.SIGTERM, shutdown_handler)

    logging.info(
        "Effective config: arango=%s/%s api=%s:%d max_batch_size=%d reorder_max_workers=%d",
        application.arango_hosts,
        application.arango_db,
        application.api_host,
        application.api_port,
        application.max_batch_size,
        application.reorder_max_workers,
    )

    try:
        uvicorn.run(
            create_api_app(application),
            host=application.api_host,
            port=application.api_port,
            timeout_keep_alive=90,
            log_level=application.log_level.lower(),
        )
    finally:
        logging.info("API server stopped, cleaning up...")
        application.stop()


if __name__ == "__main__":
    main()
