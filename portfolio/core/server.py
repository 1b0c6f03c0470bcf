"""uvicorn server construction."""

import uvicorn
from fastapi import FastAPI

from portfolio.config import Settings


def create_server(app: FastAPI, settings: Settings) -> uvicorn.Server:
    """Build a uvicorn server for app.

    uvicorn traps SIGINT and SIGTERM: it stops accepting connections, lets
    in-flight requests finish within settings.shutdown_timeout and cancels
    whatever is still running after that.

    Args:
        app: Application to serve
        settings: Listen address and timeouts

    Returns:
        Server ready for run() or serve()
    """
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,  # keep the handlers installed by setup_logging
        access_log=False,
        server_header=False,
    )
    return uvicorn.Server(config)
