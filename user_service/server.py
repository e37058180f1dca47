from __future__ import annotations

import logging
import socket
from typing import Optional

import uvicorn

from user_service.observability.logger import setup_logging
from user_service.settings import Settings, settings as default_settings


logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the listening socket cannot be acquired."""

    def __init__(self, host: str, port: int, reason: OSError) -> None:
        super().__init__(f"unable to bind {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason


def bind_socket(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except OSError as exc:
        sock.close()
        raise StartupError(host, port, exc) from exc
    sock.set_inheritable(True)
    return sock


def run(settings: Optional[Settings] = None) -> None:
    """Bind the listener and serve until the process is terminated.

    A bind failure is fatal: it is logged and the process exits with status 1.
    Without explicit settings the module-level application is served.
    """
    from user_service import main

    if settings is None:
        settings = default_settings
        app = main.app
    else:
        setup_logging(settings, force=True)
        app = main.create_app(settings)
    runtime = app.state.runtime

    try:
        sock = bind_socket(settings.app_host, settings.app_port)
    except StartupError as exc:
        logger.error(
            "service.bind_failed",
            extra={"host": exc.host, "port": exc.port, "error": str(exc.reason)},
        )
        raise SystemExit(1) from exc

    logger.info(
        "service.starting",
        extra={"host": settings.app_host, "port": settings.app_port, "version": runtime.version},
    )
    config = uvicorn.Config(app, log_config=None, access_log=False)
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
