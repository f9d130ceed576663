"""Background report server.

Runs uvicorn on a daemon thread so that the interactive prompt in the
foreground is never blocked by HTTP traffic. The listening socket is
bound before the thread starts, which turns an occupied port into an
immediate, reportable startup error instead of a failure hidden inside
the server thread.
"""

from __future__ import annotations

import logging
import os
import socket
import threading
import time
from pathlib import Path

import uvicorn

from covserve.server.app import create_app

logger = logging.getLogger(__name__)


def _address_reuse_option() -> int:
    """Socket option that allows quick rebinding but never a shared port.

    On Windows SO_REUSEADDR lets a second socket bind a listening port;
    SO_EXCLUSIVEADDRUSE does not.
    """
    if os.name == "nt":
        return socket.SO_EXCLUSIVEADDRUSE
    return socket.SO_REUSEADDR


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on ``host:port``.

    Raises:
        ServerBindError: If the address is already in use or otherwise
            cannot be bound.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, _address_reuse_option(), 1)
    try:
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError as e:
        sock.close()
        raise ServerBindError(f"Cannot bind {host}:{port}: {e}") from e
    return sock


class ReportServer:
    """Serves the report directory over HTTP from a background thread.

    The thread is a daemon, so process exit tears the server down even
    if ``stop()`` is never called.
    """

    def __init__(
        self,
        directory: Path | str = "htmlcov",
        host: str = "127.0.0.1",
        port: int = 8080,
        log_level: str = "warning",
    ) -> None:
        self._directory = Path(directory)
        self._host = host
        self._port = port
        self._log_level = log_level
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        return self._port

    @property
    def url(self) -> str:
        return f"http://localhost:{self._port}"

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Bind the port and start serving in a background thread.

        Raises:
            ServerBindError: If the port cannot be bound.
        """
        if self._thread is not None:
            return

        self._socket = bind_socket(self._host, self._port)
        self._port = self._socket.getsockname()[1]

        config = uvicorn.Config(create_app(self._directory), log_level=self._log_level)
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [self._socket]},
            daemon=True,
            name="report-server",
        )
        self._thread.start()
        logger.info(
            "Report server started on %s (directory=%s)", self.url, self._directory
        )

    def wait_until_started(self, timeout: float = 5.0) -> bool:
        """Block until uvicorn reports it is accepting connections."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if self._server is not None and self._server.started:
                return True
            if self._thread is not None and not self._thread.is_alive():
                return False
            time.sleep(0.05)
        return False

    def stop(self, timeout: float = 3.0) -> None:
        """Ask uvicorn to exit and wait for the thread."""
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("Report server did not stop within %.1fs", timeout)
            self._thread = None
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        self._server = None
        logger.info("Report server stopped")


class ServerBindError(Exception):
    """Raised when the report server cannot bind its port."""
