"""Tests for the background report server."""

from __future__ import annotations

import socket
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from covserve.server import background
from covserve.server.background import ReportServer, ServerBindError, bind_socket


@pytest.fixture
def occupied_port():
    """A port held by a listening socket for the duration of the test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


class TestBindSocket:
    def test_binds_free_port(self) -> None:
        sock = bind_socket("127.0.0.1", 0)
        try:
            assert sock.getsockname()[1] > 0
        finally:
            sock.close()

    def test_occupied_port_raises(self, occupied_port: int) -> None:
        with pytest.raises(ServerBindError, match="Cannot bind"):
            bind_socket("127.0.0.1", occupied_port)


class TestReportServer:
    def test_defaults(self) -> None:
        server = ReportServer()
        assert server.port == 8080
        assert server.url == "http://localhost:8080"
        assert not server.is_running

    def test_start_on_occupied_port_fails(self, report_dir: Path, occupied_port: int) -> None:
        server = ReportServer(directory=report_dir, port=occupied_port)
        with pytest.raises(ServerBindError):
            server.start()
        assert not server.is_running

    def test_serves_files_in_background(self, report_dir: Path) -> None:
        server = ReportServer(directory=report_dir, port=0)
        server.start()
        try:
            assert server.wait_until_started()
            assert server.is_running
            base = f"http://127.0.0.1:{server.port}"

            with httpx.Client(base_url=base, trust_env=False) as client:
                assert client.get("/index.html").status_code == 404

                (report_dir / "index.html").write_text("<html>report</html>")
                response = client.get("/index.html")
            assert response.status_code == 200
            assert "report" in response.text
        finally:
            server.stop()
        assert not server.is_running


class TestAddressReuseOption:
    def test_posix_uses_reuseaddr(self) -> None:
        with patch.object(background.os, "name", "posix"):
            assert background._address_reuse_option() == socket.SO_REUSEADDR

    def test_windows_uses_exclusive_option(self) -> None:
        with patch.object(background.os, "name", "nt"), \
                patch.object(background.socket, "SO_EXCLUSIVEADDRUSE", -5, create=True):
            assert background._address_reuse_option() == -5

    def test_bind_socket_applies_option(self) -> None:
        fake = MagicMock()
        with patch.object(background.os, "name", "nt"), \
                patch.object(background.socket, "SO_EXCLUSIVEADDRUSE", -5, create=True), \
                patch.object(background.socket, "socket", return_value=fake):
            assert bind_socket("127.0.0.1", 8080) is fake
        fake.setsockopt.assert_called_once_with(socket.SOL_SOCKET, -5, 1)
        fake.bind.assert_called_once_with(("127.0.0.1", 8080))
