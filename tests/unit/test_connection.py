"""Unit tests for redirectdemo.transport.connection.

Test Coverage:
    - Connection initialization and timeout coercion
    - TCP connection establishment (with and without TLS)
    - Error mapping (timeouts, TLS errors, other socket errors)
    - Context manager lifecycle

Testing Strategy:
    - socket.create_connection and ssl.create_default_context are patched
"""

import socket
import ssl
from unittest import mock

import pytest

from redirectdemo.exceptions import ConnectTimeout, NetworkError, TlsError
from redirectdemo.transport.connection import Connection
from redirectdemo.utils.timing import Timeout

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def basic_connection() -> Connection:
    return Connection("localhost", 8080, use_ssl=False, timeout=Timeout(connect=1, read=2))


# ============================================================================
# TEST CLASS: Init
# ============================================================================


class TestConnectionInit:
    def test_float_timeout_is_coerced(self):
        conn = Connection("localhost", 80, timeout=3)
        assert conn.timeout == Timeout(connect=3, read=3, total=3)
        assert conn.sock is None

    def test_none_timeout(self):
        conn = Connection("localhost", 80)
        assert conn.timeout == Timeout()


# ============================================================================
# TEST CLASS: Open
# ============================================================================


class TestConnectionOpen:
    @mock.patch("redirectdemo.transport.connection.socket.create_connection")
    def test_open_plain(self, mock_create, basic_connection):
        raw_sock = mock.Mock()
        mock_create.return_value = raw_sock

        sock = basic_connection.open()

        assert sock is raw_sock
        mock_create.assert_called_once_with(("localhost", 8080), timeout=1)
        raw_sock.settimeout.assert_called_once_with(2)

    @mock.patch("redirectdemo.transport.connection.ssl.create_default_context")
    @mock.patch("redirectdemo.transport.connection.socket.create_connection")
    def test_open_tls(self, mock_create, mock_context):
        raw_sock = mock.Mock()
        tls_sock = mock.Mock()
        mock_create.return_value = raw_sock
        mock_context.return_value.wrap_socket.return_value = tls_sock

        conn = Connection("example.com", 443, use_ssl=True, timeout=5)
        assert conn.open() is tls_sock
        mock_context.return_value.wrap_socket.assert_called_once_with(
            raw_sock, server_hostname="example.com"
        )

    @mock.patch("redirectdemo.transport.connection.socket.create_connection")
    def test_connect_timeout(self, mock_create, basic_connection):
        mock_create.side_effect = socket.timeout("timed out")
        with pytest.raises(ConnectTimeout, match="localhost:8080"):
            basic_connection.open()

    @mock.patch("redirectdemo.transport.connection.socket.create_connection")
    def test_connection_refused(self, mock_create, basic_connection):
        mock_create.side_effect = ConnectionRefusedError("refused")
        with pytest.raises(NetworkError, match="Connection error") as exc_info:
            basic_connection.open()
        assert isinstance(exc_info.value.__cause__, ConnectionRefusedError)

    @mock.patch("redirectdemo.transport.connection.ssl.create_default_context")
    @mock.patch("redirectdemo.transport.connection.socket.create_connection")
    def test_tls_error(self, mock_create, mock_context):
        raw_sock = mock.Mock()
        mock_create.return_value = raw_sock
        mock_context.return_value.wrap_socket.side_effect = ssl.SSLError("bad cert")

        conn = Connection("example.com", 443, use_ssl=True)
        with pytest.raises(TlsError):
            conn.open()
        raw_sock.close.assert_called_once()


# ============================================================================
# TEST CLASS: Lifecycle
# ============================================================================


class TestConnectionLifecycle:
    @mock.patch("redirectdemo.transport.connection.socket.create_connection")
    def test_context_manager_closes(self, mock_create, basic_connection):
        raw_sock = mock.Mock()
        mock_create.return_value = raw_sock

        with basic_connection as conn:
            assert conn.sock is raw_sock

        raw_sock.close.assert_called_once()
        assert basic_connection.sock is None

    def test_close_is_idempotent(self, basic_connection):
        basic_connection.close()
        basic_connection.close()
        assert basic_connection.sock is None

    def test_close_ignores_os_error(self, basic_connection):
        sock = mock.Mock()
        sock.close.side_effect = OSError("already closed")
        basic_connection.sock = sock
        basic_connection.close()
        assert basic_connection.sock is None
