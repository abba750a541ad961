"""tests/unit/test_body.py"""

import socket
from unittest import mock

import pytest

from redirectdemo.exceptions import NetworkError, ProtocolError, ReadTimeout
from redirectdemo.http.body import decode_chunked, read_until_close


class TestReadUntilClose:
    def test_reads_all_chunks(self):
        sock = mock.Mock()
        sock.recv.side_effect = [b"hello, ", b"world", b""]
        assert read_until_close(sock) == b"hello, world"

    def test_empty_stream(self):
        sock = mock.Mock()
        sock.recv.return_value = b""
        assert read_until_close(sock) == b""

    def test_timeout_becomes_read_timeout(self):
        sock = mock.Mock()
        sock.recv.side_effect = socket.timeout("timed out")
        with pytest.raises(ReadTimeout, match="Read timed out"):
            read_until_close(sock)

    def test_socket_error_becomes_network_error(self):
        sock = mock.Mock()
        sock.recv.side_effect = ConnectionResetError("reset")
        with pytest.raises(NetworkError, match="during read"):
            read_until_close(sock)


    def test_size_cap(self):
        sock = mock.Mock()
        sock.recv.side_effect = [b"a" * 6, b"b" * 6, b""]
        with pytest.raises(ProtocolError, match="maximum size of 10 bytes"):
            read_until_close(sock, max_size=10)

    def test_size_cap_at_boundary(self):
        sock = mock.Mock()
        sock.recv.side_effect = [b"a" * 5, b"b" * 5, b""]
        assert read_until_close(sock, max_size=10) == b"aaaaabbbbb"

    def test_no_cap(self):
        sock = mock.Mock()
        sock.recv.side_effect = [b"x" * 4096] * 3 + [b""]
        assert len(read_until_close(sock, max_size=None)) == 3 * 4096


class TestDecodeChunked:
    def test_decodes_chunks(self):
        data = b"5\r\nhello\r\n7\r\n, world\r\n0\r\n\r\n"
        assert decode_chunked(data) == b"hello, world"

    def test_chunk_extensions_ignored(self):
        data = b"5;name=value\r\nhello\r\n0\r\n\r\n"
        assert decode_chunked(data) == b"hello"

    def test_empty_body(self):
        assert decode_chunked(b"0\r\n\r\n") == b""

    def test_invalid_size(self):
        with pytest.raises(ProtocolError, match="Invalid chunk size"):
            decode_chunked(b"zz\r\nhello\r\n0\r\n\r\n")

    def test_truncated_chunk(self):
        with pytest.raises(ProtocolError, match="Truncated"):
            decode_chunked(b"a\r\nhello")

    def test_missing_terminator(self):
        with pytest.raises(ProtocolError, match="missing chunk header"):
            decode_chunked(b"5\r\nhello\r\n")
