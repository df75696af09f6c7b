"""
Unit tests for ConsoleTransport adapter.

Tests verify the console transport implements the Transport protocol
and logs verification messages in the correct format.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.adapters.transport.console import ConsoleTransport


class TestConsoleTransportProtocol:
    """Tests for Transport protocol compliance."""

    def test_implements_transport_protocol(self) -> None:
        from src.domain.ports import Transport

        transport = ConsoleTransport()
        assert callable(transport.send)

        def accepts_transport(t: Transport) -> None:
            pass

        accepts_transport(transport)

    def test_no_explicit_inheritance(self) -> None:
        """ConsoleTransport uses structural subtyping, not inheritance."""
        assert ConsoleTransport.__bases__ == (object,)


class TestSend:
    """Tests for send method."""

    def test_send_logs_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = ConsoleTransport()

        with caplog.at_level(logging.INFO):
            transport.send("your register code is: 123456", "arian@gmail.com")

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO

    def test_send_format(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log format: [VERIFICATION] To: ... Message: ..."""
        transport = ConsoleTransport()

        with caplog.at_level(logging.INFO):
            transport.send("your register code is: 000042", "09123231976")

        assert "[VERIFICATION]" in caplog.text
        assert "To: 09123231976" in caplog.text
        assert "Message: your register code is: 000042" in caplog.text

    def test_send_returns_none(self) -> None:
        assert ConsoleTransport().send("hello", "arian@gmail.com") is None


class TestThreadSafety:
    """Tests for thread-safe logging."""

    def test_concurrent_sends_all_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = ConsoleTransport()

        with caplog.at_level(logging.INFO), ThreadPoolExecutor(max_workers=5) as executor:
            futures = [
                executor.submit(transport.send, f"code {i:06d}", f"user{i}@example.com")
                for i in range(10)
            ]
            for f in futures:
                f.result()

        assert len(caplog.records) == 10
        for record in caplog.records:
            assert "[VERIFICATION]" in record.message
