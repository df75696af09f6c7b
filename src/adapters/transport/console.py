"""
Console transport adapter - Implements Transport protocol.

This module provides a console-based implementation of the domain's
transport port, logging verification messages for development and tests.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleTransport:
    """
    Implements Transport protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Never fails, so every issued code is persisted.
    """

    def send(self, message: str, destination: str) -> None:
        """
        Log the verification message (simulates email or SMS delivery).

        The message is logged at INFO level to be visible in container logs.

        Args:
            message: Rendered verification message
            destination: Email address or phone number
        """
        logger.info("[VERIFICATION] To: %s Message: %s", destination, message)
