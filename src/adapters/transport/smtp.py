"""
SMTP transport adapter - Delivers verification messages by email.

Implements the Transport protocol with the standard library smtplib.
One connection is opened per message; there are no retries.
"""

import logging
import smtplib
from email.message import EmailMessage

from src.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Your verification code"


class SmtpEmailTransport:
    """Implements Transport protocol over SMTP (optionally STARTTLS + login)."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
        subject: str = DEFAULT_SUBJECT,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.subject = subject

    def send(self, message: str, destination: str) -> None:
        """
        Send the message as a plain-text email.

        Raises:
            TransportError: On any SMTP or socket failure
        """
        email = EmailMessage()
        email["From"] = self.sender
        email["To"] = destination
        email["Subject"] = self.subject
        email.set_content(message)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("SMTP delivery to %s failed: %s", destination, e)
            raise TransportError() from e
