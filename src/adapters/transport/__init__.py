"""Transport adapters - Verification message delivery implementations."""

from src.config.settings import Settings
from src.domain.ports import Transport

from .console import ConsoleTransport
from .sms_gateway import SmsGatewayTransport
from .smtp import SmtpEmailTransport


def build_transport(settings: Settings) -> Transport:
    """Create the transport selected by settings.transport."""
    if settings.transport == "smtp":
        return SmtpEmailTransport(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.smtp_sender,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )
    if settings.transport == "sms_gateway":
        if not settings.sms_gateway_url:
            raise ValueError("SMS_GATEWAY_URL must be set when TRANSPORT=sms_gateway")
        return SmsGatewayTransport(
            url=settings.sms_gateway_url,
            api_key=settings.sms_api_key,
            timeout=settings.sms_timeout_seconds,
        )
    return ConsoleTransport()


__all__ = ["ConsoleTransport", "SmsGatewayTransport", "SmtpEmailTransport", "build_transport"]
