"""
SMTP email provider.
"""
from email.message import EmailMessage
from email.utils import make_msgid
from typing import Optional
import aiosmtplib

from src.common.config import settings
from .base import BaseEmailProvider, EmailSendResult, OutgoingEmail


class SmtpProvider(BaseEmailProvider):
    """Sends mail over SMTP using aiosmtplib."""

    name = "smtp"

    def __init__(
        self,
        hostname: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
    ):
        self.hostname = settings.SMTP_HOST if hostname is None else hostname
        self.port = port or settings.SMTP_PORT
        self.username = settings.SMTP_USER if username is None else username
        self.password = settings.SMTP_PASSWORD if password is None else password
        self.use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls

    @property
    def is_configured(self) -> bool:
        return bool(self.hostname)

    def build_message(self, email: OutgoingEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = email.sender
        message["To"] = ", ".join(email.recipients)
        message["Subject"] = email.subject
        message["Message-ID"] = make_msgid()
        if email.reply_to:
            message["Reply-To"] = email.reply_to
        message.set_content(email.text)
        message.add_alternative(email.html, subtype="html")
        return message

    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        message = self.build_message(email)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                use_tls=self.use_tls,
                start_tls=not self.use_tls,
                timeout=60,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            return EmailSendResult(success=False, error_message=str(e))

        return EmailSendResult(success=True, message_id=message["Message-ID"])
