"""
Resend transactional email provider.
"""
import logging
from typing import Optional, Dict
import httpx

from src.common.config import settings
from .base import BaseEmailProvider, EmailSendResult, OutgoingEmail

logger = logging.getLogger(__name__)


class ResendProvider(BaseEmailProvider):
    """Sends mail through the Resend HTTP API."""

    name = "resend"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = settings.RESEND_API_KEY if api_key is None else api_key
        self.base_url = (base_url or settings.RESEND_API_URL).rstrip("/")
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        payload = {
            "from": email.sender,
            "to": email.recipients,
            "subject": email.subject,
            "html": email.html,
            "text": email.text,
        }
        if email.reply_to:
            payload["reply_to"] = email.reply_to

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/emails",
                    headers=self.headers,
                    json=payload,
                    timeout=30.0,
                )
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            return EmailSendResult(success=False, error_message=str(e))

        if not isinstance(data, dict):
            data = {}

        if response.is_success and data.get("id"):
            logger.debug("Resend accepted message %s", data["id"])
            return EmailSendResult(success=True, message_id=str(data["id"]), raw_response=data)

        return EmailSendResult(
            success=False,
            error_message=data.get("message") or f"Resend responded with HTTP {response.status_code}",
            raw_response=data,
        )
