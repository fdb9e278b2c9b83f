"""
Cloudflare Turnstile token verification.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import httpx

logger = logging.getLogger(__name__)


@dataclass
class CaptchaVerifyResult:
    """Result of verifying a challenge token."""
    success: bool
    error_codes: List[str] = field(default_factory=list)
    hostname: Optional[str] = None
    error_message: Optional[str] = None
    raw_response: Optional[Dict[str, Any]] = None


class TurnstileVerifier:
    """Client for the Turnstile ``siteverify`` endpoint."""

    def __init__(
        self,
        secret_key: str,
        verify_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.secret_key = secret_key
        self.verify_url = verify_url
        self.transport = transport

    async def verify(self, token: str, remote_ip: Optional[str] = None) -> CaptchaVerifyResult:
        """
        Verify a token issued by the Turnstile widget.

        Args:
            token: Token posted by the browser
            remote_ip: Visitor IP, forwarded to Cloudflare when known

        Returns:
            CaptchaVerifyResult, never raises for network or decoding errors
        """
        payload = {"secret": self.secret_key, "response": token}
        if remote_ip:
            payload["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(self.verify_url, json=payload, timeout=30.0)
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Turnstile verification request failed: %s", e)
            return CaptchaVerifyResult(success=False, error_message=str(e))

        if not isinstance(data, dict):
            return CaptchaVerifyResult(success=False, error_message="Unexpected verifier response")

        return CaptchaVerifyResult(
            success=response.status_code == 200 and data.get("success") is True,
            error_codes=list(data.get("error-codes") or []),
            hostname=data.get("hostname"),
            raw_response=data,
        )
