"""
Contact form controller.

Holds the state behind the portfolio's contact form and drives a submission:
collect a Turnstile token, post the form as JSON and map the reply onto an
idle/success/error status that the view renders.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol
import httpx

from src.common.utils.global_messages import GlobalMessages

logger = logging.getLogger(__name__)

BYPASS_TOKEN = "dev-mode-bypass"
FORM_FIELDS = ("name", "email", "message")


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


class CaptchaWidget(Protocol):
    """The slice of the Turnstile widget the form talks to."""

    def get_token(self) -> Optional[str]:
        ...

    def reset(self) -> None:
        ...


@dataclass
class ContactFormData:
    name: str = ""
    email: str = ""
    message: str = ""


class ContactFormController:
    def __init__(
        self,
        endpoint_url: str,
        captcha: Optional[CaptchaWidget] = None,
        bypass_captcha: bool = False,
        success_reset_delay: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url.rstrip("/")
        self.captcha = captcha
        self.bypass_captcha = bypass_captcha
        self.success_reset_delay = success_reset_delay
        self.transport = transport

        self.form = ContactFormData()
        self.status = SubmitStatus.IDLE
        self.error_message: Optional[str] = None
        self.is_submitting = False
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    def update_field(self, field: str, value: str) -> None:
        if field not in FORM_FIELDS:
            raise ValueError(f"Unknown contact form field: {field}")
        setattr(self.form, field, value)

    async def load_config(self) -> None:
        """
        Enable bypass mode when the server does not enforce verification.

        A failed or malformed config response leaves the current mode unchanged.
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(f"{self.endpoint_url}/config", timeout=30.0)
                response.raise_for_status()
                config = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Could not load contact form config: %s", e)
            return

        if not isinstance(config, dict):
            logger.error("Unexpected contact form config: %r", config)
            return
        if not config.get("captchaEnabled", True):
            self.bypass_captcha = True

    def _resolve_token(self) -> Optional[str]:
        if self.bypass_captcha:
            return BYPASS_TOKEN
        if self.captcha is None:
            return None
        return self.captcha.get_token() or None

    async def submit(self) -> SubmitStatus:
        """
        Submit the current form.

        A second call while a submission is in flight is ignored. On success the
        fields are cleared and the status returns to idle after
        ``success_reset_delay`` seconds; on error the CAPTCHA widget is reset so
        the visitor can try again.
        """
        if self.is_submitting:
            return self.status

        self.is_submitting = True
        self.status = SubmitStatus.IDLE
        self.error_message = None
        try:
            token = self._resolve_token()
            if token is None:
                self._fail(GlobalMessages.COMPLETE_SECURITY_VERIFICATION)
                return self.status

            payload = {
                "name": self.form.name,
                "email": self.form.email,
                "message": self.form.message,
                "turnstileToken": token,
            }
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(self.endpoint_url, json=payload, timeout=30.0)

            try:
                data = response.json()
            except ValueError:
                data = {}
            if not isinstance(data, dict):
                data = {}

            if response.is_success and data.get("success"):
                self._succeed()
            else:
                self._fail(data.get("error") or GlobalMessages.GENERIC_SUBMIT_ERROR)
        except httpx.HTTPError as e:
            logger.error("Contact form submission failed: %s", e)
            self._fail(GlobalMessages.GENERIC_SUBMIT_ERROR)
        finally:
            self.is_submitting = False
        return self.status

    def _succeed(self) -> None:
        self.form = ContactFormData()
        self.status = SubmitStatus.SUCCESS
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.success_reset_delay, self._clear_success)

    def _clear_success(self) -> None:
        self._reset_handle = None
        if self.status == SubmitStatus.SUCCESS:
            self.status = SubmitStatus.IDLE

    def _fail(self, message: str) -> None:
        self.status = SubmitStatus.ERROR
        self.error_message = message
        if self.captcha is not None:
            self.captcha.reset()
