import json
import logging
from typing import Optional
from pydantic import ValidationError

from src.common.config import settings
from src.common.utils.email_service import render_contact_email
from src.common.utils.global_messages import GlobalMessages
from src.modules.captcha import captcha_service
from src.modules.contact.exceptions import (
    CaptchaError,
    ConfigurationError,
    EmailDeliveryError,
    InvalidSubmissionError,
)
from src.modules.contact.providers.base import BaseEmailProvider, EmailSendResult, OutgoingEmail
from src.modules.contact.providers.resend_provider import ResendProvider
from src.modules.contact.providers.smtp_provider import SmtpProvider
from src.modules.contact.schemas import ContactFormRequest

logger = logging.getLogger(__name__)

EMAIL_PROVIDERS = {
    ResendProvider.name: ResendProvider,
    SmtpProvider.name: SmtpProvider,
}


def get_email_provider() -> BaseEmailProvider:
    """Build the provider named by EMAIL_PROVIDER, failing if it cannot send."""
    provider_cls = EMAIL_PROVIDERS.get(settings.EMAIL_PROVIDER.lower())
    if provider_cls is None:
        logger.error("Unknown EMAIL_PROVIDER '%s'", settings.EMAIL_PROVIDER)
        raise ConfigurationError()

    provider = provider_cls()
    if not provider.is_configured:
        logger.error("Email provider '%s' is not configured", provider.name)
        raise ConfigurationError()
    return provider


def parse_submission(raw_body: bytes) -> ContactFormRequest:
    """
    Decode and validate a raw contact form request body.

    Raises:
        InvalidSubmissionError: if the body is empty, is not JSON, or fails validation.
    """
    text = raw_body.decode("utf-8", errors="replace") if raw_body else ""
    if not text.strip():
        raise InvalidSubmissionError(GlobalMessages.EMPTY_REQUEST_BODY)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Contact form body is not valid JSON: %s", e)
        raise InvalidSubmissionError(GlobalMessages.INVALID_REQUEST_FORMAT)

    if not isinstance(data, dict):
        raise InvalidSubmissionError()

    try:
        return ContactFormRequest.model_validate(data)
    except ValidationError as e:
        logger.info("Contact form rejected: %d validation error(s)", e.error_count())
        raise InvalidSubmissionError()


async def verify_captcha(token: Optional[str], remote_ip: Optional[str] = None) -> None:
    """
    Apply the CAPTCHA policy to a submission.

    Development mode skips verification. Otherwise a token is required; the
    configured bypass token and an unconfigured secret are accepted with a
    warning, anything else is checked against Turnstile.
    """
    if settings.is_development:
        logger.info("Turnstile verification skipped in development mode")
        return

    if not token:
        raise CaptchaError(GlobalMessages.SECURITY_VERIFICATION_REQUIRED)

    if settings.TURNSTILE_BYPASS_TOKEN and token == settings.TURNSTILE_BYPASS_TOKEN:
        logger.warning("Turnstile bypassed with the development bypass token")
        return

    if not settings.TURNSTILE_SECRET_KEY:
        logger.warning("TURNSTILE_SECRET_KEY is not configured; skipping verification")
        return

    verifier = captcha_service.TurnstileVerifier(
        secret_key=settings.TURNSTILE_SECRET_KEY,
        verify_url=settings.TURNSTILE_VERIFY_URL,
    )
    result = await verifier.verify(token, remote_ip)
    if not result.success:
        logger.error(
            "Turnstile verification failed: codes=%s error=%s",
            result.error_codes,
            result.error_message,
        )
        raise CaptchaError(GlobalMessages.SECURITY_VERIFICATION_FAILED)


def build_contact_email(form: ContactFormRequest) -> OutgoingEmail:
    bodies = render_contact_email(form.name, form.email, form.message)
    # Header values cannot carry line breaks
    subject_name = " ".join(form.name.split())
    return OutgoingEmail(
        sender=settings.EMAIL_SENDER,
        recipients=[settings.CONTACT_RECIPIENT],
        subject=f"Portfolio Contact Form: Message from {subject_name}",
        text=bodies["text"],
        html=bodies["html"],
        reply_to=form.email,
    )


async def process_contact_form(raw_body: bytes, remote_ip: Optional[str] = None) -> EmailSendResult:
    """
    Run a contact form submission through validation, CAPTCHA and delivery.

    Args:
        raw_body (bytes): The untouched request body.
        remote_ip (Optional[str]): The visitor's IP, forwarded to the CAPTCHA verifier.

    Returns:
        EmailSendResult: The provider's successful send result.

    Raises:
        ContactError: Any subclass, mapped to an HTTP response by the controller.
    """
    provider = get_email_provider()
    form = parse_submission(raw_body)
    await verify_captcha(form.turnstile_token, remote_ip)

    result = await provider.send(build_contact_email(form))
    if not result.success:
        logger.error("Email provider '%s' failed: %s", provider.name, result.error_message)
        raise EmailDeliveryError()

    logger.info("Contact form message delivered via %s (id=%s)", provider.name, result.message_id)
    return result
