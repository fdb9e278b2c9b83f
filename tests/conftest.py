"""
Shared pytest fixtures for the API tests.
"""
import pytest
from fastapi.testclient import TestClient

from src.common.config import settings
from src.common.rate_limit import limiter
from src.main import app
from src.modules.contact import contact_service
from src.modules.contact.providers.base import BaseEmailProvider, EmailSendResult


class FakeEmailProvider(BaseEmailProvider):
    """Records outgoing mail instead of sending it."""

    name = "fake"

    def __init__(self, result=None, configured=True):
        self.result = result or EmailSendResult(success=True, message_id="msg_123")
        self.configured = configured
        self.sent = []

    @property
    def is_configured(self):
        return self.configured

    async def send(self, email):
        self.sent.append(email)
        return self.result


@pytest.fixture(autouse=True)
def production_settings(monkeypatch):
    """Production-like settings with every secret configured."""
    monkeypatch.setattr(settings, "APP_ENV", "production")
    monkeypatch.setattr(settings, "EMAIL_PROVIDER", "resend")
    monkeypatch.setattr(settings, "RESEND_API_KEY", "re_test_key")
    monkeypatch.setattr(settings, "EMAIL_SENDER", "site@example.com")
    monkeypatch.setattr(settings, "CONTACT_RECIPIENT", "owner@example.com")
    monkeypatch.setattr(settings, "TURNSTILE_SECRET_KEY", "turnstile-secret")
    monkeypatch.setattr(settings, "PUBLIC_TURNSTILE_SITE_KEY", "0x4AAAAAAA")
    monkeypatch.setattr(settings, "TURNSTILE_BYPASS_TOKEN", "dev-mode-bypass")
    monkeypatch.setattr(limiter, "enabled", False)
    return settings


@pytest.fixture
def email_provider(monkeypatch):
    provider = FakeEmailProvider()
    monkeypatch.setattr(contact_service, "get_email_provider", lambda: provider)
    return provider


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_payload():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "message": "I'd love to talk about a project.",
        "turnstileToken": "token-from-widget",
    }
