import asyncio
import json

import httpx

from src.modules.captcha.captcha_service import TurnstileVerifier

VERIFY_URL = "https://challenges.example.com/turnstile/v0/siteverify"


def make_verifier(handler):
    return TurnstileVerifier("secret", VERIFY_URL, transport=httpx.MockTransport(handler))


def test_successful_verification_posts_secret_token_and_ip():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "hostname": "example.com", "error-codes": []})

    result = asyncio.run(make_verifier(handler).verify("tok", "198.51.100.1"))

    assert result.success is True
    assert result.hostname == "example.com"
    assert seen["url"] == VERIFY_URL
    assert seen["body"] == {"secret": "secret", "response": "tok", "remoteip": "198.51.100.1"}


def test_rejected_token_reports_error_codes():
    def handler(request):
        assert "remoteip" not in json.loads(request.content)
        return httpx.Response(200, json={"success": False, "error-codes": ["timeout-or-duplicate"]})

    result = asyncio.run(make_verifier(handler).verify("tok"))

    assert result.success is False
    assert result.error_codes == ["timeout-or-duplicate"]


def test_network_error_is_a_failed_result():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    result = asyncio.run(make_verifier(handler).verify("tok"))

    assert result.success is False
    assert "unreachable" in result.error_message


def test_non_json_response_is_a_failed_result():
    def handler(request):
        return httpx.Response(502, text="<html>Bad gateway</html>")

    result = asyncio.run(make_verifier(handler).verify("tok"))

    assert result.success is False
    assert result.error_message
