"""
Tests for SMS providers
"""
import logging
import requests
from roomnest.core.config import Settings
from roomnest.utils import sms


class FakeResponse:
    def __init__(self, payload, status_code=201):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


def twilio_settings(**overrides):
    values = {
        "SMS_PROVIDER": "twilio",
        "TWILIO_ACCOUNT_SID": "AC123",
        "TWILIO_AUTH_TOKEN": "secret",
        "TWILIO_PHONE_NUMBER": "+15005550006",
    }
    values.update(overrides)
    return Settings(**values)


def test_console_provider_always_succeeds():
    result = sms.send_sms("+919876543210", "hello", Settings(SMS_PROVIDER="console"))
    assert result == {"success": True, "message_id": "console"}


def test_unknown_provider():
    result = sms.send_sms("+919876543210", "hello", Settings(SMS_PROVIDER="pigeon"))
    assert result["success"] is False


def test_twilio_without_credentials():
    config = twilio_settings(TWILIO_ACCOUNT_SID="", TWILIO_AUTH_TOKEN="")
    result = sms.send_sms("+919876543210", "hello", config)
    assert result == {"success": False, "error": "SMS credentials not configured"}


def test_twilio_posts_message(monkeypatch):
    calls = []

    def fake_post(url, data, auth, timeout):
        calls.append((url, data, auth))
        return FakeResponse({"sid": "SM1"})

    monkeypatch.setattr(sms.requests, "post", fake_post)
    result = sms.send_sms("+919876543210", "hello", twilio_settings())

    assert result == {"success": True, "message_id": "SM1"}
    url, data, auth = calls[0]
    assert url.endswith("/Accounts/AC123/Messages.json")
    assert data == {"From": "+15005550006", "To": "+919876543210", "Body": "hello"}
    assert auth == ("AC123", "secret")


def test_twilio_failure_is_reported(monkeypatch):
    monkeypatch.setattr(sms.requests, "post", lambda *a, **kw: FakeResponse({}, status_code=500))
    result = sms.send_sms("+919876543210", "hello", twilio_settings())
    assert result["success"] is False


def test_console_provider_logs_message_outside_production(caplog):
    caplog.set_level(logging.INFO, logger="roomnest.utils.sms")
    config = Settings(SMS_PROVIDER="console", ENVIRONMENT="development")
    sms.send_sms("+919876543210", "Your RoomNest OTP is: 482913. Valid for 5 minutes.", config)
    assert "482913" in caplog.text


def test_console_provider_withholds_message_in_production(caplog):
    caplog.set_level(logging.INFO, logger="roomnest.utils.sms")
    config = Settings(SMS_PROVIDER="console", ENVIRONMENT="production")
    result = sms.send_sms("+919876543210", "Your RoomNest OTP is: 482913. Valid for 5 minutes.", config)

    assert result["success"] is True
    assert "+919876543210" in caplog.text
    assert "482913" not in caplog.text
