"""
SMS utilities for sending messages
"""
import logging
import requests
from roomnest.core.config import settings

logger = logging.getLogger(__name__)


def send_sms(phone: str, message: str, config=None) -> dict:
    """
    Send SMS via configured provider

    Returns: {'success': bool, 'message_id': str} or {'success': False, 'error': str}
    """
    config = config or settings
    if config.SMS_PROVIDER == "console":
        return send_console_sms(phone, message, config)
    if config.SMS_PROVIDER == "twilio":
        return send_twilio_sms(phone, message, config)

    # Add other providers here
    return {"success": False, "error": "Unknown provider"}


def send_console_sms(phone: str, message: str, config=None) -> dict:
    """
    Mock provider: logs the message instead of sending it

    In production only the recipient is logged; the body may carry a live OTP.
    """
    config = config or settings
    if config.is_production:
        logger.info("[SMS] (mock) to=%s message=<%d chars withheld>", phone, len(message))
    else:
        logger.info("[SMS] (mock) to=%s message=%s", phone, message)
    return {"success": True, "message_id": "console"}


def send_twilio_sms(phone: str, message: str, config) -> dict:
    """
    Send SMS via Twilio REST API
    """
    if not (config.TWILIO_ACCOUNT_SID and config.TWILIO_AUTH_TOKEN):
        return {"success": False, "error": "SMS credentials not configured"}

    url = f"{config.SMS_API_URL}/Accounts/{config.TWILIO_ACCOUNT_SID}/Messages.json"

    try:
        response = requests.post(
            url,
            data={
                "From": config.TWILIO_PHONE_NUMBER,
                "To": phone,
                "Body": message,
            },
            auth=(config.TWILIO_ACCOUNT_SID, config.TWILIO_AUTH_TOKEN),
            timeout=config.SMS_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()

        return {
            "success": True,
            "message_id": str(data.get("sid", "")),
        }
    except requests.RequestException as e:
        logger.warning("[SMS] Twilio send to %s failed: %s", phone, e)
        return {"success": False, "error": str(e)}
