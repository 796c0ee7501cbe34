"""
Tests for configuration
"""
from roomnest.core.config import Settings, settings


def test_settings_loaded():
    """Test that settings are loaded"""
    assert settings.APP_NAME is not None


def test_database_config():
    """Test database configuration exists"""
    assert hasattr(settings, 'DATABASE_URL')


def test_lockout_defaults():
    assert settings.MAX_LOGIN_ATTEMPTS == 5
    assert settings.LOCKOUT_MINUTES == 15
    assert settings.TOKEN_EXPIRE_DAYS == 30


def test_otp_defaults():
    assert settings.OTP_LENGTH == 6
    assert settings.OTP_EXPIRY == 300


def test_production_flag():
    assert Settings(ENVIRONMENT="production").is_production is True
    assert Settings(ENVIRONMENT="development").is_production is False


def test_celery_beat_runs_otp_cleanup():
    from roomnest.core.celery_app import celery_app
    entry = celery_app.conf.beat_schedule["cleanup-expired-otps"]
    assert entry["task"] == "roomnest.tasks.cleanup.cleanup_expired_otps"
