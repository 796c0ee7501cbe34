"""
Application Configuration
All settings loaded from environment variables
"""
from pydantic import BaseModel
import os


class Settings(BaseModel):
    # ==================== Application ====================
    APP_NAME: str = os.getenv("APP_NAME", "RoomNest")
    APP_VERSION: str = os.getenv("APP_VERSION", "2.0.0")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-this")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRE_DAYS: int = int(os.getenv("TOKEN_EXPIRE_DAYS", "30"))

    # ==================== Database ====================
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./roomnest.db")
    DATABASE_POOL_SIZE: int = int(os.getenv("DATABASE_POOL_SIZE", "10"))
    DATABASE_MAX_OVERFLOW: int = int(os.getenv("DATABASE_MAX_OVERFLOW", "20"))

    # ==================== Login Lockout ====================
    MAX_LOGIN_ATTEMPTS: int = int(os.getenv("MAX_LOGIN_ATTEMPTS", "5"))
    LOCKOUT_MINUTES: int = int(os.getenv("LOCKOUT_MINUTES", "15"))

    # ==================== OTP ====================
    OTP_LENGTH: int = int(os.getenv("OTP_LENGTH", "6"))
    OTP_EXPIRY: int = int(os.getenv("OTP_EXPIRY", "300"))
    OTP_CLEANUP_INTERVAL: float = float(os.getenv("OTP_CLEANUP_INTERVAL", "600"))

    # ==================== SMS ====================
    SMS_PROVIDER: str = os.getenv("SMS_PROVIDER", "console")  # 'console' | 'twilio'
    SMS_API_URL: str = os.getenv("SMS_API_URL", "https://api.twilio.com/2010-04-01")
    TWILIO_ACCOUNT_SID: str = os.getenv("TWILIO_ACCOUNT_SID", "")
    TWILIO_AUTH_TOKEN: str = os.getenv("TWILIO_AUTH_TOKEN", "")
    TWILIO_PHONE_NUMBER: str = os.getenv("TWILIO_PHONE_NUMBER", "")
    SMS_TIMEOUT: int = int(os.getenv("SMS_TIMEOUT", "10"))

    # ==================== Celery ====================
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/0")
    CELERY_TIMEZONE: str = os.getenv("CELERY_TIMEZONE", "Asia/Kolkata")

    # ==================== Logging ====================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    LOG_FILE: str = os.getenv("LOG_FILE", "")
    LOG_MAX_SIZE: int = int(os.getenv("LOG_MAX_SIZE", "10485760"))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # ==================== CORS ====================
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
    CORS_ALLOW_CREDENTIALS: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
