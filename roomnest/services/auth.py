"""
Registration and password login

Lockout state lives on the User row: ``failed_login_attempts`` counts
cumulative failures and ``locked_until`` blocks every attempt, correct
password or not, until it has passed.
"""
import logging
from datetime import timedelta
from sqlalchemy.orm import Session
from roomnest.core.errors import (
    AccountLocked,
    DuplicateEmail,
    DuplicatePhone,
    InvalidCredentials,
    MissingFields,
)
from roomnest.core.security import TokenIssuer, hash_password, verify_password
from roomnest.models import User
from roomnest.schemas import RegisterRequest
from roomnest.utils.datetime_utils import minutes_until, utcnow
from roomnest.utils.validators import validate_email, validate_name, validate_password, validate_phone

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, settings, tokens: TokenIssuer):
        self.db = db
        self.settings = settings
        self.tokens = tokens

    def get_user_by_email(self, email: str):
        return self.db.query(User).filter(User.email == email.strip().lower()).first()

    def get_user_by_phone(self, phone: str):
        return self.db.query(User).filter(User.phone == phone).first()

    def register(self, data: RegisterRequest) -> tuple[User, str]:
        """
        Create a user and return it with a fresh token
        """
        if not (data.name and data.email and data.phone and data.password):
            raise MissingFields()

        name = validate_name(data.name)
        email = validate_email(data.email)
        phone = validate_phone(data.phone)
        validate_password(data.password)

        if self.get_user_by_email(email):
            raise DuplicateEmail()
        if self.get_user_by_phone(phone):
            raise DuplicatePhone()

        user = User(
            name=name,
            email=email,
            phone=phone,
            password_hash=hash_password(data.password),
            role=data.role or "user",
            phone_verified=False,
            failed_login_attempts=0,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info("[AUTH] Registered user %s (role=%s)", user.id, user.role)
        return user, self.tokens.issue(user.id)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """
        Password login guarded by the lockout state machine
        """
        if not email or not password:
            raise MissingFields("Please provide email and password")

        email = validate_email(email)
        user = self.get_user_by_email(email)
        if not user:
            raise InvalidCredentials()

        now = utcnow()
        if user.is_locked(now):
            remaining = minutes_until(user.locked_until, now)
            raise AccountLocked(
                f"Account is temporarily locked. Try again in {remaining} minutes.",
                remaining_minutes=remaining,
                locked_until=user.locked_until.isoformat(),
            )

        if not verify_password(password, user.password_hash):
            self._record_failure(user, now)

        user.failed_login_attempts = 0
        user.locked_until = None
        self.db.commit()
        self.db.refresh(user)

        return user, self.tokens.issue(user.id)

    def _record_failure(self, user: User, now):
        max_attempts = self.settings.MAX_LOGIN_ATTEMPTS
        attempts = (user.failed_login_attempts or 0) + 1
        user.failed_login_attempts = attempts

        if attempts >= max_attempts:
            user.locked_until = now + timedelta(minutes=self.settings.LOCKOUT_MINUTES)
            self.db.commit()
            logger.warning("[AUTH] User %s locked until %s after %s failed attempts",
                           user.id, user.locked_until, attempts)
            raise AccountLocked(
                f"Too many failed login attempts. Account locked for {self.settings.LOCKOUT_MINUTES} minutes.",
                remaining_minutes=self.settings.LOCKOUT_MINUTES,
                locked_until=user.locked_until.isoformat(),
            )

        user.locked_until = None
        self.db.commit()
        logger.info("[AUTH] Failed login for user %s (%s/%s)", user.id, attempts, max_attempts)
        raise InvalidCredentials(attempts_remaining=max_attempts - attempts)
