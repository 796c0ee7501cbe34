"""
Phone OTP login

A code is bound to a canonical phone, lives for OTP_EXPIRY seconds and can be
consumed once.
"""
import logging
from typing import Callable, Optional
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from roomnest.core.errors import InvalidOrExpiredOTP, MissingFields, UserNotFound
from roomnest.core.security import TokenIssuer
from roomnest.models import OtpCode, User
from roomnest.utils.datetime_utils import utcnow
from roomnest.utils.otp import generate_otp, get_otp_expiry
from roomnest.utils.validators import validate_phone

logger = logging.getLogger(__name__)

OTP_MESSAGE = "Your RoomNest OTP is: {code}. Valid for {minutes} minutes."


class OtpService:
    def __init__(self, db: Session, settings, tokens: TokenIssuer,
                 send_message: Optional[Callable[[str, str], object]] = None):
        self.db = db
        self.settings = settings
        self.tokens = tokens
        self.send_message = send_message

    def request_otp(self, phone: str) -> dict:
        """
        Issue a code for a registered phone

        Returns: {'expires_at': datetime} plus 'code' outside production
        """
        if not phone:
            raise MissingFields("Phone number is required")
        phone = validate_phone(phone)

        user = self.db.query(User).filter(User.phone == phone).first()
        if not user:
            raise UserNotFound("No account found with this phone number")

        code = generate_otp(self.settings.OTP_LENGTH)
        expires_at = get_otp_expiry(self.settings.OTP_EXPIRY)

        otp = OtpCode(
            phone=phone,
            code=code,
            expires_at=expires_at,
            verified=False,
            created_at=utcnow(),
        )
        self.db.add(otp)
        self.db.commit()

        self._dispatch(phone, OTP_MESSAGE.format(code=code, minutes=self.settings.OTP_EXPIRY // 60))

        result = {"expires_at": expires_at}
        if not self.settings.is_production:
            result["code"] = code
        return result

    def _dispatch(self, phone: str, message: str):
        if self.send_message is None:
            return
        try:
            self.send_message(phone, message)
        except Exception:
            # Delivery is best effort; the code is already stored
            logger.exception("[OTP] Could not dispatch code to %s", phone)

    def verify_otp(self, phone: str, code: str) -> tuple[User, str]:
        """
        Consume a code and log the user in
        """
        if not phone or not code:
            raise MissingFields("Phone number and OTP code are required")
        phone = validate_phone(phone)
        now = utcnow()

        otp = self.db.query(OtpCode).filter(
            OtpCode.phone == phone,
            OtpCode.code == str(code).strip(),
            OtpCode.verified == False,  # noqa: E712
            OtpCode.expires_at > now
        ).order_by(OtpCode.created_at.desc(), OtpCode.id.desc()).first()

        if not otp:
            raise InvalidOrExpiredOTP()

        # Guarded update: only one caller can flip verified for this row
        result = self.db.execute(
            update(OtpCode)
            .where(OtpCode.id == otp.id, OtpCode.verified == False)  # noqa: E712
            .values(verified=True)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.db.rollback()
            raise InvalidOrExpiredOTP()
        self.db.commit()

        user = self.db.query(User).filter(User.phone == phone).first()
        if not user:
            raise UserNotFound()

        user.phone_verified = True
        user.failed_login_attempts = 0
        user.locked_until = None
        self.db.commit()
        self.db.refresh(user)

        logger.info("[OTP] User %s logged in with OTP", user.id)
        return user, self.tokens.issue(user.id)


def purge_expired_otps(db: Session, now=None) -> int:
    """
    Delete unverified codes past their expiry

    Rows are removed one at a time; a failed delete is rolled back and skipped.
    Returns: number of rows deleted
    """
    now = now or utcnow()
    expired_ids = [row_id for (row_id,) in db.query(OtpCode.id).filter(
        OtpCode.expires_at < now,
        OtpCode.verified == False  # noqa: E712
    ).all()]

    deleted = 0
    for otp_id in expired_ids:
        try:
            db.query(OtpCode).filter(OtpCode.id == otp_id).delete(synchronize_session=False)
            db.commit()
            deleted += 1
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning("[CLEANUP] Could not delete OTP %s: %s", otp_id, e)
    return deleted
