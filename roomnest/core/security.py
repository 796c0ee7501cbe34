"""
Password hashing and identity tokens
"""
from datetime import datetime, timedelta, timezone
from jose import jwt, ExpiredSignatureError, JWTError
from pwdlib import PasswordHash
from roomnest.core.errors import TokenExpired, TokenInvalid

password_hash = PasswordHash.recommended()


def hash_password(password: str) -> str:
    """Hash with a random per-password salt"""
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed: str) -> bool:
    if not hashed:
        return False
    return password_hash.verify(plain_password, hashed)


class TokenIssuer:
    """
    Stateless signed identity tokens

    A token binds a user id and stays valid for ``expire_days`` after issuance.
    There is no server-side revocation list.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_days: int = 30):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_days = expire_days

    @classmethod
    def from_settings(cls, settings) -> "TokenIssuer":
        return cls(settings.SECRET_KEY, settings.JWT_ALGORITHM, settings.TOKEN_EXPIRE_DAYS)

    def issue(self, user_id: int, now: datetime = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + timedelta(days=self.expire_days),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """
        Return the user id bound to ``token``

        Raises TokenExpired past the validity window and TokenInvalid for
        anything malformed or tampered with.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenExpired()
        except JWTError:
            raise TokenInvalid()

        subject = payload.get("sub")
        if subject is None:
            raise TokenInvalid()
        try:
            return int(subject)
        except (TypeError, ValueError):
            raise TokenInvalid()
