"""
Request-scoped dependencies: current user, role checks, service construction
"""
from functools import partial
from fastapi import BackgroundTasks, Depends, Request
from sqlalchemy.orm import Session
from roomnest.core.config import settings
from roomnest.core.database import get_db
from roomnest.core.errors import AuthenticationError, Forbidden
from roomnest.core.security import TokenIssuer
from roomnest.models import User
from roomnest.services import AuthService, BookingService, OtpService, PropertyService
from roomnest.utils.sms import send_sms


def get_settings():
    return settings


def get_token_issuer(config=Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer.from_settings(config)


def get_bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Not authorized, no token")
    return token.strip()


def get_current_user(
    token: str = Depends(get_bearer_token),
    tokens: TokenIssuer = Depends(get_token_issuer),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to a user; any failure is a 401"""
    user_id = tokens.verify(token)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise AuthenticationError("User not found")
    return user


def require_role(*roles: str):
    """Require one of ``roles`` on the current user"""
    def checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise Forbidden(f"User role '{user.role}' is not authorized to access this route")
        return user
    return checker


require_owner = require_role("owner")


def get_auth_service(
    db: Session = Depends(get_db),
    config=Depends(get_settings),
    tokens: TokenIssuer = Depends(get_token_issuer)
) -> AuthService:
    return AuthService(db, config, tokens)


def get_otp_service(
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    config=Depends(get_settings),
    tokens: TokenIssuer = Depends(get_token_issuer)
) -> OtpService:
    # SMS goes out after the response is sent
    send_message = partial(background_tasks.add_task, send_sms)
    return OtpService(db, config, tokens, send_message=send_message)


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(db)


def get_property_service(db: Session = Depends(get_db)) -> PropertyService:
    return PropertyService(db)
