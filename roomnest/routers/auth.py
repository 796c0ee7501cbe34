"""
Authentication endpoints
"""
from fastapi import APIRouter, Depends, status
from roomnest.core.dependencies import get_auth_service, get_current_user, get_otp_service
from roomnest.models import User
from roomnest.schemas import LoginRequest, RegisterRequest, SendOtpRequest, UserOut, VerifyOtpRequest
from roomnest.services import AuthService, OtpService

router = APIRouter(prefix="/auth", tags=["auth"])


def user_payload(user: User, token: str = None) -> dict:
    data = UserOut.model_validate(user).model_dump(mode="json")
    if token:
        data["token"] = token
    return data


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user and log them in
    """
    user, token = service.register(payload)
    return {"success": True, "message": "User registered successfully", "data": user_payload(user, token)}


@router.post("/login")
def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Email and password login
    """
    user, token = service.login(payload.email, payload.password)
    return {"success": True, "message": "Logged in successfully", "data": user_payload(user, token)}


@router.post("/send-otp")
def send_otp(payload: SendOtpRequest, service: OtpService = Depends(get_otp_service)):
    """
    Request an OTP for phone login
    """
    result = service.request_otp(payload.phone)
    response = {
        "success": True,
        "message": "OTP sent successfully",
        "data": {"expires_at": result["expires_at"].isoformat()},
    }
    if "code" in result:
        response["data"]["code"] = result["code"]
        response["dev_message"] = "OTP shown for development only"
    return response


@router.post("/verify-otp")
def verify_otp(payload: VerifyOtpRequest, service: OtpService = Depends(get_otp_service)):
    """
    Verify OTP and log in
    """
    user, token = service.verify_otp(payload.phone, payload.code)
    return {"success": True, "message": "Login successful", "data": user_payload(user, token)}


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    """
    Get current logged-in user
    """
    return {"success": True, "data": user_payload(user)}
