from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response, status
from sqlalchemy.orm import Session

from consult_admin.core.config import settings
from consult_admin.core.database import get_db
from consult_admin.core.mailer import Mailer, get_mailer
from consult_admin.schemas.auth_schema import (
    AdminResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    TokenResponse,
    VerifyRequest,
)
from consult_admin.schemas.category_schema import MessageResponse
from consult_admin.services.auth_service import AuthService

# 관리자 인증 API 라우터
router = APIRouter(prefix="/api", tags=["Auth"])

# 세션 쿠키 이름 (카테고리 생성 시 생성자 토큰으로 사용)
TOKEN_COOKIE = "token"


def get_auth_service(db: Session = Depends(get_db), mailer: Mailer = Depends(get_mailer)) -> AuthService:
    return AuthService(db, mailer, settings)


# 쿠키 토큰 검증 → 로그인한 관리자
def get_current_admin(
    token: Optional[str] = Cookie(None),
    service: AuthService = Depends(get_auth_service),
):
    return service.current_admin(token)


def _set_token_cookie(response: Response, token: str):
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
    )


# 관리자 가입 → OTP 메일 발송
@router.post("/admin/signup", response_model=MessageResponse)
def admin_signup(body: SignupRequest, service: AuthService = Depends(get_auth_service)):
    service.signup(body.name, body.email, body.password)
    return MessageResponse(message="OTP sent successfully")


# 가입 OTP 확인
@router.post("/verify/admin/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def verify_signup(body: VerifyRequest, response: Response, service: AuthService = Depends(get_auth_service)):
    token = service.verify_signup(body.email, body.otp)
    _set_token_cookie(response, token)
    return TokenResponse(message="Admin registered successfully", token=token)


# 로그인
@router.post("/admin/login", response_model=TokenResponse)
def login(body: LoginRequest, response: Response, service: AuthService = Depends(get_auth_service)):
    token = service.login(body.email, body.password)
    _set_token_cookie(response, token)
    return TokenResponse(message="Login successful", token=token)


# 비밀번호 찾기 → 재설정 OTP 발송
@router.post("/admin/forgot/password", response_model=MessageResponse)
def forgot_password(body: ForgotPasswordRequest, service: AuthService = Depends(get_auth_service)):
    service.forgot_password(body.email)
    return MessageResponse(message="OTP sent successfully")


# 비밀번호 재설정
@router.post("/admin/reset/password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest, service: AuthService = Depends(get_auth_service)):
    service.reset_password(body.email, body.otp, body.new_password)
    return MessageResponse(message="Password reset successfully")


# 로그인한 관리자 정보
@router.get("/admin/me", response_model=AdminResponse)
def read_current_admin(admin=Depends(get_current_admin)):
    return admin
