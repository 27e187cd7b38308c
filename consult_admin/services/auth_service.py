import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from consult_admin.core.config import Settings
from consult_admin.core.exceptions import AdminError, AuthenticationError, MailDeliveryError, NotFound
from consult_admin.core.mailer import Mailer, render
from consult_admin.core.security import (
    create_access_token,
    decode_access_token,
    generate_otp,
    hash_password,
    verify_password,
)
from consult_admin.crud import admin_crud
from consult_admin.models.admin_model import Admin

logger = logging.getLogger(__name__)

SIGNUP = "signup"
RESET = "reset"


def _as_utc(value: datetime) -> datetime:
    # SQLite 는 tzinfo 없이 돌려줌
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AuthService:
    """
    관리자 가입(OTP 인증) / 로그인 / 비밀번호 재설정
    """
    def __init__(self, db: Session, mailer: Mailer, config: Settings):
        self.db = db
        self.mailer = mailer
        self.config = config

    def _issue_token(self, admin: Admin) -> str:
        return create_access_token(admin.id, admin.email, self.config)

    def _send_otp(self, email: str, otp: str, subject: str) -> bool:
        context = {"otp": otp, "minutes": self.config.OTP_EXPIRE_MINUTES}
        return self.mailer.send(
            to=email,
            subject=subject,
            text=render("otp_email.txt", **context),
            html=render("otp_email.html", **context),
        )

    def _expiry(self) -> datetime:
        return datetime.now(timezone.utc) + timedelta(minutes=self.config.OTP_EXPIRE_MINUTES)

    def _consume_otp(self, email: str, purpose: str, otp: str):
        record = admin_crud.get_latest_otp(self.db, email, purpose)
        if not record or record.otp != otp.strip():
            raise AdminError("Invalid OTP")
        if _as_utc(record.expires_at) < datetime.now(timezone.utc):
            admin_crud.delete_otp(self.db, record)
            raise AdminError("OTP has expired")
        return record

    # 가입 요청 → OTP 메일 발송
    def signup(self, name: str, email: str, password: str):
        if admin_crud.get_admin_by_email(self.db, email):
            raise AdminError("Email is already registered")

        otp = generate_otp()
        if not self._send_otp(email, otp, "Email Verification OTP"):
            raise MailDeliveryError("Failed to send OTP email")

        admin_crud.store_otp(
            self.db,
            email,
            SIGNUP,
            otp,
            self._expiry(),
            pending_name=name,
            pending_password_hash=hash_password(password, self.config),
        )
        logger.info("Signup OTP sent to %s", email)

    # OTP 확인 → 관리자 생성, 토큰 발급
    def verify_signup(self, email: str, otp: str) -> str:
        record = self._consume_otp(email, SIGNUP, otp)
        if admin_crud.get_admin_by_email(self.db, email):
            admin_crud.delete_otp(self.db, record)
            raise AdminError("Email is already registered")

        admin = admin_crud.create_admin(
            self.db, record.pending_name, email, record.pending_password_hash
        )
        admin_crud.delete_otp(self.db, record)
        logger.info("Admin %s registered", admin.email)
        return self._issue_token(admin)

    # 로그인
    def login(self, email: str, password: str) -> str:
        admin = admin_crud.get_admin_by_email(self.db, email)
        if not admin or not verify_password(password, admin.password_hash):
            raise AuthenticationError("Invalid email or password")
        return self._issue_token(admin)

    # 비밀번호 찾기 → 재설정 OTP 발송
    def forgot_password(self, email: str):
        if not admin_crud.get_admin_by_email(self.db, email):
            raise NotFound("Admin not found")

        otp = generate_otp()
        if not self._send_otp(email, otp, "Password Reset OTP"):
            raise MailDeliveryError("Failed to send OTP email")
        admin_crud.store_otp(self.db, email, RESET, otp, self._expiry())

    # 비밀번호 재설정
    def reset_password(self, email: str, otp: str, new_password: str):
        admin = admin_crud.get_admin_by_email(self.db, email)
        if not admin:
            raise NotFound("Admin not found")

        record = self._consume_otp(email, RESET, otp)
        admin_crud.update_password(self.db, admin, hash_password(new_password, self.config))
        admin_crud.delete_otp(self.db, record)
        logger.info("Password reset for %s", admin.email)

    # 쿠키 토큰 → 로그인한 관리자
    def current_admin(self, token: Optional[str]) -> Admin:
        if not token:
            raise AuthenticationError("Not authenticated")

        payload = decode_access_token(token, self.config)
        admin = admin_crud.get_admin_by_email(self.db, payload.get("email", ""))
        if not admin or str(admin.id) != payload["sub"]:
            raise AuthenticationError("Invalid session token")
        return admin
