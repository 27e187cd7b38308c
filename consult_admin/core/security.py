"""Admin credentials: scrypt password hashes, signup/reset OTP codes and session JWTs."""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from consult_admin.core.config import Settings, settings
from consult_admin.core.exceptions import AuthenticationError

SALT_BYTES = 16
KEY_BYTES = 32
OTP_DIGITS = 6


def _scrypt(password: str, salt: bytes, n: int, r: int, p: int, length: int = KEY_BYTES) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"), salt=salt, n=n, r=r, p=p, maxmem=256 * n * r, dklen=length
    )


def hash_password(password: str, config: Settings = settings) -> str:
    """Return ``scrypt:<n>:<r>:<p>:<salt hex>:<key hex>`` using the configured cost."""
    if not password.strip():
        raise ValueError("Password must not be empty")

    salt = secrets.token_bytes(SALT_BYTES)
    key = _scrypt(password, salt, config.SCRYPT_N, config.SCRYPT_R, config.SCRYPT_P)
    return ":".join(
        ["scrypt", str(config.SCRYPT_N), str(config.SCRYPT_R), str(config.SCRYPT_P), salt.hex(), key.hex()]
    )


def verify_password(password: str, hashed: str) -> bool:
    # 해시에 저장된 비용으로 재계산 (설정이 바뀌어도 기존 해시 검증 가능)
    parts = hashed.split(":")
    if len(parts) != 6 or parts[0] != "scrypt":
        return False
    try:
        n, r, p = (int(value) for value in parts[1:4])
        salt = bytes.fromhex(parts[4])
        expected = bytes.fromhex(parts[5])
        candidate = _scrypt(password, salt, n, r, p, len(expected))
    except ValueError:
        return False
    return hmac.compare_digest(candidate, expected)


def generate_otp() -> str:
    """Six digit one-time code, never starting with 0."""
    low = 10 ** (OTP_DIGITS - 1)
    return str(low + secrets.randbelow(9 * low))


# 로그인 세션 토큰 발급
def create_access_token(admin_id: int, email: str, config: Settings = settings) -> str:
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(admin_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


# 토큰 검증 (만료/서명 오류는 AuthenticationError)
def decode_access_token(token: str, config: Settings = settings) -> Dict[str, Any]:
    try:
        return jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=[config.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthenticationError("Session has expired, please log in again") from exc
    except jwt.PyJWTError as exc:
        raise AuthenticationError("Invalid session token") from exc
