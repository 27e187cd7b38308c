from pydantic import BaseModel, EmailStr, Field


# 관리자 가입 요청 (OTP 발송)
class SignupRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


# OTP 확인 요청
class VerifyRequest(BaseModel):
    email: EmailStr
    otp: str = Field(min_length=1)


# 로그인 요청
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


# 비밀번호 찾기 요청
class ForgotPasswordRequest(BaseModel):
    email: EmailStr


# 비밀번호 재설정 요청
class ResetPasswordRequest(BaseModel):
    email: EmailStr
    otp: str = Field(min_length=1)
    new_password: str = Field(min_length=6, alias="newPassword")

    class Config:
        populate_by_name = True


# 토큰 응답
class TokenResponse(BaseModel):
    message: str
    token: str


# 로그인한 관리자 정보
class AdminResponse(BaseModel):
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True
