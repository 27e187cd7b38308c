from typing import Optional

from pydantic import BaseModel


# 문의하기 폼 (필수값 검증은 서비스에서 처리)
class ContactForm(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


# 전문가 상담 폼
class ConsultForm(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    requirement: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


# 폼 처리 결과
class ContactResult(BaseModel):
    success: bool
    message: str
