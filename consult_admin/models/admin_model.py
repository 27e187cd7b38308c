from sqlalchemy import Column, DateTime, String

from consult_admin.core.database import Base, BigIntId  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from consult_admin.models.category_model import utcnow


class Admin(Base):

    __tablename__ = "admin"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigIntId, primary_key=True, autoincrement=True)

    name = Column(String(100), nullable=False)

    # 로그인 이메일 (소문자 저장, 중복 불가)
    email = Column(String(255), nullable=False, unique=True)

    # scrypt 해시
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Otp(Base):

    __tablename__ = "otp"  # DB 테이블명 지정

    id = Column(BigIntId, primary_key=True, autoincrement=True)

    # 발송 대상 이메일
    email = Column(String(255), nullable=False, index=True)

    # 용도: signup / reset
    purpose = Column(String(20), nullable=False)

    otp = Column(String(10), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    # 가입 대기 정보 (signup 용도일 때만)
    pending_name = Column(String(100), nullable=True)
    pending_password_hash = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
