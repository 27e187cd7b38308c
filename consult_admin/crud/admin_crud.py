from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from consult_admin.models.admin_model import Admin, Otp


# READ 이메일로 관리자 조회
def get_admin_by_email(db: Session, email: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.email == email.lower()).first()


# CREATE 관리자 등록
def create_admin(db: Session, name: str, email: str, password_hash: str):
    admin = Admin(name=name, email=email.lower(), password_hash=password_hash)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


# UPDATE 비밀번호 변경
def update_password(db: Session, admin: Admin, password_hash: str):
    admin.password_hash = password_hash
    db.commit()
    db.refresh(admin)
    return admin


# CREATE OTP 저장 (같은 용도의 이전 OTP 는 삭제)
def store_otp(
    db: Session,
    email: str,
    purpose: str,
    otp: str,
    expires_at: datetime,
    pending_name: Optional[str] = None,
    pending_password_hash: Optional[str] = None,
):
    db.query(Otp).filter(Otp.email == email.lower(), Otp.purpose == purpose).delete()
    record = Otp(
        email=email.lower(),
        purpose=purpose,
        otp=otp,
        expires_at=expires_at,
        pending_name=pending_name,
        pending_password_hash=pending_password_hash,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


# READ 최신 OTP 조회
def get_latest_otp(db: Session, email: str, purpose: str) -> Optional[Otp]:
    return (
        db.query(Otp)
        .filter(Otp.email == email.lower(), Otp.purpose == purpose)
        .order_by(Otp.id.desc())
        .first()
    )


# DELETE OTP 사용 처리
def delete_otp(db: Session, record: Otp):
    db.delete(record)
    db.commit()
