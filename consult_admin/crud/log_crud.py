from typing import Optional

from sqlalchemy.orm import Session

from consult_admin.models.log_model import Log
from consult_admin.schemas.log_schema import LogCreate


# READ-ALL 로그 조회 (최신순, target_type=None 이면 전체)
def get_logs(db: Session, target_type: Optional[str] = None):
    query = db.query(Log)
    if target_type is not None:
        query = query.filter(Log.target_type == target_type)
    return query.order_by(Log.timestamp.desc(), Log.id.desc()).all()


# CREATE 새로운 로그 데이터 추가
def create_log(db: Session, log_data: LogCreate):
    new_log = Log(**log_data.model_dump())
    db.add(new_log)
    db.commit()
    db.refresh(new_log)
    return new_log
