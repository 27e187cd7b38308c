from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from consult_admin.crud import log_crud
from consult_admin.schemas.log_schema import LogCreate


class LogService:
    def __init__(self, db: Session):
        self.db = db  # DB 세션

    # CREATE 작업 로그 기록
    def record(self, action: str, target_type: str, target_name: str, actor: Optional[str] = None):
        return log_crud.create_log(
            self.db,
            LogCreate(
                action=action,
                target_type=target_type,
                target_name=target_name,
                actor=actor,
                timestamp=datetime.now(timezone.utc),
            ),
        )

    # READ 로그 조회 (대상 종류 필터 가능)
    def list_logs(self, target_type: Optional[str] = None):
        return log_crud.get_logs(self.db, target_type)
