from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from consult_admin.core.database import get_db
from consult_admin.schemas.log_schema import LogResponse
from consult_admin.services.log_service import LogService

# 작업 로그 API 라우터
router = APIRouter(prefix="/api/logs", tags=["Logs"])


# 전체 로그 조회 (최신순, 대상 종류로 필터 가능)
@router.get("", response_model=List[LogResponse])
def read_logs(target_type: Optional[str] = None, db: Session = Depends(get_db)):
    return LogService(db).list_logs(target_type)
