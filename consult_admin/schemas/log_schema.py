from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# 기본 로그 데이터 스키마 (공통 필드 정의)
class LogBase(BaseModel):
    action: str                      # 작업 종류 (예: 카테고리 등록)
    target_type: str                 # 대상 종류
    target_name: str                 # 대상 이름
    actor: Optional[str] = None      # 작업자 (옵션)
    timestamp: datetime              # 이벤트 발생 시각


# 로그 생성 요청 시 사용 (입력용)
class LogCreate(LogBase):
    pass


# 로그 조회 응답 시 사용 (출력용)
class LogResponse(LogBase):
    id: int

    class Config:
        from_attributes = True
