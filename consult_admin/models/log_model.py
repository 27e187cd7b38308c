from sqlalchemy import Column, DateTime, String, Text

from consult_admin.core.database import Base, BigIntId  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함


class Log(Base):

    __tablename__ = "log"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigIntId, primary_key=True, autoincrement=True)

    # 작업 관련 정보
    action = Column(String(100), nullable=False)       # 수행된 작업 (예: 카테고리 등록)
    target_type = Column(String(50), nullable=False)   # 대상 종류 (category / subcategory / service)
    target_name = Column(String(255), nullable=False)  # 대상 이름

    # 작업자 (생성 토큰 등, 옵션)
    actor = Column(Text, nullable=True)

    # 이벤트 발생 시간
    timestamp = Column(DateTime(timezone=True), nullable=False)
