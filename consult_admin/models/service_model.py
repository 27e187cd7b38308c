from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text

from consult_admin.core.database import Base, BigIntId  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from consult_admin.models.category_model import utcnow


class Service(Base):

    __tablename__ = "service"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigIntId, primary_key=True, autoincrement=True)

    # 제목 / 본문(HTML)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    # 카테고리 / 하위 카테고리 이름
    category = Column(String(255), nullable=False)
    subcategory = Column(String(255), nullable=False, default="")

    # SEO 키워드 목록
    seo_keywords = Column(JSON, nullable=False, default=list)

    # 요약 설명
    short_description = Column(Text, nullable=False, default="")

    # 소프트 삭제 플래그
    is_deleted = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
