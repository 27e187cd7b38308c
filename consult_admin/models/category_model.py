from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates

from consult_admin.core.database import Base, BigIntId  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함


def utcnow():
    return datetime.now(timezone.utc)


class Category(Base):

    __tablename__ = "category"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigIntId, primary_key=True, autoincrement=True)

    # 카테고리 이름 (중복 허용)
    name = Column(String(255), nullable=False)

    # 생성 요청의 세션 쿠키 토큰 (생성자 기록용)
    token = Column(Text, nullable=False)

    # 소프트 삭제 플래그
    is_deleted = Column(Boolean, nullable=False, default=False)

    # 낙관적 잠금 버전 (저장할 때마다 증가)
    version = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # 하위 카테고리 (position 순서 유지, 카테고리와 함께 저장/삭제)
    subcategories = relationship(
        "Subcategory",
        back_populates="category",
        order_by="Subcategory.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}


class Subcategory(Base):

    __tablename__ = "subcategory"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigIntId, primary_key=True, autoincrement=True)

    # 소속 카테고리 FK (생성 후 변경 불가)
    category_id = Column(BigIntId, ForeignKey("category.id", ondelete="CASCADE"), nullable=False)

    # 하위 카테고리 이름
    name = Column(String(255), nullable=False)

    # 대소문자 무시 비교용 이름 (name 변경 시 자동 갱신)
    name_key = Column(String(255), nullable=False, index=True)

    # 카테고리 내 순서
    position = Column(Integer, nullable=False, default=0)

    # 소프트 삭제 플래그
    is_deleted = Column(Boolean, nullable=False, default=False)

    category = relationship("Category", back_populates="subcategories")

    @validates("name")
    def _sync_name_key(self, key, value):
        self.name_key = value.lower()
        return value
