from sqlalchemy import BigInteger, Integer, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from consult_admin.core.config import settings

# DB 접속 URL
DB_URL = settings.database_url


def build_engine(url: str):
    # SQLite 메모리 DB는 단일 커넥션 공유 (테스트/로컬 실행용)
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


# SQLAlchemy 엔진
engine = build_engine(DB_URL)

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()

# PK 타입 (SQLite 에서는 INTEGER 여야 자동 증가)
BigIntId = BigInteger().with_variant(Integer, "sqlite")


# DB 세션 의존성
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
