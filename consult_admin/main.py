# consult_admin/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from consult_admin.core.config import settings
from consult_admin.core.database import Base, engine
from consult_admin.core.exceptions import AdminError
from consult_admin.core.logging import setup_logging

# 모델 등록 (create_all 대상)
import consult_admin.models  # noqa: F401

from consult_admin.routers.category_router import router as category_router
from consult_admin.routers.catalog_router import router as catalog_router
from consult_admin.routers.service_router import router as service_router
from consult_admin.routers.auth_router import router as auth_router
from consult_admin.routers.contact_router import router as contact_router
from consult_admin.routers.log_router import router as log_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Consultancy Admin API", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(auth_router)
app.include_router(category_router)
app.include_router(catalog_router)
app.include_router(service_router)
app.include_router(contact_router)
app.include_router(log_router)


# --------------------------------
# 예외 처리
# --------------------------------
@app.exception_handler(AdminError)
async def admin_error_handler(request: Request, exc: AdminError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    setup_logging(settings)
    Base.metadata.create_all(bind=engine)
    logger.info("DB 테이블 자동 생성 완료")


@app.on_event("shutdown")
def on_shutdown():
    engine.dispose()
    logger.info("서버 종료")


def run():
    import uvicorn

    uvicorn.run("consult_admin.main:app", host="0.0.0.0", port=settings.SERVER_PORT)
