import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from consult_admin.core.config import settings
from consult_admin.core.exceptions import AdminError
from consult_admin.core.mailer import Mailer, get_mailer
from consult_admin.schemas.contact_schema import ConsultForm, ContactForm, ContactResult
from consult_admin.services.contact_service import ContactService

logger = logging.getLogger(__name__)

# 문의 메일 API 라우터
router = APIRouter(prefix="/api", tags=["Contact"])

SENT = "Your message has been sent successfully"


def get_contact_service(mailer: Mailer = Depends(get_mailer)) -> ContactService:
    return ContactService(mailer, settings)


# 폼 응답은 항상 {success, message} 형태
def _failure(exc: AdminError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ContactResult(success=False, message=exc.message).model_dump(),
    )


# 문의하기
@router.post("/contact", response_model=ContactResult)
def contact_us(form: ContactForm, service: ContactService = Depends(get_contact_service)):
    try:
        service.send_contact(form)
    except AdminError as exc:
        logger.warning("Contact form rejected: %s", exc.message)
        return _failure(exc)
    return ContactResult(success=True, message=SENT)


# 전문가 상담 신청
@router.post("/consult/expert", response_model=ContactResult)
def consult_expert(form: ConsultForm, service: ContactService = Depends(get_contact_service)):
    try:
        service.send_consult(form)
    except AdminError as exc:
        logger.warning("Consult form rejected: %s", exc.message)
        return _failure(exc)
    return ContactResult(success=True, message=SENT)
