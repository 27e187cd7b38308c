from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from consult_admin.core.assets import AssetHost, get_asset_host
from consult_admin.core.database import get_db
from consult_admin.schemas.category_schema import MessageResponse
from consult_admin.schemas.service_schema import (
    ServiceCreate,
    ServiceEnvelope,
    ServiceImagesEnvelope,
    ServiceListEnvelope,
    ServicePageEnvelope,
    ServiceResponse,
)
from consult_admin.services.content_service import ContentService

# 서비스(소개글) 관리 API 라우터
router = APIRouter(prefix="/api", tags=["Services"])


# ORM → 응답 스키마
def _out(service):
    return ServiceResponse.model_validate(service)


def get_content_service(
    db: Session = Depends(get_db),
    asset_host: AssetHost = Depends(get_asset_host),
) -> ContentService:
    return ContentService(db, asset_host)


# 서비스 등록 (본문 이미지 업로드 포함)
@router.post("/create/service", response_model=ServiceEnvelope, status_code=status.HTTP_201_CREATED)
def create_service(payload: ServiceCreate, service: ContentService = Depends(get_content_service)):
    created = service.create_service(payload)
    return ServiceEnvelope(message="Service added successfully", data=_out(created))


# 서비스 수정
@router.put("/create/update/service/{service_id}", response_model=ServiceEnvelope)
def update_service(
    service_id: int,
    payload: ServiceCreate,
    service: ContentService = Depends(get_content_service),
):
    updated = service.update_service(service_id, payload)
    return ServiceEnvelope(message="Service updated successfully", data=_out(updated))


# 서비스 소프트 삭제
@router.delete("/mark/delete/{service_id}", response_model=MessageResponse)
def delete_service(service_id: int, service: ContentService = Depends(get_content_service)):
    service.soft_delete_service(service_id)
    return MessageResponse(message="Service soft-deleted successfully")


# 서비스 완전 삭제
@router.delete("/permanent/delete/{service_id}", response_model=MessageResponse)
def permanent_delete_service(service_id: int, service: ContentService = Depends(get_content_service)):
    service.permanent_delete_service(service_id)
    return MessageResponse(message="Service permanently deleted successfully")


# 서비스 복원
@router.put("/restore/service/{service_id}", response_model=ServiceEnvelope)
def restore_service(service_id: int, service: ContentService = Depends(get_content_service)):
    restored = service.restore_service(service_id)
    return ServiceEnvelope(message="Service restored successfully", data=_out(restored))


# 활성 서비스 전체 조회
@router.get("/all/service", response_model=ServiceListEnvelope)
def read_services(service: ContentService = Depends(get_content_service)):
    services, total = service.list_services()
    return ServiceListEnvelope(message="Services retrieved successfully", data=[_out(s) for s in services], total=total)


# 삭제된 서비스 조회 (페이지)
@router.get("/mark/delete/service", response_model=ServicePageEnvelope)
def read_deleted_services(
    page: int = 1,
    limit: int = 10,
    service: ContentService = Depends(get_content_service),
):
    services, pagination = service.list_deleted_services(page, limit)
    return ServicePageEnvelope(
        message="Deleted services retrieved successfully", data=[_out(s) for s in services], pagination=pagination
    )


# 단일 서비스 조회
@router.get("/single/service/{service_id}", response_model=ServiceEnvelope)
def read_service(service_id: int, service: ContentService = Depends(get_content_service)):
    found = service.get_service(service_id)
    return ServiceEnvelope(message="Service retrieved successfully", data=_out(found))


# 카테고리별 서비스 조회
@router.get("/category/{category}", response_model=ServiceImagesEnvelope)
def read_services_by_category(category: str, service: ContentService = Depends(get_content_service)):
    services = service.services_by_category(category)
    return ServiceImagesEnvelope(message="Services retrieved successfully", data=services)


# 하위 카테고리별 서비스 조회
@router.get("/subcategory/{subcategory}", response_model=ServiceImagesEnvelope)
def read_services_by_subcategory(subcategory: str, service: ContentService = Depends(get_content_service)):
    services = service.services_by_subcategory(subcategory)
    return ServiceImagesEnvelope(message="Services retrieved successfully", data=services)


# SEO 키워드 검색
@router.get("/keyword/search", response_model=ServicePageEnvelope)
def search_services(
    keywords: str = "",
    page: int = 1,
    limit: int = 10,
    service: ContentService = Depends(get_content_service),
):
    services, pagination = service.search_services(keywords, page, limit)
    return ServicePageEnvelope(
        message="Services retrieved successfully", data=[_out(s) for s in services], pagination=pagination
    )
