import base64
import binascii
import logging
import math
import re
from datetime import datetime, timezone
from typing import List, Tuple

from sqlalchemy.orm import Session

from consult_admin.core.assets import HOSTED_URL_PATTERN, AssetHost
from consult_admin.core.exceptions import AssetError, InvalidContent, InvalidStateTransition, NotFound
from consult_admin.crud import service_crud
from consult_admin.models.service_model import Service
from consult_admin.schemas.service_schema import Pagination, ServiceCreate, ServiceWithImages
from consult_admin.services.log_service import LogService

logger = logging.getLogger(__name__)

# 본문 내 인라인 이미지 (data URI)
DATA_URI_PATTERN = re.compile(r'data:image/(jpeg|png|gif);base64,([^"]+)')
HOSTED_URL_RE = re.compile(HOSTED_URL_PATTERN)

MAX_IMAGE_BYTES = 5 * 1024 * 1024
IMAGE_FOLDER = "services"


def public_id_from_url(url: str) -> str:
    """Return the host-side id (``services/<name>``) of a hosted image URL."""

    name = url.split("/")[-1].split(".")[0]
    return f"{IMAGE_FOLDER}/{name}"


def process_images_in_content(content: str, asset_host: AssetHost) -> str:
    """Upload every inline base64 image and swap in its hosted URL.

    All images are decoded and size-checked before the first upload, so an
    invalid image leaves nothing behind on the host.
    """
    images = []
    for match in DATA_URI_PATTERN.finditer(content):
        mime_type = f"image/{match.group(1)}"
        try:
            data = base64.b64decode(match.group(2), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidContent("Invalid base64 image data in content") from exc
        if len(data) > MAX_IMAGE_BYTES:
            raise InvalidContent("An image in content exceeds 5MB. Please use a smaller image.")
        images.append((match.group(0), mime_type, data))

    modified = content
    for data_uri, mime_type, data in images:
        result = asset_host.upload(data, mime_type, folder=IMAGE_FOLDER)
        modified = modified.replace(data_uri, result["secure_url"])
    return modified


def hosted_image_urls(content: str) -> List[str]:
    return HOSTED_URL_RE.findall(content or "")


def check_pagination(page: int, limit: int):
    if page < 1 or limit < 1:
        raise InvalidContent("Invalid pagination parameters")


class ContentService:
    """
    서비스(상담 서비스 소개글) 관리 비즈니스 로직
    """
    def __init__(self, db: Session, asset_host: AssetHost):
        self.db = db
        self.asset_host = asset_host
        self.logs = LogService(db)

    # 입력값 검증 + 이미지 업로드 후 저장용 데이터 생성
    def _prepare(self, payload: ServiceCreate) -> dict:
        if not payload.title or not payload.content or not payload.category:
            raise InvalidContent("Title, content, and category are required")
        if not payload.category.strip():
            raise InvalidContent("Category must be a non-empty string")
        if payload.subcategory and not payload.subcategory.strip():
            raise InvalidContent("Subcategory must be a non-empty string")

        return {
            "title": payload.title,
            "content": process_images_in_content(payload.content, self.asset_host),
            "category": payload.category.strip(),
            "subcategory": payload.subcategory.strip() if payload.subcategory else "",
            "seo_keywords": payload.seo_keywords or [],
            "short_description": payload.short_description or "",
        }

    def _get(self, service_id: int) -> Service:
        service = service_crud.get_service(self.db, service_id)
        if not service:
            raise NotFound("Service not found")
        return service

    # 호스팅 이미지 메타데이터 첨부
    def _with_images(self, service: Service) -> ServiceWithImages:
        images = []
        for url in hosted_image_urls(service.content):
            public_id = public_id_from_url(url)
            try:
                meta = self.asset_host.resource(public_id)
            except AssetError:
                logger.exception("Error fetching image metadata for %s", public_id)
                images.append({"url": url, "error": "Failed to fetch image metadata"})
                continue
            images.append({
                "url": meta.get("secure_url"),
                "public_id": meta.get("public_id"),
                "format": meta.get("format"),
                "width": meta.get("width"),
                "height": meta.get("height"),
            })
        return ServiceWithImages.model_validate(service).model_copy(update={"images": images})

    # CREATE 서비스 등록
    def create_service(self, payload: ServiceCreate) -> Service:
        data = self._prepare(payload)
        data["is_deleted"] = False
        service = service_crud.create_service(self.db, data)
        self.logs.record("서비스 등록", "service", service.title)
        return service

    # UPDATE 서비스 수정 (전체 필드)
    def update_service(self, service_id: int, payload: ServiceCreate) -> Service:
        self._get(service_id)
        data = self._prepare(payload)
        data["updated_at"] = datetime.now(timezone.utc)
        service = service_crud.update_service(self.db, service_id, data)
        self.logs.record("서비스 수정", "service", service.title)
        return service

    # DELETE 소프트 삭제
    def soft_delete_service(self, service_id: int) -> Service:
        self._get(service_id)
        service = service_crud.update_service(
            self.db, service_id, {"is_deleted": True, "updated_at": datetime.now(timezone.utc)}
        )
        self.logs.record("서비스 삭제", "service", service.title)
        return service

    # UPDATE 복원
    def restore_service(self, service_id: int) -> Service:
        service = self._get(service_id)
        if not service.is_deleted:
            raise InvalidStateTransition("Service is not deleted")

        service = service_crud.update_service(
            self.db, service_id, {"is_deleted": False, "updated_at": datetime.now(timezone.utc)}
        )
        self.logs.record("서비스 복원", "service", service.title)
        return service

    # DELETE 완전 삭제 (호스팅 이미지 포함)
    def permanent_delete_service(self, service_id: int):
        service = self._get(service_id)
        title = service.title

        for url in hosted_image_urls(service.content):
            public_id = public_id_from_url(url)
            if not self.asset_host.destroy(public_id):
                logger.warning("Hosted image %s was not removed", public_id)

        service_crud.delete_service(self.db, service_id)
        self.logs.record("서비스 완전 삭제", "service", title)

    # READ 활성 서비스 전체 + 개수
    def list_services(self) -> Tuple[List[Service], int]:
        services = service_crud.get_services(self.db, is_deleted=False)
        return services, service_crud.count_services(self.db, is_deleted=False)

    # READ 삭제된 서비스 (페이지)
    def list_deleted_services(self, page: int, limit: int) -> Tuple[List[Service], Pagination]:
        check_pagination(page, limit)
        services = service_crud.get_services(
            self.db, is_deleted=True, skip=(page - 1) * limit, limit=limit
        )
        total = service_crud.count_services(self.db, is_deleted=True)
        return services, Pagination(total=total, page=page, pages=math.ceil(total / limit), limit=limit)

    # READ 단건 조회 (활성만)
    def get_service(self, service_id: int) -> Service:
        service = service_crud.get_active_service(self.db, service_id)
        if not service:
            raise NotFound("Service not found")
        return service

    # READ 카테고리별 조회 (이미지 메타데이터 포함)
    def services_by_category(self, category: str) -> List[ServiceWithImages]:
        if not category.strip():
            raise InvalidContent("Invalid category name")
        services = service_crud.get_services_by_category(self.db, category.strip())
        if not services:
            raise NotFound("No services found for this category")
        return [self._with_images(service) for service in services]

    # READ 하위 카테고리별 조회 (이미지 메타데이터 포함)
    def services_by_subcategory(self, subcategory: str) -> List[ServiceWithImages]:
        if not subcategory.strip():
            raise InvalidContent("Invalid subcategory")
        services = service_crud.get_services_by_subcategory(self.db, subcategory.strip())
        if not services:
            raise NotFound("No services found for this subcategory")
        return [self._with_images(service) for service in services]

    # READ SEO 키워드 검색 (쉼표 구분, 페이지)
    def search_services(self, keywords: str, page: int, limit: int) -> Tuple[List[Service], Pagination]:
        if not keywords:
            raise InvalidContent("Keywords are required")
        check_pagination(page, limit)

        keyword_list = [kw.strip() for kw in keywords.split(",") if kw.strip()]
        matched = service_crud.search_services_by_keywords(self.db, keyword_list)
        total = len(matched)
        start = (page - 1) * limit
        return (
            matched[start:start + limit],
            Pagination(total=total, page=page, pages=math.ceil(total / limit), limit=limit),
        )
