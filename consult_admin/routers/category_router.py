from typing import Optional

from fastapi import APIRouter, Cookie, Depends, status
from sqlalchemy.orm import Session

from consult_admin.core.database import get_db
from consult_admin.schemas.category_schema import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    MessageResponse,
    SubcategoryName,
)
from consult_admin.services.category_service import CategoryService

# 카테고리 관리 API 라우터
router = APIRouter(prefix="/api/categories", tags=["Categories"])


# 요청자 쿠키 토큰을 작업자로 기록하는 서비스 의존성
def get_category_service(
    db: Session = Depends(get_db),
    token: Optional[str] = Cookie(None),
) -> CategoryService:
    return CategoryService(db, actor=token)


# 카테고리 생성 (쿠키 토큰 필수)
@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category: CategoryCreate,
    token: Optional[str] = Cookie(None),
    service: CategoryService = Depends(get_category_service),
):
    names = [sub.name for sub in category.subcategories]
    return service.create_category(category.name, names, token)


# 하위 카테고리 추가
@router.post("/{category_id}/subcategories", response_model=CategoryResponse)
def create_subcategory(
    category_id: int,
    body: SubcategoryName,
    service: CategoryService = Depends(get_category_service),
):
    return service.add_subcategory(category_id, body.subcategory)


# 카테고리 이름 수정
@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return service.rename_category(category_id, body.name)


# 하위 카테고리 이름 수정
@router.put("/{category_id}/subcategories/{subcategory_id}", response_model=MessageResponse)
def update_subcategory(
    category_id: int,
    subcategory_id: int,
    body: SubcategoryName,
    service: CategoryService = Depends(get_category_service),
):
    service.rename_subcategory(category_id, subcategory_id, body.subcategory)
    return MessageResponse(message="Subcategory updated successfully")


# 카테고리 소프트 삭제
@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    service.soft_delete_category(category_id)
    return MessageResponse(message="Category marked as deleted")


# 하위 카테고리 소프트 삭제
@router.delete("/{category_id}/subcategories/{subcategory_id}", response_model=CategoryResponse)
def delete_subcategory(
    category_id: int,
    subcategory_id: int,
    service: CategoryService = Depends(get_category_service),
):
    return service.soft_delete_subcategory(category_id, subcategory_id)


# 카테고리 복원
@router.put("/{category_id}/restore", response_model=MessageResponse)
def restore_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    service.restore_category(category_id)
    return MessageResponse(message="Category restored successfully")


# 하위 카테고리 복원
@router.put("/{category_id}/subcategories/{subcategory_id}/restore", response_model=CategoryResponse)
def restore_subcategory(
    category_id: int,
    subcategory_id: int,
    service: CategoryService = Depends(get_category_service),
):
    return service.restore_subcategory(category_id, subcategory_id)


# 카테고리 완전 삭제
@router.delete("/delete/category/{category_id}", response_model=MessageResponse)
def delete_category_completely(category_id: int, service: CategoryService = Depends(get_category_service)):
    service.hard_delete_category(category_id)
    return MessageResponse(message="Category deleted completely")


# 하위 카테고리 완전 삭제
@router.delete("/delete/{category_id}/subcategory/{subcategory_id}", response_model=MessageResponse)
def delete_subcategory_completely(
    category_id: int,
    subcategory_id: int,
    service: CategoryService = Depends(get_category_service),
):
    service.hard_delete_subcategory(category_id, subcategory_id)
    return MessageResponse(message="Subcategory deleted completely")
