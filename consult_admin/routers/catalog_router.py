from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from consult_admin.core.database import get_db
from consult_admin.schemas.category_schema import CategoryResponse, SubcategoryResponse
from consult_admin.services.category_service import CategoryService

# 카테고리 조회 API 라우터 (사이트 프론트용)
router = APIRouter(prefix="/api/bilvani/get", tags=["Catalog"])


# 활성 카테고리 전체 조회
@router.get("/category", response_model=List[CategoryResponse])
def read_categories(db: Session = Depends(get_db)):
    return CategoryService(db).list_active_categories()


# 활성 하위 카테고리 전체 조회 (카테고리 순)
@router.get("/subcategory", response_model=List[SubcategoryResponse])
def read_all_subcategories(db: Session = Depends(get_db)):
    return CategoryService(db).list_all_active_subcategories()


# 삭제된 카테고리 조회
@router.get("/delete-category", response_model=List[CategoryResponse])
def read_deleted_categories(db: Session = Depends(get_db)):
    return CategoryService(db).list_deleted_categories()


# 특정 카테고리의 활성 하위 카테고리 조회
@router.get("/{category_id}/subcategories", response_model=List[SubcategoryResponse])
def read_subcategories(category_id: int, db: Session = Depends(get_db)):
    return CategoryService(db).list_active_subcategories(category_id)


# 특정 카테고리의 삭제된 하위 카테고리 조회
@router.get("/{category_id}/delete-subcategory", response_model=List[SubcategoryResponse])
def read_deleted_subcategories(category_id: int, db: Session = Depends(get_db)):
    return CategoryService(db).list_deleted_subcategories(category_id)
