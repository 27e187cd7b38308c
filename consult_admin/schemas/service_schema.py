from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# 서비스 생성/수정 스키마
class ServiceCreate(BaseModel):
    title: str
    content: str
    category: str
    subcategory: Optional[str] = None
    seo_keywords: List[str] = Field(default_factory=list, alias="seoKeywords")
    short_description: str = Field(default="", alias="shortDescription")

    class Config:
        populate_by_name = True


# 서비스 응답 스키마
class ServiceResponse(BaseModel):
    id: int
    title: str
    content: str
    category: str
    subcategory: str
    seo_keywords: List[str] = Field(alias="seoKeywords")
    short_description: str = Field(alias="shortDescription")
    is_deleted: bool = Field(alias="isDeleted")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


# 이미지 메타데이터 포함 응답
class ServiceWithImages(ServiceResponse):
    images: List[Dict[str, Any]] = []


# 페이지 정보
class Pagination(BaseModel):
    total: int
    page: int
    pages: int
    limit: int


# 단건 응답
class ServiceEnvelope(BaseModel):
    message: str
    data: Optional[ServiceResponse] = None


# 목록 응답
class ServiceListEnvelope(BaseModel):
    message: str
    data: List[ServiceResponse]
    total: int


# 이미지 포함 목록 응답
class ServiceImagesEnvelope(BaseModel):
    message: str
    data: List[ServiceWithImages]


# 페이지 목록 응답
class ServicePageEnvelope(BaseModel):
    message: str
    data: List[ServiceResponse]
    pagination: Pagination
