from typing import List

from pydantic import BaseModel, Field, field_validator


# 하위 카테고리 입력 스키마
class SubcategoryBase(BaseModel):
    name: str = Field(min_length=1)


# 카테고리 생성 스키마 (하위 카테고리는 객체 또는 문자열 목록)
class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    subcategories: List[SubcategoryBase] = []

    @field_validator("subcategories", mode="before")
    @classmethod
    def _names_to_objects(cls, value):
        if value is None:
            return []
        return [{"name": item} if isinstance(item, str) else item for item in value]


# 카테고리 이름 수정 스키마
class CategoryUpdate(BaseModel):
    name: str = Field(min_length=1)


# 하위 카테고리 추가/수정 스키마
class SubcategoryName(BaseModel):
    subcategory: str = Field(min_length=1)


# 하위 카테고리 응답 스키마
class SubcategoryResponse(BaseModel):
    id: int
    name: str
    is_deleted: bool = Field(alias="isDeleted")

    class Config:
        from_attributes = True
        populate_by_name = True


# 카테고리 응답 스키마
class CategoryResponse(BaseModel):
    id: int
    name: str
    token: str
    is_deleted: bool = Field(alias="isDeleted")
    subcategories: List[SubcategoryResponse] = []

    class Config:
        from_attributes = True
        populate_by_name = True


# 단순 메시지 응답
class MessageResponse(BaseModel):
    message: str
