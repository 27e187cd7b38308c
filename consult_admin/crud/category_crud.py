from typing import List, Optional

from sqlalchemy.orm import Session

from consult_admin.models.category_model import Category, Subcategory, utcnow


# CREATE 새로운 카테고리 추가 (하위 카테고리 포함)
def insert_category(db: Session, name: str, subcategory_names: List[str], token: str):
    category = Category(name=name, token=token, is_deleted=False)
    for sub_name in subcategory_names:
        category.subcategories.append(Subcategory(name=sub_name, is_deleted=False))
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


# READ 특정 카테고리 ID로 조회
def get_category(db: Session, category_id: int) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


# READ 하위 카테고리 이름으로 카테고리 조회 (대소문자 무시)
def find_categories_by_subcategory_name(db: Session, name: str, active_only: bool = True):
    query = (
        db.query(Category)
        .join(Subcategory, Subcategory.category_id == Category.id)
        .filter(Subcategory.name_key == name.lower())
    )
    if active_only:
        query = query.filter(Subcategory.is_deleted.is_(False))
    return query.distinct().order_by(Category.id).all()


# UPDATE 카테고리 전체(하위 카테고리 포함) 저장
def save_category(db: Session, category: Category):
    # updated_at 갱신 → 항상 UPDATE 발생 → 버전 검사
    category.updated_at = utcnow()
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


# DELETE 카테고리 완전 삭제
def delete_category(db: Session, category_id: int) -> Optional[Category]:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        return None

    db.delete(category)
    db.commit()
    return category


# READ-ALL 카테고리 목록 조회 (is_deleted=None 이면 전체)
def get_categories(db: Session, is_deleted: Optional[bool] = None):
    query = db.query(Category)
    if is_deleted is not None:
        query = query.filter(Category.is_deleted.is_(is_deleted))
    return query.order_by(Category.id).all()
