from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from consult_admin.models.service_model import Service


# CREATE
def create_service(db: Session, service_data: dict):
    service = Service(**service_data)
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


# READ 단일 서비스 조회 (ID 기준)
def get_service(db: Session, service_id: int) -> Optional[Service]:
    return db.query(Service).filter(Service.id == service_id).first()


# READ 삭제되지 않은 단일 서비스 조회
def get_active_service(db: Session, service_id: int) -> Optional[Service]:
    return (
        db.query(Service)
        .filter(Service.id == service_id, Service.is_deleted.is_(False))
        .first()
    )


# READ-ALL 삭제 여부 기준 목록 조회
def get_services(db: Session, is_deleted: bool = False, skip: int = 0, limit: Optional[int] = None):
    query = db.query(Service).filter(Service.is_deleted.is_(is_deleted)).order_by(Service.id)
    if skip:
        query = query.offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def count_services(db: Session, is_deleted: bool = False) -> int:
    return db.query(Service).filter(Service.is_deleted.is_(is_deleted)).count()


# READ 카테고리 이름으로 조회 (대소문자 무시)
def get_services_by_category(db: Session, category: str):
    return (
        db.query(Service)
        .filter(func.lower(Service.category) == category.lower(), Service.is_deleted.is_(False))
        .order_by(Service.id)
        .all()
    )


# READ 하위 카테고리 이름으로 조회
def get_services_by_subcategory(db: Session, subcategory: str):
    return (
        db.query(Service)
        .filter(Service.subcategory == subcategory, Service.is_deleted.is_(False))
        .order_by(Service.id)
        .all()
    )


# READ SEO 키워드 부분 일치 검색 (대소문자 무시)
def search_services_by_keywords(db: Session, keywords: List[str]):
    needles = [kw.lower() for kw in keywords]
    matched = []
    for service in get_services(db, is_deleted=False):
        haystack = [kw.lower() for kw in (service.seo_keywords or [])]
        if any(needle in kw for needle in needles for kw in haystack):
            matched.append(service)
    return matched


# UPDATE 서비스 데이터 수정
def update_service(db: Session, service_id: int, update_data: dict):
    service = db.query(Service).filter(Service.id == service_id).first()
    if not service:
        return None

    for key, value in update_data.items():
        setattr(service, key, value)

    db.commit()
    db.refresh(service)
    return service


# DELETE 서비스 완전 삭제
def delete_service(db: Session, service_id: int):
    service = db.query(Service).filter(Service.id == service_id).first()
    if not service:
        return None

    db.delete(service)
    db.commit()
    return service
