import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from consult_admin.core.exceptions import (
    ConcurrentModification,
    DuplicateName,
    InvalidStateTransition,
    MissingProvenanceToken,
    NotFound,
)
from consult_admin.crud import category_crud
from consult_admin.models.category_model import Category, Subcategory
from consult_admin.services.log_service import LogService

logger = logging.getLogger(__name__)


class CategoryService:
    """
    카테고리/하위 카테고리 관련 비즈니스 로직을 관리하는 서비스 클래스

    - 활성 하위 카테고리 이름은 전체 카테고리에서 대소문자 무시 중복 불가 (생성 시 검사)
    - 이름 변경 시에는 같은 카테고리 안에서만 중복 검사 (삭제된 항목 포함)
    - 소프트 삭제/복원은 자기 플래그만 변경 (카테고리 삭제가 하위로 전파되지 않음)
    - 모든 변경은 소유 카테고리 단위로 읽고-수정-저장, 버전 충돌 시 ConcurrentModification
    """
    def __init__(self, db: Session, actor: Optional[str] = None):
        self.db = db
        self.actor = actor
        self.logs = LogService(db)

    # 카테고리 조회 (없으면 NotFound)
    def _get_category(self, category_id: int) -> Category:
        category = category_crud.get_category(self.db, category_id)
        if not category:
            raise NotFound("Category not found")
        return category

    @staticmethod
    def _get_subcategory(category: Category, subcategory_id: int) -> Subcategory:
        for subcategory in category.subcategories:
            if subcategory.id == subcategory_id:
                return subcategory
        raise NotFound("Subcategory not found")

    def _ensure_globally_unique(self, name: str):
        if category_crud.find_categories_by_subcategory_name(self.db, name, active_only=True):
            raise DuplicateName("Subcategory with this name already exists globally")

    # 버전 충돌 → 롤백 후 ConcurrentModification
    def _write(self, category_id: int, write):
        try:
            return write()
        except StaleDataError as exc:
            self.db.rollback()
            logger.warning("Concurrent update on category %s", category_id)
            raise ConcurrentModification(
                "Category was modified by another request, please retry"
            ) from exc

    def _save(self, category: Category) -> Category:
        return self._write(category.id, lambda: category_crud.save_category(self.db, category))

    # CREATE 카테고리 생성
    def create_category(self, name: str, subcategory_names: List[str], token: Optional[str]) -> Category:
        if not token:
            raise MissingProvenanceToken("Token not found in cookies")

        seen = set()
        for sub_name in subcategory_names:
            if sub_name.lower() in seen:
                raise DuplicateName("Subcategory name must be unique within the category")
            seen.add(sub_name.lower())
            self._ensure_globally_unique(sub_name)

        category = category_crud.insert_category(self.db, name, subcategory_names, token)
        logger.info("Category %s created with %d subcategories", category.id, len(subcategory_names))
        self.logs.record("카테고리 등록", "category", category.name, token)
        return category

    # CREATE 기존 카테고리에 하위 카테고리 추가
    def add_subcategory(self, category_id: int, name: str) -> Category:
        self._ensure_globally_unique(name)
        category = self._get_category(category_id)

        category.subcategories.append(Subcategory(name=name, is_deleted=False))
        category = self._save(category)
        self.logs.record("하위 카테고리 등록", "subcategory", f"{category.name}/{name}", self.actor)
        return category

    # UPDATE 카테고리 이름 변경
    def rename_category(self, category_id: int, new_name: str) -> Category:
        category = self._get_category(category_id)
        old_name = category.name

        category.name = new_name
        category = self._save(category)
        self.logs.record(f"카테고리 수정 ('{old_name}' → '{new_name}')", "category", new_name, self.actor)
        return category

    # UPDATE 하위 카테고리 이름 변경 (같은 카테고리 안에서만 중복 검사)
    def rename_subcategory(self, category_id: int, subcategory_id: int, new_name: str) -> Subcategory:
        category = self._get_category(category_id)
        target = self._get_subcategory(category, subcategory_id)

        key = new_name.lower()
        for other in category.subcategories:
            if other.id != target.id and other.name_key == key:
                raise DuplicateName("Subcategory name must be unique within the category")

        old_name = target.name
        target.name = new_name
        category = self._save(category)
        self.logs.record(
            f"하위 카테고리 수정 ('{old_name}' → '{new_name}')",
            "subcategory",
            f"{category.name}/{new_name}",
            self.actor,
        )
        return self._get_subcategory(category, subcategory_id)

    # DELETE 카테고리 소프트 삭제
    def soft_delete_category(self, category_id: int) -> Category:
        category = self._get_category(category_id)
        if category.is_deleted:
            raise InvalidStateTransition("Category is already marked as deleted")

        category.is_deleted = True
        category = self._save(category)
        self.logs.record("카테고리 삭제", "category", category.name, self.actor)
        return category

    # UPDATE 카테고리 복원
    def restore_category(self, category_id: int) -> Category:
        category = self._get_category(category_id)
        if not category.is_deleted:
            raise InvalidStateTransition("Category is not marked as deleted")

        category.is_deleted = False
        category = self._save(category)
        self.logs.record("카테고리 복원", "category", category.name, self.actor)
        return category

    # DELETE 하위 카테고리 소프트 삭제
    def soft_delete_subcategory(self, category_id: int, subcategory_id: int) -> Category:
        category = self._get_category(category_id)
        subcategory = self._get_subcategory(category, subcategory_id)
        if subcategory.is_deleted:
            raise InvalidStateTransition("Subcategory is already marked as deleted")

        subcategory.is_deleted = True
        name = subcategory.name
        category = self._save(category)
        self.logs.record("하위 카테고리 삭제", "subcategory", f"{category.name}/{name}", self.actor)
        return category

    # UPDATE 하위 카테고리 복원
    def restore_subcategory(self, category_id: int, subcategory_id: int) -> Category:
        category = self._get_category(category_id)
        subcategory = self._get_subcategory(category, subcategory_id)
        if not subcategory.is_deleted:
            raise InvalidStateTransition("Subcategory is not marked as deleted")

        subcategory.is_deleted = False
        name = subcategory.name
        category = self._save(category)
        self.logs.record("하위 카테고리 복원", "subcategory", f"{category.name}/{name}", self.actor)
        return category

    # DELETE 카테고리 완전 삭제 (하위 카테고리 포함)
    def hard_delete_category(self, category_id: int) -> Category:
        category = self._get_category(category_id)
        name = category.name

        self._write(category_id, lambda: category_crud.delete_category(self.db, category_id))
        logger.info("Category %s deleted completely", category_id)
        self.logs.record("카테고리 완전 삭제", "category", name, self.actor)
        return category

    # DELETE 하위 카테고리 완전 삭제 (순서 재정렬)
    def hard_delete_subcategory(self, category_id: int, subcategory_id: int) -> Category:
        category = self._get_category(category_id)
        subcategory = self._get_subcategory(category, subcategory_id)

        name = subcategory.name
        category.subcategories.remove(subcategory)
        category = self._save(category)
        self.logs.record("하위 카테고리 완전 삭제", "subcategory", f"{category.name}/{name}", self.actor)
        return category

    # READ 활성 카테고리 목록
    def list_active_categories(self) -> List[Category]:
        return category_crud.get_categories(self.db, is_deleted=False)

    # READ 삭제된 카테고리 목록
    def list_deleted_categories(self) -> List[Category]:
        return category_crud.get_categories(self.db, is_deleted=True)

    # READ 특정 카테고리의 활성 하위 카테고리
    def list_active_subcategories(self, category_id: int) -> List[Subcategory]:
        category = self._get_category(category_id)
        return [sub for sub in category.subcategories if not sub.is_deleted]

    # READ 특정 카테고리의 삭제된 하위 카테고리
    def list_deleted_subcategories(self, category_id: int) -> List[Subcategory]:
        category = self._get_category(category_id)
        return [sub for sub in category.subcategories if sub.is_deleted]

    # READ 활성 카테고리의 활성 하위 카테고리 전체 (카테고리 순 → 등록 순)
    def list_all_active_subcategories(self) -> List[Subcategory]:
        return [
            sub
            for category in self.list_active_categories()
            for sub in category.subcategories
            if not sub.is_deleted
        ]
