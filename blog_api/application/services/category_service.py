from dataclasses import dataclass
from typing import List, Optional
import logging

from ..ports.category_repo import CategoryRepository, CategoryDto
from ...exceptions import NotFoundError, ValidationError, store_boundary

logger = logging.getLogger(__name__)


@dataclass
class CategoryService:
    repo: CategoryRepository

    def _clean_name(self, name: Optional[str]) -> str:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        return name.strip()

    def list_all(self) -> List[CategoryDto]:
        with store_boundary("Failed to fetch categories"):
            return self.repo.list_all()

    def create(self, name: Optional[str]) -> CategoryDto:
        clean = self._clean_name(name)
        with store_boundary("Failed to create category"):
            category = self.repo.create(clean)
        logger.info(f"Created category {category.id} ({category.name})")
        return category

    def update(self, category_id: int, name: Optional[str]) -> CategoryDto:
        clean = self._clean_name(name)
        with store_boundary("Failed to update category"):
            category = self.repo.update(category_id, clean)
        if not category:
            raise NotFoundError("Category not found")
        return category

    def delete(self, category_id: int) -> CategoryDto:
        with store_boundary("Failed to delete category"):
            category = self.repo.delete(category_id)
        if not category:
            raise NotFoundError("Category not found")
        logger.info(f"Deleted category {category_id}")
        return category
