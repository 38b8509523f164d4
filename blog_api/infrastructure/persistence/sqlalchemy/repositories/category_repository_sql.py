from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Category
from .....application.ports.category_repo import CategoryDto, CategoryRepository


class SqlCategoryRepository(CategoryRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, c: Category) -> CategoryDto:
        return CategoryDto(id=c.id, name=c.name)

    def list_all(self) -> List[CategoryDto]:
        rows = self.session.exec(select(Category).order_by(Category.id)).all()
        return [self._to_dto(c) for c in rows]

    def create(self, name: str) -> CategoryDto:
        category = Category(name=name)
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        return self._to_dto(category)

    def update(self, category_id: int, name: str) -> Optional[CategoryDto]:
        category = self.session.get(Category, category_id)
        if not category:
            return None
        category.name = name
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        return self._to_dto(category)

    def delete(self, category_id: int) -> Optional[CategoryDto]:
        category = self.session.get(Category, category_id)
        if not category:
            return None
        dto = self._to_dto(category)
        self.session.delete(category)
        self.session.commit()
        return dto
