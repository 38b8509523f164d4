from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class CategoryDto:
    id: int
    name: str


class CategoryRepository(Protocol):
    def list_all(self) -> List[CategoryDto]:
        ...

    def create(self, name: str) -> CategoryDto:
        ...

    def update(self, category_id: int, name: str) -> Optional[CategoryDto]:
        ...

    def delete(self, category_id: int) -> Optional[CategoryDto]:
        ...
