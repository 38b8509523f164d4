from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol


@dataclass
class PostDto:
    id: int
    image: Optional[str]
    category: str
    title: str
    description: str
    date: datetime
    content: str
    status: str
    likes_count: int


@dataclass
class PostInput:
    title: str
    image: Optional[str]
    category_id: int
    description: str
    content: str
    status_id: int


class PostRepository(Protocol):
    def search(self, category: Optional[str], keyword: Optional[str], limit: int, offset: int) -> List[PostDto]:
        ...

    def count(self, category: Optional[str], keyword: Optional[str]) -> int:
        ...

    def get_by_id(self, post_id: int) -> Optional[PostDto]:
        ...

    def exists(self, post_id: int) -> bool:
        ...

    def create(self, data: PostInput) -> int:
        ...

    def update(self, post_id: int, data: PostInput, date: datetime) -> bool:
        ...

    def delete(self, post_id: int) -> bool:
        ...
