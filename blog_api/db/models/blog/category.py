# blog_api/db/models/blog/category.py
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship

class Category(SQLModel, table=True):
    __tablename__ = "categories"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)

    posts: List["Post"] = Relationship(back_populates="category")
