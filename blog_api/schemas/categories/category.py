# blog_api/schemas/categories/category.py
from pydantic import BaseModel
from typing import List, Optional

class CategoryWrite(BaseModel):
    name: Optional[str] = None

class CategoryResponse(BaseModel):
    id: int
    name: str

class CategoryListResponse(BaseModel):
    categories: List[CategoryResponse]

class CategoryMutationResponse(BaseModel):
    message: str
    category: CategoryResponse
