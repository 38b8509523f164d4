from fastapi import APIRouter, Depends

from ..application.ports.category_repo import CategoryDto
from ..application.ports.identity_provider import Identity
from ..application.services.category_service import CategoryService
from ..dependencies import get_category_service, require_admin
from ..schemas.categories.category import (
    CategoryListResponse,
    CategoryMutationResponse,
    CategoryResponse,
    CategoryWrite,
)

router = APIRouter(prefix="/auth/categories", tags=["Categories"])


def _to_response(c: CategoryDto) -> CategoryResponse:
    return CategoryResponse(id=c.id, name=c.name)


@router.get("", response_model=CategoryListResponse)
def list_categories(categories: CategoryService = Depends(get_category_service)):
    return CategoryListResponse(categories=[_to_response(c) for c in categories.list_all()])


@router.post("", response_model=CategoryMutationResponse, status_code=201)
def create_category(
    body: CategoryWrite,
    admin: Identity = Depends(require_admin),
    categories: CategoryService = Depends(get_category_service),
):
    category = categories.create(body.name)
    return CategoryMutationResponse(message="Category created successfully", category=_to_response(category))


@router.put("/{category_id}", response_model=CategoryMutationResponse)
def update_category(
    category_id: int,
    body: CategoryWrite,
    admin: Identity = Depends(require_admin),
    categories: CategoryService = Depends(get_category_service),
):
    category = categories.update(category_id, body.name)
    return CategoryMutationResponse(message="Category updated successfully", category=_to_response(category))


@router.delete("/{category_id}", response_model=CategoryMutationResponse)
def delete_category(
    category_id: int,
    admin: Identity = Depends(require_admin),
    categories: CategoryService = Depends(get_category_service),
):
    category = categories.delete(category_id)
    return CategoryMutationResponse(message="Category deleted successfully", category=_to_response(category))
