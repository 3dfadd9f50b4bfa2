"""API routes for category management."""

from fastapi import APIRouter, Depends, Query, Response, status

from flashdeck.application.learning.dtos import CategoryRequest
from flashdeck.application.learning.services import CategoryService
from flashdeck.core import container
from flashdeck.infrastructure.common.di import inject_service
from flashdeck.infrastructure.common.schemas import IdResponse
from flashdeck.infrastructure.learning.schemas import (
    Category,
    CategoryCreateRequest,
    CategoryUpsertRequest,
)

router = APIRouter(tags=["categories"])

get_category_service = inject_service(container.category_service)


@router.get("", response_model=list[Category], status_code=status.HTTP_200_OK)
def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[Category]:
    """List every category, sorted by name."""
    return [Category.from_entity(category) for category in service.find_all()]


@router.get("/details", response_model=Category, status_code=status.HTTP_200_OK)
def get_category_by_name(
    name: str = Query(..., description="Exact category name"),
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """Get a category by its exact name."""
    return Category.from_entity(service.find_by_name(name))


@router.get("/lookup", response_model=IdResponse, status_code=status.HTTP_200_OK)
def lookup_category_id(
    name: str = Query(..., description="Exact category name"),
    service: CategoryService = Depends(get_category_service),
) -> IdResponse:
    """Resolve a category name to its ID."""
    return IdResponse(id=service.id_from_category_with_name(name))


@router.get("/{category_id}", response_model=Category, status_code=status.HTTP_200_OK)
def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """Get a category by ID."""
    return Category.from_entity(service.find_by_id(category_id))


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CategoryCreateRequest,
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """
    Create a category with a server-issued ID.

    Returns 409 if the name is already taken.
    """
    category = service.create_category(CategoryRequest(name=str(request.name)))
    return Category.from_entity(category)


@router.put("", response_model=Category, status_code=status.HTTP_200_OK)
def upsert_category(
    request: CategoryUpsertRequest,
    response: Response,
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """
    Insert or replace a category keyed by its ID.

    Responds 200 when the ID already existed and 201 when it was created.
    """
    category = request.to_entity()
    if not service.exists_by_id(category.id.value):
        response.status_code = status.HTTP_201_CREATED
    return Category.from_entity(service.save(category))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category together with its study sessions and flashcards."""
    service.delete_by_id(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
