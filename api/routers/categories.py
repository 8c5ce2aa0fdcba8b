"""
Categories router.

This router contains endpoints for:
- GET /categories - List categories sorted by name
- GET /categories/can-add - Whether the Add button is enabled for a name
- POST /categories - Add a category
- DELETE /categories/{category_id} - Delete a category
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import get_manage_categories
from api.schemas import CategoryResponse, category_response
from application.use_cases import (
    CategoryNotFoundError,
    CategoryValidationError,
    DuplicateCategoryError,
    ManageCategoriesUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateCategoryRequest(BaseModel):
    """Request model for adding a category."""
    name: str


class CanAddResponse(BaseModel):
    name: str
    can_add: bool


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=List[CategoryResponse])
def list_categories_endpoint(
    categories: ManageCategoriesUseCase = Depends(get_manage_categories),
):
    return [category_response(c) for c in categories.list()]


@router.get("/can-add", response_model=CanAddResponse)
def can_add_category_endpoint(
    name: str = Query(..., description="Category name as typed"),
    categories: ManageCategoriesUseCase = Depends(get_manage_categories),
):
    return CanAddResponse(name=name, can_add=categories.can_add(name))


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category_endpoint(
    request: CreateCategoryRequest,
    categories: ManageCategoriesUseCase = Depends(get_manage_categories),
):
    """
    Add a category.

    Returns:
        The created category

    Raises:
        422 if the name is blank, 409 if it already exists
    """
    try:
        category = categories.add(request.name)
    except CategoryValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return category_response(category)


@router.delete("/{category_id}")
def delete_category_endpoint(
    category_id: str,
    categories: ManageCategoriesUseCase = Depends(get_manage_categories),
):
    try:
        category = categories.delete(category_id)
    except CategoryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "id": category.id, "message": "Category deleted"}
