from fastapi import APIRouter, Body, Depends
from typing import Any, Dict, List

from app.dependencies import get_subcategory_service
from app.schemas.common import MessageResponseSchema
from app.schemas.subcategory import SubcategoryResponseSchema, SubcategoryWithCategoryResponseSchema
from app.services.subcategory_service import SubcategoryService

router = APIRouter(
    prefix="/subcategories",
    tags=["Subcategories"]
)

@router.post(
    "",
    summary="Create new subcategory",
    response_model=SubcategoryResponseSchema
)
async def create_subcategory(
    payload: Dict[str, Any] = Body(...),
    service: SubcategoryService = Depends(get_subcategory_service)
):
    return await service.create(payload)

@router.get(
    "",
    summary="Get all subcategories with their category",
    response_model=List[SubcategoryWithCategoryResponseSchema]
)
async def get_subcategories(
    service: SubcategoryService = Depends(get_subcategory_service)
):
    return await service.list()

@router.get(
    "/category/{category_id}",
    summary="Get subcategories of a category",
    response_model=List[SubcategoryWithCategoryResponseSchema]
)
async def get_subcategories_by_category(
    category_id: str,
    service: SubcategoryService = Depends(get_subcategory_service)
):
    return await service.list_by_category(category_id)

@router.delete(
    "/{subcategory_id}",
    summary="Delete a subcategory",
    response_model=MessageResponseSchema
)
async def delete_subcategory(
    subcategory_id: str,
    service: SubcategoryService = Depends(get_subcategory_service)
):
    await service.delete(subcategory_id)
    return {"message": "Subcategory deleted"}
