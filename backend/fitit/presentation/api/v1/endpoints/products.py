"""Product CRUD endpoints.

Application errors (not found, duplicates, storage failures) propagate to the
``AppError`` handler registered in ``fitit.main``.
"""

from fastapi import APIRouter, Depends, Query, status

from fitit.application.schemas import ProductCreate, ProductResponse, ProductUpdate
from fitit.application.services import ProductService
from fitit.infrastructure.dependencies import get_product_service

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    limit: int | None = Query(None, ge=1, le=1000),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    """Retrieve all products (optionally capped)."""
    products = await service.list_products(limit=limit)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/search", response_model=list[ProductResponse])
async def search_products(
    q: str = Query(..., min_length=1, description="Text to find in name or description"),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    products = await service.search_products(q)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/top-rated", response_model=list[ProductResponse])
async def top_rated_products(
    limit: int = Query(10, ge=1, le=100),
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    products = await service.top_rated(limit)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/category/{category}", response_model=list[ProductResponse])
async def products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service),
) -> list[ProductResponse]:
    products = await service.list_by_category(category)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Retrieve a single product by ID."""
    product = await service.get_product(product_id)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a new product."""
    product = await service.create_product(data)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Update an existing product — only supplied fields change."""
    product = await service.update_product(product_id, data)
    return ProductResponse.model_validate(product, from_attributes=True)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete a product by ID."""
    await service.delete_product(product_id)
