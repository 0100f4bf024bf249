"""
Product API endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from portal.api.deps import get_current_identity, get_source, source_error
from portal.schemas.product import ProductListResponse, ProductDetailResponse
from portal.services.erp_client import RecordSource, RecordSourceError
from portal.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"], dependencies=[Depends(get_current_identity)])


def get_product_service(source: RecordSource = Depends(get_source)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(source)


@router.get("", response_model=ProductListResponse, summary="Get catalog")
async def get_products(
    sku: Optional[str] = Query(None, description="Case-insensitive SKU substring"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve the product catalog

    - **sku**: Only return products whose SKU contains this text (optional)
    """
    try:
        products = await service.list_products(sku)
    except RecordSourceError as e:
        raise source_error(e)
    return ProductListResponse(products=products)


@router.get("/{sku}", response_model=ProductDetailResponse, summary="Get product by SKU")
async def get_product(
    sku: str,
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve a specific product by exact SKU

    - **sku**: Product SKU (case-sensitive)
    """
    try:
        product = await service.get_product_by_sku(sku)
    except RecordSourceError as e:
        raise source_error(e)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with sku={sku} not found"
        )
    return ProductDetailResponse(product=product)
