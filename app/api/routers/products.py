# app/api/routers/products.py
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response

from app.api.deps import get_product_service
from app.domain.schemas import ProductView
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])

# zakres kolumny INTEGER / BIGINT
MAX_PRODUCT_ID = 2**63 - 1


#statyczne sciezki przed /{product_id}, inaczej "search" trafia w walidacje int
@router.get("", response_model=list[ProductView])
def list_products(svc: ProductService = Depends(get_product_service)):
    return svc.list_products()


@router.get("/search", response_model=list[ProductView])
def search_products(
    name: str = Query(..., min_length=1),
    svc: ProductService = Depends(get_product_service),
):
    return svc.search_products(name)


@router.get("/price-range", response_model=list[ProductView])
def get_products_by_price_range(
    min_price: Decimal = Query(..., alias="min", ge=0),
    max_price: Decimal = Query(..., alias="max", ge=0),
    svc: ProductService = Depends(get_product_service),
):
    try:
        return svc.get_products_by_price_range(min_price, max_price)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/{product_id}",
    response_model=ProductView,
    responses={404: {"description": "Product not found (empty body)"}},
)
def get_product(
    product_id: int = Path(..., gt=0, le=MAX_PRODUCT_ID),
    svc: ProductService = Depends(get_product_service),
):
    product = svc.get_product_by_id(product_id)
    if product is None:
        return Response(status_code=404)
    return product
