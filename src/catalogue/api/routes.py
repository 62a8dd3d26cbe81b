"""FastAPI endpoints for the Catalogue domain."""

import json

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CreateProductRequest,
    ProductCardResponse,
    ProductIdResponse,
    ProductPageResponse,
    ProductResponse,
    RecordSaleRequest,
    StatusResponse,
)
from catalogue.product.creation import CreateProduct
from catalogue.product.publishing import PublishProduct, UnpublishProduct
from catalogue.product.queries import (
    get_all_categories,
    get_product_by_slug,
    get_products_by_tag,
    get_products_for_card,
    get_related_products_by_category,
)
from catalogue.product.sales import RecordProductSale

product_router = APIRouter(prefix="/products", tags=["products"])


# --- Storefront reads ---


@product_router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    return get_all_categories()


@product_router.get("/cards", response_model=list[ProductCardResponse])
async def list_product_cards(tag: str, limit: int = Query(4, ge=1)) -> list[ProductCardResponse]:
    return [ProductCardResponse(**card) for card in get_products_for_card(tag=tag, limit=limit)]


@product_router.get("/tags/{tag}", response_model=list[ProductResponse])
async def list_products_by_tag(tag: str, limit: int = Query(10, ge=1)) -> list[ProductResponse]:
    return [ProductResponse(**product) for product in get_products_by_tag(tag=tag, limit=limit)]


@product_router.get("/slug/{slug}", response_model=ProductResponse)
async def product_by_slug(slug: str) -> ProductResponse:
    return ProductResponse(**get_product_by_slug(slug))


@product_router.get("/related", response_model=ProductPageResponse)
async def related_products(
    category: str,
    product_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(4, ge=1),
) -> ProductPageResponse:
    result = get_related_products_by_category(category=category, product_id=product_id, limit=limit, page=page)
    return ProductPageResponse(
        data=[ProductResponse(**product) for product in result["data"]],
        total_pages=result["total_pages"],
    )


# --- Admin writes ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: CreateProductRequest) -> ProductIdResponse:
    command = CreateProduct(
        name=body.name,
        slug=body.slug,
        category=body.category,
        brand=body.brand,
        description=body.description,
        tags=json.dumps(body.tags),
        images=json.dumps(body.images),
        price=body.price,
        list_price=body.list_price,
        count_in_stock=body.count_in_stock,
        is_published=body.is_published,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}/publish", response_model=StatusResponse)
async def publish_product(product_id: str) -> StatusResponse:
    current_domain.process(PublishProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/unpublish", response_model=StatusResponse)
async def unpublish_product(product_id: str) -> StatusResponse:
    current_domain.process(UnpublishProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.post("/{product_id}/sales", status_code=201, response_model=StatusResponse)
async def record_sale(product_id: str, body: RecordSaleRequest) -> StatusResponse:
    command = RecordProductSale(product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
