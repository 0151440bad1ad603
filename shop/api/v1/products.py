"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for adding, deleting and searching catalog products.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query, status

from shop.catalog import Catalog
from shop.core import exceptions
from shop.core.dependencies import get_catalog
from shop.schemas.common import MessageResponse, SuccessResponse
from shop.schemas.product import (
    NameSearchResponse,
    ProducerSearchResponse,
    ProductCreate,
    ProductDetail,
    ProductListResponse,
    ProductResponse,
)


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    def add(self, payload: ProductCreate) -> ProductDetail:
        """Add a product, rejecting duplicate ids."""
        product = payload.to_product()
        if not self._catalog.add_new_product(product):
            raise exceptions.product_exists(product.id)

        return ProductDetail(product=ProductResponse.from_product(product))

    def delete(self, product_id: str) -> MessageResponse:
        """Delete a product by id."""
        if not self._catalog.delete_product(product_id):
            raise exceptions.product_not_found(product_id)

        return MessageResponse(message=f"Product '{product_id}' deleted")

    def list_products(self) -> ProductListResponse:
        """List all products in catalog order."""
        products = self._catalog.products
        return ProductListResponse(
            total=len(products),
            products=[ProductResponse.from_product(p) for p in products]
        )

    def get_by_id(self, product_id: str) -> ProductDetail:
        """Get product by id."""
        product = self._catalog.get(product_id)
        if product is None:
            raise exceptions.product_not_found(product_id)

        return ProductDetail(product=ProductResponse.from_product(product))

    def search_by_name(self, query: str) -> NameSearchResponse:
        """Search products by name."""
        labels = self._catalog.list_products_by_name(query)
        return NameSearchResponse(query=query, total=len(labels), labels=sorted(labels))

    def search_by_producer(self, query: str) -> ProducerSearchResponse:
        """Search products by producer."""
        names = self._catalog.list_products_by_producer(query)
        return ProducerSearchResponse(query=query, total=len(names), names=names)

    def get_stats(self) -> SuccessResponse:
        """Get catalog statistics."""
        return SuccessResponse(data=self._catalog.get_stats())


@router.post("", response_model=ProductDetail, status_code=status.HTTP_201_CREATED)
async def add_product(payload: ProductCreate, catalog: Catalog = Depends(get_catalog)):
    """Add a new product. Responds 409 when the id is already taken."""
    controller = ProductController(catalog)
    return controller.add(payload)


@router.get("", response_model=ProductListResponse)
async def list_products(catalog: Catalog = Depends(get_catalog)):
    """List all products."""
    controller = ProductController(catalog)
    return controller.list_products()


@router.get("/stats", response_model=SuccessResponse)
async def get_catalog_stats(catalog: Catalog = Depends(get_catalog)):
    """Get catalog statistics."""
    controller = ProductController(catalog)
    return controller.get_stats()


@router.get("/search/name", response_model=NameSearchResponse)
async def search_by_name(
    q: str = Query(..., min_length=1),
    catalog: Catalog = Depends(get_catalog)
):
    """Search products whose name contains the query."""
    controller = ProductController(catalog)
    return controller.search_by_name(q)


@router.get("/search/producer", response_model=ProducerSearchResponse)
async def search_by_producer(
    q: str = Query(..., min_length=1),
    catalog: Catalog = Depends(get_catalog)
):
    """Search products whose producer contains the query."""
    controller = ProductController(catalog)
    return controller.search_by_producer(q)


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(product_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get product by id."""
    controller = ProductController(catalog)
    return controller.get_by_id(product_id)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, catalog: Catalog = Depends(get_catalog)):
    """Delete a product. Responds 404 when the id is unknown."""
    controller = ProductController(catalog)
    return controller.delete(product_id)
