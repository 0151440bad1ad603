"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for catalog endpoints.

==============================================================================
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shop.catalog import Product


# Ids the /products/{product_id} routes cannot reach
RESERVED_IDS = frozenset({"stats", ".", ".."})


class ProductCreate(BaseModel):
    """
    Request body for adding a product.

    Ids must be addressable as a single path segment under /products, so
    slashes and the names of static routes are rejected.
    """

    id: str = Field(
        ...,
        min_length=1,
        pattern=r"^[^/]+$",
        description="Unique product identifier"
    )
    name: str = Field(..., description="Product name")
    producer: str = Field(..., description="Producer name")

    @field_validator("id")
    @classmethod
    def validate_id(cls, value: str) -> str:
        """Reject ids shadowed by static routes."""
        if value in RESERVED_IDS:
            raise ValueError(f"Product id '{value}' is reserved")
        return value

    def to_product(self) -> Product:
        """Build the catalog value from the request body."""
        return Product(id=self.id, name=self.name, producer=self.producer)


class ProductResponse(BaseModel):
    """Product representation returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    producer: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from Product model."""
        return cls.model_validate(product)


class ProductDetail(BaseModel):
    """Single product wrapped in a success envelope."""
    success: bool = Field(default=True)
    product: ProductResponse


class ProductListResponse(BaseModel):
    """All products in catalog order."""
    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[ProductResponse]


class NameSearchResponse(BaseModel):
    """
    Name search result.

    Labels come from a set; they are sorted only to keep the JSON stable.
    """
    success: bool = Field(default=True)
    query: str
    total: int = Field(ge=0)
    labels: List[str]


class ProducerSearchResponse(BaseModel):
    """Producer search result, names in id order."""
    success: bool = Field(default=True)
    query: str
    total: int = Field(ge=0)
    names: List[str]
