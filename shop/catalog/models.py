"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog items.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Immutable value record. Two products are considered the same catalog
    entry when their ``id`` matches, regardless of name or producer.

    Attributes:
        id: Unique identifier within a catalog
        name: Product display name
        producer: Producer (manufacturer) name
    """

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
        strict=True,
    )

    id: str = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product name")
    producer: str = Field(..., description="Producer name")

    def label(self) -> str:
        """Get the disambiguated display label "<producer> - <name>"."""
        return f"{self.producer} - {self.name}"
