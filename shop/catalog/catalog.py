"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog backed by a single ordered list.

Features:
---------
- Add / delete by product id (id is the only uniqueness key)
- Substring search by product name, disambiguated with producer labels
- Substring search by producer, ordered by numeric product id

All searches are linear scans over the backing list. The catalog has no
internal locking; callers own it and access it one operation at a time.

==============================================================================
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Dict, List, Optional, Set

from .models import Product


# Module logger
logger = logging.getLogger(__name__)

# Signed 64-bit range for numeric ids
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

_NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


class Catalog:
    """
    In-memory product catalog.

    Holds products in arrival order. Deleting a product keeps the relative
    order of the remaining ones and frees its id for reuse.

    Attributes:
        products: Copy of all products in current order

    Example:
        >>> catalog = Catalog()
        >>> catalog.add_new_product(Product(id="1", name="Tea", producer="Acme"))
        True
        >>> catalog.list_products_by_name("Te")
        {'Tea'}
    """

    DEFAULT_NAME_LIMIT = 10
    DEFAULT_PRODUCER_LIMIT = 10

    def __init__(
        self,
        name_limit: int = DEFAULT_NAME_LIMIT,
        producer_limit: int = DEFAULT_PRODUCER_LIMIT,
        case_sensitive: bool = True,
    ) -> None:
        """
        Initialize an empty catalog.

        Args:
            name_limit: Maximum products scanned into a name search result
            producer_limit: Maximum names returned by a producer search
            case_sensitive: Compare search strings case-sensitively
        """
        self._products: List[Product] = []
        self._name_limit = name_limit
        self._producer_limit = producer_limit
        self._case_sensitive = case_sensitive

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return self._products.copy()

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return any(p.id == product_id for p in self._products)

    def __repr__(self) -> str:
        return f"Catalog(products={len(self._products)}, case_sensitive={self._case_sensitive})"

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_new_product(self, product: Product) -> bool:
        """
        Add a product to the catalog.

        Args:
            product: Product to add

        Returns:
            False if a product with the same id already exists, True otherwise
        """
        if product.id in self:
            logger.debug(f"Rejected duplicate product id: {product.id}")
            return False

        self._products.append(product)
        logger.info(f"Added product {product.id} ({product.name})")
        return True

    def delete_product(self, product_id: str) -> bool:
        """
        Delete the product with the given id.

        Args:
            product_id: Id of the product to remove

        Returns:
            True if the product existed, False otherwise
        """
        for index, product in enumerate(self._products):
            if product.id == product_id:
                del self._products[index]
                logger.info(f"Deleted product {product_id}")
                return True

        logger.debug(f"Delete skipped, product not found: {product_id}")
        return False

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def _contains(self, value: str, search_string: str) -> bool:
        """Substring test honoring the catalog's case sensitivity."""
        if self._case_sensitive:
            return search_string in value
        return search_string.casefold() in value.casefold()

    def list_products_by_name(self, search_string: str) -> Set[str]:
        """
        Search products whose name contains the given string.

        At most the first ``name_limit`` matches (in catalog order) are turned
        into labels. A match is labelled "<producer> - <name>" when its name
        is shared by another match, otherwise it is the bare name. Identical
        labels collapse, so fewer labels than scanned products may come back.

        Args:
            search_string: Substring to look for in product names

        Returns:
            Set of display labels
        """
        if not self._products:
            return set()

        matched = [p for p in self._products if self._contains(p.name, search_string)]
        name_counts = Counter(p.name for p in matched)

        labels = set()
        for product in matched[:self._name_limit]:
            if name_counts[product.name] > 1:
                labels.add(product.label())
            else:
                labels.add(product.name)

        return labels

    def list_products_by_producer(self, search_string: str) -> List[str]:
        """
        Search products whose producer contains the given string.

        Matches are ordered by the numeric value of their id (see
        :meth:`numeric_id`) and capped at ``producer_limit``.

        Args:
            search_string: Substring to look for in producer names

        Returns:
            Product names in id order, duplicates kept
        """
        if not self._products:
            return []

        matched = [p for p in self._products if self._contains(p.producer, search_string)]
        matched.sort(key=lambda p: self.numeric_id(p.id))

        return [p.name for p in matched[:self._producer_limit]]

    @staticmethod
    def numeric_id(value: str) -> int:
        """
        Parse a product id as a signed 64-bit integer.

        Ids that are not an optionally signed run of ASCII digits, or that
        overflow 64 bits, count as 0.

        Example:
            >>> Catalog.numeric_id("42")
            42
            >>> Catalog.numeric_id("sku-42")
            0
        """
        if not _NUMERIC_ID.fullmatch(value):
            return 0

        number = int(value)
        if number < _INT64_MIN or number > _INT64_MAX:
            return 0
        return number

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, product_id: str) -> Optional[Product]:
        """Find product by exact id."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        return {
            "total_products": len(self._products),
            "producers": len({p.producer for p in self._products}),
        }
