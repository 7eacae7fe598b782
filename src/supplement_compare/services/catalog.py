"""Read-only product catalog interface."""

from collections.abc import Iterable
from typing import Protocol

from supplement_compare.domain.products import ProductRecord


class ProductCatalog(Protocol):
    """Lookup from product key to catalog record."""

    def get(self, key: str) -> ProductRecord | None:
        """Return the product for a key, or None when it is not listed."""

    def items(self) -> Iterable[tuple[str, ProductRecord]]:
        """Return every (key, product) pair in catalog order."""
