"""Static in-process product catalog."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from supplement_compare.domain.products import ProductRecord
from supplement_compare.services.catalog import ProductCatalog

DEFAULT_PRODUCTS: Mapping[str, ProductRecord] = MappingProxyType(
    {
        "Sports Research": ProductRecord(
            brand="Sports Research",
            name="Alaskan Omega-3 Fish Oil (90 softgels)",
            source="Manual from product page",
            price=29.99,
            currency="USD",
            softgels=90,
            serving_softgels=1,
            omega3_per_serving_mg=1250,
            epa_per_serving_mg=690,
            dha_per_serving_mg=260,
        ),
        "NOW Foods": ProductRecord(
            brand="NOW Foods",
            name="Super Omega EPA (Double Strength) (180 softgels)",
            source="Manual from product page",
            price=24.99,
            currency="USD",
            softgels=180,
            serving_softgels=2,
            omega3_per_serving_mg=1000,
            epa_per_serving_mg=500,
            dha_per_serving_mg=250,
        ),
    }
)


@dataclass(frozen=True)
class StaticProductCatalog(ProductCatalog):
    """Catalog backed by an immutable mapping built at startup."""

    products: Mapping[str, ProductRecord]

    @classmethod
    def create(
        cls, products: Mapping[str, ProductRecord] | None = None
    ) -> "StaticProductCatalog":
        """Create a catalog, defaulting to the manually curated products."""
        source = DEFAULT_PRODUCTS if products is None else products
        return cls(products=MappingProxyType(dict(source)))

    def get(self, key: str) -> ProductRecord | None:
        """Return the product for a key, if listed."""
        return self.products.get(key)

    def items(self) -> Iterable[tuple[str, ProductRecord]]:
        """Return every (key, product) pair."""
        return list(self.products.items())
