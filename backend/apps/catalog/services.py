from __future__ import annotations

from typing import List, Optional

from apps.common import get_logger
from .dtos import ProductDTO, ProductSlugDTO, ProductSummaryDTO
from .mappers import ProductMapper
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class CatalogService:
    """Read-only catalog access.

    Every read runs one query, maps the rows to DTOs and rewrites image
    references to absolute URLs. Data-source errors are not caught here; the
    API exception handler reports them.
    """

    def __init__(
        self,
        products: ProductRepositoryProtocol,
        mapper: Optional[ProductMapper] = None,
    ):
        self.products = products
        self.mapper = mapper or ProductMapper()
        self.logger = logger.bind(service="CatalogService")

    def get_product_by_slug(self, slug: str) -> Optional[ProductDTO]:
        self.logger.debug("Fetching product by slug", slug=slug)
        product = self.products.get_by_slug(slug)
        if not product:
            self.logger.info("Product not found", slug=slug)
            return None
        return self.mapper.to_dto(product)

    def get_all_product_slugs(self) -> List[ProductSlugDTO]:
        slugs = self.products.list_slugs()
        self.logger.debug("Listed product slugs", count=len(slugs))
        return self.mapper.many_to_slug(slugs)

    def get_products_by_term(self, term) -> List[ProductSummaryDTO]:
        term = str(term).lower()
        self.logger.debug("Searching products", term=term)
        results = self.mapper.many_to_summary(self.products.search(term))
        self.logger.debug("Product search finished", term=term, count=len(results))
        return results

    def get_all_products(self) -> List[ProductDTO]:
        products = self.mapper.many_to_dto(self.products.list_all())
        self.logger.debug("Listed all products", count=len(products))
        return products
