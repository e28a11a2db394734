from __future__ import annotations

from .mappers import ProductMapper
from .repositories import ProductRepository
from .services import CatalogService


def build_catalog_service() -> CatalogService:
    return CatalogService(products=ProductRepository(), mapper=ProductMapper())
