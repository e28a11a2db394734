from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Product


class ProductRepositoryProtocol(Protocol):
    def get_by_slug(self, slug: str) -> Optional["Product"]:
        ...

    def list_all(self) -> Iterable["Product"]:
        ...

    def list_slugs(self) -> List[str]:
        ...

    def search(self, term: str) -> Iterable["Product"]:
        ...
