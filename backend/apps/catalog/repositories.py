from functools import reduce
from operator import or_
from typing import Iterable, List, Optional

from django.db.models import Q

from apps.common.repository import GenericRepository
from .models import Product

SEARCH_FIELDS = ("title", "tags")
SUMMARY_FIELDS = ("title", "images", "price", "in_stock", "slug")


class ProductRepository(GenericRepository[Product]):
    ordering = ("id",)

    def __init__(self):
        super().__init__(Product)

    def get_by_slug(self, slug: str) -> Optional[Product]:
        return self.get(slug=slug)

    def list_all(self) -> Iterable[Product]:
        return self.queryset()

    def list_slugs(self) -> List[str]:
        return list(self.queryset().values_list("slug", flat=True))

    def search(self, term: str) -> Iterable[Product]:
        """Case-insensitive match of any word in ``term`` against the text fields."""
        words = [w for w in term.split() if w]
        if not words:
            return self.model.objects.none()
        conditions = [
            Q(**{f"{field}__icontains": word})
            for word in words
            for field in SEARCH_FIELDS
        ]
        return self.queryset().filter(reduce(or_, conditions)).only(*SUMMARY_FIELDS)
