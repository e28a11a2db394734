from typing import Generic, Optional, Sequence, Type, TypeVar

from django.db import models

T = TypeVar("T", bound=models.Model)


class GenericRepository(Generic[T]):
    """Read-oriented base repository over a single Django model."""

    ordering: Sequence[str] = ()

    def __init__(self, model: Type[T]):
        self.model = model

    def queryset(self):
        qs = self.model.objects.all()
        return qs.order_by(*self.ordering) if self.ordering else qs

    def get(self, **filters) -> Optional[T]:
        return self.queryset().filter(**filters).first()
