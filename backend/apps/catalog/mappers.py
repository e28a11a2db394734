from typing import Iterable, List, Optional

from django.conf import settings

from .dtos import ProductDTO, ProductSlugDTO, ProductSummaryDTO
from .models import Product

PRODUCT_IMAGES_PATH = "products"


def absolute_image_url(image: str, host: Optional[str] = None) -> str:
    """Prefix relative image names with ``<host>/products/``; absolute URLs pass through."""
    if image.startswith("http"):
        return image
    host = settings.HOST_NAME if host is None else host
    return f"{host.rstrip('/')}/{PRODUCT_IMAGES_PATH}/{image.lstrip('/')}"


def absolute_images(images: Iterable[str], host: Optional[str] = None) -> List[str]:
    return [absolute_image_url(image, host) for image in images or []]


def _isoformat(value) -> str:
    return value.isoformat() if value is not None else ""


class ProductMapper:
    def __init__(self, host: Optional[str] = None) -> None:
        self.host = host

    def to_dto(self, product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            slug=product.slug,
            title=product.title,
            description=product.description,
            images=absolute_images(product.images, self.host),
            in_stock=product.in_stock,
            price=str(product.price),
            sizes=list(product.sizes or []),
            tags=list(product.tags or []),
            type=product.type,
            gender=product.gender,
            created_at=_isoformat(getattr(product, "created_at", None)),
            updated_at=_isoformat(getattr(product, "updated_at", None)),
        )

    def many_to_dto(self, products: Iterable[Product]) -> List[ProductDTO]:
        return [self.to_dto(p) for p in products]

    def to_summary(self, product: Product) -> ProductSummaryDTO:
        return ProductSummaryDTO(
            title=product.title,
            images=absolute_images(product.images, self.host),
            price=str(product.price),
            in_stock=product.in_stock,
            slug=product.slug,
        )

    def many_to_summary(self, products: Iterable[Product]) -> List[ProductSummaryDTO]:
        return [self.to_summary(p) for p in products]

    @staticmethod
    def many_to_slug(slugs: Iterable[str]) -> List[ProductSlugDTO]:
        return [ProductSlugDTO(slug=s) for s in slugs]
