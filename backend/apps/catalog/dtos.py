from dataclasses import dataclass, field
from typing import List


@dataclass
class ProductDTO:
    id: str
    slug: str
    title: str
    description: str
    images: List[str]
    in_stock: int
    price: str
    sizes: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    type: str = ""
    gender: str = ""
    created_at: str = ""
    updated_at: str = ""


@dataclass
class ProductSlugDTO:
    slug: str


@dataclass
class ProductSummaryDTO:
    title: str
    images: List[str]
    price: str
    in_stock: int
    slug: str
