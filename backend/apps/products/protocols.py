from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.products.models import Product


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]: ...

    def list(self, **filters) -> Iterable["Product"]: ...

    def list_by_category(self, category: str, **filters) -> Iterable["Product"]: ...

    def save(self, product: "Product") -> "Product": ...
