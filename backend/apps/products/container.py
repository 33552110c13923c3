from __future__ import annotations

from .repositories import ProductRepository
from .services import ProductService
from .validators import ProductValidator


def build_product_service() -> ProductService:
    return ProductService(products=ProductRepository(), validator=ProductValidator())
