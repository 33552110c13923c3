from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, Union

from rest_framework import serializers

from apps.common import get_logger
from .dtos import CreateProductDTO, ProductDTO, UpdateProductDTO
from .exceptions import ProductNotFoundError
from .mappers import ProductMapper
from .models import Product
from .protocols import ProductRepositoryProtocol
from .serializers import ProductCreateSerializer, ProductUpdateSerializer
from .validators import ProductValidator

logger = get_logger(__name__).bind(component="products", layer="service")


def _decode(serializer_class: Type[serializers.Serializer], payload: Dict[str, Any]):
    serializer = serializer_class(data=dict(payload or {}))
    serializer.is_valid(raise_exception=True)
    return serializer.to_dto()


class ProductService:
    """Create/read/update/soft-delete orchestration for products.

    Validation runs before any entity is built or mutated, so a failing
    request never reaches the repository.
    """

    def __init__(
        self,
        products: ProductRepositoryProtocol,
        validator: Optional[ProductValidator] = None,
    ):
        self.products = products
        self.validator = validator or ProductValidator()
        self.logger = logger.bind(service="ProductService")

    def _get_product(self, product_id: int, *, include_inactive: bool = False) -> Product:
        filters: Dict[str, Any] = {"id": product_id}
        if not include_inactive:
            filters["active"] = True
        product = self.products.get(**filters)
        if product is None:
            self.logger.info("Product not found", product_id=product_id)
            raise ProductNotFoundError(product_id)
        return product

    def list_products(
        self, category: Optional[str] = None, *, include_inactive: bool = False
    ) -> List[ProductDTO]:
        self.logger.debug(
            "Listing products", category=category, include_inactive=include_inactive
        )
        filters: Dict[str, Any] = {} if include_inactive else {"active": True}
        qs = (
            self.products.list_by_category(category, **filters)
            if category
            else self.products.list(**filters)
        )
        return ProductMapper.many_to_dto(qs)

    def get_product(self, product_id: int) -> ProductDTO:
        self.logger.debug("Fetching product", product_id=product_id)
        return ProductMapper.to_dto(self._get_product(product_id))

    def create_product(
        self, data: Union[Dict[str, Any], CreateProductDTO]
    ) -> ProductDTO:
        dto = (
            data
            if isinstance(data, CreateProductDTO)
            else _decode(ProductCreateSerializer, data)
        )
        self.logger.info("Creating product", name=dto.name, category=dto.category)
        self.validator.validate_for_creation(dto)
        self.validator.validate_stock_for_category(dto.category, dto.stock)
        product = self.products.save(ProductMapper.to_entity(dto))
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(product)

    def update_product(
        self, product_id: int, data: Union[Dict[str, Any], UpdateProductDTO]
    ) -> ProductDTO:
        dto = (
            data
            if isinstance(data, UpdateProductDTO)
            else _decode(ProductUpdateSerializer, data)
        )
        self.logger.info("Updating product", product_id=product_id)
        product = self._get_product(product_id)
        category = dto.category if dto.category is not None else product.category
        stock = dto.stock if dto.stock is not None else product.stock
        self.validator.validate_stock_for_category(category, stock)
        ProductMapper.update_entity(product, dto)
        product = self.products.save(product)
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(product)

    def deactivate_product(self, product_id: int) -> None:
        """Soft delete: the row is kept and hidden from regular reads."""
        self.logger.info("Deactivating product", product_id=product_id)
        product = self._get_product(product_id)
        product.active = False
        self.products.save(product)
        self.logger.info("Product deactivated", product_id=product_id)

    def reactivate_product(self, product_id: int) -> ProductDTO:
        self.logger.info("Reactivating product", product_id=product_id)
        product = self._get_product(product_id, include_inactive=True)
        if not product.active:
            product.active = True
            product = self.products.save(product)
        return ProductMapper.to_dto(product)
