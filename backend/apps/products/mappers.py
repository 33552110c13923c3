from typing import Iterable, List, Optional

from .dtos import CreateProductDTO, ProductDTO, UpdateProductDTO
from .models import Product

UPDATABLE_FIELDS = ("name", "description", "price", "category", "stock")


class ProductMapper:
    """Converts between ``Product`` entities and the product DTO shapes.

    ``None`` is tolerated everywhere: reads map it to ``None`` and updates
    treat it as a no-op.
    """

    @staticmethod
    def to_dto(product: Optional[Product]) -> Optional[ProductDTO]:
        if product is None:
            return None
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            stock=product.stock,
            active=product.active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]

    @staticmethod
    def to_entity(dto: Optional[CreateProductDTO]) -> Optional[Product]:
        """Build an unsaved entity; id and timestamps are assigned on persist."""
        if dto is None:
            return None
        return Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            category=dto.category,
            stock=dto.stock,
            active=True,
        )

    @staticmethod
    def update_entity(
        product: Optional[Product], dto: Optional[UpdateProductDTO]
    ) -> None:
        """Patch ``product`` in place with every non-None field of ``dto``."""
        if product is None or dto is None:
            return
        for field_name in UPDATABLE_FIELDS:
            value = getattr(dto, field_name)
            if value is not None:
                setattr(product, field_name, value)
