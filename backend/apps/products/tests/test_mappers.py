import copy
import unittest
from dataclasses import asdict, fields
from datetime import datetime, timezone
from decimal import Decimal

from apps.products.dtos import CreateProductDTO, ProductDTO, UpdateProductDTO
from apps.products.mappers import ProductMapper
from apps.products.models import Product


class StubProduct:
    def __init__(
        self,
        product_id: int,
        name: str,
        price=Decimal("10.00"),
        description: str = "",
        category: str = "General",
        stock: int = 0,
        active: bool = True,
        created_at=None,
        updated_at=None,
    ):
        self.id = product_id
        self.name = name
        self.description = description
        self.price = price
        self.category = category
        self.stock = stock
        self.active = active
        self.created_at = created_at
        self.updated_at = updated_at


def make_product(**overrides):
    data = {
        "name": "Laptop",
        "description": "Portátil de 14 pulgadas",
        "price": Decimal("1299.99"),
        "category": "Electrónicos",
        "stock": 25,
        "active": True,
    }
    data.update(overrides)
    return Product(**data)


class ProductMapperReadTests(unittest.TestCase):
    def test_to_dto_none_returns_none(self):
        self.assertIsNone(ProductMapper.to_dto(None))

    def test_to_dto_copies_all_fields(self):
        created = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        updated = datetime(2024, 1, 16, 8, 0, tzinfo=timezone.utc)
        product = StubProduct(
            product_id=7,
            name="Teclado",
            price=Decimal("75.50"),
            description="Mecánico",
            category="Electrónicos",
            stock=12,
            active=False,
            created_at=created,
            updated_at=updated,
        )
        dto = ProductMapper.to_dto(product)
        self.assertIsInstance(dto, ProductDTO)
        self.assertEqual(
            asdict(dto),
            {
                "id": 7,
                "name": "Teclado",
                "description": "Mecánico",
                "price": Decimal("75.50"),
                "category": "Electrónicos",
                "stock": 12,
                "active": False,
                "created_at": created,
                "updated_at": updated,
            },
        )
        self.assertEqual(len(fields(ProductDTO)), 9)

    def test_many_to_dto_preserves_order(self):
        products = [StubProduct(3, "C"), StubProduct(1, "A"), StubProduct(2, "B")]
        dtos = ProductMapper.many_to_dto(products)
        self.assertEqual([d.id for d in dtos], [3, 1, 2])
        self.assertEqual([d.name for d in dtos], ["C", "A", "B"])

    def test_many_to_dto_empty(self):
        self.assertEqual(ProductMapper.many_to_dto([]), [])


class ProductMapperWriteTests(unittest.TestCase):
    def test_to_entity_none_returns_none(self):
        self.assertIsNone(ProductMapper.to_entity(None))

    def test_to_entity_sets_active_and_leaves_store_fields_unset(self):
        dto = CreateProductDTO(
            name="Camisa",
            description="Algodón",
            price=Decimal("35.00"),
            category="Ropa",
            stock=40,
        )
        snapshot = copy.deepcopy(dto)
        product = ProductMapper.to_entity(dto)
        self.assertIsInstance(product, Product)
        self.assertTrue(product.active)
        self.assertIsNone(product.id)
        self.assertIsNone(product.created_at)
        self.assertIsNone(product.updated_at)
        self.assertEqual(product.name, "Camisa")
        self.assertEqual(product.description, "Algodón")
        self.assertEqual(product.price, Decimal("35.00"))
        self.assertEqual(product.category, "Ropa")
        self.assertEqual(product.stock, 40)
        self.assertEqual(dto, snapshot)

    def test_update_entity_with_empty_dto_changes_nothing(self):
        product = make_product()
        before = {f: getattr(product, f) for f in ("name", "description", "price", "category", "stock", "active")}
        ProductMapper.update_entity(product, UpdateProductDTO())
        after = {f: getattr(product, f) for f in before}
        self.assertEqual(before, after)

    def test_update_entity_only_changes_present_field(self):
        cases = {
            "name": "Monitor",
            "description": "27 pulgadas",
            "price": Decimal("310.00"),
            "category": "Oficina",
            "stock": 3,
        }
        for field_name, value in cases.items():
            with self.subTest(field=field_name):
                product = make_product()
                original = {f: getattr(product, f) for f in cases}
                ProductMapper.update_entity(product, UpdateProductDTO(**{field_name: value}))
                for other, original_value in original.items():
                    expected = value if other == field_name else original_value
                    self.assertEqual(getattr(product, other), expected)

    def test_update_entity_tolerates_missing_arguments(self):
        product = make_product()
        ProductMapper.update_entity(product, None)
        ProductMapper.update_entity(None, UpdateProductDTO(name="X"))
        self.assertEqual(product.name, "Laptop")

    def test_update_entity_does_not_touch_active_flag(self):
        product = make_product(active=False)
        ProductMapper.update_entity(product, UpdateProductDTO(name="Otro"))
        self.assertFalse(product.active)
