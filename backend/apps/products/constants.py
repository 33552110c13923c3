"""Business rule literals for product validation.

The defaults reproduce the catalogue rules of the tutorial service. They are
plain data so tests (or a localised deployment) can build a different
``ProductRules`` without touching ``ProductValidator``.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

FORBIDDEN_WORDS: Tuple[str, ...] = ("test", "prueba", "demo", "temporal")
MAX_PRICE = Decimal("100000.00")
MAX_STOCK = 10000

BUSINESS_RULES_MESSAGE = "Error de validación de reglas de negocio"
FORBIDDEN_NAME_MESSAGE = (
    "El nombre del producto no puede contener palabras prohibidas como "
    "'test', 'demo', etc."
)


@dataclass(frozen=True)
class PriceCategoryRule:
    keywords: Tuple[str, ...]
    message: str
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None

    def applies_to(self, category: str) -> bool:
        return any(keyword in category for keyword in self.keywords)

    def is_violated_by(self, price: Decimal) -> bool:
        if self.min_price is not None and price < self.min_price:
            return True
        return self.max_price is not None and price > self.max_price


@dataclass(frozen=True)
class StockCategoryRule:
    keywords: Tuple[str, ...]
    message: str
    min_stock: Optional[int] = None
    max_stock: Optional[int] = None

    def applies_to(self, category: str) -> bool:
        return any(keyword in category for keyword in self.keywords)

    def is_violated_by(self, stock: int) -> bool:
        if self.min_stock is not None and stock < self.min_stock:
            return True
        return self.max_stock is not None and stock > self.max_stock


# Evaluated in order; all of them write to the same "price" key.
PRICE_CATEGORY_RULES: Tuple[PriceCategoryRule, ...] = (
    PriceCategoryRule(
        keywords=("electrón",),
        message="Los productos electrónicos deben tener un precio mínimo de $50.00",
        min_price=Decimal("50.00"),
    ),
    PriceCategoryRule(
        keywords=("libro",),
        message="Los libros no pueden exceder $200.00",
        max_price=Decimal("200.00"),
    ),
    PriceCategoryRule(
        keywords=("ropa", "vestimenta"),
        message="La ropa debe tener un precio entre $10.00 y $1,000.00",
        min_price=Decimal("10.00"),
        max_price=Decimal("1000.00"),
    ),
)

# First matching violation wins.
STOCK_CATEGORY_RULES: Tuple[StockCategoryRule, ...] = (
    StockCategoryRule(
        keywords=("digital", "software"),
        message="Los productos digitales deberían tener stock alto (mínimo 1000)",
        min_stock=1000,
    ),
    StockCategoryRule(
        keywords=("comida", "alimento"),
        message="Los productos perecederos no deberían tener stock mayor a 100",
        max_stock=100,
    ),
)


@dataclass(frozen=True)
class ProductRules:
    forbidden_words: Tuple[str, ...] = FORBIDDEN_WORDS
    max_price: Decimal = MAX_PRICE
    max_stock: int = MAX_STOCK
    price_category_rules: Tuple[PriceCategoryRule, ...] = PRICE_CATEGORY_RULES
    stock_category_rules: Tuple[StockCategoryRule, ...] = STOCK_CATEGORY_RULES


DEFAULT_RULES = ProductRules()
