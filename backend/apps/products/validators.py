from decimal import Decimal
from typing import Any, Dict, Optional

from .constants import (
    BUSINESS_RULES_MESSAGE,
    DEFAULT_RULES,
    FORBIDDEN_NAME_MESSAGE,
    ProductRules,
)
from .dtos import CreateProductDTO
from .exceptions import ProductValidationError


def _as_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class ProductValidator:
    """Business rules that go beyond per-field serializer validation.

    All name/category matching is case-insensitive substring containment.
    """

    def __init__(self, rules: Optional[ProductRules] = None):
        self.rules = rules or DEFAULT_RULES

    def validate_for_creation(self, dto: CreateProductDTO) -> None:
        """Run every creation rule and raise once with all field errors."""
        errors: Dict[str, str] = {}
        price = _as_decimal(dto.price)

        if self._contains_forbidden_words(dto.name):
            errors["name"] = FORBIDDEN_NAME_MESSAGE

        if price is not None and price > self.rules.max_price:
            errors["price"] = f"El precio no puede exceder ${self.rules.max_price}"

        if dto.stock is not None and dto.stock > self.rules.max_stock:
            errors["stock"] = (
                f"El stock no puede exceder {self.rules.max_stock} unidades"
            )

        self._validate_price_category_coherence(price, dto.category, errors)

        if errors:
            raise ProductValidationError(BUSINESS_RULES_MESSAGE, errors=errors)

    def validate_stock_for_category(
        self, category: Optional[str], stock: Optional[int]
    ) -> None:
        if category is None or stock is None:
            return
        lower_category = category.lower()
        for rule in self.rules.stock_category_rules:
            if rule.applies_to(lower_category) and rule.is_violated_by(stock):
                raise ProductValidationError(rule.message)

    def _contains_forbidden_words(self, name: Optional[str]) -> bool:
        if name is None:
            return False
        lower_name = name.lower()
        return any(word in lower_name for word in self.rules.forbidden_words)

    def _validate_price_category_coherence(
        self,
        price: Optional[Decimal],
        category: Optional[str],
        errors: Dict[str, str],
    ) -> None:
        if price is None or category is None:
            return
        lower_category = category.lower()
        # Later rules overwrite earlier ones on the shared "price" key.
        for rule in self.rules.price_category_rules:
            if rule.applies_to(lower_category) and rule.is_violated_by(price):
                errors["price"] = rule.message
