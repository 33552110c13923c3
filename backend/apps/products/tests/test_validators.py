from decimal import Decimal

import pytest

from apps.products.constants import (
    BUSINESS_RULES_MESSAGE,
    FORBIDDEN_NAME_MESSAGE,
    PriceCategoryRule,
    ProductRules,
)
from apps.products.dtos import CreateProductDTO
from apps.products.exceptions import ProductValidationError
from apps.products.validators import ProductValidator

validator = ProductValidator()


def make_dto(**overrides):
    data = {
        "name": "Laptop Pro",
        "description": "Portátil",
        "price": Decimal("1500.00"),
        "category": "Electrónicos",
        "stock": 10,
    }
    data.update(overrides)
    return CreateProductDTO(**data)


def creation_errors(dto):
    with pytest.raises(ProductValidationError) as exc:
        validator.validate_for_creation(dto)
    return exc.value.errors


def test_valid_product_passes():
    assert validator.validate_for_creation(make_dto()) is None


@pytest.mark.parametrize(
    "name", ["Test Product", "mi PRUEBA", "Demo unit", "Stock temporal", "contest"]
)
def test_forbidden_words_flag_name(name):
    errors = creation_errors(make_dto(name=name))
    assert errors == {"name": FORBIDDEN_NAME_MESSAGE}


def test_test_product_only_fails_on_name():
    errors = creation_errors(
        make_dto(
            name="Test Product",
            price=Decimal("50000"),
            category="Electrónicos",
            stock=5,
        )
    )
    assert set(errors) == {"name"}


def test_price_above_ceiling():
    errors = creation_errors(make_dto(price=Decimal("100000.01"), category="Hogar"))
    assert errors == {"price": "El precio no puede exceder $100000.00"}


def test_price_at_ceiling_is_allowed():
    validator.validate_for_creation(make_dto(price=Decimal("100000.00"), category="Hogar"))


def test_stock_above_ceiling():
    errors = creation_errors(make_dto(stock=10001))
    assert errors == {"stock": "El stock no puede exceder 10000 unidades"}


def test_all_checks_run_and_aggregate():
    errors = creation_errors(
        make_dto(name="demo", price=Decimal("200000"), category="Hogar", stock=20000)
    )
    assert set(errors) == {"name", "price", "stock"}


def test_error_carries_business_message_and_details():
    with pytest.raises(ProductValidationError) as exc:
        validator.validate_for_creation(make_dto(stock=10001))
    assert exc.value.message == BUSINESS_RULES_MESSAGE
    assert exc.value.code == "VALIDATION_ERROR"
    assert exc.value.status_code == 400
    assert exc.value.details == exc.value.errors


def test_cheap_electronics_rejected():
    errors = creation_errors(make_dto(price=Decimal("49.99")))
    assert errors == {
        "price": "Los productos electrónicos deben tener un precio mínimo de $50.00"
    }


@pytest.mark.parametrize("category", ["ELECTRÓNICOS", "electrónicos", "Electrónicos"])
def test_category_matching_is_case_insensitive(category):
    errors = creation_errors(make_dto(price=Decimal("10.00"), category=category))
    assert "price" in errors


def test_expensive_book_rejected():
    errors = creation_errors(make_dto(price=Decimal("250.00"), category="Libros"))
    assert "200.00" in errors["price"]


def test_cheap_clothing_rejected():
    errors = creation_errors(make_dto(price=Decimal("5.00"), category="Ropa"))
    assert errors == {"price": "La ropa debe tener un precio entre $10.00 y $1,000.00"}


def test_clothing_substring_matches():
    errors = creation_errors(make_dto(price=Decimal("1500.00"), category="Ropa deportiva"))
    assert "price" in errors
    validator.validate_for_creation(make_dto(price=Decimal("80.00"), category="Vestimenta formal"))


def test_later_price_rule_overwrites_earlier_message():
    errors = creation_errors(
        make_dto(price=Decimal("150000.00"), category="Ropa")
    )
    assert errors == {"price": "La ropa debe tener un precio entre $10.00 y $1,000.00"}


def test_float_price_is_compared_as_decimal():
    errors = creation_errors(make_dto(price=5.0, category="Ropa"))
    assert "price" in errors


@pytest.mark.parametrize(
    "category, stock, message",
    [
        ("Software", 500, "Los productos digitales deberían tener stock alto (mínimo 1000)"),
        ("Libros digitales", 999, "Los productos digitales deberían tener stock alto (mínimo 1000)"),
        ("Comida", 150, "Los productos perecederos no deberían tener stock mayor a 100"),
        ("ALIMENTOS", 101, "Los productos perecederos no deberían tener stock mayor a 100"),
    ],
)
def test_stock_for_category_rejects(category, stock, message):
    with pytest.raises(ProductValidationError) as exc:
        validator.validate_stock_for_category(category, stock)
    assert exc.value.message == message
    assert exc.value.errors == {}
    assert exc.value.details is None


@pytest.mark.parametrize(
    "category, stock",
    [
        ("Software", 1500),
        ("Comida", 50),
        ("Hogar", 0),
        (None, 5),
        ("Software", None),
    ],
)
def test_stock_for_category_accepts(category, stock):
    assert validator.validate_stock_for_category(category, stock) is None


def test_custom_rules_can_be_injected():
    rules = ProductRules(
        forbidden_words=("borrador",),
        price_category_rules=(
            PriceCategoryRule(
                keywords=("juguete",), message="Juguete demasiado caro", max_price=Decimal("100")
            ),
        ),
    )
    custom = ProductValidator(rules)
    custom.validate_for_creation(make_dto(name="Test Product"))
    with pytest.raises(ProductValidationError) as exc:
        custom.validate_for_creation(
            make_dto(name="Borrador", category="Juguetes", price=Decimal("101"))
        )
    assert exc.value.errors == {
        "name": FORBIDDEN_NAME_MESSAGE,
        "price": "Juguete demasiado caro",
    }
