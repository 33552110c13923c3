from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class ProductDTO:
    id: Optional[int]
    name: str
    description: str
    price: Decimal
    category: str
    stock: int
    active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass
class CreateProductDTO:
    name: str
    description: str
    price: Decimal
    category: str
    stock: int


@dataclass
class UpdateProductDTO:
    # None means "leave unchanged"
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None
    stock: Optional[int] = None
