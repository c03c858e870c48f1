"""
Product Domain Model

Represents a catalog product as shown in the dashboard product list.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal

from crm_api.domain.formatting import to_float


class Product(BaseModel):
    """
    Product domain model

    Fields:
        id: products.product_id
        name: Product name (list is sorted by it)
        category: Product category (exact-match filter)
        price: Unit price
        stock_quantity: Units in stock
        description: Free-text description
        is_active: Only active products are listed
    """

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    category: Optional[str] = Field(None, description="Product category")
    price: Optional[Decimal] = Field(None, description="Unit price")
    stock_quantity: int = Field(0, description="Units in stock")
    description: Optional[str] = Field(None, description="Product description")
    is_active: bool = Field(True, description="Whether product is active")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Product row as listed by GET /api/products"""
        return {
            "product_id": self.id,
            "product_name": self.name,
            "category": self.category,
            "price": to_float(self.price),
            "stock_quantity": self.stock_quantity,
            "description": self.description,
        }
