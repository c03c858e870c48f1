"""
Customer Domain Model

The aggregate columns (total_orders, total_spent) are maintained by the
order processing system; the API only reads them.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal

from crm_api.domain.formatting import format_display_date, to_float


class Customer(BaseModel):
    """Customer domain model"""

    id: int = Field(..., description="Customer ID")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    email: Optional[str] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    avatar_initials: Optional[str] = Field(None, description="Avatar initials")
    total_orders: int = Field(0, description="Number of orders placed")
    total_spent: Decimal = Field(Decimal("0"), description="Lifetime spend")
    is_active: bool = Field(True, description="Whether the customer is active")
    created_at: Optional[datetime] = Field(None, description="When the customer joined")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Customer row as listed by GET /api/customers"""
        return {
            "customer_id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "avatar_initials": self.avatar_initials,
            "total_orders": self.total_orders,
            "total_spent": to_float(self.total_spent),
            "joined_date": format_display_date(self.created_at),
        }
