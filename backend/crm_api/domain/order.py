"""
Order Domain Models

Orders as shown in the dashboard's recent-orders table, joined with the
ordering customer.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal

from crm_api.domain.formatting import format_display_date, to_float


class OrderStatus:
    """Known order statuses (other values are passed through as-is)"""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"

    OPEN = (PENDING, PROCESSING)


class RecentOrder(BaseModel):
    """
    Order joined with its customer

    Fields:
        order_number: Human-readable order number
        order_date: When the order was placed
        total_amount: Order total
        status: Order status (pending, processing, completed, ...)
        payment_status: Payment status
        first_name / last_name / email / avatar_initials: Ordering customer
    """

    order_number: str = Field(..., description="Order number")
    order_date: datetime = Field(..., description="Order date")
    total_amount: Decimal = Field(Decimal("0"), description="Order total")
    status: str = Field(..., description="Order status")
    payment_status: Optional[str] = Field(None, description="Payment status")

    first_name: Optional[str] = Field(None, description="Customer first name")
    last_name: Optional[str] = Field(None, description="Customer last name")
    email: Optional[str] = Field(None, description="Customer email")
    avatar_initials: Optional[str] = Field(None, description="Customer avatar initials")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return {
            "order_number": self.order_number,
            "order_date": format_display_date(self.order_date),
            "total_amount": to_float(self.total_amount),
            "status": self.status,
            "payment_status": self.payment_status,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "avatar_initials": self.avatar_initials,
        }
