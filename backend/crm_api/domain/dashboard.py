"""
Dashboard Domain Models

Aggregates behind the dashboard widgets: stats cards, the weekly
revenue chart and the sales-by-category chart.
"""
from pydantic import BaseModel, Field
from typing import Any, Callable, Dict, List, Optional
from datetime import date
from decimal import Decimal

from crm_api.domain.formatting import day_label, format_fixed, to_float


class DashboardStats(BaseModel):
    """
    Headline metrics for the stats cards

    Fields:
        total_revenue: Sum of totals of completed orders
        total_customers: Number of active customers
        active_orders: Orders that are pending or processing
        satisfaction_rate: Share of completed orders, in percent (None without orders)
    """

    total_revenue: Decimal = Field(Decimal("0"))
    total_customers: int = Field(0, ge=0)
    active_orders: int = Field(0, ge=0)
    satisfaction_rate: Optional[Decimal] = Field(None)

    def to_dict(self, trend_for: Callable[[str], Dict[str, Any]]) -> dict:
        """
        Stats payload with a change/trend annotation per metric

        Args:
            trend_for: Returns {"change", "trend"} for a metric name
        """
        values = {
            "revenue": format_fixed(self.total_revenue, 2),
            "customers": int(self.total_customers),
            "orders": int(self.active_orders),
            "satisfaction": format_fixed(self.satisfaction_rate, 1),
        }
        return {
            metric: {"value": value, **trend_for(metric)}
            for metric, value in values.items()
        }


class RevenueStat(BaseModel):
    """One row of the precomputed daily revenue table"""

    day: date = Field(..., description="Calendar day")
    daily_revenue: Decimal = Field(Decimal("0"))

    @property
    def label(self) -> str:
        return day_label(self.day)


class CategorySales(BaseModel):
    """Completed-order sales total for one product category"""

    category: Optional[str] = None
    total_sales: Decimal = Field(Decimal("0"))


class ChartData(BaseModel):
    """Two parallel series, as consumed by the dashboard charts"""

    labels: List[Optional[str]] = Field(default_factory=list)
    data: List[float] = Field(default_factory=list)

    @classmethod
    def from_revenue(cls, rows: List[RevenueStat]) -> "ChartData":
        return cls(
            labels=[row.label for row in rows],
            data=[to_float(row.daily_revenue) for row in rows],
        )

    @classmethod
    def from_categories(cls, rows: List[CategorySales]) -> "ChartData":
        return cls(
            labels=[row.category for row in rows],
            data=[to_float(row.total_sales) for row in rows],
        )
