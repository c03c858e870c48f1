"""
Dashboard API Endpoints
Read-only aggregates for the dashboard widgets

- /stats: headline metric cards
- /revenue-chart: daily revenue, first 7 days
- /category-chart: completed sales by product category
- /recent-orders: latest 10 orders, optional status filter
"""
import logging
from typing import Optional

from fastapi import APIRouter, Query

from crm_api.api.utils import error_response, normalize_filter
from crm_api.core.config import settings
from crm_api.domain.dashboard import ChartData
from crm_api.repositories.dashboard_repository import DashboardRepository
from crm_api.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats")
def get_dashboard_stats():
    """
    Revenue, active customers, open orders and satisfaction

    change/trend per metric are configured placeholders (STATS_TRENDS),
    not period-over-period figures.
    """
    try:
        repo = DashboardRepository()
        stats = repo.get_stats()

        return {
            "success": True,
            "stats": stats.to_dict(settings.get_trend)
        }

    except Exception as e:
        logger.error(f"Stats error: {e}", exc_info=True)
        return error_response(500, "Error fetching dashboard stats")


@router.get("/revenue-chart")
def get_revenue_chart():
    """Daily revenue as parallel labels (day names) and data lists"""
    try:
        repo = DashboardRepository()
        chart = ChartData.from_revenue(repo.get_revenue_series())

        return {
            "success": True,
            "chart": chart.model_dump()
        }

    except Exception as e:
        logger.error(f"Revenue chart error: {e}", exc_info=True)
        return error_response(500, "Error fetching revenue chart data")


@router.get("/category-chart")
def get_category_chart():
    """Completed sales per category, largest first"""
    try:
        repo = DashboardRepository()
        chart = ChartData.from_categories(repo.get_category_sales())

        return {
            "success": True,
            "chart": chart.model_dump()
        }

    except Exception as e:
        logger.error(f"Category chart error: {e}", exc_info=True)
        return error_response(500, "Error fetching category chart data")


@router.get("/recent-orders")
def get_recent_orders(
    status: Optional[str] = Query(None, description="Exact order status, or 'all'")
):
    """Latest 10 orders with their customer, newest first"""
    try:
        repo = OrderRepository()
        orders = repo.find_recent(status=normalize_filter(status))

        return {
            "success": True,
            "orders": [order.to_dict() for order in orders]
        }

    except Exception as e:
        logger.error(f"Recent orders error: {e}", exc_info=True)
        return error_response(500, "Error fetching recent orders")
