"""
Dashboard Repository - aggregate queries for the dashboard widgets

Every method is a single read-only statement.
"""
from typing import List

from crm_api.domain.dashboard import DashboardStats, RevenueStat, CategorySales
from crm_api.domain.order import OrderStatus
from crm_api.core.database import get_db_cursor


REVENUE_CHART_DAYS = 7


class DashboardRepository:
    """Repository for dashboard aggregates"""

    def get_stats(self) -> DashboardStats:
        """
        Headline metrics in one round trip

        - revenue: sum of completed order totals (0 when none)
        - customers: active customers
        - active orders: pending + processing
        - satisfaction: % of orders that are completed, 1 decimal
        """
        with get_db_cursor() as cursor:
            cursor.execute("""
                SELECT
                    (SELECT COALESCE(SUM(total_amount), 0)
                       FROM orders WHERE status = %s) AS total_revenue,
                    (SELECT COUNT(*)
                       FROM customers WHERE is_active = TRUE) AS total_customers,
                    (SELECT COUNT(*)
                       FROM orders WHERE status IN %s) AS active_orders,
                    (SELECT ROUND(AVG(CASE WHEN status = %s THEN 100 ELSE 0 END), 1)
                       FROM orders) AS satisfaction_rate
            """, (OrderStatus.COMPLETED, OrderStatus.OPEN, OrderStatus.COMPLETED))

            row = cursor.fetchone() or {}

            return DashboardStats(
                total_revenue=row.get('total_revenue') or 0,
                total_customers=row.get('total_customers') or 0,
                active_orders=row.get('active_orders') or 0,
                satisfaction_rate=row.get('satisfaction_rate'),
            )

    def get_revenue_series(self, days: int = REVENUE_CHART_DAYS) -> List[RevenueStat]:
        """
        First N daily revenue rows, oldest first

        Args:
            days: Number of rows to return

        Returns:
            List of RevenueStat ordered by date ascending
        """
        with get_db_cursor() as cursor:
            cursor.execute("""
                SELECT date, COALESCE(daily_revenue, 0) AS daily_revenue
                FROM revenue_stats
                ORDER BY date ASC
                LIMIT %s
            """, (days,))

            return [
                RevenueStat(day=row['date'], daily_revenue=row['daily_revenue'])
                for row in cursor.fetchall()
            ]

    def get_category_sales(self) -> List[CategorySales]:
        """
        Completed-order line totals per product category, largest first

        Categories without completed sales do not appear.
        """
        with get_db_cursor() as cursor:
            cursor.execute("""
                SELECT
                    p.category,
                    ROUND(SUM(oi.total_price)::numeric, 2) AS total_sales
                FROM order_items oi
                JOIN products p ON oi.product_id = p.product_id
                JOIN orders o ON oi.order_id = o.order_id
                WHERE o.status = %s
                GROUP BY p.category
                ORDER BY total_sales DESC
            """, (OrderStatus.COMPLETED,))

            return [
                CategorySales(category=row['category'], total_sales=row['total_sales'])
                for row in cursor.fetchall()
            ]
