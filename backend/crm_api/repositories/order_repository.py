"""
Order Repository - Data Access Layer for Orders

Handles the order queries behind the dashboard's recent-orders table.
"""
from typing import List, Optional
from crm_api.domain.order import RecentOrder
from crm_api.core.database import get_db_cursor


RECENT_ORDERS_LIMIT = 10


class OrderRepository:
    """
    Repository for Order data access

    Orders are always returned joined with their customer.
    """

    @staticmethod
    def _map_row_to_order(row: dict) -> RecentOrder:
        return RecentOrder(
            order_number=row['order_number'],
            order_date=row['order_date'],
            total_amount=row['total_amount'] or 0,
            status=row['status'],
            payment_status=row['payment_status'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            email=row['email'],
            avatar_initials=row['avatar_initials'],
        )

    def find_recent(
        self,
        status: Optional[str] = None,
        limit: int = RECENT_ORDERS_LIMIT
    ) -> List[RecentOrder]:
        """
        Most recent orders, newest first

        Args:
            status: Exact status to match (None = any status)
            limit: Maximum rows to return

        Returns:
            List of orders with customer name, email and initials
        """
        conditions = []
        params = []

        if status:
            conditions.append("o.status = %s")
            params.append(status)

        where_clause = f"WHERE {' AND '.join(conditions)}" if conditions else ""

        with get_db_cursor() as cursor:
            cursor.execute(f"""
                SELECT
                    o.order_number,
                    o.order_date,
                    o.total_amount,
                    o.status,
                    o.payment_status,
                    c.first_name,
                    c.last_name,
                    c.email,
                    c.avatar_initials
                FROM orders o
                JOIN customers c ON o.customer_id = c.customer_id
                {where_clause}
                ORDER BY o.order_date DESC
                LIMIT %s
            """, params + [limit])

            return [self._map_row_to_order(row) for row in cursor.fetchall()]
