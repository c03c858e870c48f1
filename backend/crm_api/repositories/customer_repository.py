"""
Customer Repository - Data Access Layer for Customers
"""
from typing import List

from crm_api.domain.customer import Customer
from crm_api.core.database import get_db_cursor


class CustomerRepository:
    """Repository for Customer data access"""

    @staticmethod
    def _map_row_to_customer(row: dict) -> Customer:
        return Customer(
            id=row['customer_id'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            email=row['email'],
            phone=row['phone'],
            avatar_initials=row['avatar_initials'],
            total_orders=row['total_orders'] or 0,
            total_spent=row['total_spent'] or 0,
            created_at=row['created_at'],
        )

    def find_active(self) -> List[Customer]:
        """
        All active customers, newest first

        Returns:
            List of customers ordered by created_at descending
        """
        with get_db_cursor() as cursor:
            cursor.execute("""
                SELECT
                    customer_id, first_name, last_name, email, phone,
                    avatar_initials, total_orders, total_spent, created_at
                FROM customers
                WHERE is_active = TRUE
                ORDER BY created_at DESC
            """)

            return [self._map_row_to_customer(row) for row in cursor.fetchall()]
