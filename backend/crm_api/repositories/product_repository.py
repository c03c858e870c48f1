"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.
"""
from typing import List, Optional
from crm_api.domain.product import Product
from crm_api.core.database import get_db_cursor


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Map a products row to the Product domain model"""
        return Product(
            id=row['product_id'],
            name=row['product_name'],
            category=row['category'],
            price=row['price'],
            stock_quantity=row['stock_quantity'] or 0,
            description=row['description'],
        )

    def find_active(self, category: Optional[str] = None) -> List[Product]:
        """
        Find active products, optionally restricted to one category

        Args:
            category: Exact category to match (None = all categories)

        Returns:
            List of products ordered by name
        """
        conditions = ["is_active = TRUE"]
        params = []

        if category:
            conditions.append("category = %s")
            params.append(category)

        where_clause = " AND ".join(conditions)

        with get_db_cursor() as cursor:
            cursor.execute(f"""
                SELECT
                    product_id, product_name, category, price,
                    stock_quantity, description
                FROM products
                WHERE {where_clause}
                ORDER BY product_name ASC
            """, params)

            return [self._map_row_to_product(row) for row in cursor.fetchall()]
