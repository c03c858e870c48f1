"""
Unit tests for ProductRepository

These tests validate repository logic without requiring a database connection.
"""
import pytest
from unittest.mock import patch
from decimal import Decimal

from crm_api.repositories.product_repository import ProductRepository
from crm_api.domain.product import Product


class TestProductRepository:
    """Test ProductRepository methods"""

    @patch('crm_api.repositories.product_repository.get_db_cursor')
    def test_find_active_returns_products(self, mock_get_cursor, mock_cursor, sample_product_rows):
        """find_active maps rows to Product domain models"""
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = sample_product_rows

        # Act
        products = ProductRepository().find_active()

        # Assert
        assert len(products) == 2
        assert all(isinstance(p, Product) for p in products)
        assert products[0].id == 2
        assert products[0].name == 'Laptop Pro 15'
        assert products[0].price == Decimal('1299.99')

    @patch('crm_api.repositories.product_repository.get_db_cursor')
    def test_find_active_without_category_has_no_parameters(self, mock_get_cursor, mock_cursor):
        """No category means only the is_active condition"""
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = []

        # Act
        ProductRepository().find_active()

        # Assert
        query, params = mock_cursor.execute.call_args[0]
        assert params == []
        assert "is_active = TRUE" in query
        assert "category = %s" not in query
        assert "ORDER BY product_name ASC" in query

    @patch('crm_api.repositories.product_repository.get_db_cursor')
    def test_find_active_with_category_binds_parameter(self, mock_get_cursor, mock_cursor):
        """The category is bound as a parameter, never inlined"""
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = []
        category = "Electronics' OR '1'='1"

        # Act
        ProductRepository().find_active(category=category)

        # Assert
        query, params = mock_cursor.execute.call_args[0]
        assert "category = %s" in query
        assert category not in query
        assert params == [category]

    @patch('crm_api.repositories.product_repository.get_db_cursor')
    def test_find_active_handles_null_stock(self, mock_get_cursor, mock_cursor, sample_product_rows):
        # Arrange
        row = dict(sample_product_rows[0], stock_quantity=None)
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = [row]

        # Act
        products = ProductRepository().find_active()

        # Assert
        assert products[0].stock_quantity == 0

    @patch('crm_api.repositories.product_repository.get_db_cursor')
    def test_find_active_propagates_database_errors(self, mock_get_cursor, mock_cursor):
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.execute.side_effect = RuntimeError("connection lost")

        # Act / Assert
        with pytest.raises(RuntimeError):
            ProductRepository().find_active()

    @patch('crm_api.repositories.product_repository.get_db_cursor')
    def test_find_active_keeps_negative_price(self, mock_get_cursor, mock_cursor, sample_product_rows):
        # Arrange
        row = dict(sample_product_rows[0], price=Decimal('-1.00'))
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = [row]

        # Act
        products = ProductRepository().find_active()

        # Assert
        assert products[0].price == Decimal('-1.00')
