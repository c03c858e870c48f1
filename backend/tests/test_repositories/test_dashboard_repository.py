"""
Unit tests for DashboardRepository
"""
from unittest.mock import patch
from datetime import date
from decimal import Decimal

from crm_api.repositories.dashboard_repository import DashboardRepository


class TestDashboardRepository:

    @patch('crm_api.repositories.dashboard_repository.get_db_cursor')
    def test_get_stats(self, mock_get_cursor, mock_cursor):
        """Completed totals {100, 50}, 2 open orders, 3 active customers"""
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchone.return_value = {
            'total_revenue': Decimal('150.00'),
            'total_customers': 3,
            'active_orders': 2,
            'satisfaction_rate': Decimal('50.0'),
        }

        # Act
        stats = DashboardRepository().get_stats()

        # Assert
        assert stats.total_revenue == Decimal('150.00')
        assert stats.total_customers == 3
        assert stats.active_orders == 2
        assert stats.satisfaction_rate == Decimal('50.0')

        params = mock_cursor.execute.call_args[0][1]
        assert params == ('completed', ('pending', 'processing'), 'completed')

    @patch('crm_api.repositories.dashboard_repository.get_db_cursor')
    def test_get_stats_without_orders(self, mock_get_cursor, mock_cursor):
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchone.return_value = {
            'total_revenue': Decimal('0'),
            'total_customers': 0,
            'active_orders': 0,
            'satisfaction_rate': None,
        }

        # Act
        stats = DashboardRepository().get_stats()

        # Assert
        assert stats.satisfaction_rate is None
        assert stats.total_revenue == Decimal('0')

    @patch('crm_api.repositories.dashboard_repository.get_db_cursor')
    def test_get_revenue_series(self, mock_get_cursor, mock_cursor, sample_revenue_rows):
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = sample_revenue_rows

        # Act
        series = DashboardRepository().get_revenue_series()

        # Assert
        assert [s.day for s in series] == [date(2025, 1, 6), date(2025, 1, 7), date(2025, 1, 8)]
        assert series[0].label == 'Mon'

        query, params = mock_cursor.execute.call_args[0]
        assert "ORDER BY date ASC" in query
        assert params == (7,)

    @patch('crm_api.repositories.dashboard_repository.get_db_cursor')
    def test_get_category_sales_only_counts_completed(self, mock_get_cursor, mock_cursor):
        # Arrange
        mock_get_cursor.return_value.__enter__.return_value = mock_cursor
        mock_cursor.fetchall.return_value = [
            {'category': 'Electronics', 'total_sales': Decimal('2599.98')},
            {'category': 'Books', 'total_sales': Decimal('45.50')},
        ]

        # Act
        sales = DashboardRepository().get_category_sales()

        # Assert
        assert [s.category for s in sales] == ['Electronics', 'Books']
        assert sales[1].total_sales == Decimal('45.50')

        query, params = mock_cursor.execute.call_args[0]
        assert "WHERE o.status = %s" in query
        assert "GROUP BY p.category" in query
        assert "ORDER BY total_sales DESC" in query
        assert params == ('completed',)
