"""
Domain Layer - Business Entities

Pydantic models for the entities the API reads. Each model knows how to
render itself as the JSON row the dashboard expects.
"""
from crm_api.domain.user import User
from crm_api.domain.customer import Customer
from crm_api.domain.product import Product
from crm_api.domain.order import OrderStatus, RecentOrder
from crm_api.domain.dashboard import DashboardStats, RevenueStat, CategorySales, ChartData

__all__ = [
    'User',
    'Customer',
    'Product',
    'OrderStatus',
    'RecentOrder',
    'DashboardStats',
    'RevenueStat',
    'CategorySales',
    'ChartData',
]
