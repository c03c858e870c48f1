"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from the endpoint handlers.
"""
from crm_api.repositories.user_repository import UserRepository
from crm_api.repositories.customer_repository import CustomerRepository
from crm_api.repositories.product_repository import ProductRepository
from crm_api.repositories.order_repository import OrderRepository
from crm_api.repositories.dashboard_repository import DashboardRepository

__all__ = [
    'UserRepository',
    'CustomerRepository',
    'ProductRepository',
    'OrderRepository',
    'DashboardRepository'
]
