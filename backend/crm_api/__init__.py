"""
CRM Dashboard API

Backend service for the CRM dashboard: login, dashboard widgets,
customer and product listings.
"""
__version__ = "1.0.0"
