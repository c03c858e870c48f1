"""
Customers API Endpoints
"""
import logging

from fastapi import APIRouter

from crm_api.api.utils import error_response
from crm_api.repositories.customer_repository import CustomerRepository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_customers():
    """All active customers, newest first (no pagination)"""
    try:
        repo = CustomerRepository()
        customers = repo.find_active()

        return {
            "success": True,
            "customers": [customer.to_dict() for customer in customers]
        }

    except Exception as e:
        logger.error(f"Customers error: {e}", exc_info=True)
        return error_response(500, "Error fetching customers")
