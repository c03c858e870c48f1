"""
Products API Endpoints
Product catalog listing for the dashboard
"""
import logging
from typing import Optional

from fastapi import APIRouter, Query

from crm_api.api.utils import error_response, normalize_filter
from crm_api.repositories.product_repository import ProductRepository


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_products(
    category: Optional[str] = Query(None, description="Exact category, or 'all'")
):
    """
    All active products ordered by name

    category narrows the list to exact matches; "all" or no value
    returns every active product.
    """
    try:
        repo = ProductRepository()
        products = repo.find_active(category=normalize_filter(category))

        return {
            "success": True,
            "products": [product.to_dict() for product in products]
        }

    except Exception as e:
        logger.error(f"Products error: {e}", exc_info=True)
        return error_response(500, "Error fetching products")
