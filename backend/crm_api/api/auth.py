"""
Login endpoint

POST /api/login checks email/password against the users table. There is
no session or token: the dashboard keeps the returned user client-side.
"""
import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from crm_api.api.utils import error_response
from crm_api.services.auth_service import CredentialVerifier


logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/login")
def login(credentials: LoginRequest):
    """
    Authenticate a dashboard user

    Returns:
        {success, message, user: {id, email, name, role, initials}}

    Errors:
        401 for unknown email, wrong password or inactive account (indistinguishable)
        500 if the database fails
    """
    try:
        verifier = CredentialVerifier()
        user = verifier.verify(credentials.email, credentials.password)
    except Exception as e:
        logger.error(f"Login error: {e}", exc_info=True)
        return error_response(500, "Server error during login")

    if user is None:
        return error_response(401, "Invalid email or password")

    return {
        "success": True,
        "message": "Login successful",
        "user": user.to_public_dict()
    }
