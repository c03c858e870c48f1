"""
Helpers shared by the endpoint handlers
"""
from typing import Optional

from fastapi.responses import JSONResponse


ALL_FILTER = "all"


def normalize_filter(value: Optional[str]) -> Optional[str]:
    """
    Turn a list filter query parameter into a repository filter

    Absent, empty or the literal "all" (case-sensitive) means no filter.
    """
    if not value or value == ALL_FILTER:
        return None
    return value


def error_response(status_code: int, message: str) -> JSONResponse:
    """Failure body used by every endpoint: {success: false, message}"""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message}
    )
