# spendwise/responses.py
from __future__ import annotations

from typing import Any, Optional

from fastapi.responses import JSONResponse


def envelope(data: Any = None, message: Optional[str] = None, success: bool = True) -> dict:
    """Every body has the shape {"success": bool, "message"?: str, "data"?: any}."""
    body: dict = {"success": success}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=envelope(message=message, success=False)
    )
