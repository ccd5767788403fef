"""
JSON envelopes shared by the catalog routes.

Successful calls return ``{"success": true, "data": ...}``; failures return
``{"success": false, "message": ...}``.
"""
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def error_response(exc: BaseException, status_code: int = 500) -> JSONResponse:
    message = str(exc) or UNKNOWN_ERROR_MESSAGE
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})
