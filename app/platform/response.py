from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    *,
    data: Optional[Any] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Single source of truth for ALL scan API responses.
    Automatically sets success = True if < 400 else False, and merges
    the encoded payload fields next to it.
    """
    content = {"success": status_code < 400}
    if data is not None:
        content.update(jsonable_encoder(data))

    return JSONResponse(status_code=status_code, content=content)


def error_response(message: str, status_code: int) -> JSONResponse:
    return api_response(data={"error": message}, status_code=status_code)
