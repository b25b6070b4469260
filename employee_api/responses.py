from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .domain.errors import EncodingError


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


def error_response(message: str, status_code: int = 400) -> JSONUTF8Response:
    return JSONUTF8Response({"Err": message}, status_code=status_code)


def ok_response(data: Any) -> JSONUTF8Response:
    try:
        return JSONUTF8Response(jsonable_encoder(data))
    except (TypeError, ValueError) as e:
        raise EncodingError(str(e)) from e
