"""Translate service-layer ValueErrors into HTTP errors.

Services raise ``ValueError("code:ref:message")``; the code picks the status.
Errors without a known code are reported as ``invalid`` with the full message.
"""

from typing import NoReturn

from fastapi import HTTPException, status

_STATUS_BY_CODE = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "duplicate": status.HTTP_409_CONFLICT,
    "invalid": status.HTTP_400_BAD_REQUEST,
}


def raise_http_error(error: ValueError) -> NoReturn:
    parts = str(error).split(":", 2)
    if len(parts) == 3 and parts[0] in _STATUS_BY_CODE:
        code, ref, message = parts
    else:
        code, ref, message = "invalid", "", str(error)
    raise HTTPException(
        status_code=_STATUS_BY_CODE[code],
        detail={"error": code, "ref": ref, "message": message},
    )
