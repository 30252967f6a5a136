import re
from typing import Any

from fastapi import HTTPException

_DIGITS = re.compile(r"[0-9]+")


def parse_positive_id(raw: Any, error_detail: str) -> int:
    """
    Accept a positive integer given as int or decimal string, else 400.
    Runs before any lookup so malformed ids never reach the repository.
    """
    if isinstance(raw, bool):
        raise HTTPException(status_code=400, detail=error_detail)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _DIGITS.fullmatch(raw.strip()):
        value = int(raw.strip())
    else:
        raise HTTPException(status_code=400, detail=error_detail)

    if value <= 0:
        raise HTTPException(status_code=400, detail=error_detail)
    return value
