"""Translation of request validation errors into the 400 response body"""

import logging
from typing import Any, Dict, List, Sequence, Tuple, Union

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from balance_gateway.api.dependencies import get_request_id
from balance_gateway.infrastructure.observability.metrics import validation_failures_counter

logger = logging.getLogger(__name__)

BODY_MESSAGE = "Request body must be a JSON object"

# (field, pydantic error type) -> message; a None type is the field's fallback
FIELD_MESSAGES: Dict[Tuple[str, Union[str, None]], str] = {
    ("initialBalance", "missing"): "initialBalance is required",
    ("initialBalance", None): "initialBalance must be a number",
    ("transactions", "missing"): "transactions is required",
    ("transactions", "too_short"): "transactions array cannot be empty",
    ("transactions", None): "transactions must be an array",
    ("transaction", None): "Each transaction must be an object",
    ("type", "missing"): "Transaction type is required",
    ("type", None): 'Transaction type must be either "credit" or "debit"',
    ("amount", "missing"): "Transaction amount is required",
    ("amount", "greater_than_equal"): "Transaction amount must be a non-negative number",
    ("amount", None): "Transaction amount must be a number",
}


def _field_name(loc: Sequence[Union[str, int]]) -> str:
    if not loc:
        return ""
    if isinstance(loc[-1], int):
        # Element of the transactions array itself
        return "transaction"
    return str(loc[-1])


def _format_path(loc: Sequence[Union[str, int]]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path


def format_violations(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Convert pydantic error dicts into field-level violation records.

    Every error is reported, not just the first one. Records have the shape
    {"location": "body", "path": ..., "msg": ..., "value": ...}; "value" is
    left out when the field was missing.
    """
    violations = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        location = str(loc[0]) if loc else "body"
        field_loc = loc[1:] if location == "body" else loc
        error_type = error.get("type")

        if error_type == "json_invalid" or not field_loc:
            # Body is absent, not valid JSON, or not an object
            msg = BODY_MESSAGE
            field_loc = ()
        else:
            field = _field_name(field_loc)
            msg = (
                FIELD_MESSAGES.get((field, error_type))
                or FIELD_MESSAGES.get((field, None))
                or error.get("msg", "Invalid value")
            )

        violation: Dict[str, Any] = {
            "location": location,
            "path": _format_path(field_loc),
            "msg": msg,
        }
        if error_type != "missing" and "input" in error:
            violation["value"] = jsonable_encoder(error["input"])
        violations.append(violation)

    return violations


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject the request with every violated field before any computation runs"""
    details = format_violations(exc.errors())

    validation_failures_counter.inc()
    logger.warning(
        "Validation failed",
        extra={
            "request_id": get_request_id(request),
            "path": request.url.path,
            "violation_count": len(details),
        },
    )

    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "details": details},
    )
