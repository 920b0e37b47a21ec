"""POST /calculate-balance - account balance calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from balance_gateway.api.schemas import (
    CalculateBalanceRequest,
    CalculateBalanceResponse,
    InternalErrorResponse,
    ValidationErrorResponse,
)
from balance_gateway.api.dependencies import get_request_id
from balance_gateway.domain.balance import calculate_balance
from balance_gateway.infrastructure.observability.metrics import record_calculation, internal_errors_counter
from balance_gateway.infrastructure.observability.logging import log_calculation

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/calculate-balance",
    response_model=CalculateBalanceResponse,
    summary="Calculate final account balance",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        500: {"model": InternalErrorResponse, "description": "Internal server error"},
    },
)
def create_balance_calculation(request_body: CalculateBalanceRequest, request: Request):
    """
    Calculate the final account balance by processing all transactions in order.

    Uses exact decimal arithmetic to avoid floating point errors. Status is
    1 for a normal account (balance >= 0) and 2 for an overdraft (balance < 0).
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        result = calculate_balance(request_body.to_domain())
        response = CalculateBalanceResponse.from_result(result)

    except Exception as e:
        internal_errors_counter.inc()
        logger.error(f"Balance calculation failed: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=InternalErrorResponse(message=str(e)).model_dump(),
        )

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_calculation(response.account_status, len(request_body.transactions))
    log_calculation(request_id, len(request_body.transactions), response.account_status, duration_ms)

    return response
