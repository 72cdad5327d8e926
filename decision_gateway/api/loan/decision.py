"""POST /loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from decision_gateway.api.loan.schemas import DecisionRequest, DecisionResponse
from decision_gateway.api.dependencies import get_decision_engine, get_request_id
from decision_gateway.domain.engine import DecisionEngine
from decision_gateway.domain.exceptions import RejectionReason
from decision_gateway.domain.models import Decision
from decision_gateway.infrastructure.observability.metrics import record_decision, unexpected_failure_counter
from decision_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def status_code_for(decision: Decision) -> int:
    """Map a decision to the HTTP status returned to the caller"""
    if decision.approved:
        return status.HTTP_200_OK
    if decision.reason is RejectionReason.NO_VALID_LOAN:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def decision_response(status_code: int, body: DecisionResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.post(
    "/decision",
    response_model=DecisionResponse,
    responses={
        400: {"model": DecisionResponse, "description": "Request breaks a loan rule"},
        404: {"model": DecisionResponse, "description": "No valid loan for the applicant"},
        500: {"model": DecisionResponse, "description": "Unexpected failure"},
    },
)
def request_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide whether a loan can be granted and on what terms.

    Flow:
    1. Validate personal code, amount, period, country and age
    2. Derive the credit modifier from the personal code
    3. Find the shortest period at which the requested amount is affordable
    4. Return the largest amount the applicant can take over that period

    - Invalid input: 400 with the rule that failed
    - No valid loan: 404 with the reason
    - Anything else: 500 with a generic message
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.evaluate(
            personal_code=request_body.personal_code,
            loan_amount=request_body.loan_amount,
            loan_period=request_body.loan_period,
            country=request_body.country,
            age=request_body.age,
        )
    except Exception as e:
        unexpected_failure_counter.inc()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id}, exc_info=True)
        return decision_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            DecisionResponse(error_message=UNEXPECTED_ERROR_MESSAGE),
        )

    # Record metrics and logs
    reason = decision.reason.value if decision.reason else None
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.approved, reason, decision.loan_amount, decision.loan_period)
    log_decision(
        request_id,
        request_body.personal_code,
        decision.approved,
        reason,
        decision.loan_amount,
        decision.loan_period,
        duration_ms,
    )

    return decision_response(
        status_code_for(decision),
        DecisionResponse(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
        ),
    )
