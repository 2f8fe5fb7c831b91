"""Mortgage routes: calculation, down payment check and informational endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mortgage_calc.api.schemas import (
    CMHCInfoResponse,
    DownPaymentCheckRequest,
    DownPaymentCheckResponse,
    DownPaymentErrorResponse,
    HealthResponse,
    MortgageCalculationRequest,
    MortgageCalculationResponse,
    RejectionResponse,
    SampleResponse,
)
from mortgage_calc.engine.eligibility import validate_down_payment
from mortgage_calc.engine.mortgage import calculate_mortgage
from mortgage_calc.engine.rules import premium_rate_table, rule_summary
from mortgage_calc.models.mortgage import Rejection

router = APIRouter(prefix="/api/mortgage", tags=["mortgage"])

SAMPLE_REQUEST = {
    "propertyPrice": 600000,
    "downPayment": 50000,
    "annualInterestRate": 5.99,
    "amortizationPeriod": 25,
    "paymentSchedule": "monthly",
    "isFirstTimeBuyer": True,
    "isNewConstruction": False,
    "downPaymentSource": "traditional",
    "employmentType": "regular",
}

MISSING_FIELDS_ERROR = "Property price and down payment are required"


def health_payload() -> HealthResponse:
    return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())


@router.post(
    "/calculate",
    response_model=MortgageCalculationResponse,
    responses={400: {"model": RejectionResponse}},
)
async def calculate(req: MortgageCalculationRequest):
    """Price the mortgage insurance premium and periodic payment."""
    outcome = calculate_mortgage(req.to_domain())
    if isinstance(outcome, Rejection):
        return JSONResponse(
            status_code=400,
            content=RejectionResponse(reason=outcome.message).model_dump(),
        )
    return MortgageCalculationResponse.from_result(outcome)


@router.post(
    "/validate-down-payment",
    response_model=DownPaymentCheckResponse,
    responses={400: {"model": DownPaymentErrorResponse}},
)
async def check_down_payment(req: DownPaymentCheckRequest):
    """Check a down payment against the regulatory minimums only."""
    if req.property_price is None or req.down_payment is None:
        return _down_payment_error(MISSING_FIELDS_ERROR)

    rejection = validate_down_payment(req.property_price, req.down_payment, req.employment_type)
    if rejection is not None:
        return _down_payment_error(rejection.message)

    return DownPaymentCheckResponse(
        property_price=req.property_price,
        down_payment=req.down_payment,
        down_payment_percentage=req.down_payment / req.property_price * 100,
        employment_type=req.employment_type,
    )


def _down_payment_error(message: str) -> JSONResponse:
    body = DownPaymentErrorResponse(error=message)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


@router.get("/cmhc-info", response_model=CMHCInfoResponse)
async def cmhc_info():
    """Premium rate table and rule thresholds enforced by the calculator."""
    return CMHCInfoResponse(premium_rates=premium_rate_table(), rules=rule_summary())


@router.get("/sample", response_model=SampleResponse)
async def sample():
    return SampleResponse(example=SAMPLE_REQUEST)


@router.get("/health", response_model=HealthResponse)
async def health():
    return health_payload()
