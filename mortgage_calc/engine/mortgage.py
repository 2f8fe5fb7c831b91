"""Mortgage calculation pipeline.

validate -> premium rate -> insured total -> periodic payment.
"""

import logging

from mortgage_calc.engine.debt import periodic_payment
from mortgage_calc.engine.eligibility import validate
from mortgage_calc.engine.premium import select_premium_rate
from mortgage_calc.models.mortgage import MortgageRequest, MortgageResult, Rejection

logger = logging.getLogger(__name__)


def calculate_mortgage(request: MortgageRequest) -> MortgageResult | Rejection:
    """Price the insurance premium and periodic payment for a mortgage request.

    Returns a Rejection for the first failed eligibility rule instead of a
    result. InvalidArgument and InvalidState propagate.

    The insurance amount is the exact product of the pre-insurance loan and
    the premium rate; only the periodic payment is rounded to cents.
    """
    rejection = validate(request)
    if rejection is not None:
        return rejection

    pct = request.down_payment_percentage
    before_insurance = request.mortgage_before_insurance

    rate = select_premium_rate(
        pct,
        request.amortization_period,
        request.is_first_time_buyer,
        request.is_new_construction,
        request.down_payment_source,
        request.employment_type,
    )
    insurance = before_insurance * rate
    total = before_insurance + insurance

    payment = periodic_payment(
        total,
        request.annual_interest_rate,
        request.amortization_period,
        request.payment_schedule,
    )
    logger.debug(
        "Mortgage priced: total=%s rate=%s payment=%s (%s)",
        total, rate, payment, request.payment_schedule.value,
    )

    return MortgageResult(
        down_payment_percentage=pct,
        mortgage_before_insurance=before_insurance,
        insurance_premium_rate=rate,
        insurance_amount=insurance,
        total_mortgage=total,
        payment_amount=payment,
    )
