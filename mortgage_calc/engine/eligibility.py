"""Eligibility validator: down payment tiers and amortization limits.

Pure functions. Rules are checked in a fixed order and the first failure is
the only one reported.
"""

import logging
from decimal import Decimal

from mortgage_calc.engine.rules import (
    BASE_MIN_PCT,
    MAX_AMORTIZATION_REGULAR,
    MAX_INSURABLE_PRICE,
    SELF_EMPLOYED_MIN_PCT,
    TIER_THRESHOLD,
    UNINSURED_MIN_PCT,
    tiered_minimum_down_payment,
)
from mortgage_calc.models.mortgage import (
    EmploymentType,
    MortgageRequest,
    Rejection,
    RejectionRule,
)

logger = logging.getLogger(__name__)

HIGH_VALUE_MESSAGE = (
    f"For properties over ${MAX_INSURABLE_PRICE:,.0f}, "
    f"minimum down payment is {UNINSURED_MIN_PCT:f}%"
)
EXCEEDS_PRICE_MESSAGE = "Down payment cannot exceed property price"
SELF_EMPLOYED_MESSAGE = (
    "Self-employed with non-verified income requires minimum "
    f"{SELF_EMPLOYED_MIN_PCT:f}% down payment"
)
TIERED_MESSAGE = (
    f"For homes over ${TIER_THRESHOLD:,.0f}, minimum down payment is 5% of "
    f"first ${TIER_THRESHOLD:,.0f} and 10% of remaining amount"
)
BASE_MESSAGE = f"Minimum down payment must be {BASE_MIN_PCT:f}% of property price"
AMORTIZATION_MESSAGE = (
    f"Maximum amortization period is {MAX_AMORTIZATION_REGULAR} years, unless you "
    "are a first-time home buyer or purchasing a newly-constructed home"
)


def validate_down_payment(
    property_price: Decimal,
    down_payment: Decimal,
    employment_type: EmploymentType = EmploymentType.REGULAR,
) -> Rejection | None:
    """Check the down payment against the tiered regulatory minimums.

    Returns None when the down payment is acceptable.
    """
    pct = down_payment / property_price * 100

    # Above the insurable ceiling the loan must be uninsured
    if property_price > MAX_INSURABLE_PRICE and pct < UNINSURED_MIN_PCT:
        return Rejection(RejectionRule.HIGH_VALUE_MINIMUM, HIGH_VALUE_MESSAGE)

    if down_payment > property_price:
        return Rejection(RejectionRule.DOWN_PAYMENT_EXCEEDS_PRICE, EXCEEDS_PRICE_MESSAGE)

    if (
        employment_type == EmploymentType.SELF_EMPLOYED_NON_VERIFIED
        and pct < SELF_EMPLOYED_MIN_PCT
    ):
        return Rejection(RejectionRule.SELF_EMPLOYED_MINIMUM, SELF_EMPLOYED_MESSAGE)

    if property_price > TIER_THRESHOLD:
        if down_payment < tiered_minimum_down_payment(property_price):
            return Rejection(RejectionRule.TIERED_MINIMUM, TIERED_MESSAGE)
    elif pct < BASE_MIN_PCT:
        return Rejection(RejectionRule.BASE_MINIMUM, BASE_MESSAGE)

    return None


def validate(request: MortgageRequest) -> Rejection | None:
    """Run every eligibility rule against a full mortgage request."""
    rejection = validate_down_payment(
        request.property_price,
        request.down_payment,
        request.employment_type,
    )
    if rejection is None and (
        request.amortization_period > MAX_AMORTIZATION_REGULAR
        and not (request.is_first_time_buyer or request.is_new_construction)
    ):
        rejection = Rejection(RejectionRule.MAX_AMORTIZATION, AMORTIZATION_MESSAGE)

    if rejection is not None:
        logger.info("Mortgage request rejected: %s", rejection.rule.value)
    return rejection
