"""Mortgage insurance premium rate selection.

The premium is a fraction of the pre-insurance loan amount, chosen from the
band table in rules.py by borrower category and down payment percentage,
plus a surcharge for extended amortization.
"""

from decimal import Decimal

from mortgage_calc.engine.errors import InvalidState
from mortgage_calc.engine.rules import (
    EXTENDED_AMORTIZATION_SURCHARGE,
    MAX_AMORTIZATION_REGULAR,
    PREMIUM_BANDS,
    SELF_EMPLOYED_MIN_PCT,
    UNINSURED_MIN_PCT,
    PremiumCategory,
)
from mortgage_calc.models.mortgage import DownPaymentSource, EmploymentType


def premium_category(
    down_payment_source: DownPaymentSource,
    employment_type: EmploymentType,
) -> PremiumCategory:
    if employment_type == EmploymentType.SELF_EMPLOYED_NON_VERIFIED:
        return PremiumCategory.SELF_EMPLOYED
    if down_payment_source == DownPaymentSource.NON_TRADITIONAL:
        return PremiumCategory.NON_TRADITIONAL
    return PremiumCategory.REGULAR


def select_premium_rate(
    down_payment_percentage: Decimal,
    amortization_period: int,
    is_first_time_buyer: bool,
    is_new_construction: bool,
    down_payment_source: DownPaymentSource,
    employment_type: EmploymentType,
) -> Decimal:
    """Premium rate for an insured mortgage.

    Bands use inclusive lower edges: exactly 10% is priced in the 10-14.99
    band. Returns Decimal("0") at 20% down or more, with no surcharge.

    Raises:
        InvalidState: self-employed (non-verified) borrower below 10% down,
            which the eligibility validator rejects first.
    """
    if down_payment_percentage >= UNINSURED_MIN_PCT:
        return Decimal("0")

    category = premium_category(down_payment_source, employment_type)
    if (
        category is PremiumCategory.SELF_EMPLOYED
        and down_payment_percentage < SELF_EMPLOYED_MIN_PCT
    ):
        raise InvalidState(
            "Self-employed with non-verified income requires minimum "
            f"{SELF_EMPLOYED_MIN_PCT:f}% down payment; got {down_payment_percentage:.2f}%"
        )

    rate = next(
        band_rate
        for floor, band_rate in PREMIUM_BANDS[category]
        if down_payment_percentage >= floor
    )

    if amortization_period > MAX_AMORTIZATION_REGULAR and (
        is_first_time_buyer or is_new_construction
    ):
        rate += EXTENDED_AMORTIZATION_SURCHARGE

    return rate
