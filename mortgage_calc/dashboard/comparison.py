"""Schedule comparison helpers for the calculator page (no Dash imports)."""

from dataclasses import replace
from decimal import Decimal

from mortgage_calc.engine.debt import payments_per_year, periodic_payment
from mortgage_calc.models.mortgage import (
    DownPaymentSource,
    EmploymentType,
    MortgageRequest,
    PaymentSchedule,
)


def build_request(
    price, down_payment, rate, amortization, schedule,
    flags=None, source=None, employment=None,
) -> MortgageRequest:
    """Build a MortgageRequest from raw form values."""
    flags = flags or []
    return MortgageRequest(
        property_price=Decimal(str(price)),
        down_payment=Decimal(str(down_payment)),
        annual_interest_rate=Decimal(str(rate or 0)),
        amortization_period=int(amortization),
        payment_schedule=PaymentSchedule(schedule or "monthly"),
        is_first_time_buyer="first_time_buyer" in flags,
        is_new_construction="new_construction" in flags,
        down_payment_source=DownPaymentSource(source or "traditional"),
        employment_type=EmploymentType(employment or "regular"),
    )


def schedule_comparison(
    request: MortgageRequest, total_mortgage: Decimal
) -> dict[PaymentSchedule, tuple[Decimal, Decimal]]:
    """Periodic payment and yearly outlay for every schedule on the same loan."""
    rows = {}
    for schedule in PaymentSchedule:
        alt = replace(request, payment_schedule=schedule)
        payment = periodic_payment(
            total_mortgage,
            alt.annual_interest_rate,
            alt.amortization_period,
            alt.payment_schedule,
        )
        rows[schedule] = (payment, payment * payments_per_year(schedule))
    return rows
