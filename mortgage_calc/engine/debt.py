"""Periodic mortgage payment computation.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from mortgage_calc.engine.errors import InvalidArgument
from mortgage_calc.models.mortgage import PaymentSchedule

TWO_PLACES = Decimal("0.01")

PAYMENTS_PER_YEAR: dict[PaymentSchedule, int] = {
    PaymentSchedule.MONTHLY: 12,
    PaymentSchedule.BIWEEKLY: 26,
    # Same periodic rate base as biweekly; acceleration applied afterwards
    PaymentSchedule.ACCELERATED_BIWEEKLY: 26,
}


def _resolve_schedule(schedule: PaymentSchedule | str) -> PaymentSchedule:
    if isinstance(schedule, PaymentSchedule):
        return schedule
    try:
        return PaymentSchedule(schedule)
    except ValueError:
        raise InvalidArgument(f"Invalid payment schedule: {schedule!r}") from None


def payments_per_year(schedule: PaymentSchedule | str) -> int:
    return PAYMENTS_PER_YEAR[_resolve_schedule(schedule)]


def periodic_payment(
    principal: Decimal,
    annual_rate_pct: Decimal,
    amortization_years: int,
    schedule: PaymentSchedule | str = PaymentSchedule.MONTHLY,
) -> Decimal:
    """Calculate the fixed payment per period for a fully amortizing loan.

    Args:
        principal: Loan amount (insurance premium included)
        annual_rate_pct: Annual interest rate in percent (e.g. 5.99)
        amortization_years: Years until the loan is fully repaid
        schedule: Payment frequency

    Rounded to cents, half up.
    """
    schedule = _resolve_schedule(schedule)
    n = PAYMENTS_PER_YEAR[schedule] * amortization_years
    r = annual_rate_pct / 100 / PAYMENTS_PER_YEAR[schedule]

    if r == 0:
        payment = principal / n
    else:
        # M = P * [r(1+r)^n] / [(1+r)^n - 1]
        factor = (1 + r) ** n
        payment = principal * (r * factor) / (factor - 1)

    if schedule is PaymentSchedule.ACCELERATED_BIWEEKLY:
        payment = payment * 12 / 24 * 26 / 12

    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)
