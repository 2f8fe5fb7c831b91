from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentSchedule(Enum):
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"
    ACCELERATED_BIWEEKLY = "accelerated-biweekly"


class DownPaymentSource(Enum):
    TRADITIONAL = "traditional"
    NON_TRADITIONAL = "non-traditional"


class EmploymentType(Enum):
    REGULAR = "regular"
    SELF_EMPLOYED_NON_VERIFIED = "self-employed-non-verified"


class RejectionRule(Enum):
    HIGH_VALUE_MINIMUM = "high_value_minimum"
    DOWN_PAYMENT_EXCEEDS_PRICE = "down_payment_exceeds_price"
    SELF_EMPLOYED_MINIMUM = "self_employed_minimum"
    TIERED_MINIMUM = "tiered_minimum"
    BASE_MINIMUM = "base_minimum"
    MAX_AMORTIZATION = "max_amortization"


@dataclass(frozen=True)
class MortgageRequest:
    property_price: Decimal
    down_payment: Decimal
    annual_interest_rate: Decimal  # Percent, e.g. Decimal("5.99")
    amortization_period: int  # Years
    payment_schedule: PaymentSchedule = PaymentSchedule.MONTHLY
    is_first_time_buyer: bool = False
    is_new_construction: bool = False
    down_payment_source: DownPaymentSource = DownPaymentSource.TRADITIONAL
    employment_type: EmploymentType = EmploymentType.REGULAR

    @property
    def down_payment_percentage(self) -> Decimal:
        return self.down_payment / self.property_price * 100

    @property
    def mortgage_before_insurance(self) -> Decimal:
        return self.property_price - self.down_payment


@dataclass(frozen=True)
class MortgageResult:
    down_payment_percentage: Decimal
    mortgage_before_insurance: Decimal
    insurance_premium_rate: Decimal  # Fraction of the pre-insurance loan
    insurance_amount: Decimal
    total_mortgage: Decimal
    payment_amount: Decimal  # Per period of the requested schedule


@dataclass(frozen=True)
class Rejection:
    """A business rule the request failed. Returned, never raised."""
    rule: RejectionRule
    message: str
