"""Pydantic schemas for API request/response models.

Field names are camelCase on the wire, snake_case in Python.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from mortgage_calc.models.mortgage import (
    DownPaymentSource,
    EmploymentType,
    MortgageRequest,
    MortgageResult,
    PaymentSchedule,
)

# Decimal in Python, plain JSON number on the wire
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class MortgageCalculationRequest(CamelModel):
    property_price: Decimal = Field(..., gt=0, description="Purchase price")
    down_payment: Decimal = Field(..., gt=0)
    annual_interest_rate: Decimal = Field(..., ge=0, le=100, description="Percent, e.g. 5.99")
    amortization_period: int = Field(..., ge=5, le=30, multiple_of=5, description="Years")
    payment_schedule: PaymentSchedule
    is_first_time_buyer: bool = False
    is_new_construction: bool = False
    down_payment_source: DownPaymentSource = DownPaymentSource.TRADITIONAL
    employment_type: EmploymentType = EmploymentType.REGULAR

    def to_domain(self) -> MortgageRequest:
        return MortgageRequest(
            property_price=self.property_price,
            down_payment=self.down_payment,
            annual_interest_rate=self.annual_interest_rate,
            amortization_period=self.amortization_period,
            payment_schedule=self.payment_schedule,
            is_first_time_buyer=self.is_first_time_buyer,
            is_new_construction=self.is_new_construction,
            down_payment_source=self.down_payment_source,
            employment_type=self.employment_type,
        )


class DownPaymentCheckRequest(CamelModel):
    # Optional so a missing value gets the endpoint's own error message
    property_price: Decimal | None = Field(None, gt=0)
    down_payment: Decimal | None = Field(None, gt=0)
    employment_type: EmploymentType = EmploymentType.REGULAR


# ---- Response schemas ----

class MortgageCalculationResponse(CamelModel):
    down_payment_percentage: JsonDecimal
    mortgage_before_insurance: JsonDecimal
    insurance_premium_rate: JsonDecimal
    insurance_amount: JsonDecimal
    total_mortgage: JsonDecimal
    payment_amount: JsonDecimal

    @classmethod
    def from_result(cls, result: MortgageResult) -> "MortgageCalculationResponse":
        return cls(
            down_payment_percentage=result.down_payment_percentage,
            mortgage_before_insurance=result.mortgage_before_insurance,
            insurance_premium_rate=result.insurance_premium_rate,
            insurance_amount=result.insurance_amount,
            total_mortgage=result.total_mortgage,
            payment_amount=result.payment_amount,
        )


class RejectionResponse(BaseModel):
    status: str = "rejected"
    reason: str


class DownPaymentCheckResponse(CamelModel):
    is_valid: bool = True
    property_price: JsonDecimal
    down_payment: JsonDecimal
    down_payment_percentage: JsonDecimal
    employment_type: EmploymentType


class DownPaymentErrorResponse(CamelModel):
    is_valid: bool = False
    error: str


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    status: str = "error"
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str


class CMHCInfoResponse(CamelModel):
    premium_rates: dict[str, dict[str, float]]
    rules: dict


class SampleResponse(BaseModel):
    example: dict


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str
