"""Mortgage insurance (CMHC) regulatory constants and premium rate table.

Everything here is read-only. The eligibility validator, the premium rate
selector and the /cmhc-info endpoint all read from this module so the
published rules cannot drift from the enforced ones.
"""

from decimal import Decimal
from enum import Enum
from types import MappingProxyType

# Property value ceiling for insured mortgages
MAX_INSURABLE_PRICE = Decimal("1500000")

# Tiered minimum down payment: 5% of the first $500K, 10% of the remainder
TIER_THRESHOLD = Decimal("500000")
FIRST_TIER_RATE = Decimal("0.05")
SECOND_TIER_RATE = Decimal("0.10")

# Minimum down payment percentages
BASE_MIN_PCT = Decimal("5")
SELF_EMPLOYED_MIN_PCT = Decimal("10")
UNINSURED_MIN_PCT = Decimal("20")  # At or above this no premium is charged

# Amortization
MAX_AMORTIZATION_REGULAR = 25
MAX_AMORTIZATION_EXTENDED = 30  # First-time buyers / new construction
EXTENDED_AMORTIZATION_SURCHARGE = Decimal("0.0020")  # +20bps


class PremiumCategory(Enum):
    REGULAR = "regular"
    NON_TRADITIONAL = "nonTraditional"
    SELF_EMPLOYED = "selfEmployed"


# (minimum down payment %, premium rate) per category, highest band first.
# Non-traditional funds at 10%+ price the same as traditional ones.
PREMIUM_BANDS: MappingProxyType = MappingProxyType({
    PremiumCategory.REGULAR: (
        (Decimal("15"), Decimal("0.0280")),
        (Decimal("10"), Decimal("0.0310")),
        (Decimal("0"), Decimal("0.0400")),
    ),
    PremiumCategory.NON_TRADITIONAL: (
        (Decimal("15"), Decimal("0.0280")),
        (Decimal("10"), Decimal("0.0310")),
        (Decimal("0"), Decimal("0.0450")),
    ),
    PremiumCategory.SELF_EMPLOYED: (
        (Decimal("15"), Decimal("0.0290")),
        (Decimal("10"), Decimal("0.0475")),
    ),
})


def tiered_minimum_down_payment(property_price: Decimal) -> Decimal:
    """Minimum down payment for a property priced above the tier threshold."""
    excess = max(property_price - TIER_THRESHOLD, Decimal("0"))
    return TIER_THRESHOLD * FIRST_TIER_RATE + excess * SECOND_TIER_RATE


def _band_label(floor: Decimal, ceiling: Decimal) -> str:
    floor = max(floor, BASE_MIN_PCT)
    return f"{floor:f}-{ceiling - Decimal('0.01'):f}"


def premium_rate_table() -> dict[str, dict[str, float]]:
    """Premium rates in percent keyed by category and down payment band.

    e.g. {"regular": {"5-9.99": 4.0, ..., "20+": 0.0}, ...}
    """
    table: dict[str, dict[str, float]] = {}
    for category, bands in PREMIUM_BANDS.items():
        ascending = sorted(bands)
        ceilings = [floor for floor, _ in ascending[1:]] + [UNINSURED_MIN_PCT]
        rows = {
            _band_label(floor, ceiling): float(rate * 100)
            for (floor, rate), ceiling in zip(ascending, ceilings)
        }
        rows[f"{UNINSURED_MIN_PCT:f}+"] = 0.0
        table[category.value] = rows
    return table


def rule_summary() -> dict:
    """Regulatory thresholds as published by the info endpoint."""
    first_pct = f"{FIRST_TIER_RATE * 100:.0f}%"
    second_pct = f"{SECOND_TIER_RATE * 100:.0f}%"
    return {
        "maxPropertyValue": int(MAX_INSURABLE_PRICE),
        "minDownPaymentRules": {
            "upTo500k": f"{BASE_MIN_PCT:f}% of purchase price",
            "over500kTo1500k": (
                f"{first_pct} of first ${TIER_THRESHOLD:,.0f} + {second_pct} of remaining"
            ),
            "over1500k": f"{UNINSURED_MIN_PCT:f}% of purchase price",
        },
        "maxAmortization": {
            "regular": MAX_AMORTIZATION_REGULAR,
            "firstTimeBuyerOrNewConstruction": MAX_AMORTIZATION_EXTENDED,
        },
        "extendedAmortization": {
            "eligibility": ["first-time-buyer", "new-construction"],
            "additionalPremium": float(EXTENDED_AMORTIZATION_SURCHARGE * 100),
        },
    }
