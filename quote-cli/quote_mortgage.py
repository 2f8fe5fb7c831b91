"""CLI client for the mortgage calculator API: posts a request and prints a terminal report.

Usage:
    python quote-cli/quote_mortgage.py 600000 50000 --rate 5.99 --first-time-buyer
    python quote-cli/quote_mortgage.py 850000 90000 --rate 4.79 --amortization 30 --new-construction --schedule accelerated-biweekly
"""

import argparse
import asyncio
import sys
from decimal import Decimal

import httpx

API_BASE = "http://localhost:8000"


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a fraction as a percentage string."""
    return f"{float(v) * 100:.2f}%"


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_request_summary(payload: dict) -> None:
    _header("Request")
    print(f"  Property Price:   {_dollar(payload['propertyPrice'])}")
    print(f"  Down Payment:     {_dollar(payload['downPayment'])}")
    print(f"  Interest Rate:    {payload['annualInterestRate']}%")
    print(f"  Amortization:     {payload['amortizationPeriod']} years ({payload['paymentSchedule']})")
    borrower = [payload["employmentType"], f"{payload['downPaymentSource']} down payment"]
    if payload["isFirstTimeBuyer"]:
        borrower.append("first-time buyer")
    if payload["isNewConstruction"]:
        borrower.append("new construction")
    print(f"  Borrower:         {', '.join(borrower)}")


def print_quote(data: dict, schedule: str) -> None:
    _header("Mortgage Quote")
    print(f"  Down Payment:         {float(data['downPaymentPercentage']):.2f}%")
    print(f"  Before Insurance:     {_dollar(data['mortgageBeforeInsurance'])}")
    print(f"  Premium Rate:         {_pct(data['insurancePremiumRate'])}")
    print(f"  Insurance Premium:    {_dollar(data['insuranceAmount'])}")
    print(f"  Total Mortgage:       {_dollar(data['totalMortgage'])}")
    print(f"  Payment ({schedule}): {_dollar(data['paymentAmount'])}")


def build_payload(args: argparse.Namespace) -> dict:
    return {
        "propertyPrice": str(args.price),
        "downPayment": str(args.down_payment),
        "annualInterestRate": str(args.rate),
        "amortizationPeriod": args.amortization,
        "paymentSchedule": args.schedule,
        "isFirstTimeBuyer": args.first_time_buyer,
        "isNewConstruction": args.new_construction,
        "downPaymentSource": args.source,
        "employmentType": args.employment,
    }


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Quote a mortgage payment and CMHC premium via the calculator API"
    )
    parser.add_argument("price", type=Decimal, help="Property price")
    parser.add_argument("down_payment", type=Decimal, help="Down payment amount")
    parser.add_argument("--rate", type=Decimal, default=Decimal("5.99"), help="Annual interest rate in percent")
    parser.add_argument("--amortization", type=int, default=25, choices=range(5, 35, 5), help="Years")
    parser.add_argument(
        "--schedule",
        choices=["monthly", "biweekly", "accelerated-biweekly"],
        default="monthly",
    )
    parser.add_argument("--first-time-buyer", action="store_true")
    parser.add_argument("--new-construction", action="store_true")
    parser.add_argument("--source", choices=["traditional", "non-traditional"], default="traditional")
    parser.add_argument("--employment", choices=["regular", "self-employed-non-verified"], default="regular")
    parser.add_argument(
        "--api-url",
        default=API_BASE,
        help=f"API base URL (default: {API_BASE})",
    )

    args = parser.parse_args()
    payload = build_payload(args)
    url = f"{args.api_url}/api/mortgage/calculate"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn mortgage_calc.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code == 400 and "reason" in resp.json():
            print_request_summary(payload)
            print(f"\n  Rejected: {resp.json()['reason']}")
            sys.exit(2)
        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            print(f"  {resp.text}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    print_request_summary(payload)
    print_quote(data, args.schedule)
    print()


if __name__ == "__main__":
    asyncio.run(main())
