"""Tests for the /api/mortgage routes."""

from datetime import datetime

from mortgage_calc.engine.eligibility import (
    BASE_MESSAGE,
    SELF_EMPLOYED_MESSAGE,
    TIERED_MESSAGE,
)
from mortgage_calc.engine.errors import InvalidState


class TestCalculate:
    def test_calculates_mortgage(self, client, calculate_payload):
        resp = client.post("/api/mortgage/calculate", json=calculate_payload)
        assert resp.status_code == 200
        assert resp.json() == {
            "downPaymentPercentage": 20,
            "mortgageBeforeInsurance": 400000,
            "insurancePremiumRate": 0,
            "insuranceAmount": 0,
            "totalMortgage": 400000,
            "paymentAmount": 2338.36,
        }

    def test_insured_mortgage(self, client, calculate_payload):
        calculate_payload["downPayment"] = 50000
        data = client.post("/api/mortgage/calculate", json=calculate_payload).json()
        assert data["insurancePremiumRate"] == 0.031
        assert data["insuranceAmount"] == 13950
        assert data["totalMortgage"] == 463950

    def test_defaults_for_optional_fields(self, client):
        resp = client.post("/api/mortgage/calculate", json={
            "propertyPrice": 500000,
            "downPayment": 100000,
            "annualInterestRate": 0,
            "amortizationPeriod": 25,
            "paymentSchedule": "monthly",
        })
        assert resp.status_code == 200
        assert resp.json()["paymentAmount"] == 1333.33

    def test_rejection_reports_one_reason(self, client, calculate_payload):
        calculate_payload.update(propertyPrice=600000, downPayment=30000)
        resp = client.post("/api/mortgage/calculate", json=calculate_payload)
        assert resp.status_code == 400
        assert resp.json() == {"status": "rejected", "reason": TIERED_MESSAGE}

    def test_amortization_must_be_multiple_of_five(self, client, calculate_payload):
        calculate_payload["amortizationPeriod"] = 12
        resp = client.post("/api/mortgage/calculate", json=calculate_payload)
        assert resp.status_code == 400
        body = resp.json()
        assert body["status"] == "error"
        assert [e["field"] for e in body["errors"]] == ["amortizationPeriod"]

    def test_unknown_schedule_is_schema_error(self, client, calculate_payload):
        calculate_payload["paymentSchedule"] = "weekly"
        resp = client.post("/api/mortgage/calculate", json=calculate_payload)
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "paymentSchedule"

    def test_negative_price_is_schema_error(self, client, calculate_payload):
        calculate_payload["propertyPrice"] = -1
        resp = client.post("/api/mortgage/calculate", json=calculate_payload)
        assert resp.status_code == 400

    def test_contract_fault_is_not_a_rejection(self, client, calculate_payload, monkeypatch):
        def broken(_request):
            raise InvalidState("validator bypassed")

        monkeypatch.setattr("mortgage_calc.api.routes.mortgage.calculate_mortgage", broken)
        resp = client.post("/api/mortgage/calculate", json=calculate_payload)
        assert resp.status_code == 500
        assert resp.json() == {"status": "error", "message": "validator bypassed"}


class TestValidateDownPayment:
    def test_valid_down_payment(self, client):
        resp = client.post("/api/mortgage/validate-down-payment", json={
            "propertyPrice": 500000,
            "downPayment": 50000,
            "employmentType": "regular",
        })
        assert resp.status_code == 200
        assert resp.json() == {
            "isValid": True,
            "propertyPrice": 500000,
            "downPayment": 50000,
            "downPaymentPercentage": 10,
            "employmentType": "regular",
        }

    def test_too_low(self, client):
        resp = client.post("/api/mortgage/validate-down-payment", json={
            "propertyPrice": 500000,
            "downPayment": 10000,
        })
        assert resp.status_code == 400
        assert resp.json() == {"isValid": False, "error": BASE_MESSAGE}

    def test_missing_fields(self, client):
        resp = client.post("/api/mortgage/validate-down-payment", json={"propertyPrice": 500000})
        assert resp.status_code == 400
        assert resp.json() == {
            "isValid": False,
            "error": "Property price and down payment are required",
        }

    def test_self_employed_insufficient(self, client):
        resp = client.post("/api/mortgage/validate-down-payment", json={
            "propertyPrice": 500000,
            "downPayment": 40000,
            "employmentType": "self-employed-non-verified",
        })
        assert resp.status_code == 400
        assert resp.json()["error"] == SELF_EMPLOYED_MESSAGE


class TestInfoEndpoints:
    def test_cmhc_info(self, client):
        data = client.get("/api/mortgage/cmhc-info").json()
        assert data["premiumRates"]["regular"]["10-14.99"] == 3.10
        assert data["premiumRates"]["selfEmployed"] == {"10-14.99": 4.75, "15-19.99": 2.90, "20+": 0}
        assert data["rules"]["maxPropertyValue"] == 1500000
        assert data["rules"]["extendedAmortization"]["additionalPremium"] == 0.20

    def test_sample_is_calculable(self, client):
        example = client.get("/api/mortgage/sample").json()["example"]
        assert example["propertyPrice"] == 600000
        resp = client.post("/api/mortgage/calculate", json=example)
        assert resp.status_code == 200
        # 50K on 600K is above the 35K tiered minimum: insured at 4%
        assert resp.json()["insurancePremiumRate"] == 0.04

    def test_health(self, client):
        for path in ("/health", "/api/mortgage/health"):
            data = client.get(path).json()
            assert data["status"] == "ok"
            datetime.fromisoformat(data["timestamp"])
