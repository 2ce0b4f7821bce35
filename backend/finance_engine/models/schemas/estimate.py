"""Pydantic schemas for financing estimate requests and responses."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_serializer, field_validator, model_validator

from finance_engine.core.enums import Product
from finance_engine.models.domain.pricing import EstimateResult, LenderOffer
from finance_engine.models.schemas.catalog import LenderCapsResponse, ScoreBandResponse
from finance_engine.models.schemas.common import CamelModel, JsonDecimal, to_jsonable


# ==================== Request Schemas ====================


class FinancingRequest(CamelModel):
    """
    Financing request with documented defaults.

    Every field is optional. Omitted or null fields take their default,
    so the echoed inputs always show the values that were priced.
    """

    model_config = ConfigDict(extra="ignore")

    state: str = Field("GA", min_length=1, description="Buyer jurisdiction code (e.g., 'GA')")
    score: JsonDecimal = Field(Decimal("700"), description="Credit score")
    vehicle_price: JsonDecimal = Decimal("20000")
    down_payment: JsonDecimal = Decimal("2000")
    trade_in_value: JsonDecimal = Decimal("0")
    est_taxes_and_fees: JsonDecimal = Decimal("1200")
    term: int = Field(60, description="Loan term in months")
    vehicle_year: int = 2018
    mileage: JsonDecimal = Decimal("80000")
    product: str = Field(
        Product.AUTO_USED.value,
        description=f"Product id ('{Product.AUTO_USED.value}' or '{Product.AUTO_NEW.value}')",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat explicit nulls as omitted so defaults apply."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("state")
    @classmethod
    def validate_state(cls, v: str) -> str:
        """Ensure state is uppercase."""
        return v.upper()

    @property
    def is_used(self) -> bool:
        return self.product == Product.AUTO_USED.value


# ==================== Response Schemas ====================


class LenderOfferResponse(CamelModel):
    """Schema for a single lender offer."""

    lender_id: str
    lender_name: str
    apr_low: JsonDecimal
    apr_high: JsonDecimal
    payment_low: JsonDecimal
    payment_high: JsonDecimal
    term: int
    loan_amount: JsonDecimal
    notes: list[str] = Field(default_factory=list)
    caps: Optional[LenderCapsResponse] = None

    @classmethod
    def from_domain(cls, offer: LenderOffer) -> "LenderOfferResponse":
        return cls(
            lender_id=offer.lender_id,
            lender_name=offer.lender_name,
            apr_low=offer.apr_low,
            apr_high=offer.apr_high,
            payment_low=offer.payment_low,
            payment_high=offer.payment_high,
            term=offer.term,
            loan_amount=offer.loan_amount,
            notes=list(offer.notes),
            caps=LenderCapsResponse.from_domain(offer.caps),
        )


class EstimateResponse(CamelModel):
    """Schema for the estimator response: {meta, band, inputs, results}."""

    meta: dict[str, Any] = Field(default_factory=dict)
    band: ScoreBandResponse
    inputs: FinancingRequest
    results: list[LenderOfferResponse] = Field(default_factory=list)

    @field_serializer("meta")
    def serialize_meta(self, meta: dict[str, Any]) -> dict[str, Any]:
        return to_jsonable(meta)

    @classmethod
    def from_result(cls, result: EstimateResult) -> "EstimateResponse":
        return cls(
            meta=dict(result.meta),
            band=ScoreBandResponse.from_domain(result.band),
            inputs=result.inputs,
            results=[LenderOfferResponse.from_domain(offer) for offer in result.results],
        )


class ErrorResponse(CamelModel):
    """Schema for estimator error responses."""

    error: str
