"""Pydantic schemas for the rule catalog file and catalog API responses."""

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Optional

from pydantic import Field, field_serializer, field_validator, model_validator

from finance_engine.core.enums import Comparator, ContextField
from finance_engine.models.domain.catalog import (
    Adjuster,
    AdjusterPredicate,
    Catalog,
    LenderCaps,
    LenderRule,
    ScoreBand,
)
from finance_engine.models.schemas.common import CamelModel, JsonDecimal, to_jsonable


# ==================== Catalog File Schemas ====================


class ScoreBandConfig(CamelModel):
    """Score band as written in the catalog file: {"id", "min", "max"}."""

    id: str = Field(..., min_length=1)
    min_score: Decimal = Field(..., alias="min")
    max_score: Decimal = Field(..., alias="max")

    @model_validator(mode="after")
    def validate_bounds(self) -> "ScoreBandConfig":
        """Ensure the interval is not inverted."""
        if self.min_score > self.max_score:
            raise ValueError(
                f"Score band '{self.id}' has min {self.min_score} above max {self.max_score}"
            )
        return self

    def to_domain(self) -> ScoreBand:
        return ScoreBand(id=self.id, min_score=self.min_score, max_score=self.max_score)


class LenderCapsConfig(CamelModel):
    """Optional lender caps; omitted caps are unbounded."""

    max_ltv: Optional[Decimal] = Field(None, alias="maxLTV")
    min_year: Optional[int] = None
    max_miles: Optional[int] = None

    def to_domain(self) -> LenderCaps:
        return LenderCaps(
            max_ltv=self.max_ltv,
            min_year=self.min_year,
            max_miles=self.max_miles,
        )


class AdjusterWhenConfig(CamelModel):
    """
    Conditions of an adjuster.

    Every field is optional; a field left out (or null) places no
    condition on the context.

    Criteria format: {"used": true, "termMin": 61, "ltvMax": 1.2, "state": "GA"}
    """

    used: Optional[bool] = None
    term_min: Optional[int] = None
    term_max: Optional[int] = None
    ltv_min: Optional[Decimal] = None
    ltv_max: Optional[Decimal] = None
    state: Optional[str] = None

    @field_validator("state")
    @classmethod
    def validate_state(cls, v: Optional[str]) -> Optional[str]:
        """Ensure state is uppercase if provided."""
        return v.upper() if v else v

    def to_predicates(self) -> tuple[AdjusterPredicate, ...]:
        """Compile the present conditions into an ordered predicate list."""
        predicates: list[AdjusterPredicate] = []

        if self.used is not None:
            predicates.append(AdjusterPredicate(ContextField.USED, Comparator.EQ, self.used))
        if self.term_min is not None:
            predicates.append(AdjusterPredicate(ContextField.TERM, Comparator.GE, self.term_min))
        if self.term_max is not None:
            predicates.append(AdjusterPredicate(ContextField.TERM, Comparator.LE, self.term_max))
        if self.ltv_min is not None:
            predicates.append(AdjusterPredicate(ContextField.LTV, Comparator.GE, self.ltv_min))
        if self.ltv_max is not None:
            predicates.append(AdjusterPredicate(ContextField.LTV, Comparator.LE, self.ltv_max))
        if self.state is not None:
            predicates.append(AdjusterPredicate(ContextField.STATE, Comparator.EQ, self.state))

        return tuple(predicates)


class AdjusterConfig(CamelModel):
    """Adjuster as written in the catalog file: {"when": {...}, "aprAdd": 0.01}."""

    when: Optional[AdjusterWhenConfig] = None
    apr_add: Optional[Decimal] = None

    def to_domain(self) -> Adjuster:
        when = self.when or AdjusterWhenConfig()
        return Adjuster(
            predicates=when.to_predicates(),
            apr_add=self.apr_add if self.apr_add is not None else Decimal("0"),
        )


class LenderRuleConfig(CamelModel):
    """Lender rule as written in the catalog file."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    states: list[str]
    products: list[str]
    terms: list[int]
    base_apr_by_band: dict[str, Optional[Decimal]]
    caps: Optional[LenderCapsConfig] = None
    adjusters: list[AdjusterConfig] = Field(default_factory=list)

    @field_validator("states")
    @classmethod
    def validate_states(cls, v: list[str]) -> list[str]:
        """Normalize state codes to uppercase."""
        return [state.upper() for state in v]

    def to_domain(self) -> LenderRule:
        base_aprs = {
            band_id: apr for band_id, apr in self.base_apr_by_band.items() if apr is not None
        }
        return LenderRule(
            id=self.id,
            name=self.name,
            states=frozenset(self.states),
            products=frozenset(self.products),
            terms=frozenset(self.terms),
            base_apr_by_band=MappingProxyType(base_aprs),
            caps=self.caps.to_domain() if self.caps else None,
            adjusters=tuple(adjuster.to_domain() for adjuster in self.adjusters),
        )


class CatalogConfig(CamelModel):
    """Top-level catalog file: {"meta", "scoreBands", "lenders"}."""

    meta: dict[str, Any] = Field(default_factory=dict)
    score_bands: list[ScoreBandConfig]
    lenders: list[LenderRuleConfig]

    def to_domain(self) -> Catalog:
        return Catalog(
            meta=MappingProxyType(dict(self.meta)),
            score_bands=tuple(band.to_domain() for band in self.score_bands),
            lenders=tuple(lender.to_domain() for lender in self.lenders),
        )


# ==================== Catalog Response Schemas ====================


class ScoreBandResponse(CamelModel):
    """Schema for score band response."""

    id: str
    min_score: JsonDecimal = Field(..., alias="min")
    max_score: JsonDecimal = Field(..., alias="max")

    @classmethod
    def from_domain(cls, band: ScoreBand) -> "ScoreBandResponse":
        return cls(id=band.id, min_score=band.min_score, max_score=band.max_score)


class LenderCapsResponse(CamelModel):
    """Schema for lender caps response; null means unbounded."""

    max_ltv: Optional[JsonDecimal] = Field(None, alias="maxLTV")
    min_year: Optional[int] = None
    max_miles: Optional[int] = None

    @classmethod
    def from_domain(cls, caps: Optional[LenderCaps]) -> Optional["LenderCapsResponse"]:
        if caps is None:
            return None
        return cls(max_ltv=caps.max_ltv, min_year=caps.min_year, max_miles=caps.max_miles)


class LenderSummaryResponse(CamelModel):
    """Schema for lender response in catalog listings."""

    id: str
    name: str
    states: list[str]
    products: list[str]
    terms: list[int]
    base_apr_by_band: dict[str, JsonDecimal]
    caps: Optional[LenderCapsResponse] = None
    adjuster_count: int = 0

    @classmethod
    def from_domain(cls, lender: LenderRule) -> "LenderSummaryResponse":
        return cls(
            id=lender.id,
            name=lender.name,
            states=sorted(lender.states),
            products=sorted(lender.products),
            terms=sorted(lender.terms),
            base_apr_by_band=dict(lender.base_apr_by_band),
            caps=LenderCapsResponse.from_domain(lender.caps),
            adjuster_count=len(lender.adjusters),
        )


class LenderListResponse(CamelModel):
    """Schema for lender list response."""

    items: list[LenderSummaryResponse]
    total: int


class CatalogSummaryResponse(CamelModel):
    """Schema for catalog overview response."""

    meta: dict[str, Any] = Field(default_factory=dict)
    score_band_count: int
    lender_count: int

    @field_serializer("meta")
    def serialize_meta(self, meta: dict[str, Any]) -> dict[str, Any]:
        return to_jsonable(meta)
