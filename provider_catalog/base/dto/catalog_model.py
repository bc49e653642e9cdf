"""
Pydantic DTOs for entries of the APIpie detailed model catalog.

Purpose
-------
Validate raw catalog JSON once at the edge so the naming core can rely on
plain typed attributes. Absent or ``null`` fields become empty strings, zero
or empty lists rather than errors; unknown fields are ignored so additions
to the vendor schema do not break a run.

Instances are frozen: a fetched model is never mutated afterwards.
"""

from __future__ import annotations

from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _count(value: Any) -> int:
    if value in (None, ""):
        return 0
    return value


def _string_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [_text(v) for v in value]


Text = Annotated[str, BeforeValidator(_text)]
Count = Annotated[int, BeforeValidator(_count)]
StringList = Annotated[List[str], BeforeValidator(_string_list)]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ConfirmedPricing(_Frozen):
    """Confirmed per-token costs (decimal strings; may be empty)."""

    input_cost: Text = ""
    output_cost: Text = ""


class AdvertisedPricing(_Frozen):
    """Advertised per-token costs (decimal strings; may be empty)."""

    input_cost_per_token: Text = ""
    output_cost_per_token: Text = ""


class Pricing(_Frozen):
    confirmed: ConfirmedPricing = Field(default_factory=ConfirmedPricing)
    advertised: AdvertisedPricing = Field(default_factory=AdvertisedPricing)


class CatalogModel(_Frozen):
    """One entry of the detailed catalog.

    ``id`` is not unique: the same identifier may appear once per provider,
    route or pool variant.
    """

    id: Text
    model: Text = ""
    route: Text = ""
    description: Text = ""
    max_tokens: Count = 0
    max_response_tokens: Count = 0
    type: Text = ""
    subtype: Text = ""
    provider: Text = ""
    pool: Text = ""
    instruct_type: Text = ""
    quantization: Text = ""
    enabled: Count = 0
    available: Count = 0
    input_modalities: StringList = Field(default_factory=list)
    output_modalities: StringList = Field(default_factory=list)
    pricing: Pricing = Field(default_factory=Pricing)

    @property
    def first_description_line(self) -> str:
        """First line of the description, as fed to prompts."""
        return self.description.split("\n")[0]


class CatalogResponse(_Frozen):
    """Envelope returned by ``GET /models/detailed``."""

    object: Text = ""
    data: List[CatalogModel] = Field(default_factory=list)


__all__ = [
    "ConfirmedPricing",
    "AdvertisedPricing",
    "Pricing",
    "CatalogModel",
    "CatalogResponse",
]
