"""Validated DTOs crossing the catalog boundary."""

from .catalog_model import (
    AdvertisedPricing,
    CatalogModel,
    CatalogResponse,
    ConfirmedPricing,
    Pricing,
)

__all__ = [
    "AdvertisedPricing",
    "CatalogModel",
    "CatalogResponse",
    "ConfirmedPricing",
    "Pricing",
]
