from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from restopos.core.config import settings


class Theme(str, Enum):
    light = "light"
    dark = "dark"


class Currency(BaseModel):
    code: str = Field(min_length=3, max_length=3)
    symbol: str = Field(min_length=1)


def _default_currency() -> Currency:
    return Currency(code=settings.default_currency_code, symbol=settings.default_currency_symbol)


class BillingConfig(BaseModel):
    """Process-wide billing settings, shared by reference with the builder."""
    tax_rate: Decimal = Field(default_factory=lambda: settings.default_tax_rate, ge=0, lt=1)
    service_charge_rate: Decimal = Field(
        default_factory=lambda: settings.default_service_charge_rate, ge=0, lt=1
    )
    currency: Currency = Field(default_factory=_default_currency)
    theme: Theme = Theme.light

    class Config:
        validate_assignment = True


class BillingConfigUpdate(BaseModel):
    tax_rate: Optional[Decimal] = Field(default=None, ge=0, lt=1)
    service_charge_rate: Optional[Decimal] = Field(default=None, ge=0, lt=1)
    currency: Optional[Currency] = None
    theme: Optional[Theme] = None
