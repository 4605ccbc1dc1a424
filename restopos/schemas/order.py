from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from restopos.schemas.menu_item import MenuItem
from restopos.utils.numbers import coerce_amount, coerce_quantity
from restopos.utils.timezones import parse_date_input


class OrderItem(MenuItem):
    """Snapshot of a menu item at the moment it went into a cart."""
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class OrderTotals(BaseModel):
    subtotal: Decimal
    tax: Decimal
    discount: Decimal
    service_charge: Decimal
    grand_total: Decimal


class Order(BaseModel):
    id: str
    date: datetime
    items: Tuple[OrderItem, ...] = Field(min_length=1)
    subtotal: Decimal
    tax: Decimal
    discount: Decimal
    service_charge: Decimal
    grand_total: Decimal

    class Config:
        frozen = True

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_date_input(value)


# ---------- Cart requests ----------
class CartItemAdd(BaseModel):
    menu_item_id: int


class CartQuantityUpdate(BaseModel):
    quantity: int

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value):
        return coerce_quantity(value)


class CartDiscountUpdate(BaseModel):
    discount: Decimal = Decimal("0")

    @field_validator("discount", mode="before")
    @classmethod
    def _coerce_discount(cls, value):
        return coerce_amount(value)


class CartServiceChargeUpdate(BaseModel):
    enabled: bool


class CartRead(BaseModel):
    items: List[OrderItem]
    discount: Decimal
    use_service_charge: bool
    totals: OrderTotals
    pending_order: Optional[Order] = None
