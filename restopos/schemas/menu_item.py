from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from restopos.utils.numbers import coerce_amount


class Category(str, Enum):
    chicken = "Chicken"
    beef = "Beef"
    mutton = "Mutton"
    fish = "Fish"
    vegetables = "Vegetables"
    rice = "Rice"
    khichuri = "Khichuri"
    biriyani = "Biriyani"
    kacchi = "Kacchi"
    drinks = "Drinks"
    desserts = "Desserts"


class ItemStatus(str, Enum):
    available = "Available"
    not_available = "Not Available"


# ---------- Menu Item ----------
class MenuItemBase(BaseModel):
    name: str
    category: Category
    price: Decimal = Decimal("0")
    status: ItemStatus = ItemStatus.available
    image_url: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value):
        return coerce_amount(value)


class MenuItemCreate(MenuItemBase):
    pass


class MenuItemUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[Category] = None
    price: Optional[Decimal] = None
    status: Optional[ItemStatus] = None
    image_url: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value):
        if value is None:
            return None
        return coerce_amount(value)


class MenuItem(MenuItemBase):
    id: int

    class Config:
        frozen = True
        from_attributes = True

    @property
    def is_available(self) -> bool:
        return self.status == ItemStatus.available
