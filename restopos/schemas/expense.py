from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from restopos.utils.numbers import coerce_amount
from restopos.utils.timezones import parse_date_input


class ExpenseCategory(str, Enum):
    utilities = "Utilities"
    supplies = "Supplies"
    rent = "Rent"
    maintenance = "Maintenance"
    other = "Other"


class ExpenseBase(BaseModel):
    date: datetime
    category: ExpenseCategory = ExpenseCategory.supplies
    description: str = Field(min_length=1)
    amount: Decimal = Decimal("0")

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return parse_date_input(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value):
        return coerce_amount(value)


class ExpenseCreate(ExpenseBase):
    pass


class Expense(ExpenseBase):
    id: int

    class Config:
        frozen = True
