from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from restopos.utils.numbers import coerce_amount


class SalaryType(str, Enum):
    monthly = "Monthly"
    daily = "Daily"


class EmployeeStatus(str, Enum):
    active = "Active"
    inactive = "Inactive"


class EmployeeBase(BaseModel):
    name: str
    role: str
    salary_type: SalaryType = SalaryType.monthly
    salary: Decimal = Decimal("0")
    status: EmployeeStatus = EmployeeStatus.active

    @field_validator("salary", mode="before")
    @classmethod
    def _coerce_salary(cls, value):
        return coerce_amount(value)


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    salary_type: Optional[SalaryType] = None
    salary: Optional[Decimal] = None
    status: Optional[EmployeeStatus] = None

    @field_validator("salary", mode="before")
    @classmethod
    def _coerce_salary(cls, value):
        if value is None:
            return None
        return coerce_amount(value)


class Employee(EmployeeBase):
    id: int

    class Config:
        frozen = True
