from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel

from restopos.schemas.employee import SalaryType
from restopos.schemas.expense import Expense
from restopos.schemas.menu_item import Category
from restopos.schemas.order import Order


class Period(str, Enum):
    last_7_days = "7d"
    last_30_days = "30d"
    year = "year"
    all_time = "all"


class TrendPoint(BaseModel):
    key: str  # ISO day or YYYY-MM
    label: str
    value: Decimal


class HourCount(BaseModel):
    hour: int
    label: str
    count: int


class TopItem(BaseModel):
    id: int
    name: str
    quantity: int


class CategorySales(BaseModel):
    category: Category
    value: Decimal


class AnalyticsReport(BaseModel):
    period: Period
    order_count: int
    total_revenue: Decimal
    sales_trend: List[TrendPoint]
    peak_hours: List[HourCount]
    top_items: List[TopItem]
    sales_by_category: List[CategorySales]


class EmployeeSalary(BaseModel):
    employee_id: int
    name: str
    role: str
    salary_type: SalaryType
    salary: Decimal
    calculated_salary: Decimal


class MonthlyReport(BaseModel):
    year: int
    month: int
    days_in_month: int
    order_count: int
    revenue: Decimal
    other_expenses_total: Decimal
    salary_expenses_total: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    expenses: List[Expense]
    employee_salaries: List[EmployeeSalary]


class DashboardSummary(BaseModel):
    date: date
    total_sales: Decimal
    total_orders: int
    total_customers: int
    orders: List[Order]
