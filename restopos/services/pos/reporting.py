# restopos/services/pos/reporting.py
"""
Sales and profit aggregation.

Every function here is pure: it takes snapshots of the ledgers/roster plus an
explicit reference time or period and recomputes from scratch. Buckets are
built on restaurant-local time (``LOCAL_TZ`` unless a zone is passed in).
"""
import calendar
from collections import Counter, defaultdict
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from zoneinfo import ZoneInfo

from restopos.schemas.employee import Employee, EmployeeStatus, SalaryType
from restopos.schemas.expense import Expense
from restopos.schemas.menu_item import Category
from restopos.schemas.order import Order
from restopos.schemas.report import (
    AnalyticsReport,
    CategorySales,
    DashboardSummary,
    EmployeeSalary,
    HourCount,
    MonthlyReport,
    Period,
    TopItem,
    TrendPoint,
)
from restopos.utils.numbers import ZERO
from restopos.utils.timezones import LOCAL_TZ, days_in_month, now_utc, to_local

PERIOD_DAYS = {
    Period.last_7_days: 7,
    Period.last_30_days: 30,
}

TOP_ITEMS_LIMIT = 5


def period_start(period: Period, now: datetime, tz: ZoneInfo = LOCAL_TZ) -> Optional[datetime]:
    """Lower bound of a period window; None means unbounded."""
    if period == Period.all_time:
        return None
    if period == Period.year:
        local_now = to_local(now, tz)
        return datetime(local_now.year, 1, 1, tzinfo=tz)
    return now - timedelta(days=PERIOD_DAYS[period])


def filter_orders_for_period(
    orders: Iterable[Order],
    period: Period,
    now: Optional[datetime] = None,
    tz: ZoneInfo = LOCAL_TZ,
) -> List[Order]:
    now = now or now_utc()
    start = period_start(period, now, tz)
    if start is None:
        return list(orders)
    return [o for o in orders if start <= o.date <= now]


def total_revenue(orders: Iterable[Order]) -> Decimal:
    return sum((o.grand_total for o in orders), ZERO)


def sales_trend(orders: Sequence[Order], period: Period, tz: ZoneInfo = LOCAL_TZ) -> List[TrendPoint]:
    """Monthly buckets for the year view, daily buckets otherwise."""
    if not orders:
        return []

    if period == Period.year:
        monthly: Dict[tuple, Decimal] = defaultdict(Decimal)
        for order in orders:
            local = to_local(order.date, tz)
            monthly[(local.year, local.month)] += order.grand_total
        return [
            TrendPoint(key=f"{year}-{month:02d}", label=calendar.month_abbr[month], value=value)
            for (year, month), value in sorted(monthly.items())
        ]

    daily: Dict[date, Decimal] = defaultdict(Decimal)
    for order in orders:
        daily[to_local(order.date, tz).date()] += order.grand_total
    return [
        TrendPoint(key=day.isoformat(), label=f"{day.day} {calendar.month_abbr[day.month]}", value=value)
        for day, value in sorted(daily.items())
    ]


def peak_hours(orders: Iterable[Order], tz: ZoneInfo = LOCAL_TZ) -> List[HourCount]:
    counts = Counter(to_local(o.date, tz).hour for o in orders)
    return [
        HourCount(hour=hour, label=f"{hour}:00", count=counts[hour])
        for hour in range(24)
        if counts[hour] > 0
    ]


def top_selling_items(orders: Iterable[Order], limit: int = TOP_ITEMS_LIMIT) -> List[TopItem]:
    # dict keeps first-encountered order, sorted() is stable -> ties stay in that order
    totals: Dict[int, TopItem] = {}
    for order in orders:
        for item in order.items:
            entry = totals.get(item.id)
            if entry is None:
                entry = totals[item.id] = TopItem(id=item.id, name=item.name, quantity=0)
            entry.quantity += item.quantity
    ranked = sorted(totals.values(), key=lambda t: t.quantity, reverse=True)
    return ranked[:limit]


def sales_by_category(orders: Iterable[Order]) -> List[CategorySales]:
    totals: Dict[Category, Decimal] = {category: ZERO for category in Category}
    seen: List[Category] = []
    for order in orders:
        for item in order.items:
            if item.category not in totals:
                raise ValueError(f"Unknown menu category: {item.category!r}")
            if item.category not in seen:
                seen.append(item.category)
            totals[item.category] += item.price * item.quantity
    ranked = sorted(seen, key=lambda c: totals[c], reverse=True)
    return [CategorySales(category=c, value=totals[c]) for c in ranked]


def analytics(
    orders: Iterable[Order],
    period: Period,
    now: Optional[datetime] = None,
    tz: ZoneInfo = LOCAL_TZ,
) -> AnalyticsReport:
    filtered = filter_orders_for_period(orders, period, now, tz)
    return AnalyticsReport(
        period=period,
        order_count=len(filtered),
        total_revenue=total_revenue(filtered),
        sales_trend=sales_trend(filtered, period, tz),
        peak_hours=peak_hours(filtered, tz),
        top_items=top_selling_items(filtered),
        sales_by_category=sales_by_category(filtered),
    )


# --- Monthly profit ----------------------------------------------------------

def _in_month(dt: datetime, year: int, month: int, tz: ZoneInfo) -> bool:
    local = to_local(dt, tz)
    return local.year == year and local.month == month


def salary_cost(employee: Employee, year: int, month: int) -> Decimal:
    if employee.salary_type == SalaryType.monthly:
        return employee.salary
    if employee.salary_type == SalaryType.daily:
        return employee.salary * days_in_month(year, month)
    raise ValueError(f"Unknown salary type: {employee.salary_type!r}")


def monthly_profit_report(
    orders: Iterable[Order],
    expenses: Iterable[Expense],
    employees: Iterable[Employee],
    year: int,
    month: int,
    tz: ZoneInfo = LOCAL_TZ,
) -> MonthlyReport:
    filtered_orders = [o for o in orders if _in_month(o.date, year, month, tz)]
    filtered_expenses = [e for e in expenses if _in_month(e.date, year, month, tz)]

    employee_salaries = [
        EmployeeSalary(
            employee_id=e.id,
            name=e.name,
            role=e.role,
            salary_type=e.salary_type,
            salary=e.salary,
            calculated_salary=salary_cost(e, year, month),
        )
        for e in employees
        if e.status == EmployeeStatus.active
    ]

    revenue = total_revenue(filtered_orders)
    other_expenses_total = sum((e.amount for e in filtered_expenses), ZERO)
    salary_expenses_total = sum((s.calculated_salary for s in employee_salaries), ZERO)
    total_expenses = other_expenses_total + salary_expenses_total

    return MonthlyReport(
        year=year,
        month=month,
        days_in_month=days_in_month(year, month),
        order_count=len(filtered_orders),
        revenue=revenue,
        other_expenses_total=other_expenses_total,
        salary_expenses_total=salary_expenses_total,
        total_expenses=total_expenses,
        net_profit=revenue - total_expenses,
        expenses=filtered_expenses,
        employee_salaries=employee_salaries,
    )


def dashboard_summary(orders: Iterable[Order], today: date, tz: ZoneInfo = LOCAL_TZ) -> DashboardSummary:
    todays = sorted(
        (o for o in orders if to_local(o.date, tz).date() == today),
        key=lambda o: o.date,
        reverse=True,
    )
    return DashboardSummary(
        date=today,
        total_sales=total_revenue(todays),
        total_orders=len(todays),
        # one order is counted as one customer
        total_customers=len(todays),
        orders=todays,
    )
