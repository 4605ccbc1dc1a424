from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from restopos.schemas.employee import Employee, EmployeeStatus, SalaryType
from restopos.schemas.expense import Expense, ExpenseCategory
from restopos.schemas.menu_item import Category, MenuItem
from restopos.schemas.order import Order, OrderItem
from restopos.schemas.report import Period
from restopos.services.pos import reporting
from restopos.utils.timezones import LOCAL_TZ, UTC


def item(item_id, name, category, price):
    return MenuItem(id=item_id, name=name, category=category, price=price)


BIRIYANI = item(1, "Chicken Biriyani", Category.biriyani, 180)
DRINK = item(21, "Cold Drink", Category.drinks, 30)
LASSI = item(23, "Lassi", Category.drinks, 60)
KACCHI = item(5, "Mutton Kacchi", Category.kacchi, 280)


def order(order_id, when, *lines, grand_total=None):
    items = [OrderItem(**menu_item.model_dump(), quantity=qty) for menu_item, qty in lines]
    subtotal = sum(i.price * i.quantity for i in items)
    return Order(
        id=order_id, date=when, items=items,
        subtotal=subtotal, tax=0, discount=0, service_charge=0,
        grand_total=subtotal if grand_total is None else grand_total,
    )


def local(*args):
    return datetime(*args, tzinfo=LOCAL_TZ)


# --- Period filtering ---------------------------------------------------------

def test_period_windows(fixed_now):
    orders = [
        order("#1", fixed_now - timedelta(days=3), (DRINK, 1)),
        order("#2", fixed_now - timedelta(days=7), (DRINK, 1)),  # boundary, inclusive
        order("#3", fixed_now - timedelta(days=20), (DRINK, 1)),
        order("#4", local(2025, 1, 1, 0, 0), (DRINK, 1)),
        order("#5", local(2024, 12, 31, 23, 59), (DRINK, 1)),
    ]

    def ids(period):
        return sorted(o.id for o in reporting.filter_orders_for_period(orders, period, fixed_now, LOCAL_TZ))

    assert ids(Period.last_7_days) == ["#1", "#2"]
    assert ids(Period.last_30_days) == ["#1", "#2", "#3"]
    assert ids(Period.year) == ["#1", "#2", "#3", "#4"]
    assert ids(Period.all_time) == ["#1", "#2", "#3", "#4", "#5"]


def test_empty_window_gives_empty_results(fixed_now):
    report = reporting.analytics([], Period.last_7_days, fixed_now, LOCAL_TZ)
    assert report.order_count == 0
    assert report.total_revenue == 0
    assert report.sales_trend == []
    assert report.peak_hours == []
    assert report.top_items == []
    assert report.sales_by_category == []


# --- Buckets -------------------------------------------------------------------

def test_daily_trend_is_chronological_with_day_labels():
    orders = [
        order("#1", local(2025, 11, 3, 12), (DRINK, 1)),
        order("#2", local(2025, 11, 1, 9), (DRINK, 2)),
        order("#3", local(2025, 11, 3, 20), (LASSI, 1)),
    ]
    trend = reporting.sales_trend(orders, Period.last_30_days, LOCAL_TZ)
    assert [(p.key, p.label, p.value) for p in trend] == [
        ("2025-11-01", "1 Nov", Decimal("60")),
        ("2025-11-03", "3 Nov", Decimal("90")),
    ]


def test_year_trend_buckets_by_month():
    orders = [
        order("#1", local(2025, 3, 10, 12), (DRINK, 1)),
        order("#2", local(2025, 1, 5, 12), (DRINK, 1)),
        order("#3", local(2025, 3, 28, 12), (LASSI, 1)),
    ]
    trend = reporting.sales_trend(orders, Period.year, LOCAL_TZ)
    assert [(p.key, p.label, p.value) for p in trend] == [
        ("2025-01", "Jan", Decimal("30")),
        ("2025-03", "Mar", Decimal("90")),
    ]


def test_peak_hours_only_nonzero_in_hour_order():
    orders = [
        order("#1", local(2025, 11, 1, 19, 15), (DRINK, 1)),
        order("#2", local(2025, 11, 2, 13, 0), (DRINK, 1)),
        order("#3", local(2025, 11, 3, 19, 45), (DRINK, 1)),
    ]
    hours = reporting.peak_hours(orders, LOCAL_TZ)
    assert [(h.hour, h.label, h.count) for h in hours] == [(13, "13:00", 1), (19, "19:00", 2)]


def test_peak_hours_use_local_time():
    # 14:00 UTC is 20:00 in Dhaka
    hours = reporting.peak_hours([order("#1", datetime(2025, 11, 1, 14, tzinfo=UTC), (DRINK, 1))], LOCAL_TZ)
    assert [h.hour for h in hours] == [20]


def test_top_selling_items_sums_quantity_and_limits_to_five():
    extra = [item(100 + i, f"Dish {i}", Category.rice, 10) for i in range(5)]
    orders = [
        order("#1", local(2025, 11, 1, 12), (BIRIYANI, 2), (DRINK, 1)),
        order("#2", local(2025, 11, 1, 13), (BIRIYANI, 3), (extra[0], 1)),
        order("#3", local(2025, 11, 1, 14), *[(e, 1) for e in extra]),
    ]
    top = reporting.top_selling_items(orders)

    assert len(top) == 5
    assert (top[0].id, top[0].quantity) == (BIRIYANI.id, 5)
    assert (top[1].id, top[1].quantity) == (extra[0].id, 2)
    # ties keep first-encountered order: Cold Drink came before Dish 1..4
    assert [t.name for t in top[2:]] == ["Cold Drink", "Dish 1", "Dish 2"]


def test_sales_by_category_sorted_descending():
    orders = [
        order("#1", local(2025, 11, 1, 12), (BIRIYANI, 1), (DRINK, 2)),
        order("#2", local(2025, 11, 2, 12), (KACCHI, 1), (LASSI, 1)),
    ]
    result = reporting.sales_by_category(orders)
    assert [(c.category, c.value) for c in result] == [
        (Category.kacchi, Decimal("280")),
        (Category.biriyani, Decimal("180")),
        (Category.drinks, Decimal("120")),
    ]


def test_total_revenue_uses_stored_grand_total():
    orders = [
        order("#1", local(2025, 11, 1, 12), (DRINK, 1), grand_total=Decimal("31.50")),
        order("#2", local(2025, 11, 1, 13), (DRINK, 1), grand_total=Decimal("20")),
    ]
    assert reporting.total_revenue(orders) == Decimal("51.50")


# --- Monthly profit ------------------------------------------------------------

def employee(emp_id, salary_type, salary, status=EmployeeStatus.active):
    return Employee(id=emp_id, name=f"E{emp_id}", role="Staff", salary_type=salary_type, salary=salary, status=status)


def test_salary_cost_daily_and_monthly():
    daily = employee(1, SalaryType.daily, 500)
    monthly = employee(2, SalaryType.monthly, 40000)

    assert reporting.salary_cost(daily, 2025, 11) == Decimal("15000")  # 30 days
    assert reporting.salary_cost(daily, 2024, 2) == Decimal("14500")   # leap February
    assert reporting.salary_cost(monthly, 2025, 11) == Decimal("40000")
    assert reporting.salary_cost(monthly, 2025, 2) == Decimal("40000")


def test_monthly_profit_report_boundaries_and_totals():
    orders = [
        order("#1", local(2025, 10, 31, 23, 59), (DRINK, 1)),        # previous month
        order("#2", local(2025, 11, 1, 0, 0), (BIRIYANI, 1)),        # first instant
        order("#3", local(2025, 11, 30, 23, 59, 59), (KACCHI, 1)),   # last day
        order("#4", local(2025, 12, 1, 0, 0), (LASSI, 1)),           # next month
    ]
    expenses = [
        Expense(id=1, date=local(2025, 11, 1), category=ExpenseCategory.rent, description="Rent", amount=8000),
        Expense(id=2, date=local(2025, 11, 30), category=ExpenseCategory.utilities, description="Gas", amount=300),
        Expense(id=3, date=local(2025, 10, 30), category=ExpenseCategory.other, description="Old", amount=999),
    ]
    employees = [
        employee(1, SalaryType.daily, 500),
        employee(2, SalaryType.monthly, 40000),
        employee(3, SalaryType.daily, 450, EmployeeStatus.inactive),
    ]

    report = reporting.monthly_profit_report(orders, expenses, employees, 2025, 11, LOCAL_TZ)

    assert report.order_count == 2
    assert report.revenue == Decimal("460")
    assert [e.id for e in report.expenses] == [1, 2]
    assert report.other_expenses_total == Decimal("8300")
    assert [(s.employee_id, s.calculated_salary) for s in report.employee_salaries] == [
        (1, Decimal("15000")),
        (2, Decimal("40000")),
    ]
    assert report.salary_expenses_total == Decimal("55000")
    assert report.total_expenses == Decimal("63300")
    assert report.net_profit == Decimal("460") - Decimal("63300")
    assert report.days_in_month == 30


def test_monthly_report_with_nothing_recorded():
    report = reporting.monthly_profit_report([], [], [], 2025, 2, LOCAL_TZ)
    assert report.revenue == 0
    assert report.total_expenses == 0
    assert report.net_profit == 0


def test_dashboard_counts_customers_as_orders():
    orders = [
        order("#1", local(2025, 11, 15, 9), (DRINK, 1)),
        order("#2", local(2025, 11, 15, 21), (LASSI, 1)),
        order("#3", local(2025, 11, 14, 21), (LASSI, 1)),
    ]
    summary = reporting.dashboard_summary(orders, date(2025, 11, 15), LOCAL_TZ)

    assert summary.total_orders == 2
    assert summary.total_customers == summary.total_orders
    assert summary.total_sales == Decimal("90")
    assert [o.id for o in summary.orders] == ["#2", "#1"]
