# scripts/pos_report.py
"""
Print reports from the seeded register using the saved billing settings.

    python -m scripts.pos_report monthly --month 2025-10
    python -m scripts.pos_report analytics --period 7d
    python -m scripts.pos_report dashboard
"""
import argparse
import asyncio

from restopos.crud.settings import load_billing_config
from restopos.db import async_session, create_db_and_tables
from restopos.schemas.report import Period
from restopos.services.pos import reporting
from restopos.services.pos.state import build_state
from restopos.utils.currency import format_currency
from restopos.utils.timezones import local_today, parse_month


async def load_state():
    await create_db_and_tables()
    async with async_session() as db:
        config = await load_billing_config(db)
    return build_state(config)


def print_monthly(state, month: str):
    if month:
        year, month_num = parse_month(month)
    else:
        today = local_today()
        year, month_num = today.year, today.month

    report = reporting.monthly_profit_report(
        state.orders, state.expenses.all(), state.employees.all(), year, month_num
    )
    money = lambda amount: format_currency(amount, state.config.currency)

    print(f"📅 {year}-{month_num:02d} ({report.days_in_month} days)")
    print(f"  Revenue:          {money(report.revenue)} from {report.order_count} orders")
    print(f"  Other expenses:   {money(report.other_expenses_total)}")
    for e in report.expenses:
        print(f"    - {e.date.date()} {e.category.value:<12} {e.description}: {money(e.amount)}")
    print(f"  Salaries:         {money(report.salary_expenses_total)}")
    for s in report.employee_salaries:
        print(f"    - {s.name} ({s.role}, {s.salary_type.value}): {money(s.calculated_salary)}")
    print(f"  Total expenses:   {money(report.total_expenses)}")
    print(f"  Net profit:       {money(report.net_profit)}")


def print_analytics(state, period: Period):
    report = reporting.analytics(state.orders, period)
    money = lambda amount: format_currency(amount, state.config.currency)

    print(f"📈 Period {period.value}: {report.order_count} orders, revenue {money(report.total_revenue)}")
    for point in report.sales_trend:
        print(f"  {point.label:>8}  {money(point.value)}")
    print("  Top items:")
    for item in report.top_items:
        print(f"    {item.name}: {item.quantity}")
    print("  Peak hours:")
    for hour in report.peak_hours:
        print(f"    {hour.label:>5}  {hour.count}")


def print_dashboard(state):
    summary = reporting.dashboard_summary(state.orders, local_today())
    money = lambda amount: format_currency(amount, state.config.currency)

    print(f"🧾 {summary.date}: {summary.total_orders} orders, {summary.total_customers} customers")
    print(f"  Sales: {money(summary.total_sales)}")


def main():
    parser = argparse.ArgumentParser(description="RestoPOS reports")
    sub = parser.add_subparsers(dest="command", required=True)

    monthly = sub.add_parser("monthly", help="Monthly profit and loss")
    monthly.add_argument("--month", help="YYYY-MM (default: current month)")

    analytics = sub.add_parser("analytics", help="Sales analytics for a period")
    analytics.add_argument("--period", choices=[p.value for p in Period], default=Period.last_30_days.value)

    sub.add_parser("dashboard", help="Today's sales summary")

    args = parser.parse_args()
    state = asyncio.run(load_state())

    if args.command == "monthly":
        print_monthly(state, args.month)
    elif args.command == "analytics":
        print_analytics(state, Period(args.period))
    else:
        print_dashboard(state)


if __name__ == "__main__":
    main()
