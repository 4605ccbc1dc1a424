# restopos/core/seed.py
"""Static fixtures the in-memory ledgers start from."""
from datetime import date, datetime
from typing import List, Optional

from restopos.schemas.employee import Employee, EmployeeStatus, SalaryType
from restopos.schemas.expense import Expense, ExpenseCategory
from restopos.schemas.menu_item import Category, ItemStatus, MenuItem
from restopos.schemas.order import Order, OrderItem
from restopos.utils.timezones import LOCAL_TZ, now_utc, to_local

MENU_TO_SEED = [
    # Biriyani
    (1, "Chicken Biriyani", Category.biriyani, 180, ItemStatus.available),
    (2, "Mutton Biriyani", Category.biriyani, 220, ItemStatus.available),
    (3, "Beef Biriyani", Category.biriyani, 200, ItemStatus.not_available),
    # Kacchi
    (4, "Basmati Kacchi", Category.kacchi, 250, ItemStatus.available),
    (5, "Mutton Kacchi", Category.kacchi, 280, ItemStatus.available),
    # Chicken
    (6, "Chicken Fry", Category.chicken, 90, ItemStatus.available),
    (7, "Chicken Roast", Category.chicken, 120, ItemStatus.available),
    (8, "Spicy Chicken Curry", Category.chicken, 150, ItemStatus.available),
    # Beef
    (9, "Beef Curry", Category.beef, 160, ItemStatus.available),
    (10, "Beef Bhuna", Category.beef, 180, ItemStatus.available),
    # Mutton
    (11, "Mutton Curry", Category.mutton, 200, ItemStatus.available),
    (12, "Mutton Rezala", Category.mutton, 220, ItemStatus.available),
    # Fish
    (13, "Rui Fish Curry", Category.fish, 130, ItemStatus.available),
    (14, "Ilish Fish Fry", Category.fish, 250, ItemStatus.available),
    # Vegetables
    (15, "Mixed Vegetables", Category.vegetables, 80, ItemStatus.available),
    (16, "Dal Fry", Category.vegetables, 50, ItemStatus.available),
    # Rice
    (17, "Plain Rice", Category.rice, 30, ItemStatus.available),
    (18, "Polao", Category.rice, 70, ItemStatus.available),
    # Khichuri
    (19, "Plain Khichuri", Category.khichuri, 80, ItemStatus.available),
    (20, "Beef Khichuri", Category.khichuri, 150, ItemStatus.available),
    # Drinks
    (21, "Cold Drink", Category.drinks, 30, ItemStatus.available),
    (22, "Mineral Water", Category.drinks, 20, ItemStatus.available),
    (23, "Lassi", Category.drinks, 60, ItemStatus.available),
    # Desserts
    (24, "Firni", Category.desserts, 50, ItemStatus.available),
    (25, "Caramel Pudding", Category.desserts, 70, ItemStatus.available),
]

EMPLOYEES_TO_SEED = [
    {"name": "Rahim Sheikh", "role": "Head Chef", "salary_type": SalaryType.monthly, "salary": 40000, "status": EmployeeStatus.active},
    {"name": "Karim Ahmed", "role": "Waiter", "salary_type": SalaryType.monthly, "salary": 15000, "status": EmployeeStatus.active},
    {"name": "Fatima Begum", "role": "Waiter", "salary_type": SalaryType.monthly, "salary": 15000, "status": EmployeeStatus.active},
    {"name": "Sultan Khan", "role": "Manager", "salary_type": SalaryType.monthly, "salary": 50000, "status": EmployeeStatus.active},
    {"name": "Jahanara Islam", "role": "Cleaner", "salary_type": SalaryType.daily, "salary": 500, "status": EmployeeStatus.active},
    {"name": "Ali Hossain", "role": "Dishwasher", "salary_type": SalaryType.daily, "salary": 450, "status": EmployeeStatus.inactive},
]

# (day of current month, category, description, amount)
EXPENSES_TO_SEED = [
    (1, ExpenseCategory.rent, "Monthly Rent", 80000),
    (5, ExpenseCategory.supplies, "Vegetables & Groceries", 15000),
    (10, ExpenseCategory.utilities, "Electricity Bill", 12000),
    (12, ExpenseCategory.supplies, "Meat & Fish", 25000),
    (15, ExpenseCategory.maintenance, "Kitchen Equipment Repair", 5000),
    (20, ExpenseCategory.utilities, "Gas Bill", 3000),
]


def seed_menu() -> List[MenuItem]:
    return [
        MenuItem(id=item_id, name=name, category=category, price=price, status=status)
        for item_id, name, category, price, status in MENU_TO_SEED
    ]


def seed_employees() -> List[Employee]:
    return [Employee(id=i, **data) for i, data in enumerate(EMPLOYEES_TO_SEED, start=1)]


def seed_expenses(today: Optional[date] = None) -> List[Expense]:
    """Expenses are dated inside the current month so reports show data."""
    today = today or to_local(now_utc()).date()
    return [
        Expense(
            id=i,
            date=datetime(today.year, today.month, day, tzinfo=LOCAL_TZ),
            category=category,
            description=description,
            amount=amount,
        )
        for i, (day, category, description, amount) in enumerate(EXPENSES_TO_SEED, start=1)
    ]


def _line(menu: List[MenuItem], item_id: int, quantity: int) -> OrderItem:
    item = next(m for m in menu if m.id == item_id)
    return OrderItem(**item.model_dump(), quantity=quantity)


def seed_orders(menu: List[MenuItem], now: Optional[datetime] = None) -> List[Order]:
    now = now or now_utc()
    return [
        Order(
            id="#1245",
            date="2025-10-31T10:00:00+00:00",
            items=[_line(menu, 1, 2), _line(menu, 21, 1)],
            subtotal=410, tax="20.5", discount=0, service_charge=0, grand_total="430.5",
        ),
        Order(
            id="#1246",
            date="2025-10-31T11:30:00+00:00",
            items=[_line(menu, 5, 1), _line(menu, 23, 1)],
            subtotal=340, tax=17, discount=10, service_charge=0, grand_total=347,
        ),
        Order(
            id="#1247",
            date=now,
            items=[_line(menu, 10, 2), _line(menu, 17, 4)],
            subtotal=480, tax=24, discount=0, service_charge=48, grand_total=552,
        ),
    ]
