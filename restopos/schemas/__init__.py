from .menu_item import (
    Category,
    ItemStatus,
    MenuItemBase,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItem,
)

from .order import (
    OrderItem,
    OrderTotals,
    Order,
    CartItemAdd,
    CartQuantityUpdate,
    CartDiscountUpdate,
    CartServiceChargeUpdate,
    CartRead,
)

from .employee import (
    SalaryType,
    EmployeeStatus,
    EmployeeBase,
    EmployeeCreate,
    EmployeeUpdate,
    Employee,
)

from .expense import (
    ExpenseCategory,
    ExpenseBase,
    ExpenseCreate,
    Expense,
)

from .settings import (
    Theme,
    Currency,
    BillingConfig,
    BillingConfigUpdate,
)

from .user import Role, Actor

from .report import (
    Period,
    TrendPoint,
    HourCount,
    TopItem,
    CategorySales,
    AnalyticsReport,
    EmployeeSalary,
    MonthlyReport,
    DashboardSummary,
)
