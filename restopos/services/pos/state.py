from datetime import datetime
from typing import Optional

from restopos.core import seed
from restopos.schemas.settings import BillingConfig
from restopos.services.pos.catalog import Catalog
from restopos.services.pos.employee_roster import EmployeeRoster
from restopos.services.pos.expense_ledger import ExpenseLedger
from restopos.services.pos.order_builder import OrderBuilder
from restopos.services.pos.order_ledger import OrderLedger
from restopos.utils.timezones import now_utc, to_local


class PosState:
    """Everything one running register owns: config, ledgers, roster and the open cart."""

    def __init__(
        self,
        config: BillingConfig,
        catalog: Optional[Catalog] = None,
        orders: Optional[OrderLedger] = None,
        expenses: Optional[ExpenseLedger] = None,
        employees: Optional[EmployeeRoster] = None,
    ):
        self.config = config
        self.catalog = catalog if catalog is not None else Catalog()
        self.orders = orders if orders is not None else OrderLedger()
        self.expenses = expenses if expenses is not None else ExpenseLedger()
        self.employees = employees if employees is not None else EmployeeRoster()
        self.builder = OrderBuilder(config)


def build_state(config: BillingConfig, seeded: bool = True, now: Optional[datetime] = None) -> PosState:
    if not seeded:
        return PosState(config)

    now = now or now_utc()
    menu = seed.seed_menu()
    return PosState(
        config,
        catalog=Catalog(menu),
        orders=OrderLedger(seed.seed_orders(menu, now)),
        expenses=ExpenseLedger(seed.seed_expenses(to_local(now).date())),
        employees=EmployeeRoster(seed.seed_employees()),
    )
