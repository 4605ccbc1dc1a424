from .catalog import Catalog
from .order_builder import OrderBuilder, compute_totals
from .order_ledger import OrderLedger
from .expense_ledger import ExpenseLedger
from .employee_roster import EmployeeRoster
from .state import PosState, build_state
