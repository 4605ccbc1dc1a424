import logging
from typing import Iterable, List, Optional

from zoneinfo import ZoneInfo

from restopos.auth.policy import Resource, require_mutate
from restopos.schemas.expense import Expense, ExpenseCreate
from restopos.schemas.user import Actor
from restopos.services.pos.common import IdSequence, require_confirmation
from restopos.utils.timezones import to_local

log = logging.getLogger(__name__)


class ExpenseLedger:
    """Dated expenses, always kept newest first."""

    def __init__(self, expenses: Iterable[Expense] = ()):
        self._expenses: List[Expense] = list(expenses)
        self._ids = IdSequence(self._expenses)
        self._sort()

    def __len__(self):
        return len(self._expenses)

    def _sort(self):
        self._expenses.sort(key=lambda e: e.date, reverse=True)

    def all(self) -> List[Expense]:
        return list(self._expenses)

    def get(self, expense_id: int) -> Optional[Expense]:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def add(self, actor: Actor, data: ExpenseCreate) -> Expense:
        require_mutate(actor, Resource.expenses)
        expense = Expense(id=self._ids.next_id(), **data.model_dump())
        self._expenses.append(expense)
        self._sort()
        log.info("expense added: id=%s amount=%s by=%s", expense.id, expense.amount, actor.username)
        return expense

    def delete(self, actor: Actor, expense_id: int, confirm: bool = False) -> bool:
        require_mutate(actor, Resource.expenses)
        require_confirmation(confirm, f"delete expense {expense_id}")
        expense = self.get(expense_id)
        if expense is None:
            return False
        self._expenses.remove(expense)
        log.info("expense deleted: id=%s by=%s", expense_id, actor.username)
        return True

    def filter_by_month(self, year: int, month: int, tz: Optional[ZoneInfo] = None) -> List[Expense]:
        matches = []
        for e in self._expenses:
            local = to_local(e.date, tz)
            if local.year == year and local.month == month:
                matches.append(e)
        return matches
