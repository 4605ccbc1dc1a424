import logging
from typing import Iterable, List, Optional

from restopos.auth.policy import Resource, require_mutate
from restopos.core.exceptions import NotFoundError
from restopos.schemas.employee import Employee, EmployeeCreate, EmployeeStatus, EmployeeUpdate
from restopos.schemas.user import Actor
from restopos.services.pos.common import IdSequence, require_confirmation

log = logging.getLogger(__name__)


class EmployeeRoster:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees: List[Employee] = list(employees)
        self._ids = IdSequence(self._employees)

    def __len__(self):
        return len(self._employees)

    def all(self) -> List[Employee]:
        return list(self._employees)

    def active(self) -> List[Employee]:
        return [e for e in self._employees if e.status == EmployeeStatus.active]

    def get(self, employee_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def search(self, term: Optional[str] = None) -> List[Employee]:
        """Case-insensitive match on name or role; empty term returns everyone."""
        term = (term or "").strip().lower()
        if not term:
            return self.all()
        return [
            e for e in self._employees
            if term in e.name.lower() or term in e.role.lower()
        ]

    def add(self, actor: Actor, data: EmployeeCreate) -> Employee:
        require_mutate(actor, Resource.employees)
        employee = Employee(id=self._ids.next_id(), **data.model_dump())
        self._employees.append(employee)
        log.info("employee added: id=%s name=%s by=%s", employee.id, employee.name, actor.username)
        return employee

    def update(self, actor: Actor, employee_id: int, changes: EmployeeUpdate) -> Employee:
        require_mutate(actor, Resource.employees)
        current = self.get(employee_id)
        if current is None:
            raise NotFoundError("Employee", employee_id)

        update_data = changes.model_dump(exclude_unset=True, exclude_none=True)
        updated = Employee(**{**current.model_dump(), **update_data, "id": current.id})
        self._employees[self._employees.index(current)] = updated
        log.info("employee updated: id=%s fields=%s by=%s", employee_id, sorted(update_data), actor.username)
        return updated

    def delete(self, actor: Actor, employee_id: int, confirm: bool = False) -> bool:
        require_mutate(actor, Resource.employees)
        require_confirmation(confirm, f"delete employee {employee_id}")
        employee = self.get(employee_id)
        if employee is None:
            return False
        self._employees.remove(employee)
        log.info("employee deleted: id=%s by=%s", employee_id, actor.username)
        return True
