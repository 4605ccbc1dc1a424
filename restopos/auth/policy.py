# restopos/auth/policy.py
"""Single authorization policy for every admin-gated operation.

Services call ``require_mutate`` before touching state; routes use
``require_view`` (see ``restopos.auth.dependencies``) for pages that only
admins may see.
"""
import logging
from enum import Enum
from typing import Optional

from restopos.core.exceptions import PermissionDenied
from restopos.schemas.user import Actor, Role

log = logging.getLogger(__name__)


class Resource(str, Enum):
    order_ledger = "order_ledger"
    catalog = "catalog"
    employees = "employees"
    expenses = "expenses"
    settings = "settings"
    reports = "reports"


ADMIN_ONLY = frozenset({Role.admin})
EVERYONE = frozenset(Role)

# Appending orders is open to every signed-in actor; only removal is gated.
_MUTATE_ROLES = {
    Resource.order_ledger: ADMIN_ONLY,
    Resource.catalog: ADMIN_ONLY,
    Resource.employees: ADMIN_ONLY,
    Resource.expenses: ADMIN_ONLY,
    Resource.settings: ADMIN_ONLY,
    Resource.reports: frozenset(),
}

_VIEW_ROLES = {
    Resource.order_ledger: EVERYONE,
    Resource.catalog: EVERYONE,
    Resource.employees: ADMIN_ONLY,
    Resource.expenses: ADMIN_ONLY,
    Resource.settings: ADMIN_ONLY,
    Resource.reports: ADMIN_ONLY,
}


def can_mutate(actor: Optional[Actor], resource: Resource) -> bool:
    if actor is None:
        return False
    return actor.role in _MUTATE_ROLES[resource]


def can_view(actor: Optional[Actor], resource: Resource) -> bool:
    if actor is None:
        return False
    return actor.role in _VIEW_ROLES[resource]


def require_mutate(actor: Optional[Actor], resource: Resource) -> None:
    if not can_mutate(actor, resource):
        log.warning("denied mutation: actor=%s resource=%s", getattr(actor, "username", None), resource.value)
        raise PermissionDenied(actor, resource)


def require_view(actor: Optional[Actor], resource: Resource) -> None:
    if not can_view(actor, resource):
        log.warning("denied view: actor=%s resource=%s", getattr(actor, "username", None), resource.value)
        raise PermissionDenied(actor, resource, action="view")
