# restopos/services/pos/order_ledger.py
import logging
import re
from datetime import date, datetime
from typing import Iterable, List, Optional

from zoneinfo import ZoneInfo

from restopos.auth.policy import Resource, require_mutate
from restopos.schemas.order import Order
from restopos.schemas.user import Actor
from restopos.services.pos.common import require_confirmation
from restopos.utils.timezones import ensure_aware, to_local

log = logging.getLogger(__name__)

_ORDER_ID_RE = re.compile(r"#(\d+)")


def format_order_id(number: int) -> str:
    return f"#{number:04d}"


def order_number(order_id: str) -> int:
    m = _ORDER_ID_RE.fullmatch(order_id or "")
    return int(m.group(1)) if m else 0


def normalize_order_id(order_id: str) -> str:
    """'1245' and '#1245' name the same order (URLs drop the '#')."""
    order_id = (order_id or "").strip()
    return order_id if order_id.startswith("#") else f"#{order_id}"


class OrderLedger:
    """Confirmed orders. Append-only except for admin deletes."""

    def __init__(self, orders: Iterable[Order] = ()):
        self._orders: List[Order] = []
        self._last_number = 0
        for order in orders:
            self.append(order)

    def __len__(self):
        return len(self._orders)

    def __iter__(self):
        return iter(self._orders)

    def next_order_id(self) -> str:
        """
        Reserve the next "#NNNN" id. Monotonic, and skips anything already
        in the ledger, so ids never collide even after deletes.
        """
        number = self._last_number + 1
        while self.find_by_id(format_order_id(number)) is not None:
            number += 1
        self._last_number = number
        return format_order_id(number)

    def append(self, order: Order) -> Order:
        if self.find_by_id(order.id) is not None:
            raise ValueError(f"Order {order.id} already exists")
        self._orders.append(order)
        self._last_number = max(self._last_number, order_number(order.id))
        log.info("order appended: id=%s total=%s", order.id, order.grand_total)
        return order

    def delete(self, actor: Actor, order_id: str, confirm: bool = False) -> bool:
        require_mutate(actor, Resource.order_ledger)
        require_confirmation(confirm, f"delete order {order_id}")
        order = self.find_by_id(order_id)
        if order is None:
            log.info("delete order no-op, not found: id=%s", order_id)
            return False
        self._orders.remove(order)
        log.info("order deleted: id=%s by=%s", order_id, actor.username)
        return True

    # --- Reads ---------------------------------------------------------------

    def all(self) -> List[Order]:
        """Newest first."""
        return sorted(self._orders, key=lambda o: o.date, reverse=True)

    def find_by_id(self, order_id: str) -> Optional[Order]:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def filter_by_date_range(self, start: datetime, end: datetime) -> List[Order]:
        """Both ends inclusive. Naive bounds are read as local time."""
        start, end = ensure_aware(start), ensure_aware(end)
        return [o for o in self.all() if start <= o.date <= end]

    def filter_by_day(self, day: date, tz: Optional[ZoneInfo] = None) -> List[Order]:
        return [o for o in self.all() if to_local(o.date, tz).date() == day]
