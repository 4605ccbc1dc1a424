# restopos/services/pos/order_builder.py
"""
Cart pricing and order finalization.

Flow:
- add_item / set_quantity / set_discount / set_service_charge edit the cart
- finalize() snapshots the cart into a draft Order (receipt preview)
- confirm() commits the draft to the ledger and resets the cart
- cancel() drops the draft and leaves the cart as it was
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from restopos.core.exceptions import EmptyCartError, NoPendingOrderError, NotFoundError
from restopos.schemas.menu_item import MenuItem
from restopos.schemas.order import Order, OrderItem, OrderTotals
from restopos.schemas.settings import BillingConfig
from restopos.services.pos.order_ledger import OrderLedger
from restopos.utils.numbers import ZERO, coerce_amount, coerce_quantity
from restopos.utils.timezones import now_utc

log = logging.getLogger(__name__)


def compute_totals(
    items: Iterable[OrderItem],
    discount: Decimal,
    use_service_charge: bool,
    config: BillingConfig,
) -> OrderTotals:
    subtotal = sum((item.price * item.quantity for item in items), ZERO)
    tax = subtotal * config.tax_rate
    service_charge = subtotal * config.service_charge_rate if use_service_charge else ZERO
    grand_total = subtotal + tax - discount + service_charge
    return OrderTotals(
        subtotal=subtotal,
        tax=tax,
        discount=discount,
        service_charge=service_charge,
        grand_total=grand_total,
    )


class OrderBuilder:
    def __init__(self, config: BillingConfig):
        self.config = config
        self._lines: Dict[int, OrderItem] = {}
        self.discount: Decimal = ZERO
        self.use_service_charge = False
        self.pending: Optional[Order] = None

    @property
    def items(self) -> List[OrderItem]:
        return list(self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def _cart_changed(self):
        if self.pending is not None:
            log.info("cart edited, discarding draft %s", self.pending.id)
            self.pending = None

    def add_item(self, menu_item: MenuItem) -> OrderItem:
        existing = self._lines.get(menu_item.id)
        if existing is not None:
            line = existing.model_copy(update={"quantity": existing.quantity + 1})
        else:
            line = OrderItem(**menu_item.model_dump(), quantity=1)
        self._lines[menu_item.id] = line
        self._cart_changed()
        return line

    def set_quantity(self, item_id: int, quantity) -> Optional[OrderItem]:
        """quantity <= 0 (or unparsable) removes the line."""
        quantity = coerce_quantity(quantity)
        if quantity <= 0:
            removed = self._lines.pop(item_id, None)
            if removed is not None:
                self._cart_changed()
            return None

        existing = self._lines.get(item_id)
        if existing is None:
            raise NotFoundError("Cart line", item_id)
        line = existing.model_copy(update={"quantity": quantity})
        self._lines[item_id] = line
        self._cart_changed()
        return line

    def set_discount(self, value) -> Decimal:
        self.discount = coerce_amount(value)
        self._cart_changed()
        return self.discount

    def set_service_charge(self, enabled: bool) -> None:
        self.use_service_charge = bool(enabled)
        self._cart_changed()

    def compute_totals(self) -> OrderTotals:
        return compute_totals(self._lines.values(), self.discount, self.use_service_charge, self.config)

    def finalize(self, ledger: OrderLedger, now: Optional[datetime] = None) -> Order:
        if self.is_empty():
            raise EmptyCartError()

        totals = self.compute_totals()
        order = Order(
            id=ledger.next_order_id(),
            date=now or now_utc(),
            items=tuple(self._lines.values()),
            **totals.model_dump(),
        )
        self.pending = order
        log.info("order finalized (draft): id=%s lines=%s total=%s", order.id, len(order.items), order.grand_total)
        return order

    def confirm(self, ledger: OrderLedger) -> Order:
        if self.pending is None:
            raise NoPendingOrderError()
        order = ledger.append(self.pending)
        self.reset()
        return order

    def cancel(self) -> Optional[Order]:
        draft, self.pending = self.pending, None
        if draft is not None:
            log.info("draft cancelled: id=%s", draft.id)
        return draft

    def reset(self) -> None:
        self._lines.clear()
        self.discount = ZERO
        self.use_service_charge = False
        self.pending = None
