from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from restopos.core.exceptions import ConfirmationRequired, PermissionDenied
from restopos.schemas.order import Order, OrderItem
from restopos.services.pos.order_ledger import OrderLedger, normalize_order_id
from restopos.utils.timezones import LOCAL_TZ, UTC


def make_order(order_id, when, item, quantity=1):
    line = OrderItem(**item.model_dump(), quantity=quantity)
    subtotal = line.price * quantity
    return Order(
        id=order_id, date=when, items=[line],
        subtotal=subtotal, tax=0, discount=0, service_charge=0, grand_total=subtotal,
    )


@pytest.fixture
def ledger(item_a):
    return OrderLedger([
        make_order("#1001", datetime(2025, 10, 1, 9, tzinfo=UTC), item_a),
        make_order("#1003", datetime(2025, 10, 3, 9, tzinfo=UTC), item_a),
        make_order("#1002", datetime(2025, 10, 2, 9, tzinfo=UTC), item_a),
    ])


def test_all_is_newest_first(ledger):
    assert [o.id for o in ledger.all()] == ["#1003", "#1002", "#1001"]


def test_next_order_id_is_monotonic_and_unique(ledger):
    assert ledger.next_order_id() == "#1004"
    assert ledger.next_order_id() == "#1005"


def test_next_order_id_starts_at_one_for_empty_ledger():
    assert OrderLedger().next_order_id() == "#0001"


def test_append_rejects_duplicate_id(ledger, item_a):
    with pytest.raises(ValueError):
        ledger.append(make_order("#1001", datetime(2025, 10, 4, tzinfo=UTC), item_a))


def test_delete_as_staff_is_denied(ledger, staff):
    with pytest.raises(PermissionDenied):
        ledger.delete(staff, "#1001", confirm=True)
    assert len(ledger) == 3


def test_delete_requires_confirmation(ledger, admin):
    with pytest.raises(ConfirmationRequired):
        ledger.delete(admin, "#1001")
    assert ledger.find_by_id("#1001") is not None


def test_delete_unknown_id_is_noop(ledger, admin):
    assert ledger.delete(admin, "#9999", confirm=True) is False
    assert len(ledger) == 3


def test_delete_as_admin(ledger, admin):
    assert ledger.delete(admin, "#1002", confirm=True) is True
    assert ledger.find_by_id("#1002") is None
    # deleted ids are not handed out again
    assert ledger.next_order_id() == "#1004"


def test_filter_by_date_range_is_inclusive(ledger):
    found = ledger.filter_by_date_range(
        datetime(2025, 10, 2, 9, tzinfo=UTC),
        datetime(2025, 10, 3, 9, tzinfo=UTC),
    )
    assert [o.id for o in found] == ["#1003", "#1002"]


def test_filter_by_day_uses_local_calendar_day(item_a):
    # 20:00 UTC on Oct 5 is already Oct 6 in Dhaka (UTC+6)
    ledger = OrderLedger([make_order("#2000", datetime(2025, 10, 5, 20, tzinfo=UTC), item_a)])
    assert ledger.filter_by_day(date(2025, 10, 5), LOCAL_TZ) == []
    assert [o.id for o in ledger.filter_by_day(date(2025, 10, 6), LOCAL_TZ)] == ["#2000"]


def test_normalize_order_id():
    assert normalize_order_id("1245") == "#1245"
    assert normalize_order_id("#1245") == "#1245"


def test_order_is_immutable(ledger):
    order = ledger.find_by_id("#1001")
    with pytest.raises(ValidationError):
        order.grand_total = Decimal("1")
