import os
import tempfile
from datetime import datetime
from decimal import Decimal

# Point the app at a throwaway database before anything imports restopos.db
_TMP_DIR = tempfile.mkdtemp(prefix="restopos-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR}/test.db"
os.environ["RESTAURANT_TIMEZONE"] = "Asia/Dhaka"

import pytest
from fastapi.testclient import TestClient

from restopos.schemas.menu_item import Category, ItemStatus, MenuItem
from restopos.schemas.settings import BillingConfig
from restopos.schemas.user import Actor, Role
from restopos.utils.timezones import UTC


@pytest.fixture
def config():
    return BillingConfig(tax_rate=Decimal("0.05"), service_charge_rate=Decimal("0.10"))


@pytest.fixture
def admin():
    return Actor(username="admin", role=Role.admin)


@pytest.fixture
def staff():
    return Actor(username="user", role=Role.staff)


@pytest.fixture
def item_a():
    return MenuItem(id=101, name="Item A", category=Category.kacchi, price=200, status=ItemStatus.available)


@pytest.fixture
def item_b():
    return MenuItem(id=102, name="Item B", category=Category.drinks, price=50, status=ItemStatus.available)


@pytest.fixture
def fixed_now():
    # 2025-11-15 18:00 in Dhaka
    return datetime(2025, 11, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def client():
    from restopos.main import app
    from restopos.services.pos.state import build_state

    with TestClient(app) as test_client:
        # fresh register per test, independent of whatever settings a previous test saved
        app.state.pos = build_state(BillingConfig())
        yield test_client


def login(client, username, password):
    resp = client.post("/auth/login", data={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.fixture
def admin_client(client):
    login(client, "admin", "admin")
    return client


@pytest.fixture
def staff_client(client):
    login(client, "user", "user")
    return client
