import asyncio
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from restopos.crud.settings import load_billing_config, save_billing_config
from restopos.db import create_db_and_tables, make_engine
from restopos.schemas.settings import BillingConfig, Currency, Theme


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path}/settings.db"


def run_with_session(url, fn):
    async def runner():
        engine = make_engine(url)
        try:
            await create_db_and_tables(bind=engine)
            session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
            async with session_factory() as db:
                return await fn(db)
        finally:
            await engine.dispose()

    return asyncio.run(runner())


def test_defaults_when_nothing_saved(db_url):
    config = run_with_session(db_url, load_billing_config)
    assert config.tax_rate == Decimal("0.05")
    assert config.service_charge_rate == Decimal("0.10")
    assert config.currency.code == "BDT"
    assert config.theme == Theme.light


def test_saved_settings_are_restored(db_url):
    saved = BillingConfig(
        tax_rate=Decimal("0.075"),
        service_charge_rate=Decimal("0"),
        currency=Currency(code="USD", symbol="$"),
        theme=Theme.dark,
    )

    async def save(db):
        row = await save_billing_config(db, saved)
        assert row.updated_at is not None
        # second save updates the same row
        saved.tax_rate = Decimal("0.08")
        await save_billing_config(db, saved)

    run_with_session(db_url, save)
    restored = run_with_session(db_url, load_billing_config)

    assert restored.tax_rate == Decimal("0.08")
    assert restored.service_charge_rate == Decimal("0")
    assert restored.currency == Currency(code="USD", symbol="$")
    assert restored.theme == Theme.dark


def test_rates_must_stay_below_one():
    with pytest.raises(ValueError):
        BillingConfig(tax_rate=Decimal("1"))
    with pytest.raises(ValueError):
        BillingConfig(service_charge_rate=Decimal("-0.1"))
