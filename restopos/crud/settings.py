import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from restopos.models.billing_settings import BillingSettings
from restopos.schemas.settings import BillingConfig, Currency

log = logging.getLogger(__name__)

SETTINGS_ROW_ID = 1


async def get_billing_settings(db: AsyncSession) -> Optional[BillingSettings]:
    result = await db.execute(select(BillingSettings).where(BillingSettings.id == SETTINGS_ROW_ID))
    return result.scalar_one_or_none()


async def load_billing_config(db: AsyncSession) -> BillingConfig:
    """Restore the saved config, or defaults when nothing was saved yet."""
    row = await get_billing_settings(db)
    if not row:
        log.info("no saved billing settings, using defaults")
        return BillingConfig()

    return BillingConfig(
        tax_rate=row.tax_rate,
        service_charge_rate=row.service_charge_rate,
        currency=Currency(code=row.currency_code, symbol=row.currency_symbol),
        theme=row.theme,
    )


async def save_billing_config(db: AsyncSession, config: BillingConfig) -> BillingSettings:
    row = await get_billing_settings(db)
    if not row:
        row = BillingSettings(id=SETTINGS_ROW_ID)
        db.add(row)

    row.tax_rate = config.tax_rate
    row.service_charge_rate = config.service_charge_rate
    row.currency_code = config.currency.code
    row.currency_symbol = config.currency.symbol
    row.theme = config.theme.value

    await db.commit()
    await db.refresh(row)
    log.info(
        "billing settings saved: tax=%s service=%s currency=%s",
        row.tax_rate, row.service_charge_rate, row.currency_code,
    )
    return row
