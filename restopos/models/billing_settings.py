from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from restopos.models.base import Base


class BillingSettings(Base):
    """Single-row table holding the persisted BillingConfig."""
    __tablename__ = "billing_settings"

    id = Column(Integer, primary_key=True)
    tax_rate = Column(Numeric(6, 4), nullable=False)
    service_charge_rate = Column(Numeric(6, 4), nullable=False)
    currency_code = Column(String(3), nullable=False)
    currency_symbol = Column(String, nullable=False)
    theme = Column(String, nullable=False, default="light")
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
