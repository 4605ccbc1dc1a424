# restopos/core/config.py
from decimal import Decimal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./restopos.db"
    sql_echo: bool = False
    session_secret: str = "restopos-dev-secret"  # 🔐 Replace in production
    log_level: str = "INFO"

    # Local time for every report bucket and "today" on the dashboard
    restaurant_timezone: str = "Asia/Dhaka"

    # Login credentials (two fixed accounts)
    admin_username: str = "admin"
    admin_password: str = "admin"
    staff_username: str = "user"
    staff_password: str = "user"

    # Billing defaults used until an admin saves settings
    default_tax_rate: Decimal = Decimal("0.05")
    default_service_charge_rate: Decimal = Decimal("0.10")
    default_currency_code: str = "BDT"
    default_currency_symbol: str = "৳"

    seed_fixtures: bool = True


settings = Settings()
