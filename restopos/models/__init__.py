from .base import Base
from .billing_settings import BillingSettings
