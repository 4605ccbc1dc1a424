from decimal import Decimal


def format_currency(amount, currency) -> str:
    """Display helper for receipts: symbol + grouped amount with 2 decimals."""
    return f"{currency.symbol}{Decimal(amount):,.2f}"
