from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def _to_decimal(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, (float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            return None
    return None


def coerce_amount(value) -> Decimal:
    """
    Money-like form input (discount, salary, price, expense amount).
    Anything non-numeric, non-finite or negative becomes 0.
    """
    amount = _to_decimal(value)
    if amount is None or not amount.is_finite() or amount < 0:
        return ZERO
    return amount


def coerce_quantity(value) -> int:
    """
    Integer parse of a quantity field: '3' -> 3, '2.9' -> 2, 'abc' -> 0.
    Negative results are kept so the caller can treat them as removal.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _to_decimal(value)
    if number is None or not number.is_finite():
        return 0
    return int(number)
