"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from recordkeep.domain.errors import ValidationError, float_amount, non_finite_amount


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and thousands separators
    amount_str = re.sub(r"[$€£¥₵]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValidationError(f"Could not parse amount '{amount_str}': {e!r}") from e
    if not amount.is_finite():
        raise ValidationError(non_finite_amount(amount_str))
    return -amount if is_negative else amount


def to_decimal(value: Decimal | int | str) -> Decimal:
    """Convert an amount to Decimal without passing through binary floats.

    Raises:
        ValidationError: If value is a float, NaN, infinite or an unparseable string
    """
    if isinstance(value, bool):
        raise ValidationError(f"Amount {value!r} is not a number")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValidationError(non_finite_amount(value))
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        raise ValidationError(float_amount(value))
    return parse_amount(value)
