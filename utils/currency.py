from decimal import Decimal

from utils.constants import DEFAULT_CURRENCY_SYMBOL


def format_currency(amount: Decimal | float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount as currency string, e.g. '₹1,234.56'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
