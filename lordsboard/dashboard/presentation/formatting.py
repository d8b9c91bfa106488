"""Number formatting for token amounts and USD values."""


def format_token(amount: float, max_decimals: int = 2) -> str:
    """
    Thousands-separated amount with up to ``max_decimals`` decimals.

    >>> format_token(1234.5)
    '1,234.5'
    >>> format_token(3150.0000000000005)
    '3,150'
    """
    text = f"{amount:,.{max_decimals}f}"
    if max_decimals > 0:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_usd(amount: float, price: float = 1.0, max_decimals: int = 2) -> str:
    """USD value of ``amount`` tokens at ``price``, e.g. ``$1,234.56``."""
    usd_value = amount * price
    sign = "-" if usd_value < 0 else ""
    return f"{sign}${abs(usd_value):,.{max_decimals}f}"


def format_percentage(share: float, decimals: int = 2) -> str:
    """Fraction as a percentage string: ``0.05`` -> ``5.00%``."""
    return f"{share * 100:.{decimals}f}%"
