"""Text formatting for amounts shown in advisories."""


def format_currency(amount: float, max_fraction_digits: int = 2) -> str:
    """US-dollar text with 0 to ``max_fraction_digits`` decimals.

    >>> format_currency(1234.5)
    '$1,234.5'
    >>> format_currency(-20)
    '-$20'
    """
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{sign}${text}"


def format_currency_simple(amount: float) -> str:
    """Whole-dollar variant used for compact labels."""
    return format_currency(amount, max_fraction_digits=0)
