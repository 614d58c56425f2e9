"""Money formatting shared by the HTML, PDF, CSV and JSON outputs."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from mortgage_breakdown.config import settings

TWO_PLACES = Decimal("0.01")


def to_cents(amount) -> Decimal:
    """Round half-up to two places, at whatever size the amount has.

    A balance left to grow under a small payment can run past the default
    28-digit context, so precision follows the integer part.
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def format_currency(amount, symbol: str | None = None) -> str:
    """£1,234,567.50 style: two places, comma every three integer digits."""
    if symbol is None:
        symbol = settings.currency_symbol
    cents = to_cents(amount)
    sign = "-" if cents < 0 else ""
    return f"{sign}{symbol}{cents.copy_abs():,.2f}"


def format_plain(amount) -> str:
    """Two places, no separators or symbol. Used for CSV cells."""
    cents = to_cents(amount)
    if cents == 0:
        cents = cents.copy_abs()  # avoid "-0.00"
    return f"{cents:.2f}"
