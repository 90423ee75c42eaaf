"""
Currency formatting for balance display.

Splits an amount into a grouped whole-dollar part and a two-digit cents
part, and joins them back into a display string::

    >>> f = CurrencyFormatter()
    >>> f.break_into_dollars_and_cents(Decimal("929466.23"))
    ('929,466', '23')
    >>> f.dollars_formatted(929466)
    '$929,466.00'

Cents are truncated, never rounded. Negative amounts are split on their
absolute value; ``dollars_formatted`` puts the minus sign in front of the
symbol. All arithmetic happens on ``Decimal`` so ``929466.23`` given as a
float still yields ``"23"``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

Amount = Decimal | float | int | str


def to_decimal(amount: Amount) -> Decimal:
    """Coerce *amount* to a finite Decimal (floats go through ``str``)."""
    if isinstance(amount, Decimal):
        value = amount
    else:
        try:
            value = Decimal(str(amount))
        except InvalidOperation as e:
            raise ValueError(f"Not a monetary amount: {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {amount!r}")
    return value


class CurrencyFormatter:
    """Stateless formatter; safe to share across tasks and threads.

    Args:
        symbol: Currency symbol placed before the dollars.
        grouping_separator: Thousands separator.
        decimal_separator: Separator between dollars and cents.
    """

    def __init__(self, symbol: str = "$", grouping_separator: str = ",", decimal_separator: str = "."):
        self.symbol = symbol
        self.grouping_separator = grouping_separator
        self.decimal_separator = decimal_separator

    @classmethod
    def from_config(cls, config) -> CurrencyFormatter:
        return cls(
            symbol=config.get("currency.symbol", "$"),
            grouping_separator=config.get("currency.grouping_separator", ","),
            decimal_separator=config.get("currency.decimal_separator", "."),
        )

    def break_into_dollars_and_cents(self, amount: Amount) -> tuple[str, str]:
        """Return ``(grouped_dollars, two_digit_cents)`` for ``abs(amount)``."""
        digits, exponent = to_decimal(amount).as_tuple()[1:]
        # Shift the point two places by hand; Decimal arithmetic would round to context precision.
        dollars, cents = divmod(int(Decimal((0, digits, exponent + 2))), 100)
        grouped = f"{dollars:,}"
        if self.grouping_separator != ",":
            grouped = grouped.replace(",", self.grouping_separator)
        return grouped, f"{cents:02d}"

    def dollars_formatted(self, amount: Amount) -> str:
        """Full display string, e.g. ``"$929,466.00"`` or ``"-$12.50"``."""
        sign, dollars, cents = self.balance_parts(amount)
        return f"{sign}{dollars}{self.decimal_separator}{cents}"

    def balance_parts(self, amount: Amount) -> tuple[str, str, str]:
        """Return ``(sign_and_symbol, dollars, cents)`` for styled rendering."""
        value = to_decimal(amount)
        dollars, cents = self.break_into_dollars_and_cents(value)
        sign = "-" if value < 0 and (dollars, cents) != ("0", "00") else ""
        return f"{sign}{self.symbol}", dollars, cents
