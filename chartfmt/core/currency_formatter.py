from typing import Any, Optional

from .currency import Currency, get_currency_symbol
from .number_format import NULL_VALUE, SMART_NUMBER, coerce_number, get_number_formatter


class CurrencyFormatter:
    """
    Currency-aware formatter.

    The numeric part comes from the d3 pattern (with "$" and "%"
    stripped); the currency symbol is then placed before or after it.
    """

    def __init__(
        self,
        d3_format: Optional[str] = None,
        currency: Any = None,
        locale: str = "en-US",
    ):
        self.d3_format = d3_format or SMART_NUMBER
        self.currency = Currency.from_value(currency)
        self.locale = locale

    @property
    def id(self) -> str:
        symbol = self.currency.symbol if self.has_valid_currency() else ""
        return f"currency-{symbol}-{self.d3_format}" if symbol else self.d3_format

    def has_valid_currency(self) -> bool:
        return bool(self.currency and self.currency.symbol)

    def get_normalized_d3_format(self) -> str:
        return self.d3_format.replace("$", "").replace("%", "")

    def format(self, value) -> str:
        if coerce_number(value) is None:
            return NULL_VALUE

        formatted = get_number_formatter(self.get_normalized_d3_format())(value)
        if not self.has_valid_currency():
            return formatted

        symbol = get_currency_symbol(self.currency)
        if self.currency.symbol_position == "prefix":
            return f"{symbol} {formatted}"
        return f"{formatted} {symbol}"

    def __call__(self, value) -> str:
        return self.format(value)

    def __repr__(self) -> str:
        return f"CurrencyFormatter(d3_format={self.d3_format!r}, currency={self.currency!r})"
