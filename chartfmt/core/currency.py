from dataclasses import dataclass
from typing import Any, Mapping, Optional

from babel.numbers import get_currency_symbol as _babel_currency_symbol
from babel.numbers import get_territory_currencies


DEFAULT_CURRENCY_CODE = "USD"
SYMBOL_POSITIONS = ("prefix", "suffix")


@dataclass(frozen=True)
class Currency:
    """
    Display currency attached to a metric.

    symbol is usually an ISO 4217 code ("EUR") but a literal
    glyph ("€") is accepted as well.
    """
    symbol: Optional[str] = None
    symbol_position: str = "prefix"

    @classmethod
    def from_value(cls, value: Any) -> Optional["Currency"]:
        """
        Accepts a Currency, a persisted mapping
        ({"symbol": ..., "symbolPosition": ...}) or None.
        """
        if value is None or isinstance(value, Currency):
            return value

        if isinstance(value, Mapping):
            position = (
                value.get("symbolPosition")
                or value.get("symbol_position")
                or "prefix"
            )
            if position not in SYMBOL_POSITIONS:
                position = "prefix"
            return cls(symbol=value.get("symbol"), symbol_position=position)

        if isinstance(value, str):
            return cls(symbol=value)

        return None


def has_symbol(currency: Any) -> bool:
    currency = Currency.from_value(currency)
    return bool(currency and currency.symbol)


# -------------------------------------------------
# LOCALE -> CURRENCY
# -------------------------------------------------
def _country_code(locale: str) -> str:
    for sep in ("_", "-"):
        parts = locale.split(sep)
        if len(parts) == 2:
            return parts[-1]
    return locale


def currency_for_locale(locale: Optional[str], default: str = DEFAULT_CURRENCY_CODE) -> str:
    """
    Currency in use for the territory of a locale tag.

    "fr-FR" -> "EUR", "ja_JP" -> "JPY". A bare language tag is tried
    as a territory ("de" -> "EUR"). Unknown tags return `default`.
    """
    if not locale:
        return default

    currencies = get_territory_currencies(_country_code(locale.strip()).upper())
    return currencies[0] if currencies else default


def get_currency_symbol(currency: Currency) -> Optional[str]:
    """
    en-US display symbol for a currency ("USD" -> "$", "EUR" -> "€").
    Unknown codes and literal glyphs are returned unchanged.
    """
    if not has_symbol(currency):
        return None
    return _babel_currency_symbol(currency.symbol, locale="en_US")
