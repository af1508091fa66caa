from .context import EmbedContext, EmbedMode
from .currency import Currency, currency_for_locale, get_currency_symbol, has_symbol
from .currency_formatter import CurrencyFormatter
from .metrics import ensure_is_array, get_metric_label, is_adhoc_metric, is_saved_metric
from .number_format import (
    NULL_VALUE,
    SMART_NUMBER,
    NumberFormatter,
    NumberFormatterRegistry,
    get_number_formatter,
)
from .symbols import replace_currency_symbol

__all__ = [
    "EmbedContext",
    "EmbedMode",
    "Currency",
    "currency_for_locale",
    "get_currency_symbol",
    "has_symbol",
    "CurrencyFormatter",
    "ensure_is_array",
    "get_metric_label",
    "is_adhoc_metric",
    "is_saved_metric",
    "NULL_VALUE",
    "SMART_NUMBER",
    "NumberFormatter",
    "NumberFormatterRegistry",
    "get_number_formatter",
    "replace_currency_symbol",
]
