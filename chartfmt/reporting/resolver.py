"""
Formatter Resolution
--------------------
Picks the formatter that renders a chart metric.

Sources, in precedence order:
1. Embedded context (locale / currencySymbol query params)
2. Explicit overrides (d3_format / currency_format)
3. Saved per-metric formats (map builder only)

Rules:
- Never raises; always returns a usable formatter or map
- Ad-hoc metrics never get a map entry
"""

import logging
from typing import Any, Dict, Mapping, Optional

from chartfmt.config.defaults import DEFAULT_CONFIG
from chartfmt.core.context import STANDALONE, EmbedContext
from chartfmt.core.currency import Currency, currency_for_locale, has_symbol
from chartfmt.core.currency_formatter import CurrencyFormatter
from chartfmt.core.locale_format import build_currency_format_func
from chartfmt.core.metrics import ensure_is_array, is_saved_metric
from chartfmt.core.number_format import NumberFormatter, get_number_formatter
from chartfmt.core.symbols import replace_currency_symbol

log = logging.getLogger("chartfmt.resolver")


# =====================================================
# MULTI-METRIC: FORMATTER MAP
# =====================================================

def build_custom_formatters(
    metrics: Any,
    saved_currency_formats: Optional[Mapping[str, Any]],
    saved_column_formats: Optional[Mapping[str, str]],
    d3_format: Optional[str],
    currency_format: Any,
) -> Dict[str, Any]:
    """
    Build one formatter per saved metric.

    - d3_format overrides the saved column format
    - currency_format (with a symbol) overrides the saved currency
    - ad-hoc metrics are skipped
    """
    saved_currency_formats = saved_currency_formats or {}
    saved_column_formats = saved_column_formats or {}

    formatters: Dict[str, Any] = {}
    for metric in ensure_is_array(metrics):
        if not is_saved_metric(metric):
            continue

        actual_d3_format = (
            d3_format if d3_format is not None else saved_column_formats.get(metric)
        )
        actual_currency = (
            currency_format
            if has_symbol(currency_format)
            else saved_currency_formats.get(metric)
        )

        if actual_currency:
            formatters[metric] = CurrencyFormatter(
                d3_format=actual_d3_format,
                currency=actual_currency,
            )
        else:
            formatters[metric] = get_number_formatter(actual_d3_format)

    return formatters


def get_custom_formatter(
    custom_formatters: Mapping[str, Any],
    metrics: Any,
    key: Optional[str] = None,
):
    """
    Pick a formatter out of a map built by build_custom_formatters.

    A single saved metric selects its own entry; otherwise the
    explicit key (e.g. a synthetic "total" column) is used.
    """
    metrics_array = ensure_is_array(metrics)
    if len(metrics_array) == 1 and is_saved_metric(metrics_array[0]):
        return custom_formatters.get(metrics_array[0])
    return custom_formatters.get(key) if key else None


# =====================================================
# SINGLE METRIC: VALUE FORMATTER
# =====================================================

def get_value_formatter(
    metrics: Any,
    saved_currency_formats: Optional[Mapping[str, Any]],
    saved_column_formats: Optional[Mapping[str, str]],
    d3_format: Optional[str],
    currency_format: Any,
    key: Optional[str] = None,
    *,
    context: Optional[EmbedContext] = None,
    config: Optional[dict] = None,
):
    """
    Resolve the formatter for a single metric.

    Standalone pages use the explicit overrides only; saved formats
    are not consulted here (see build_custom_formatters).
    Embedded pages format as locale currency, optionally with the
    currency symbol replaced.
    """
    context = context or STANDALONE

    if not context.is_embedded:
        log.debug("No embedding params, using explicit formats")
        if has_symbol(currency_format):
            return CurrencyFormatter(
                d3_format=d3_format,
                currency=Currency.from_value(currency_format),
            )
        return get_number_formatter(d3_format)

    embedding = {**DEFAULT_CONFIG["embedding"], **(config or {}).get("embedding", {})}

    try:
        locale = context.locale or embedding["default_locale"]
        currency_code = currency_for_locale(locale, default=embedding["default_currency"])
        final_symbol = context.currency_symbol or currency_code

        format_func = build_currency_format_func(
            locale,
            currency_code,
            fraction_digits=int(embedding["fraction_digits"]),
            fallback_locale=embedding["default_locale"],
        )
    except Exception:
        log.exception(
            "Error creating number formatter (locale=%r, currencySymbol=%r)",
            context.locale,
            context.currency_symbol,
        )
        return get_number_formatter(d3_format)

    log.debug(
        "Embedded formatter: mode=%s locale=%s currency=%s",
        context.mode.value,
        locale,
        currency_code,
    )

    def embedded_format(value) -> str:
        text = format_func(value)
        if context.currency_symbol:
            text = replace_currency_symbol(text, context.currency_symbol)
        return text

    return NumberFormatter(
        id=f"currency-{currency_code}",
        format_func=embedded_format,
        label=f"Currency ({final_symbol})",
        description=f"Formats numbers as currency in {final_symbol}",
    )
