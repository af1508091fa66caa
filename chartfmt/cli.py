"""
chartfmt CLI
Format values the way a chart would render them.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from chartfmt.__version__ import __version__
from chartfmt.config.loader import load_config
from chartfmt.core.context import EmbedContext
from chartfmt.core.currency import Currency
from chartfmt.core.metrics import get_metric_label, is_adhoc_metric
from chartfmt.reporting.resolver import (
    build_custom_formatters,
    get_custom_formatter,
    get_value_formatter,
)

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def resolve_formatter(
    metrics: List[Any],
    config: dict,
    d3_format: Optional[str] = None,
    currency: Optional[Currency] = None,
    query: Optional[str] = None,
    key: Optional[str] = None,
):
    """
    Single metric (or none) -> value formatter.
    Several metrics -> formatter map, picked by key.
    """
    saved_currency_formats = config.get("saved_currency_formats", {})
    saved_column_formats = config.get("saved_column_formats", {})

    if len(metrics) > 1:
        formatters = build_custom_formatters(
            metrics,
            saved_currency_formats,
            saved_column_formats,
            d3_format,
            currency,
        )
        formatter = get_custom_formatter(formatters, metrics, key)
        if formatter is not None:
            return formatter
        logger.info("No formatter for key %r, falling back to value formatter", key)

    return get_value_formatter(
        metrics,
        saved_currency_formats,
        saved_column_formats,
        d3_format,
        currency,
        key,
        context=EmbedContext.from_query_string(query),
        config=config,
    )


def parse_metric(text: str):
    """
    "revenue" -> saved metric; '{"expressionType": "SQL", ...}' -> ad-hoc metric.
    """
    if not text.lstrip().startswith("{"):
        return text

    metric = json.loads(text)
    if not is_adhoc_metric(metric):
        raise ValueError(f"ad-hoc metric needs an expressionType: {text}")
    return metric


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"chartfmt v{__version__}"
    )

    parser.add_argument("values", nargs="*", type=float, help="Values to format")
    parser.add_argument("--metric", action="append", default=[], help="Saved metric name, or an ad-hoc metric as JSON (repeatable)")
    parser.add_argument("--key", help="Formatter key when several metrics are given")
    parser.add_argument("--format", dest="d3_format", help="d3 number format, e.g. ',.2f'")
    parser.add_argument("--currency", help="Currency code override, e.g. EUR")
    parser.add_argument(
        "--symbol-position",
        choices=["prefix", "suffix"],
        default="prefix",
    )
    parser.add_argument("--query", help="Page query string, e.g. 'locale=fr-FR'")
    parser.add_argument("--config", required=False, help="Path to config YAML")

    parser.add_argument("--describe", action="store_true", help="Print formatter metadata")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"chartfmt v{__version__}")
        return 0

    # ---- LOGGING ----
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if not args.values and not args.describe:
        parser.error("at least one value is required")

    try:
        metrics = [parse_metric(m) for m in args.metric]
    except ValueError as err:
        parser.error(f"invalid --metric: {err}")

    config = load_config(args.config)
    currency = (
        Currency(symbol=args.currency, symbol_position=args.symbol_position)
        if args.currency
        else None
    )

    formatter = resolve_formatter(
        metrics,
        config,
        d3_format=args.d3_format,
        currency=currency,
        query=args.query,
        key=args.key,
    )

    if args.describe:
        if metrics:
            print(f"metrics: {', '.join(get_metric_label(m) for m in metrics)}")
        print(f"id: {formatter.id}")
        print(f"label: {getattr(formatter, 'label', formatter.id)}")
        print(f"description: {getattr(formatter, 'description', '')}")

    for value in args.values:
        print(formatter(value))

    return 0


if __name__ == "__main__":
    sys.exit(main())
