import matplotlib.pyplot as plt
import pandas as pd
import pytest
from matplotlib.ticker import FuncFormatter

from chartfmt.core.currency import Currency
from chartfmt.core.number_format import get_number_formatter
from chartfmt.reporting.formatters import format_metric_frame
from chartfmt.reporting.resolver import build_custom_formatters
from chartfmt.visuals.formatters import apply_axis_formatter, tick_formatter


# -------------------------------------------------
# Result frames
# -------------------------------------------------

def test_format_metric_frame():
    df = pd.DataFrame({
        "region": ["EU", "US"],
        "revenue": [1234.5, None],
        "orders": [12, 3400],
    })
    formatters = build_custom_formatters(
        ["revenue", "orders"],
        {"revenue": Currency(symbol="EUR", symbol_position="suffix")},
        {"revenue": ",.2f", "orders": ",d"},
        None,
        None,
    )

    out = format_metric_frame(df, formatters)

    assert out["revenue"].tolist() == ["1,234.50 €", "N/A"]
    assert out["orders"].tolist() == ["12", "3,400"]
    assert out["region"].tolist() == ["EU", "US"]
    # source frame untouched
    assert df["orders"].tolist() == [12, 3400]


def test_format_metric_frame_none():
    assert format_metric_frame(None, {}).empty


# -------------------------------------------------
# Axis ticks
# -------------------------------------------------

def test_tick_formatter():
    tick = tick_formatter(get_number_formatter(",.0f"))

    assert isinstance(tick, FuncFormatter)
    assert tick(1234.4, 0) == "1,234"


def test_apply_axis_formatter():
    fig, ax = plt.subplots()
    try:
        apply_axis_formatter(ax, get_number_formatter(".0%"))
        formatter = ax.yaxis.get_major_formatter()

        assert isinstance(formatter, FuncFormatter)
        assert formatter(0.25, 0) == "25%"

        with pytest.raises(ValueError):
            apply_axis_formatter(ax, get_number_formatter(None), axis="z")
    finally:
        plt.close(fig)
