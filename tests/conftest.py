import matplotlib
import pytest

from chartfmt.core.currency import Currency

matplotlib.use("Agg")


@pytest.fixture
def saved_currency_formats():
    """
    Persisted currency formats, in the JSON shape charts store them.
    """
    return {
        "revenue": {"symbol": "EUR", "symbolPosition": "suffix"},
        "cost": Currency(symbol="USD"),
    }


@pytest.fixture
def saved_column_formats():
    return {
        "revenue": ",.2f",
        "orders": ",d",
    }


@pytest.fixture
def adhoc_metric():
    return {
        "expressionType": "SQL",
        "sqlExpression": "SUM(amount)",
        "label": "total_amount",
    }
