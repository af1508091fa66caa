from chartfmt.core.metrics import (
    ensure_is_array,
    get_metric_label,
    is_adhoc_metric,
    is_saved_metric,
)


def test_ensure_is_array():
    assert ensure_is_array(None) == []
    assert ensure_is_array("m1") == ["m1"]
    assert ensure_is_array(["m1", "m2"]) == ["m1", "m2"]
    assert ensure_is_array(("m1",)) == ["m1"]


def test_saved_vs_adhoc(adhoc_metric):
    assert is_saved_metric("revenue")
    assert not is_saved_metric("")
    assert not is_saved_metric(adhoc_metric)
    assert is_adhoc_metric(adhoc_metric)
    assert not is_adhoc_metric("revenue")


def test_metric_labels(adhoc_metric):
    simple = {
        "expressionType": "SIMPLE",
        "aggregate": "SUM",
        "column": {"column_name": "amount"},
    }
    sql = {"expressionType": "SQL", "sqlExpression": "COUNT(*)"}

    assert get_metric_label("revenue") == "revenue"
    assert get_metric_label(adhoc_metric) == "total_amount"
    assert get_metric_label(simple) == "SUM(amount)"
    assert get_metric_label(sql) == "COUNT(*)"


def test_plain_mapping_is_not_an_adhoc_metric():
    metric = {"label": "orphan"}

    assert not is_adhoc_metric(metric)
    assert get_metric_label(metric) == str(metric)
