from typing import Any, List, Mapping


# =====================================================
# METRIC CLASSIFICATION
# =====================================================
# Saved metrics are referenced by name (plain str).
# Ad-hoc metrics are inline expressions (mappings).

def is_saved_metric(metric: Any) -> bool:
    return isinstance(metric, str) and bool(metric)


def is_adhoc_metric(metric: Any) -> bool:
    return isinstance(metric, Mapping) and "expressionType" in metric


def ensure_is_array(value: Any) -> List[Any]:
    """
    Normalize a metric argument into a list.

    - None         -> []
    - list / tuple -> list
    - anything else -> [value]
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def get_metric_label(metric: Any) -> str:
    """
    Human-readable label for a saved or ad-hoc metric.
    """
    if is_saved_metric(metric):
        return metric

    if not is_adhoc_metric(metric):
        return str(metric)

    if metric.get("label"):
        return metric["label"]

    if metric.get("expressionType") == "SQL" and metric.get("sqlExpression"):
        return metric["sqlExpression"]

    column = metric.get("column") or {}
    column_name = column.get("column_name", "") if isinstance(column, Mapping) else ""
    aggregate = metric.get("aggregate") or ""
    return f"{aggregate}({column_name})"
