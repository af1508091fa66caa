from typing import Any, Mapping

import pandas as pd


def format_metric_frame(df: pd.DataFrame, formatters: Mapping[str, Any]) -> pd.DataFrame:
    """
    Copy of a result frame with formatted metric columns.

    Columns without a formatter are left untouched.
    """
    if df is None:
        return pd.DataFrame()

    out = df.copy()
    for column in out.columns:
        formatter = formatters.get(column)
        if formatter is None:
            continue
        out[column] = out[column].map(formatter).astype(object)

    return out
