from matplotlib.ticker import FuncFormatter


def tick_formatter(formatter) -> FuncFormatter:
    """
    Adapt a resolved value formatter to a matplotlib tick formatter.
    """
    return FuncFormatter(lambda x, _pos: formatter(x))


def apply_axis_formatter(ax, formatter, axis: str = "y"):
    if axis not in ("x", "y"):
        raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")

    target = ax.get_yaxis() if axis == "y" else ax.get_xaxis()
    target.set_major_formatter(tick_formatter(formatter))
    return ax
