"""
chartfmt v1.0

Formatter resolution for chart metrics: saved formats,
explicit overrides and embedded-view locale / currency hints.
"""

from .__version__ import __version__

# Keep package init lightweight
# pandas / matplotlib helpers (reporting.formatters, visuals) are imported explicitly

from .core import (
    Currency,
    CurrencyFormatter,
    EmbedContext,
    EmbedMode,
    NumberFormatter,
    get_number_formatter,
)
from .reporting.resolver import (
    build_custom_formatters,
    get_custom_formatter,
    get_value_formatter,
)

__all__ = [
    "__version__",
    "Currency",
    "CurrencyFormatter",
    "EmbedContext",
    "EmbedMode",
    "NumberFormatter",
    "get_number_formatter",
    "build_custom_formatters",
    "get_custom_formatter",
    "get_value_formatter",
]
