from .resolver import build_custom_formatters, get_custom_formatter, get_value_formatter

__all__ = [
    "build_custom_formatters",
    "get_custom_formatter",
    "get_value_formatter",
]
