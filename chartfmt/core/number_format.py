"""
Number Formatting
-----------------
Plain numeric formatters built from d3-style format patterns
(",.2f", ".1%", "$,.0f", ".3~s", ...).

Rules:
- A formatter NEVER raises while formatting a value
- Null / NaN / non-numeric values render as NULL_VALUE
- Invalid patterns still yield a formatter (flagged is_invalid)
"""

import logging
import math
import re
from decimal import Decimal
from numbers import Number
from typing import Callable, Dict, Optional

log = logging.getLogger("chartfmt.number-format")

NULL_VALUE = "N/A"
SMART_NUMBER = "SMART_NUMBER"

# [[fill]align][sign][symbol][0][width][,][.precision][~][type]
D3_PATTERN = re.compile(
    r"^(?:(.)?([<>=^]))?([+\-( ])?([$#])?(0)?(\d+)?(,)?(\.\d+)?(~)?([a-z%])?$",
    re.IGNORECASE,
)
D3_TYPES = set("efgrsdxobc%")
INTEGER_TYPES = set("dxobc")

SI_PREFIXES = {
    -24: "y", -21: "z", -18: "a", -15: "f", -12: "p", -9: "n",
    -6: "µ", -3: "m", 0: "", 3: "k", 6: "M", 9: "G", 12: "T",
    15: "P", 18: "E", 21: "Z", 24: "Y",
}

_TRAILING_ZEROS = re.compile(r"\.(\d*?)0+(?!\d)")


# =====================================================
# GENERIC FORMATTER WRAPPER
# =====================================================

class NumberFormatter:
    """
    Wraps a `number -> str` function with an id and display metadata.
    """

    def __init__(
        self,
        id: str,
        format_func: Callable[[Number], str],
        label: str = "",
        description: str = "",
        is_invalid: bool = False,
    ):
        self.id = id
        self.format_func = format_func
        self.label = label or id
        self.description = description
        self.is_invalid = is_invalid

    def format(self, value) -> str:
        number = coerce_number(value)
        if number is None:
            return NULL_VALUE
        try:
            return self.format_func(number)
        except (ValueError, ArithmeticError):
            # inf / out-of-range input (integer patterns, decimal quantization)
            return str(number)

    def __call__(self, value) -> str:
        return self.format(value)

    def __repr__(self) -> str:
        return f"NumberFormatter(id={self.id!r})"


def coerce_number(value) -> Optional[Number]:
    """
    Returns a numeric value, or None for null / NaN / unparseable input.
    """
    if value is None or isinstance(value, bool):
        return None

    if not isinstance(value, Number):
        try:
            value = float(value)
        except (TypeError, ValueError):
            return None

    try:
        if math.isnan(value):
            return None
    except TypeError:
        return None

    return value


# =====================================================
# HELPERS
# =====================================================

def trim_trailing_zeros(text: str) -> str:
    return _TRAILING_ZEROS.sub(
        lambda m: "." + m.group(1) if m.group(1) else "",
        text,
        count=1,
    )


def format_si(value, precision: int = 6, trim: bool = False) -> str:
    """
    SI-prefix notation with `precision` significant digits.

    12345 -> "12.3k" (precision=3)
    """
    value = float(value)
    if value == 0 or not math.isfinite(value):
        text = f"{value:.{max(precision - 1, 0)}f}" if value == 0 else str(value)
        return trim_trailing_zeros(text) if trim else text

    rounded = float(f"{value:.{max(precision - 1, 0)}e}")
    exponent = int(math.floor(math.log10(abs(rounded))))
    si = max(-24, min(24, (exponent // 3) * 3))
    digits = max(0, precision - 1 - (exponent - si))

    text = f"{rounded / 10 ** si:.{digits}f}"
    if trim:
        text = trim_trailing_zeros(text)
    return text + SI_PREFIXES[si]


def smart_number(value) -> str:
    """
    Compact default format.

    0 -> "0", 1234.5 -> "1.23k", 12.5 -> "12.5", 0.01234 -> "0.0123"
    """
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude >= 1000:
        return format_si(value, 3, trim=True).replace("G", "B")
    if magnitude >= 1:
        return trim_trailing_zeros(f"{value:.2f}")
    if magnitude >= 0.001:
        return trim_trailing_zeros(f"{value:.4f}")
    return format_si(value, 3, trim=True)


NAMED_FORMATS: Dict[str, Callable[[Number], str]] = {
    SMART_NUMBER: smart_number,
}


# =====================================================
# D3 PATTERN -> PYTHON
# =====================================================

def d3_format_func(pattern: str) -> Callable[[Number], str]:
    """
    Compile a d3-format pattern into a formatting function.

    Raises ValueError for patterns outside the supported grammar.
    """
    match = D3_PATTERN.match(pattern)
    if not match:
        raise ValueError(f"invalid format: {pattern}")

    fill, align, sign, symbol, zero, width, comma, precision, trim, type_ = match.groups()
    type_ = type_ or ""
    if type_ and type_ not in D3_TYPES:
        raise ValueError(f"invalid format type: {type_}")

    digits = int(precision[1:]) if precision else None
    parens = sign == "("
    py_sign = "-" if parens or not sign else sign
    currency = symbol == "$"
    alternate = "#" if symbol == "#" else ""

    # width / fill are applied to the final text when a "$" is inserted
    number_width = "" if currency else (width or "")
    number_zero = "" if currency else (zero or "")
    number_align = "" if currency else f"{fill or ''}{align or ''}"
    grouping = comma or ""

    def render(value) -> str:
        if type_ == "s":
            text = format_si(value, 6 if digits is None else max(digits, 1), bool(trim))
            if py_sign in "+ " and value >= 0:
                text = py_sign + text
        elif type_ == "r":
            significant = 6 if digits is None else max(digits, 1)
            rounded = Decimal(f"{float(value):.{significant - 1}e}")
            text = format(rounded, f"{py_sign}{grouping}f")
        else:
            py_type = type_ or "g"
            py_precision = digits
            if not type_ and digits is None:
                py_precision = 12
            if py_type in INTEGER_TYPES:
                value = int(round(value))
                py_precision = None
            spec_sign = "" if py_type == "c" else py_sign
            spec = (
                f"{number_align}{spec_sign}{alternate}{number_zero}{number_width}"
                f"{grouping}{'' if py_precision is None else '.' + str(py_precision)}{py_type}"
            )
            text = format(value, spec)

        if trim and type_ not in ("s", "g", ""):
            text = trim_trailing_zeros(text)

        if currency:
            stripped = text.lstrip()
            if stripped[:1] in "+- ":
                text = stripped[0] + "$" + stripped[1:]
            else:
                text = "$" + stripped

        if parens and text.lstrip().startswith("-"):
            text = "(" + text.lstrip()[1:] + ")"

        if currency and width:
            text = format(text, f"{fill or ' '}{align or '>'}{width}")

        return text

    return render


def create_number_formatter(pattern: str) -> NumberFormatter:
    if pattern in NAMED_FORMATS:
        return NumberFormatter(id=pattern, format_func=NAMED_FORMATS[pattern])

    try:
        func = d3_format_func(pattern)
        func(12345.678)
        func(-0.5)
    except (ValueError, TypeError, OverflowError) as err:
        log.warning("Invalid number format %r: %s", pattern, err)
        return NumberFormatter(
            id=pattern,
            format_func=lambda value: f"{value} (Invalid format: {pattern})",
            is_invalid=True,
        )

    return NumberFormatter(id=pattern, format_func=func)


# =====================================================
# REGISTRY
# =====================================================

class NumberFormatterRegistry:
    """
    One formatter per pattern, created on first use.
    """

    def __init__(self, default_format: str = SMART_NUMBER):
        self.default_format = default_format
        self._formatters: Dict[str, NumberFormatter] = {}

    def get(self, pattern: Optional[str] = None) -> NumberFormatter:
        key = pattern.strip() if isinstance(pattern, str) else ""
        key = key or self.default_format

        if key not in self._formatters:
            self._formatters[key] = create_number_formatter(key)
        return self._formatters[key]

    def __contains__(self, pattern: str) -> bool:
        return pattern in self._formatters


_REGISTRY = NumberFormatterRegistry()


def get_number_formatter(pattern: Optional[str] = None) -> NumberFormatter:
    """
    Plain numeric formatter for a d3 pattern (SMART_NUMBER when None).
    """
    return _REGISTRY.get(pattern)
