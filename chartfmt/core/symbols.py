import re
import unicodedata

# a bare ISO 4217 code, or any single non-word, non-space character
# (currency glyphs are filtered by unicode category below);
# word boundaries are ASCII-only, so "éUSD" still exposes "USD"
_SYMBOL_CANDIDATE = re.compile(r"\b[A-Z]{3}\b|[^\w\s]", re.ASCII)


def is_currency_token(token: str) -> bool:
    if len(token) == 1:
        return unicodedata.category(token) == "Sc"
    return len(token) == 3 and token.isascii() and token.isupper()


def replace_currency_symbol(text: str, symbol: str) -> str:
    """
    Replace every currency token in a formatted string with `symbol`.

    "€1,234.56" -> "£1,234.56"
    "1.234,56 EUR" -> "1.234,56 £"

    Strings without a currency token are returned unchanged.
    """
    if not symbol:
        return text

    return _SYMBOL_CANDIDATE.sub(
        lambda m: symbol if is_currency_token(m.group(0)) else m.group(0),
        text,
    )
