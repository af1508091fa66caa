"""
Embedding Context
-----------------
Embedded / shared views pass `locale` and `currencySymbol` on the
page query string. The context is parsed once by the caller and
handed to the resolver explicitly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional
from urllib.parse import parse_qs, urlsplit

LOCALE_PARAM = "locale"
CURRENCY_SYMBOL_PARAM = "currencySymbol"


class EmbedMode(str, Enum):
    STANDALONE = "standalone"
    EMBEDDED_WITH_LOCALE = "embedded-with-locale"
    EMBEDDED_WITH_SYMBOL = "embedded-with-symbol"


@dataclass(frozen=True)
class EmbedContext:
    locale: Optional[str] = None
    currency_symbol: Optional[str] = None

    def __post_init__(self):
        # empty values count as absent
        object.__setattr__(self, "locale", _clean(self.locale))
        object.__setattr__(self, "currency_symbol", _clean(self.currency_symbol))

    @property
    def mode(self) -> EmbedMode:
        if self.currency_symbol:
            return EmbedMode.EMBEDDED_WITH_SYMBOL
        if self.locale:
            return EmbedMode.EMBEDDED_WITH_LOCALE
        return EmbedMode.STANDALONE

    @property
    def is_embedded(self) -> bool:
        return self.mode is not EmbedMode.STANDALONE

    # -----------------------------
    # CONSTRUCTORS
    # -----------------------------
    @classmethod
    def from_params(cls, params: Optional[Mapping]) -> "EmbedContext":
        if not params:
            return cls()
        return cls(
            locale=_first(params.get(LOCALE_PARAM)),
            currency_symbol=_first(params.get(CURRENCY_SYMBOL_PARAM)),
        )

    @classmethod
    def from_query_string(cls, query: Optional[str]) -> "EmbedContext":
        """
        Accepts "locale=fr-FR", "?locale=fr-FR" or a full URL.
        """
        if not query:
            return cls()

        if "://" in query:
            query = urlsplit(query).query
        return cls.from_params(parse_qs(query.lstrip("?")))


def _first(value):
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


STANDALONE = EmbedContext()
