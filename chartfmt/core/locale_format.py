import logging
from typing import Callable, Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency, parse_pattern, validate_currency

log = logging.getLogger("chartfmt.locale-format")


def parse_locale(locale_tag: str, fallback: Optional[str] = None) -> Locale:
    """
    IETF ("fr-FR") or POSIX ("fr_FR") tag -> babel Locale.

    Well-formed tags without locale data resolve to the nearest
    available locale: the language subtag ("fr-XX" -> fr), then
    `fallback`. Malformed tags raise ValueError.
    """
    tag = locale_tag.replace("_", "-")
    try:
        return Locale.parse(tag, sep="-")
    except UnknownLocaleError:
        candidates = [tag.split("-")[0]]
        if fallback:
            candidates.append(fallback.replace("_", "-"))

        for candidate in candidates:
            try:
                locale = Locale.parse(candidate, sep="-")
            except (ValueError, UnknownLocaleError):
                continue
            log.warning("No locale data for %r, using %s", locale_tag, locale)
            return locale
        raise


def build_currency_format_func(
    locale_tag: str,
    currency_code: str,
    fraction_digits: int = 2,
    fallback_locale: Optional[str] = None,
) -> Callable[[float], str]:
    """
    Locale-aware currency formatting with a fixed number of fraction digits.

    Validation happens here, not on first use:
    malformed locales and unknown currency codes raise immediately.
    """
    locale = parse_locale(locale_tag, fallback=fallback_locale)
    validate_currency(currency_code, locale)

    pattern = parse_pattern(locale.currency_formats["standard"].pattern)
    pattern.frac_prec = (fraction_digits, fraction_digits)

    def format_func(value) -> str:
        return format_currency(
            value,
            currency_code,
            format=pattern,
            locale=locale,
            currency_digits=False,
        )

    return format_func
