from dataclasses import dataclass


@dataclass
class EmbeddingConfig:
    """
    Fallbacks for embedded (locale-driven) formatting.
    """
    default_locale: str = "en-US"
    default_currency: str = "USD"
    fraction_digits: int = 2

    def as_dict(self) -> dict:
        return {
            "default_locale": self.default_locale,
            "default_currency": self.default_currency,
            "fraction_digits": self.fraction_digits,
        }
