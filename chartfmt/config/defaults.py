DEFAULT_CONFIG = {
    # -----------------------------
    # EMBEDDED VIEWS
    # -----------------------------
    # Used when the page carries locale / currencySymbol params
    "embedding": {
        "default_locale": "en-US",
        "default_currency": "USD",
        "fraction_digits": 2,
    },

    # -----------------------------
    # SAVED FORMATS (OPTIONAL)
    # -----------------------------
    # metric -> {"symbol": "EUR", "symbolPosition": "suffix"}
    "saved_currency_formats": {},
    # metric -> d3 pattern, e.g. ",.2f"
    "saved_column_formats": {},
}
