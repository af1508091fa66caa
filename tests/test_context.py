from chartfmt.core.context import EmbedContext, EmbedMode


def test_no_params_is_standalone():
    context = EmbedContext.from_query_string("")

    assert context.mode is EmbedMode.STANDALONE
    assert not context.is_embedded


def test_locale_alone_is_embedded():
    context = EmbedContext.from_query_string("locale=fr-FR")

    assert context.mode is EmbedMode.EMBEDDED_WITH_LOCALE
    assert context.locale == "fr-FR"
    assert context.currency_symbol is None


def test_symbol_is_url_decoded():
    context = EmbedContext.from_query_string("?currencySymbol=%C2%A3")

    assert context.mode is EmbedMode.EMBEDDED_WITH_SYMBOL
    assert context.currency_symbol == "£"


def test_symbol_wins_mode_and_locale_is_kept():
    context = EmbedContext.from_query_string("locale=de-DE&currencySymbol=CHF")

    assert context.mode is EmbedMode.EMBEDDED_WITH_SYMBOL
    assert context.locale == "de-DE"


def test_full_url():
    context = EmbedContext.from_query_string(
        "https://bi.example.com/dashboard/12/?standalone=1&locale=ja-JP"
    )

    assert context.locale == "ja-JP"
    assert context.is_embedded


def test_empty_values_count_as_absent():
    assert not EmbedContext.from_query_string("locale=&currencySymbol=").is_embedded
    assert not EmbedContext(locale="  ", currency_symbol="").is_embedded


def test_from_params():
    assert EmbedContext.from_params({"locale": ["fr-FR"]}).locale == "fr-FR"
    assert EmbedContext.from_params({"currencySymbol": "R$"}).currency_symbol == "R$"
    assert EmbedContext.from_params(None) == EmbedContext()
