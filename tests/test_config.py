import pytest

from chartfmt.config import DEFAULT_CONFIG, EmbeddingConfig, load_config, load_embedding_config


def test_defaults_without_file():
    config = load_config(None)

    assert config["embedding"] == EmbeddingConfig().as_dict()
    assert config["saved_currency_formats"] == {}
    assert config["saved_column_formats"] == DEFAULT_CONFIG["saved_column_formats"]


def test_user_config_merges_over_defaults(tmp_path):
    path = tmp_path / "chartfmt.yaml"
    path.write_text(
        "embedding:\n"
        "  default_locale: fr-FR\n"
        "saved_column_formats:\n"
        "  revenue: ',.2f'\n",
        encoding="utf-8",
    )

    config = load_config(str(path))

    assert config["embedding"]["default_locale"] == "fr-FR"
    assert config["embedding"]["default_currency"] == "USD"
    assert config["saved_column_formats"] == {"revenue": ",.2f"}


def test_defaults_are_not_mutated(tmp_path):
    path = tmp_path / "chartfmt.yaml"
    path.write_text("embedding:\n  default_currency: EUR\n", encoding="utf-8")

    load_config(str(path))

    assert DEFAULT_CONFIG["embedding"]["default_currency"] == "USD"


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config("does/not/exist.yaml")


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "chartfmt.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_saved_formats_must_be_mappings(tmp_path):
    path = tmp_path / "chartfmt.yaml"
    path.write_text("saved_column_formats:\n  - ',.2f'\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_embedding_config_validation():
    assert load_embedding_config({}).default_locale == "en-US"
    assert load_embedding_config({"embedding": {"fraction_digits": "3"}}).fraction_digits == 3

    with pytest.raises(ValueError):
        load_embedding_config({"embedding": {"fraction_digits": "two"}})
