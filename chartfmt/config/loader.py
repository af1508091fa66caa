import copy
from pathlib import Path

import yaml

from .defaults import DEFAULT_CONFIG
from chartfmt.config.embedding_config import EmbeddingConfig
from chartfmt.utils.logger import get_logger

log = get_logger("config-loader")


# -------------------------------------------------
# EMBEDDING CONFIG LOADER
# -------------------------------------------------
def load_embedding_config(cfg: dict) -> EmbeddingConfig:
    values = (cfg or {}).get("embedding", {}) or {}
    defaults = EmbeddingConfig()

    try:
        fraction_digits = int(values.get("fraction_digits", defaults.fraction_digits))
    except (TypeError, ValueError):
        raise ValueError(
            f"embedding.fraction_digits must be an integer, got {values.get('fraction_digits')!r}"
        ) from None

    return EmbeddingConfig(
        default_locale=values.get("default_locale") or defaults.default_locale,
        default_currency=values.get("default_currency") or defaults.default_currency,
        fraction_digits=fraction_digits,
    )


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: str | None) -> dict:
    """
    Load and merge user config with defaults.

    - Defaults win if the user omits fields
    - Saved format maps are always dicts
    - embedding section is validated into EmbeddingConfig
    """

    # -------------------------------------------------
    # 1. Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

        log.info("Loaded config from %s", path)

    # -------------------------------------------------
    # 2. Merge with defaults
    # -------------------------------------------------
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    # -------------------------------------------------
    # 3. Enforce invariants
    # -------------------------------------------------
    for key in ("saved_currency_formats", "saved_column_formats"):
        if not isinstance(config.get(key), dict):
            raise ValueError(f"{key} must be a mapping of metric -> format")

    config["embedding"] = load_embedding_config(config).as_dict()

    return config
