from .loader import load_config, load_embedding_config
from .defaults import DEFAULT_CONFIG
from .embedding_config import EmbeddingConfig

__all__ = [
    "load_config",
    "load_embedding_config",
    "DEFAULT_CONFIG",
    "EmbeddingConfig",
]
