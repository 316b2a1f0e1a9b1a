from bugslang.config.loader import ConfigSource, load_config, resolve_config
from bugslang.config.model import RecognizerConfig

__all__ = [
    "load_config",
    "resolve_config",
    "ConfigSource",
    "RecognizerConfig",
]
