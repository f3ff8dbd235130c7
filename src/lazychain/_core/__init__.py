from ._config import Config, config_context, configure, get_config
from ._main import Pipeable

__all__ = [
    "Config",
    "Pipeable",
    "config_context",
    "configure",
    "get_config",
]
