from .loader import load_config
from .models import AssertConfig
from .runtime import configure, get_config, reset_config

__all__ = ["AssertConfig", "configure", "get_config", "load_config", "reset_config"]
