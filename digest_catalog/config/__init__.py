from .loader import DEFAULT_CONFIG_PATH, load_config
from .schema import ReconcileConfig

__all__ = ["DEFAULT_CONFIG_PATH", "ReconcileConfig", "load_config"]
