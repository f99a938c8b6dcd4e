from .constants import Paths, get_config_base, load_config

__all__ = ["Paths", "get_config_base", "load_config"]
