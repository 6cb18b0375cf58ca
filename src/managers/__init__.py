from .config_manager import ConfigManager
from .style_manager import StyleManager

__all__ = [
    "ConfigManager",
    "StyleManager",
]
