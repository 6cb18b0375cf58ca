"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and initializes the style sub-manager.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional

from managers.style_manager import StyleManager, parse_color
from models.enums import LogCategory, LogLevel
from models.settings import AppSettings
from models.state import ClockTimings
from models.style import ClockConfiguration
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes its include: directive to merge modular
    YAML files (app.yaml, styles.yaml).

    Example:
        config = ConfigManager()
        config.load()

        settings = config.app_settings
        clock_config = config.get_clock_configuration()
    """

    def __init__(
        self,
        config_path="config/config.yaml",
        defaults_path="config/factory_defaults.yaml",
        base_dir: Optional[Path] = None,
    ):
        """
        Args:
            config_path: Path to main config.yaml (relative to base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory paths are resolved against (default: src/)
        """
        self.base_dir = Path(base_dir) if base_dir else SRC_DIR
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict = {}
        self.used_factory_defaults = False

        # Initialized in load()
        self.style_manager: StyleManager
        self._app_settings: Optional[AppSettings] = None

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has an 'include:' list, load and merge those files
        3. Otherwise treat it as a monolithic config
        4. Fall back to factory_defaults.yaml on failure
        5. Initialize the style manager and app settings

        Returns:
            Merged config data dict
        """
        try:
            full_path = self.base_dir / self.config_path
            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if "include" in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config["include"], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

            self._initialize_managers()

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            with open(self.base_dir / self.factory_defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}
            self.used_factory_defaults = True
            self._initialize_managers()

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from the include list

        Later files override top-level keys of earlier ones.
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())))
        return merged

    def _initialize_managers(self):
        self.style_manager = StyleManager(self.data.get("styles", {}))
        self._app_settings = self._parse_app_settings()

        # Unknown active style counts as a broken config
        self.style_manager.get_style(self._app_settings.style)

    def _parse_app_settings(self) -> AppSettings:
        app = self.data.get("app") or {}
        surface = app.get("surface") or {}
        logging_cfg = self.data.get("logging") or {}
        timings = app.get("timings") or {}
        defaults = AppSettings()
        default_timings = ClockTimings()

        level_name = str(logging_cfg.get("level", defaults.log_level.name)).upper()
        try:
            log_level = LogLevel[level_name]
        except KeyError:
            raise ValueError(f"Unknown log level: {level_name}") from None

        return AppSettings(
            style=app.get("style", defaults.style),
            width=int(surface.get("width", defaults.width)),
            height=int(surface.get("height", defaults.height)),
            fps=int(app.get("fps", defaults.fps)),
            background=parse_color(surface["background"]) if "background" in surface else defaults.background,
            output_path=app.get("output_path", defaults.output_path),
            timings=ClockTimings(
                fine_sweep_ms=float(timings.get("fine_sweep_ms", default_timings.fine_sweep_ms)),
                second_ms=float(timings.get("second_ms", default_timings.second_ms)),
                hour_ms=float(timings.get("hour_ms", default_timings.hour_ms)),
            ),
            log_level=log_level,
            log_colors=bool(logging_cfg.get("colors", defaults.log_colors)),
        )

    # === Accessors ===

    @property
    def app_settings(self) -> AppSettings:
        if self._app_settings is None:
            raise RuntimeError("ConfigManager.load() has not been called")
        return self._app_settings

    def get_clock_configuration(self, name: Optional[str] = None) -> ClockConfiguration:
        """Style preset by name (default: the active style)"""
        return self.style_manager.get_style(name or self.app_settings.style)

    def get_background(self, name: Optional[str] = None):
        """Background of the style, or the surface default when it sets none"""
        style = self.style_manager.get_background(name or self.app_settings.style)
        return style or self.app_settings.background
