from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from utils.logger import LEVELS
import logging
import yaml

DEFAULTS: Dict[str, Any] = {
    "log_level":   "info",
    "log_to_file": False,
    "log_dir":     "Logs",
    "logistics":   ["road", "sea"],
    "furniture":   ["victorian", "modern"],
    "builder":     True,
}

_TYPES = {
    "log_level":   str,
    "log_to_file": bool,
    "log_dir":     str,
    "logistics":   list,
    "furniture":   list,
    "builder":     bool,
}


class DemoConfig:
    """
    Settings for the demo run, read from an optional YAML file.
    Keys missing from the file keep their default value.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.__cfg_path = Path(path) if path is not None else None
        self.__cfg: Dict[str, Any] = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULTS.items()}
        self.__loaded = False

    def load_config(self) -> Dict[str, Any]:
        if self.__cfg_path is None or not self.__cfg_path.exists():
            return dict(self.__cfg)

        # The Logger is not configured yet at this point, report through the root logger
        log = logging.getLogger(__name__)
        try:
            with self.__cfg_path.open(encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}
        except Exception as e:
            log.error("Configuration error: %s", e)
            raise
        if not isinstance(cfg, dict):
            log.error("Configuration error: %s is not a mapping", self.__cfg_path)
            raise ValueError(f"{self.__cfg_path}: top level must be a mapping")

        for key, value in cfg.items():
            expected = _TYPES.get(key)
            if expected is None:
                log.warning("Ignoring unknown config key: %s", key)
                continue
            if not isinstance(value, expected):
                log.error("Configuration error: %s must be %s", key, expected.__name__)
                raise ValueError(f"{self.__cfg_path}: '{key}' must be {expected.__name__}, got {type(value).__name__}")
            if expected is list and not all(isinstance(v, str) for v in value):
                log.error("Configuration error: %s must be a list of names", key)
                raise ValueError(f"{self.__cfg_path}: '{key}' must only contain strings, got {value!r}")
            self.__cfg[key] = value

        if self.__cfg["log_level"] not in LEVELS:
            log.error("Configuration error: unknown log_level %s", self.__cfg["log_level"])
            raise ValueError(f"{self.__cfg_path}: unknown log_level '{self.__cfg['log_level']}'")
        self.__loaded = True
        return dict(self.__cfg)

    def loaded_from(self) -> Optional[Path]:
        """Path the settings came from, None when only defaults are in use"""
        return self.__cfg_path if self.__loaded else None

    def log_level(self) -> str: return self.__cfg["log_level"]

    def log_to_file(self) -> bool: return self.__cfg["log_to_file"]

    def log_dir(self) -> str: return self.__cfg["log_dir"]

    def logistics(self) -> List[str]: return list(self.__cfg["logistics"])

    def furniture(self) -> List[str]: return list(self.__cfg["furniture"])

    def builder(self) -> bool: return self.__cfg["builder"]

    def override_log_level(self, level: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{level}'")
        self.__cfg["log_level"] = level
