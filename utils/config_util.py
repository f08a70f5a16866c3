"""Per-environment application settings read from ``config/<env>.json``."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "config"
ENVIRONMENTS = ("qa", "dev", "prod", "uat")
DEFAULT_ENVIRONMENT = "qa"


class ConfigLoadError(Exception):
    def __init__(self, environment: str, cause: Exception):
        super().__init__(f"Failed to load configuration for environment: {environment}. Error: {cause}")
        self.environment = environment
        self.cause = cause


@dataclass(frozen=True)
class AppConfig:
    base_url: str
    browser: str = "chrome"
    headless: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        base_url = data.get("baseURL")
        if not isinstance(base_url, str) or not base_url.strip():
            raise ValueError("'baseURL' is required")
        headless = data.get("headless", cls.headless)
        if not isinstance(headless, bool):
            raise ValueError("'headless' must be true or false")
        return cls(
            base_url=base_url,
            browser=data.get("browser", cls.browser),
            headless=headless,
        )


def get_app_config(environment: Optional[str] = None, config_dir: Path = CONFIG_DIR) -> AppConfig:
    """Load the configuration for ``environment``.

    Falls back to the ``ENV`` variable, then to ``qa``. Any read or validation
    failure is raised as :class:`ConfigLoadError` naming the environment.
    """
    target_env = environment or os.environ.get("ENV") or DEFAULT_ENVIRONMENT
    if target_env not in ENVIRONMENTS:
        raise ConfigLoadError(target_env, ValueError(f"expected one of {', '.join(ENVIRONMENTS)}"))
    config_path = Path(config_dir) / f"{target_env}.json"
    try:
        with config_path.open(encoding="utf-8") as handle:
            config = AppConfig.from_dict(json.load(handle))
    except (OSError, ValueError) as exc:
        raise ConfigLoadError(target_env, exc) from exc
    logger.debug("Loaded %s configuration from %s", target_env, config_path)
    return config
