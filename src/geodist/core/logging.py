"""
Logging configuration.

We use a YAML logging config (`src/geodist/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `GEODIST_LOG_LEVEL`).
"""

from __future__ import annotations

import logging.config

from geodist.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure the Python logging system based on packaged YAML config + settings.

    An explicit `level` (e.g. from `--log-level`) wins over the settings value.
    """
    settings = get_settings()
    config = dict(get_logging_config())
    config["handlers"] = {name: dict(h) for name, h in config.get("handlers", {}).items()}
    config["root"] = dict(config.get("root", {}))

    level = (level or settings.app.log_level).upper()
    config["root"]["level"] = level
    for handler in config["handlers"].values():
        if "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
