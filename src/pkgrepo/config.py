"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

PACKAGES_FILE_ENV_VAR = "PKGREPO_PACKAGES_FILE"
LOG_LEVEL_ENV_VAR = "PKGREPO_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    packages_file: str = "packages.json"
    # Name of a stdlib logging level, eg "DEBUG"
    log_level: str = "WARNING"


def load_settings() -> Settings:
    packages_file = os.getenv(PACKAGES_FILE_ENV_VAR, "").strip()
    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "").strip().upper()
    defaults = Settings()
    return Settings(
        packages_file=packages_file or defaults.packages_file,
        log_level=log_level or defaults.log_level,
    )
