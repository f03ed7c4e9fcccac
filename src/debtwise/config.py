"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "DebtWise"
    LOG_FILENAME = "debtwise.log"
    DEFAULT_MAX_MONTHS = 600  # 50 years
    DEFAULT_RECOMMENDATION_THRESHOLD = 1000.0

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTWISE_DEV_MODE", default=True)
        self.MAX_MONTHS = _env_int("DEBTWISE_MAX_MONTHS", self.DEFAULT_MAX_MONTHS)
        self.RECOMMENDATION_THRESHOLD = _env_float(
            "DEBTWISE_RECOMMENDATION_THRESHOLD", self.DEFAULT_RECOMMENDATION_THRESHOLD
        )
        if self.MAX_MONTHS < 1:
            raise ValueError("DEBTWISE_MAX_MONTHS must be at least 1.")
        if self.RECOMMENDATION_THRESHOLD < 0:
            raise ValueError("DEBTWISE_RECOMMENDATION_THRESHOLD must not be negative.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTWISE_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True


def default_config() -> BaseConfig:
    """Return a configuration built from the current environment."""

    return BaseConfig()
