"""
Suite configuration module.

This module defines configuration classes for the environments the E2E
suite runs in (local, ci). Values are loaded from environment variables
with defaults that point at the hosted application.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``HEADLESS=0`` from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration with default settings."""

    # Front end under test and the API it talks to
    BASE_URL: str = os.environ.get("BASE_URL", "https://managmenttool-front-end.onrender.com/")
    API_BASE_URL: str = os.environ.get("API_BASE_URL", "https://managmenttool.onrender.com")

    # Test account
    USERNAME: str = os.environ.get("E2E_USERNAME", "Playwright")
    PASSWORD: str = os.environ.get("E2E_PASSWORD", "Playwright")
    RESET_SECRET: str = os.environ.get("E2E_RESET_SECRET", "CHRONOS_SECRET")

    # Timeouts (milliseconds)
    EXPECT_TIMEOUT: int = 5000
    TEST_TIMEOUT: int = 20000
    RESPONSE_TIMEOUT: int = int(os.environ.get("E2E_RESPONSE_TIMEOUT", TEST_TIMEOUT))

    # Hosted app may need a cold start (seconds)
    REACHABILITY_TIMEOUT: int = 60

    HEADLESS: bool = _env_flag("HEADLESS", True)
    VIEWPORT: dict = {"width": 1280, "height": 720}

    # Fail instead of skip when no browser binary is installed
    REQUIRE_BROWSER: bool = _env_flag("E2E_REQUIRE_BROWSER", False)

    # Failure artifacts
    SCREENSHOT_DIR: Path = BASE_DIR / "test-results" / "screenshots"
    TRACE_DIR: Path = BASE_DIR / "test-results" / "traces"
    TRACE_ON_FAILURE: bool = _env_flag("E2E_TRACE", True)


class LocalConfig(Config):
    """Developer machine: headed browser unless overridden."""

    HEADLESS: bool = _env_flag("HEADLESS", False)


class CIConfig(Config):
    """CI runner configuration."""

    HEADLESS: bool = True
    REQUIRE_BROWSER: bool = True
    REACHABILITY_TIMEOUT: int = 120


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "default")
    return config.get(env, config["default"])
