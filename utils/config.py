"""Environment-driven settings for the automation framework."""

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from utils.exceptions import ConfigurationError

DEFAULT_APP_URL = "https://demo.nopcommerce.com/"
DEFAULT_HUB_URL = "https://hub.lambdatest.com/wd/hub"

# Settings field -> environment variable
ENV_KEYS = {
    "app_url": "APP_URL",
    "browser": "BROWSER",
    "execution_platform": "EXECUTION_PLATFORM",
    "headless": "HEADLESS",
    "implicit_wait": "IMPLICIT_WAIT",
    "explicit_wait": "EXPLICIT_WAIT",
    "page_load_timeout": "PAGE_LOAD_TIMEOUT",
    "script_timeout": "SCRIPT_TIMEOUT",
    "artifacts_dir": "ARTIFACTS_DIR",
    "testdata_dir": "TESTDATA_DIR",
    "remote_hub_url": "REMOTE_HUB_URL",
    "lt_username": "LT_USERNAME",
    "lt_access_key": "LT_ACCESS_KEY",
    "run_browser_tests": "RUN_BROWSER_TESTS",
}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_url: str = DEFAULT_APP_URL
    browser: str = "chrome"
    execution_platform: Literal["LOCAL", "REMOTE"] = "LOCAL"
    headless: bool = False
    implicit_wait: int = Field(default=10, ge=0)
    explicit_wait: int = Field(default=20, ge=0)
    page_load_timeout: int = Field(default=30, gt=0)
    script_timeout: int = Field(default=30, gt=0)
    artifacts_dir: Path = Path("test-output")
    testdata_dir: Optional[Path] = None
    remote_hub_url: str = DEFAULT_HUB_URL
    lt_username: Optional[str] = None
    lt_access_key: Optional[str] = None
    run_browser_tests: bool = False

    @field_validator("browser", mode="before")
    def normalize_browser(cls, v):  # type: ignore[no-untyped-def]
        return str(v).strip().lower()

    @field_validator("execution_platform", mode="before")
    def normalize_platform(cls, v):  # type: ignore[no-untyped-def]
        return str(v).strip().upper()

    @property
    def is_remote(self) -> bool:
        return self.execution_platform == "REMOTE"

    @property
    def screenshots_dir(self) -> Path:
        return self.artifacts_dir / "screenshots"

    @property
    def reports_dir(self) -> Path:
        return self.artifacts_dir / "reports"

    @property
    def logs_dir(self) -> Path:
        return self.artifacts_dir / "logs"


def load_env_files(root: Path = Path(".")) -> None:
    """Load `.env.local` then `.env`; variables already set are never overridden.

    The process environment therefore wins over `.env.local`, which wins over `.env`.
    """
    for name in (".env.local", ".env"):
        env_file = root / name
        if env_file.exists():
            load_dotenv(env_file, override=False)
            logger.debug(f"Loaded environment from {env_file}")


def get_settings(environ: Optional[dict] = None) -> Settings:
    """Build settings from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ`` (used by tests)

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: if any value fails validation
    """
    source = os.environ if environ is None else environ
    values = {}
    for field_name, env_key in ENV_KEYS.items():
        raw = source.get(env_key)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()

    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e
