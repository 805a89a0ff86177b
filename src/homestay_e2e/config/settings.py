"""Runtime configuration for the end-to-end suite.

Relies on pydantic-settings so that environment variables (prefixed with ``HOMESTAY_``)
can override defaults, e.g. ``HOMESTAY_BASE_URL`` or ``HOMESTAY_HEADLESS=false``.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8081/healingland/index.jsp"


class Settings(BaseSettings):
    """Captures runtime configuration for a browser session."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Entry point of the homestay application under test",
    )
    page_load_timeout_s: int = Field(default=60, description="Navigation timeout in seconds")
    implicit_wait_s: int = Field(
        default=30, description="Default auto-wait applied to every element action, in seconds"
    )
    explicit_wait_s: int = Field(
        default=60, description="Upper bound for explicit element, URL and assertion waits"
    )
    dialog_wait_s: float = Field(
        default=5.0, description="Seconds to poll for a validation alert before giving up"
    )

    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    slow_mo_ms: int = Field(default=0, description="Slow-mo delay in milliseconds")
    viewport_width: int = 1280
    viewport_height: int = 720

    results_route_marker: str = Field(
        default="searchServlet",
        description="Substring expected in the URL once the search has been submitted",
    )

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("data/logs"))
    artifacts_dir: Path = Field(
        default=Path("data/artifacts"), description="Screenshots and HTML captured on failure"
    )
    capture_on_failure: bool = True

    model_config = SettingsConfigDict(
        env_prefix="HOMESTAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_dir", "artifacts_dir", mode="before")
    def _expand_dir(cls, value: str | Path) -> Path:  # noqa: D401
        if isinstance(value, Path):
            return value
        return Path(value).expanduser()

    @field_validator("page_load_timeout_s", "implicit_wait_s", "explicit_wait_s", "dialog_wait_s")
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeouts must be positive")
        return value

    @field_validator("results_route_marker")
    def _validate_marker(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("results_route_marker must not be blank")
        return value

    @property
    def page_load_timeout_ms(self) -> float:
        return self.page_load_timeout_s * 1000

    @property
    def implicit_wait_ms(self) -> float:
        return self.implicit_wait_s * 1000

    @property
    def explicit_wait_ms(self) -> float:
        return self.explicit_wait_s * 1000

    def ensure_directories(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        if self.capture_on_failure:
            self.artifacts_dir.mkdir(parents=True, exist_ok=True)

    def launch_args(self) -> dict[str, object]:
        return {
            "headless": self.headless,
            "slow_mo": self.slow_mo_ms,
        }

    def context_options(self) -> dict[str, object]:
        return {
            "viewport": {"width": self.viewport_width, "height": self.viewport_height},
        }
