from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from homestay_e2e.config.settings import DEFAULT_BASE_URL, Settings


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("HOMESTAY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults_target_local_healingland():
    settings = Settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.page_load_timeout_s == 60
    assert settings.implicit_wait_s == 30
    assert settings.explicit_wait_s == 60
    assert settings.results_route_marker == "searchServlet"
    assert settings.page_load_timeout_ms == 60_000
    assert settings.implicit_wait_ms == 30_000


def test_settings_read_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("HOMESTAY_BASE_URL", "http://staging.example/healingland/index.jsp")
    monkeypatch.setenv("HOMESTAY_HEADLESS", "false")
    monkeypatch.setenv("HOMESTAY_EXPLICIT_WAIT_S", "45")
    monkeypatch.setenv("HOMESTAY_BROWSER", "firefox")

    settings = Settings()

    assert settings.base_url == "http://staging.example/healingland/index.jsp"
    assert settings.headless is False
    assert settings.explicit_wait_ms == 45_000
    assert settings.launch_args() == {"headless": False, "slow_mo": 0}
    assert settings.browser == "firefox"


@pytest.mark.parametrize("field", ["page_load_timeout_s", "implicit_wait_s", "explicit_wait_s", "dialog_wait_s"])
def test_settings_reject_non_positive_timeouts(field: str):
    with pytest.raises(ValidationError, match="timeouts must be positive"):
        Settings(**{field: 0})


def test_settings_reject_blank_results_marker():
    with pytest.raises(ValidationError):
        Settings(results_route_marker="   ")


def test_settings_reject_unknown_browser():
    with pytest.raises(ValidationError):
        Settings(browser="netscape")


def test_ensure_directories_creates_log_and_artifact_dirs(tmp_path):
    settings = Settings(log_dir=str(tmp_path / "logs"), artifacts_dir=tmp_path / "artifacts")

    settings.ensure_directories()

    assert settings.log_dir.is_dir()
    assert settings.artifacts_dir.is_dir()
    assert settings.context_options() == {"viewport": {"width": 1280, "height": 720}}
