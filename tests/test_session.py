"""Tests for the launch state machine (default → fallback → fatal).

``BrowserType.launch`` is an ``AsyncMock``; no browser is ever started.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.scraper.errors import FatalLaunchError, LaunchFailure
from backend.scraper.locator import CANDIDATE_PATHS
from backend.scraper.models import DEFAULT_LAUNCH_ARGS, LaunchConfiguration
from backend.scraper.session import launch_browser


def _browser_type(*outcomes) -> MagicMock:
    browser_type = MagicMock()
    browser_type.launch = AsyncMock(side_effect=list(outcomes))
    return browser_type


class TestLaunchConfiguration:
    def test_defaults_disable_sandbox(self) -> None:
        kwargs = LaunchConfiguration(headless=True).launch_kwargs()
        assert kwargs == {"headless": True, "args": list(DEFAULT_LAUNCH_ARGS)}

    def test_with_executable_keeps_args(self) -> None:
        config = LaunchConfiguration(args=("--a", "--b"), headless=False)
        kwargs = config.with_executable("/usr/bin/chromium").launch_kwargs()
        assert kwargs == {
            "headless": False,
            "args": ["--a", "--b"],
            "executable_path": "/usr/bin/chromium",
        }
        assert config.executable_path is None


class TestLaunchBrowser:
    async def test_default_launch_succeeds(self) -> None:
        browser = MagicMock()
        browser_type = _browser_type(browser)
        locate = MagicMock()

        result = await launch_browser(browser_type, LaunchConfiguration(), locate=locate)

        assert result is browser
        browser_type.launch.assert_awaited_once()
        locate.assert_not_called()

    async def test_fallback_uses_located_executable(self) -> None:
        browser = MagicMock()
        browser_type = _browser_type(RuntimeError("no bundled chromium"), browser)

        result = await launch_browser(
            browser_type, LaunchConfiguration(), locate=lambda: "/usr/bin/chromium"
        )

        assert result is browser
        assert browser_type.launch.await_count == 2
        second_kwargs = browser_type.launch.await_args_list[1].kwargs
        assert second_kwargs["executable_path"] == "/usr/bin/chromium"
        assert second_kwargs["args"] == list(DEFAULT_LAUNCH_ARGS)

    async def test_no_candidate_is_fatal_after_one_attempt(self) -> None:
        primary = RuntimeError("no bundled chromium")
        browser_type = _browser_type(primary)

        with pytest.raises(FatalLaunchError) as excinfo:
            await launch_browser(browser_type, LaunchConfiguration(), locate=lambda: None)

        assert browser_type.launch.await_count == 1
        assert excinfo.value.primary is primary
        assert excinfo.value.fallback is None
        assert "CHROME_PATH" in str(excinfo.value)
        assert isinstance(excinfo.value, LaunchFailure)

    async def test_fallback_failure_is_fatal_and_stops(self) -> None:
        primary, secondary = RuntimeError("first"), RuntimeError("second")
        browser_type = _browser_type(primary, secondary, MagicMock())

        with pytest.raises(FatalLaunchError) as excinfo:
            await launch_browser(browser_type, LaunchConfiguration(), locate=lambda: "/x/chrome")

        assert browser_type.launch.await_count == 2
        assert excinfo.value.primary is primary
        assert excinfo.value.fallback is secondary
        assert "first" in str(excinfo.value)
        assert "second" in str(excinfo.value)

    async def test_existing_override_beats_table(self, monkeypatch, tmp_path) -> None:
        """With CHROME_PATH set, the fallback launches exactly that path."""
        override = tmp_path / "my-chrome"
        override.write_text("")
        table_path = CANDIDATE_PATHS["linux"][0]
        on_disk = {str(override), table_path}
        monkeypatch.setattr("backend.config.settings.chrome_path", str(override))
        monkeypatch.setattr("backend.scraper.locator.platform_family", lambda platform=None: "linux")
        monkeypatch.setattr("backend.scraper.locator._path_exists", lambda path: path in on_disk)
        browser_type = _browser_type(RuntimeError("boom"), MagicMock())

        await launch_browser(browser_type, LaunchConfiguration())

        assert browser_type.launch.await_args_list[1].kwargs["executable_path"] == str(override)

    async def test_missing_override_falls_through_to_table(self, monkeypatch, tmp_path) -> None:
        table_path = CANDIDATE_PATHS["linux"][1]
        monkeypatch.setattr("backend.config.settings.chrome_path", str(tmp_path / "gone"))
        monkeypatch.setattr("backend.scraper.locator.platform_family", lambda platform=None: "linux")
        monkeypatch.setattr("backend.scraper.locator._path_exists", lambda path: path == table_path)
        browser_type = _browser_type(RuntimeError("boom"), MagicMock())

        await launch_browser(browser_type, LaunchConfiguration())

        assert browser_type.launch.await_count == 2
        assert browser_type.launch.await_args_list[1].kwargs["executable_path"] == table_path

    async def test_missing_override_and_empty_table_is_fatal(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr("backend.config.settings.chrome_path", str(tmp_path / "gone"))
        monkeypatch.setattr("backend.scraper.locator._path_exists", lambda path: False)
        browser_type = _browser_type(RuntimeError("boom"))

        with pytest.raises(FatalLaunchError):
            await launch_browser(browser_type, LaunchConfiguration())

        assert browser_type.launch.await_count == 1

    async def test_default_locator_is_consulted(self, monkeypatch) -> None:
        locate = MagicMock(return_value=None)
        monkeypatch.setattr("backend.scraper.session.locate_executable", locate)
        browser_type = _browser_type(RuntimeError("boom"))

        with pytest.raises(FatalLaunchError):
            await launch_browser(browser_type)

        locate.assert_called_once_with()
