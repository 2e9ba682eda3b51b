"""
Unit tests for ScreenshotRunner: ordering, viewport fidelity, browser release,
idempotent outputs and the console report. Playwright is mocked.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from playwright.async_api import Error as PlaywrightError

from layout_check.exceptions import TargetPageNotFoundError
from layout_check.runner import ScreenshotRunner, take_screenshots


@pytest.mark.asyncio
async def test_run_captures_desktop_then_mobile(app_config, fake_playwright, fake_browser, no_sleep):
    result = await ScreenshotRunner(app_config).run()

    contexts = fake_browser.contexts_created
    assert [c.kwargs["viewport"] for c in contexts] == [
        {"width": 1280, "height": 800},
        {"width": 390, "height": 844},
    ]
    assert [c.kwargs["is_mobile"] for c in contexts] == [False, True]
    assert result.desktop.reported_viewport == {"width": 1280, "height": 800}
    assert result.mobile.reported_viewport == {"width": 390, "height": 844}


@pytest.mark.asyncio
async def test_run_writes_both_screenshots(app_config, fake_playwright, fake_browser, no_sleep):
    result = await ScreenshotRunner(app_config).run()

    out = Path(app_config.output_dir)
    assert (out / "screenshot-desktop.png").stat().st_size > 0
    assert (out / "screenshot-mobile.png").stat().st_size > 0
    assert result.desktop.path == out / "screenshot-desktop.png"
    assert result.mobile.path == out / "screenshot-mobile.png"


@pytest.mark.asyncio
async def test_run_twice_overwrites(app_config, fake_playwright, fake_browser, no_sleep):
    """Running twice leaves the same two files, holding the latest bytes."""
    await take_screenshots(app_config)
    fake_browser.screenshot_bytes = b"\x89PNG second run"
    await take_screenshots(app_config)

    out = Path(app_config.output_dir)
    assert sorted(p.name for p in out.iterdir()) == [
        "screenshot-desktop.png",
        "screenshot-mobile.png",
    ]
    assert (out / "screenshot-mobile.png").read_bytes() == b"\x89PNG second run"


@pytest.mark.asyncio
async def test_run_closes_browser_on_success(app_config, fake_playwright, fake_browser, no_sleep):
    await ScreenshotRunner(app_config).run()

    fake_browser.close.assert_awaited_once()
    for context in fake_browser.contexts_created:
        context.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_closes_browser_on_navigation_failure(
    app_config, fake_playwright, fake_browser, no_sleep
):
    original_new_context = fake_browser.new_context.side_effect

    async def _new_context(**kwargs):
        context = await original_new_context(**kwargs)
        context.page.goto.side_effect = PlaywrightError("net::ERR_FILE_NOT_FOUND")
        return context

    fake_browser.new_context.side_effect = _new_context

    with pytest.raises(PlaywrightError):
        await ScreenshotRunner(app_config).run()

    fake_browser.close.assert_awaited_once()
    # Aborted after the desktop pass; mobile never started.
    assert len(fake_browser.contexts_created) == 1


@pytest.mark.asyncio
async def test_run_closes_browser_on_write_failure(
    app_config, fake_playwright, fake_browser, no_sleep, tmp_path: Path
):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    config = dataclasses.replace(app_config, output_dir=str(blocker))

    with pytest.raises(OSError):
        await ScreenshotRunner(config).run()

    fake_browser.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_missing_target_fails_before_launch(app_config, fake_playwright, tmp_path: Path):
    config = dataclasses.replace(app_config, target_page=str(tmp_path / "missing.html"))

    with pytest.raises(TargetPageNotFoundError):
        await ScreenshotRunner(config).run()

    fake_playwright.chromium.launch.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_launch_failure_propagates(app_config, fake_playwright, no_sleep):
    fake_playwright.chromium.launch.side_effect = PlaywrightError("Executable doesn't exist")

    with pytest.raises(PlaywrightError, match="Executable"):
        await ScreenshotRunner(app_config).run()


@pytest.mark.asyncio
async def test_run_passes_launch_options(app_config, fake_playwright, no_sleep):
    config = dataclasses.replace(app_config, headless=False, chrome_executable="/opt/chrome")

    await ScreenshotRunner(config).run()

    fake_playwright.chromium.launch.assert_awaited_once_with(
        headless=False, executable_path="/opt/chrome"
    )


@pytest.mark.asyncio
async def test_run_reasonable_footer_report(
    app_config, fake_playwright, fake_browser, no_sleep, capsys
):
    result = await ScreenshotRunner(app_config).run()

    out = capsys.readouterr().out
    assert result.verdict == "reasonable"
    assert result.passed is True
    assert "© 2024" in out
    assert "Footer height (30.0 px) is reasonable" in out
    assert "✅ Desktop screenshot saved" in out
    assert "✅ Mobile screenshot saved" in out
    assert "Check screenshot-desktop.png and screenshot-mobile.png" in out


@pytest.mark.asyncio
async def test_run_footer_41px_is_too_tall(app_config, fake_playwright, fake_browser, no_sleep, capsys):
    fake_browser.footer_payload = {**fake_browser.footer_payload, "height": 41}

    result = await ScreenshotRunner(app_config).run()

    assert result.verdict == "too_tall"
    assert result.passed is False
    assert "might be too tall for mobile" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_footer_40px_is_reasonable(app_config, fake_playwright, fake_browser, no_sleep):
    fake_browser.footer_payload = {**fake_browser.footer_payload, "height": 40}

    result = await ScreenshotRunner(app_config).run()

    assert result.verdict == "reasonable"


@pytest.mark.asyncio
async def test_run_absent_footer_completes(
    app_config, fake_playwright, fake_browser, no_sleep, capsys
):
    fake_browser.footer_payload = None

    result = await ScreenshotRunner(app_config).run()

    out = capsys.readouterr().out
    assert result.mobile.footer.visible is False
    assert result.verdict == "absent"
    assert result.passed is True
    assert "- Visible: False" in out
    fake_browser.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_uses_configured_selector(app_config, fake_playwright, fake_browser, no_sleep):
    config = dataclasses.replace(app_config, footer_selector="#legal")

    await ScreenshotRunner(config).run()

    for context in fake_browser.contexts_created:
        assert context.page.evaluate.call_args.args[1] == "#legal"
