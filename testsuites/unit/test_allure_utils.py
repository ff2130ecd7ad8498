import json
from unittest.mock import MagicMock, patch

from playwright.sync_api import Error as PlaywrightError

from autotest_tools.report_tools import allure_utils


def test_attach_page_state_without_session():
    assert allure_utils.attach_page_state(None) is False


def test_attach_page_state_skips_closed_session(session):
    session.closed = True
    assert allure_utils.attach_page_state(session) is False


def test_attach_page_state_attaches_url_title_and_screenshot(session, page):
    page.screenshot.return_value = b"\x89PNG"

    with patch.object(allure_utils.allure, "attach") as attach:
        assert allure_utils.attach_page_state(session, name="failure") is True

    names = [c.kwargs["name"] for c in attach.call_args_list]
    assert names == ["failure_url", "failure_title", "failure_screenshot"]
    page.screenshot.assert_called_once_with(full_page=True)


def test_attach_page_state_tolerates_dead_page(session, page):
    page.title.side_effect = PlaywrightError("Target page has been closed")

    with patch.object(allure_utils.allure, "attach", MagicMock()):
        assert allure_utils.attach_page_state(session) is False


def test_attach_png_reads_file(tmp_path):
    image = tmp_path / "shot.png"
    image.write_bytes(b"\x89PNG")

    with patch.object(allure_utils.allure, "attach") as attach:
        allure_utils.attach_png(image, name="shot")

    assert attach.call_args.args[0] == b"\x89PNG"


def test_attach_json_serializes_settings(settings):
    with patch.object(allure_utils.allure, "attach") as attach:
        allure_utils.attach_json(settings.as_dict(), name="settings")

    body = json.loads(attach.call_args.args[0])
    assert body["browser.name"] == "chrome"
    assert body["explicit.wait"] == "1"
    assert attach.call_args.kwargs["attachment_type"] == allure_utils.allure.attachment_type.JSON
