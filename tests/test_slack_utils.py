import logging

from slack_sdk.errors import SlackApiError

from conftest import slack_response
from donut.utils_slack.slack_utils import open_modal, open_dm_channel, send_message, update_message


def _api_error(code):
    return SlackApiError(code, slack_response({"ok": False, "error": code}))


def test_open_dm_channel_returns_channel_id(slack_client):
    assert open_dm_channel("U1") == "DU1"
    slack_client.conversations_open.assert_called_once_with(users="U1")


def test_open_dm_channel_returns_none_on_api_error(slack_client):
    slack_client.conversations_open.side_effect = _api_error("user_not_found")

    assert open_dm_channel("U1") is None


def test_send_message_returns_ts(slack_client):
    assert send_message("D1", text="hi") == "1700000000.000200"
    slack_client.chat_postMessage.assert_called_once_with(channel="D1", text="hi", blocks=None)


def test_send_message_returns_none_on_api_error(slack_client):
    slack_client.chat_postMessage.side_effect = _api_error("channel_not_found")

    assert send_message("D1", text="hi") is None


def test_update_message_posts_as_user(slack_client):
    blocks = [{"type": "divider"}]

    assert update_message("D1", "1.2", text="done", blocks=blocks)["ok"] is True
    slack_client.chat_update.assert_called_once_with(
        channel="D1", ts="1.2", text="done", blocks=blocks, as_user=True
    )


def test_update_message_returns_none_on_api_error(slack_client):
    slack_client.chat_update.side_effect = _api_error("cant_update_message")

    assert update_message("D1", "1.2", text="done") is None


def test_open_modal(slack_client):
    view = {"type": "modal"}

    assert open_modal("trig", view)["view"]["id"] == "V123"
    slack_client.views_open.assert_called_once_with(trigger_id="trig", view=view)


def test_open_modal_returns_none_on_api_error(slack_client):
    slack_client.views_open.side_effect = _api_error("expired_trigger_id")

    assert open_modal("trig", {"type": "modal"}) is None


def test_send_message_logs_success_at_info(slack_client, caplog):
    with caplog.at_level(logging.INFO, logger="donut"):
        send_message("D1", text="hi")

    assert [r.levelno for r in caplog.records] == [logging.INFO]
    assert "D1" in caplog.records[0].getMessage()


def test_open_dm_channel_logs_failure_at_error(slack_client, caplog):
    slack_client.conversations_open.side_effect = _api_error("user_not_found")

    with caplog.at_level(logging.INFO, logger="donut"):
        open_dm_channel("U1")

    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    assert "user_not_found" in caplog.records[0].getMessage()
