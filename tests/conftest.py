import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from slack_sdk.web import SlackResponse

from donut.main import app
from donut.utils_slack import slack_utils


def slack_response(data, status_code=200):
    return SlackResponse(
        client=None,
        http_verb="POST",
        api_url="https://slack.com/api/test",
        req_args={},
        data=data,
        headers={},
        status_code=status_code,
    )


@pytest.fixture()
def slack_client(monkeypatch):
    """Replace the module-level WebClient; each user gets DM channel D<user>."""
    client = MagicMock()
    client.conversations_open.side_effect = lambda users: slack_response({"ok": True, "channel": {"id": f"D{users}"}})
    client.chat_postMessage.return_value = slack_response({"ok": True, "ts": "1700000000.000200"})
    client.chat_update.return_value = slack_response({"ok": True, "ts": "1700000000.000100"})
    client.views_open.return_value = slack_response({"ok": True, "view": {"id": "V123"}})
    monkeypatch.setattr(slack_utils, "client", client)
    return client


@pytest.fixture()
def client():
    return TestClient(app)


def shortcut_payload(user_id="UREQ", trigger_id="trig-1"):
    return {"type": "shortcut", "user": {"id": user_id}, "trigger_id": trigger_id}


def view_submission_payload(actor_id="UREQ", assignee_id="UASSIGN", description="Water the plants"):
    return {
        "type": "view_submission",
        "user": {"id": actor_id},
        "view": {
            "state": {
                "values": {
                    "request_task_from": {
                        "conversation_id": {
                            "type": "conversations_select",
                            "selected_conversation": assignee_id,
                        }
                    },
                    "task_description": {
                        "description": {"type": "plain_text_input", "value": description}
                    },
                }
            }
        },
    }


def block_actions_payload(actor_id="UASSIGN", value="UREQ:Water the plants", ts="1700000000.000100"):
    return {
        "type": "block_actions",
        "user": {"id": actor_id},
        "actions": [{"type": "button", "action_id": "complete_task", "value": value}],
        "message": {"ts": ts},
    }


def as_form(payload):
    return {"payload": json.dumps(payload)}
