import json
from typing import Any

from donut import logger
from donut.errors import InvalidPayloadError
from donut.utils_slack.payloads import (
    REQUEST_TASK_FROM_BLOCK,
    CONVERSATION_ACTION,
    TASK_DESCRIPTION_BLOCK,
    DESCRIPTION_ACTION,
    decode_task_value,
)


def parse_interaction_payload(raw) -> dict:
    if not raw:
        raise InvalidPayloadError("Missing 'payload' form field")
    try:
        payload = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as e:
        logger.error("Error en JSON")
        raise InvalidPayloadError(f"Payload is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidPayloadError("Payload must be a JSON object")
    return payload


def _dig(payload: dict, *path) -> Any:
    node = payload
    for key in path:
        try:
            node = node[key]
        except (KeyError, IndexError, TypeError):
            dotted = ".".join(str(p) for p in path)
            raise InvalidPayloadError(f"Missing field in payload: {dotted}") from None
    if node is None:
        raise InvalidPayloadError(f"Empty field in payload: {'.'.join(str(p) for p in path)}")
    return node


def get_interaction_type(payload: dict) -> str:
    return _dig(payload, "type")


def get_actor_id(payload: dict) -> str:
    return _dig(payload, "user", "id")


def get_submission_values(payload: dict) -> tuple[str, str]:
    values = _dig(payload, "view", "state", "values")
    assignee_id = _dig(values, REQUEST_TASK_FROM_BLOCK, CONVERSATION_ACTION, "selected_conversation")
    description = _dig(values, TASK_DESCRIPTION_BLOCK, DESCRIPTION_ACTION, "value")
    return assignee_id, description


def get_completed_task(payload: dict) -> tuple[str, str, str]:
    requester_id, description = decode_task_value(_dig(payload, "actions", 0, "value"))
    message_ts = _dig(payload, "message", "ts")
    return requester_id, description, message_ts


def get_trigger_id(payload: dict) -> str:
    return _dig(payload, "trigger_id")


def get_action_id(payload: dict) -> str:
    return _dig(payload, "actions", 0, "action_id")
