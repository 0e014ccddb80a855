import copy

from donut.errors import InvalidPayloadError

# Block / action ids shared between the modal and the submission parser
REQUEST_TASK_FROM_BLOCK = "request_task_from"
CONVERSATION_ACTION = "conversation_id"
TASK_DESCRIPTION_BLOCK = "task_description"
DESCRIPTION_ACTION = "description"
COMPLETE_TASK_ACTION = "complete_task"

SELF_TASK_PREFIX = "You have assigned yourself the following task:"
REQUESTED_TASK_PREFIX = "<@{requester}> has requested the following task:"

MODAL_VIEW = {
    "type": "modal",
    "title": {
        "type": "plain_text",
        "text": "Request a task",
        "emoji": True
    },
    "submit": {
        "type": "plain_text",
        "text": "Request",
        "emoji": True
    },
    "close": {
        "type": "plain_text",
        "text": "Cancel",
        "emoji": True
    },
    "blocks": [
        {
            "type": "divider"
        },
        {
            "block_id": REQUEST_TASK_FROM_BLOCK,
            "type": "input",
            "optional": False,
            "label": {
                "type": "plain_text",
                "text": "Request task from:"
            },
            "element": {
                "action_id": CONVERSATION_ACTION,
                "type": "conversations_select"
            }
        },
        {
            "block_id": TASK_DESCRIPTION_BLOCK,
            "type": "input",
            "element": {
                "type": "plain_text_input",
                "action_id": DESCRIPTION_ACTION
            },
            "label": {
                "type": "plain_text",
                "text": "Description of task:",
                "emoji": True
            }
        }
    ]
}


def request_task_modal() -> dict:
    """Fresh copy of the modal view, safe to hand to the Slack client."""
    return copy.deepcopy(MODAL_VIEW)


def encode_task_value(requester: str, description: str) -> str:
    return f"{requester}:{description}"


def decode_task_value(value: str) -> tuple[str, str]:
    """
    Splits a button value back into (requester, description).
    Only the first colon separates: user ids never hold one, descriptions may.
    """
    if not isinstance(value, str) or ":" not in value:
        raise InvalidPayloadError(f"Malformed task value: {value!r}")
    requester, description = value.split(":", 1)
    if not requester:
        raise InvalidPayloadError(f"Task value without requester: {value!r}")
    return requester, description


def _task_prefix(requester: str, assignee: str) -> str:
    if requester == assignee:
        return SELF_TASK_PREFIX
    return REQUESTED_TASK_PREFIX.format(requester=requester)


def _task_context(requester: str, assignee: str, description: str) -> str:
    return f"*{_task_prefix(requester, assignee)}* {description}"


def _fallback_text(requester: str, assignee: str, description: str) -> str:
    # notifications and screen readers don't render mrkdwn blocks
    return f"{_task_prefix(requester, assignee)} {description}"


def requested_task_message_payload(requester: str, assignee: str, description: str) -> dict:
    task_context = _task_context(requester, assignee, description)
    if requester == assignee:
        button_context = "Click the button once the task has been completed to mark as done"
    else:
        button_context = "Click the button once the task has been completed, and we'll notify them that it's been done!"

    return {
        "text": _fallback_text(requester, assignee, description),
        "blocks": [
            {
                "block_id": TASK_DESCRIPTION_BLOCK,
                "type": "context",
                "elements": [
                    {
                        "type": "mrkdwn",
                        "text": task_context,
                    }
                ]
            },
            {
                "type": "actions",
                "elements": [
                    {
                        "type": "button",
                        "action_id": COMPLETE_TASK_ACTION,
                        "text": {
                            "type": "plain_text",
                            "text": "Completed",
                            "emoji": True
                        },
                        "style": "primary",
                        "value": encode_task_value(requester, description)
                    }
                ]
            },
            {
                "type": "context",
                "elements": [
                    {
                        "type": "plain_text",
                        "text": button_context,
                        "emoji": True,
                    }
                ]
            }
        ]
    }


def completed_task_message_payload(requester: str, assignee: str, description: str) -> dict:
    task_context = _task_context(requester, assignee, description)

    return {
        "text": "Task complete! " + _fallback_text(requester, assignee, description),
        "blocks": [
            {
                "type": "context",
                "elements": [
                    {
                        "type": "mrkdwn",
                        "text": f"~{task_context}~",
                    }
                ]
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": ":white_check_mark: Task complete!"
                }
            }
        ]
    }


def task_requested_text(assignee: str, description: str) -> str:
    return f":speech_balloon: You have requested <@{assignee}> to do the following task: {description}"


def task_completed_text(assignee: str, description: str) -> str:
    return f":white_check_mark: <@{assignee}> has completed the following task: {description}"
