import json
from donut.errors import InvalidPayloadError
from donut.utils_slack.validators import (
    get_interaction_type,
    get_actor_id,
    get_trigger_id,
    get_action_id,
    get_submission_values,
    get_completed_task,
)
from donut.utils_slack.slack_utils import open_modal, open_dm_channel, send_message, update_message
from donut.utils_slack.payloads import (
    COMPLETE_TASK_ACTION,
    request_task_modal,
    requested_task_message_payload,
    completed_task_message_payload,
    task_requested_text,
    task_completed_text,
)
from donut import logger


def handler(payload: dict):
    try:
        interaction_type = get_interaction_type(payload)
        logger.info("[+] Interaction type %s received.", interaction_type)
        logger.debug("[+] Payload:\n%s", json.dumps(payload, indent=2))

        if interaction_type == "shortcut":
            handle_shortcut(payload)
        elif interaction_type == "view_submission":
            handle_view_submission(payload)
        elif interaction_type == "block_actions":
            handle_block_actions(payload)
        else:
            logger.warning("Unsupported interaction type: %s", interaction_type)
    except InvalidPayloadError as e:
        logger.error("Dropping interaction: %s", e)


def handle_shortcut(payload: dict):
    open_modal(trigger_id=get_trigger_id(payload), view=request_task_modal())


def handle_view_submission(payload: dict):
    actor_id = get_actor_id(payload)
    assignee_id, description = get_submission_values(payload)

    actor_channel_id = open_dm_channel(actor_id)
    assignee_channel_id = open_dm_channel(assignee_id)
    if not actor_channel_id or not assignee_channel_id:
        logger.error("Could not open DM channels for %s / %s", actor_id, assignee_id)
        return

    # Notify assignee of requested task
    task_message = requested_task_message_payload(
        requester=actor_id,
        assignee=assignee_id,
        description=description
    )
    send_message(assignee_channel_id, **task_message)

    if actor_id != assignee_id:
        send_message(actor_channel_id, text=task_requested_text(assignee_id, description))


def handle_block_actions(payload: dict):
    action_id = get_action_id(payload)
    if action_id != COMPLETE_TASK_ACTION:
        logger.warning("Unsupported block action: %s", action_id)
        return

    actor_id = get_actor_id(payload)
    requester_id, description, message_ts = get_completed_task(payload)

    actor_channel_id = open_dm_channel(actor_id)
    requester_channel_id = open_dm_channel(requester_id)
    if not actor_channel_id or not requester_channel_id:
        logger.error("Could not open DM channels for %s / %s", actor_id, requester_id)
        return

    # Update the assignee's message to show it as done
    task_message = completed_task_message_payload(
        requester=requester_id,
        assignee=actor_id,
        description=description
    )
    update_message(actor_channel_id, message_ts, **task_message)

    if actor_id != requester_id:
        send_message(requester_channel_id, text=task_completed_text(actor_id, description))
