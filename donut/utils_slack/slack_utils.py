from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from donut import logger, SLACK_BOT_TOKEN

client = WebClient(token=SLACK_BOT_TOKEN)


def open_modal(trigger_id: str, view: dict):
    try:
        response = client.views_open(trigger_id=trigger_id, view=view)
        logger.info(f"✅ Modal abierto: {response['view']['id']}")
        return response.data

    except SlackApiError as e:
        error_msg = e.response.get("error", "unknown_error")
        logger.error(f"❌ Error al abrir modal: {error_msg}")
        return None


def open_dm_channel(user_id: str) -> str | None:
    """
    Abre (o recupera) el canal de mensajes directos con un usuario
    """
    try:
        response = client.conversations_open(users=user_id)
        channel_id = response["channel"]["id"]
        logger.info(f"✅ DM con {user_id}: {channel_id}")
        return channel_id

    except SlackApiError as e:
        error_msg = e.response.get("error", "unknown_error")
        logger.error(f"❌ Error abriendo DM con {user_id}: {error_msg}")
        return None


def send_message(channel, text=None, blocks=None):
    """
    Envía un mensaje a Slack; `text` hace de fallback cuando hay `blocks`
    """
    try:
        response = client.chat_postMessage(
            channel=channel,
            text=text,
            blocks=blocks
        )
        logger.info(f"✅ Mensaje enviado a {channel}: {response['ts']}")
        return response["ts"]

    except SlackApiError as e:
        logger.error(f"❌ Error al enviar mensaje: {e.response['error']}")
        return None


def update_message(channel: str, ts: str, text: str = None, blocks: list = None):
    try:
        response = client.chat_update(
            channel=channel,
            ts=ts,
            text=text,
            blocks=blocks,
            as_user=True
        )
        logger.info(f"✅ Mensaje actualizado en {channel}: {ts}")
        return response.data

    except SlackApiError as e:
        error_msg = e.response.get("error", "unknown_error")
        logger.error(f"❌ Error al actualizar mensaje: {error_msg}")
        return None
