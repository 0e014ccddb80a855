from donut.config import logger, SLACK_BOT_TOKEN, LOG_LEVEL
