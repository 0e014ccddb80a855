import logging
import sys
import os
from dotenv import load_dotenv


load_dotenv()

# === CONFIG GLOBAL DE LOGGING ===
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

FORMATTER = "[%(levelname)s] %(name)s.%(funcName)s():Line %(lineno)d → %(message)s"

root_logger = logging.getLogger()
root_logger.handlers.clear()
root_logger.setLevel(LOG_LEVEL)


console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(logging.Formatter(FORMATTER))
console_handler.setLevel(LOG_LEVEL)

root_logger.addHandler(console_handler)
logger = logging.getLogger("donut")

for noisy_logger in [
    "slack_sdk",
    "urllib3",
    "uvicorn",
    "fastapi"
]:
    logging.getLogger(noisy_logger).setLevel(logging.WARNING)


SLACK_BOT_TOKEN = os.getenv("SLACK_BOT_TOKEN")
