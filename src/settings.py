"""Static configuration for spotrelay.

Service settings (webhook, upstream URLs, pacing, logging) live in a single
optional JSON file; the bot token stays in the environment.
"""

import json
import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# SPOTRELAY_CONFIG points at an alternative file; defaults apply when none exists.
CONFIG_PATH = os.getenv("SPOTRELAY_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json, or an empty config when the file is absent."""

    if not os.path.exists(CONFIG_PATH):
        return {}

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Inbound webhook. Telegram posts updates to WEBHOOK_PATH.
_webhook = _CONFIG.get("webhook", {})
WEBHOOK_HOST = _webhook.get("host", "0.0.0.0")
WEBHOOK_PORT = int(_webhook.get("port", 8000))
WEBHOOK_PATH = _webhook.get("path", "/api/telegram")

# Upstream services.
TELEGRAM_API_BASE = _CONFIG.get("telegram", {}).get("api_base", "https://api.telegram.org")
RESOLVER_BASE_URL = _CONFIG.get("resolver", {}).get("base_url", "https://api.fabdl.com")
# Conversion tasks can take a while, so the default is well above httpx's 5s.
HTTP_TIMEOUT_SECONDS = float(_CONFIG.get("http", {}).get("timeout_seconds", 60))

# Delay between playlist tracks (seconds).
PLAYLIST_PACING_SECONDS = float(_CONFIG.get("playlist", {}).get("pacing_seconds", 2.0))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
