# src/rpbasic/telemetry/logger/processors.py

"""
structlog processors applied to console output.
"""

from typing import Any

LOG_EMOJIS = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
}


def add_emoji_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Prefixes the event with an emoji for its level."""
    emoji = LOG_EMOJIS.get(event_dict.get("level", method_name))
    event = event_dict.get("event")
    if emoji and isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict
# 🔼⚙️
