#
# src/rpbasic/conflicts.py
#
"""
Detection of "finish not allowed" conflicts and parsing of the orphaned item
list ReportPortal embeds in their message text.

The service signals these conflicts only through free-text messages such as::

    {"message": "Finish launch is not allowed. Launch '42' has items '[7, 9]' with 'IN_PROGRESS' status"}
"""

import json

import structlog
from attrs import define

from rpbasic.exceptions import ConflictParseError

log = structlog.get_logger("conflicts")

ERROR_FINISH_LAUNCH = "Finish launch is not allowed."
ERROR_FINISH_TEST_ITEM = "Finish test item is not allowed."
CONFLICT_PHRASES = (ERROR_FINISH_LAUNCH, ERROR_FINISH_TEST_ITEM)


@define(frozen=True, slots=True)
class FinishConflict:
    """A refused finish request, as reported by the service."""

    phrase: str
    message: str
    error_code: int | None = None


def detect_finish_conflict(response_text: str) -> FinishConflict | None:
    """
    Returns the conflict described by a response body, or None.

    The structured ``message`` field is checked first; a raw substring search
    covers other bodies. The item list is only taken from text the service
    sent as a message: a JSON body matched by the raw search yields an empty
    message, so no orphaned items are read out of JSON syntax.
    """
    try:
        payload = json.loads(response_text)
        is_json = True
    except (json.JSONDecodeError, TypeError):
        payload = None
        is_json = False

    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        message = payload["message"]
        error_code = payload.get("errorCode")
        for phrase in CONFLICT_PHRASES:
            if phrase in message:
                return FinishConflict(
                    phrase=phrase,
                    message=message,
                    error_code=error_code if isinstance(error_code, int) else None,
                )

    for phrase in CONFLICT_PHRASES:
        if phrase in response_text:
            log.debug("Finish conflict found outside a structured message", phrase=phrase)
            if not is_json:
                message = response_text
            elif isinstance(payload, str):
                message = payload
            else:
                message = ""
            return FinishConflict(phrase=phrase, message=message)
    return None


def parse_orphaned_item_ids(message: str) -> list[str]:
    """
    Extracts the comma separated id list from the first ``[...]`` group.

    A message without an opening bracket carries no list and yields ``[]``.

    Raises:
        ConflictParseError: the bracket is never closed or an entry is empty.
    """
    start = message.find("[")
    if start == -1:
        return []
    end = message.find("]", start + 1)
    if end == -1:
        raise ConflictParseError("Unterminated item list in conflict message", raw_message=message)

    inner = message[start + 1 : end]
    if not inner.strip():
        return []

    item_ids = [part.strip().strip("'\"") for part in inner.split(",")]
    if any(not item_id for item_id in item_ids):
        raise ConflictParseError(f"Empty item id in list '[{inner}]'", raw_message=message)
    return item_ids


# 🔼⚙️
