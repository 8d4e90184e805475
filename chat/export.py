"""Conversation export to plain text or JSON."""

import json
from datetime import datetime, timezone
from typing import Optional, Sequence

from pydantic import BaseModel

from chat.models import ExportMessage


class ExportedFile(BaseModel):
    """A rendered export ready to be downloaded."""
    filename: str
    media_type: str
    content: str


def _to_text(messages: Sequence[ExportMessage]) -> str:
    return "\n\n".join(
        f"[{msg.timestamp.strftime('%Y-%m-%d %H:%M:%S')}] {msg.sender.upper()}: {msg.content}"
        for msg in messages
    )


def _to_json(messages: Sequence[ExportMessage], personality: str, now: datetime) -> str:
    payload = {
        "exportDate": now.isoformat(),
        "personalityMode": personality,
        "messages": [msg.model_dump(mode="json") for msg in messages],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def export_conversation(
    messages: Sequence[ExportMessage],
    personality: str,
    fmt: str = "txt",
    now: Optional[datetime] = None
) -> ExportedFile:
    """Render a conversation for download.

    Args:
        messages: Messages in display order
        personality: Active personality tag, recorded in JSON exports
        fmt: "txt" or "json"
        now: Export time (defaults to current UTC time)

    Returns:
        ExportedFile with filename, media type and content

    Raises:
        ValueError: If there are no messages or the format is unknown
    """
    if not messages:
        raise ValueError("No messages to export")

    now = now or datetime.now(timezone.utc)
    stem = f"oryo-conversation-{now.date().isoformat()}"

    if fmt == "txt":
        return ExportedFile(filename=f"{stem}.txt", media_type="text/plain", content=_to_text(messages))
    if fmt == "json":
        return ExportedFile(
            filename=f"{stem}.json",
            media_type="application/json",
            content=_to_json(messages, personality, now)
        )

    raise ValueError(f"Unsupported export format: {fmt}")
