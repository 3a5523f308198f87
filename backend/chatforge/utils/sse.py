import json
from typing import Any


def sse_event(event: str, data: Any) -> str:
    payload = json.dumps(data) if not isinstance(data, str) else data
    return f"event: {event}\ndata: {payload}\n\n"


def sse_comment(text: str) -> str:
    return f": {text}\n\n"
