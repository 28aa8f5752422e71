import json
from typing import Any


def try_parse_json(text: str) -> Any:
    """Parse ``text`` as JSON, returning it unchanged when it is not JSON."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return text
