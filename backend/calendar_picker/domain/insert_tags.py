"""Insert tags referencing calendar events, e.g. ``{{event_url::5}}``."""
import re
from typing import Optional, Union

EVENT_TABLE = "tl_calendar_events"
EVENT_URL_PATTERN = re.compile(r"\{\{event_url::(\d+)\}\}")


def parse_event_url(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    match = EVENT_URL_PATTERN.fullmatch(value)
    return match.group(1) if match else None


def format_event_url(record_id: Union[int, str]) -> str:
    return "{{event_url::" + str(record_id) + "}}"
