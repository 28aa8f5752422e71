"""
Utilities: version comparison, JSON parsing, heartbeat timer
"""

from image_reporter.utils.heartbeat import HeartbeatTimer, create_heartbeat_timer
from image_reporter.utils.json import try_parse_json
from image_reporter.utils.versioning import is_at_least

__all__ = ["HeartbeatTimer", "create_heartbeat_timer", "try_parse_json", "is_at_least"]
