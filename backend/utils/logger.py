from flask import Blueprint, jsonify, current_app
from typing import List, Dict
from collections import deque
from datetime import datetime, timezone
import threading

LOG_CAPACITY = 100
RECENT_LOGS_LIMIT = 20


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class LogBuffer:
    """In-memory ring buffer of activity log entries.

    Holds at most `capacity` entries; once full, the oldest entry is dropped
    on every append. Each entry is also echoed to the console.
    """

    def __init__(self, capacity: int = LOG_CAPACITY):
        self._entries: deque = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def add_log(self, message: str) -> Dict:
        with self._lock:
            entry = {'timestamp': utc_timestamp(), 'message': message}
            self._entries.append(entry)
        print(f"[{entry['timestamp']}] {message}", flush=True)
        return entry

    def recent(self, n: int = RECENT_LOGS_LIMIT) -> List[Dict]:
        """Return the last `n` entries, oldest first."""
        if n <= 0:
            return []
        with self._lock:
            entries = list(self._entries)
        return [dict(e) for e in entries[-n:]]

    def __len__(self) -> int:
        return len(self._entries)


def get_log_buffer() -> LogBuffer:
    return current_app.extensions['log_buffer']


def add_log(message: str) -> Dict:
    """Append to the current app's log buffer (request/app context required)."""
    return get_log_buffer().add_log(message)


logs_bp = Blueprint('logs', __name__)


@logs_bp.get('/logs')
def get_logs():
    return jsonify({'logs': get_log_buffer().recent(RECENT_LOGS_LIMIT)})
