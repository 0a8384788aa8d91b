"""
Admin activity log.

Entries go to the ``app_logs`` table of the SQLite database named by
``LOGS_DB`` and are shown on the admin logs page. When the database cannot be
written the entry is printed instead.
"""

import json
import traceback
from datetime import datetime
from flask import request, has_request_context
from .database import Database
from .config import get_config_value

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS app_logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        timestamp TEXT NOT NULL,
        level TEXT NOT NULL,
        source TEXT NOT NULL,
        message TEXT NOT NULL,
        details TEXT,
        ip_address TEXT,
        user_agent TEXT,
        request_path TEXT
    )
"""


class LoggingService:
    """Writes and reads admin log entries keyed by source (auth, skills, public_api)"""

    @staticmethod
    def _logs_db():
        return get_config_value('LOGS_DB')

    @staticmethod
    def _request_fields():
        if not has_request_context():
            return None, None, None
        # First hop only when behind a proxy
        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr) or ''
        ip_address = ip_address.split(',')[0].strip() or None
        return ip_address, request.headers.get('User-Agent', ''), request.path

    @staticmethod
    def log(level, source, message, details=None):
        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)
        timestamp = datetime.now().isoformat()

        try:
            with Database.connect(LoggingService._logs_db()) as conn:
                conn.execute(_SCHEMA)
                conn.execute(
                    "INSERT INTO app_logs (timestamp, level, source, message, details,"
                    " ip_address, user_agent, request_path) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                    (timestamp, level.upper(), source, message, details,
                     *LoggingService._request_fields()),
                )
                conn.commit()
        except Exception as e:
            print(f"[{timestamp}] [{level.upper()}] [{source}] {message}")
            if details:
                print(f"Details: {details}")
            print(f"Logging service error: {e}")

    @staticmethod
    def warning(source, message, details=None):
        LoggingService.log('WARNING', source, message, details)

    @staticmethod
    def error(source, message, details=None):
        LoggingService.log('ERROR', source, message, details)

    @staticmethod
    def log_user_action(source, action, details=None):
        LoggingService.log('INFO', source, f"User action: {action}", details)

    @staticmethod
    def log_error_with_traceback(source, error):
        """Log an exception caught at a route edge, with the current traceback"""
        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc(),
        })

    @staticmethod
    def recent_logs(limit=50, source=None):
        """Newest entries first, as dicts; an unreadable database gives []"""
        query = "SELECT timestamp, level, source, message, details FROM app_logs"
        params = ()
        if source:
            query += " WHERE source = ?"
            params = (source,)
        query += " ORDER BY id DESC LIMIT ?"

        try:
            with Database.connect(LoggingService._logs_db()) as conn:
                conn.execute(_SCHEMA)
                rows = conn.execute(query, params + (limit,)).fetchall()
        except Exception as e:
            print(f"Error reading logs: {e}")
            return []
        return [dict(zip(('timestamp', 'level', 'source', 'message', 'details'), row))
                for row in rows]
