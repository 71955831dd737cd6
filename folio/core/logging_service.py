"""
Centralized logging service for the portfolio application.
Provides structured logging with database storage and easy integration.
"""

import json
import traceback
from datetime import datetime, timedelta

from flask import current_app, has_app_context, has_request_context, request

from .config import Config
from .database import Database


class LoggingService:
    """Centralized logging service for application-wide logging"""

    @staticmethod
    def _get_logs_db():
        """Logs live next to the content tables unless LOGS_DB says otherwise"""
        if has_app_context():
            val = current_app.config.get('LOGS_DB') or current_app.config.get('PORTFOLIO_DB')
            if val:
                return val
        return Config.PORTFOLIO_DB

    @staticmethod
    def _ensure_logs_table(conn):
        """Ensure the app_logs table exists"""
        cursor = conn.cursor()
        cursor.execute("""
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
        """)
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_logs_timestamp
            ON app_logs(timestamp DESC)
        """)
        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_logs_level
            ON app_logs(level)
        """)

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None, None

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        user_agent = request.headers.get('User-Agent', '')
        return ip_address, user_agent, request.path

    @staticmethod
    def log(level, source, message, details=None):
        """
        Log a message to the database

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (auth, projects, skills, etc.)
            message (str): Main log message
            details (str/dict): Additional details (will be JSON-encoded if dict)
        """
        ip_address, user_agent, request_path = LoggingService._get_request_context()

        if isinstance(details, dict):
            details = json.dumps(details, indent=2, default=str)

        timestamp = datetime.now().isoformat()

        try:
            conn = Database.connect(LoggingService._get_logs_db())
            try:
                with conn:
                    LoggingService._ensure_logs_table(conn)
                    conn.execute("""
                        INSERT INTO app_logs
                        (timestamp, level, source, message, details, ip_address, user_agent, request_path)
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """, (
                        timestamp, level.upper(), source, message, details,
                        ip_address, user_agent, request_path
                    ))
            finally:
                conn.close()
        except Exception as e:
            # Fallback to console logging if database fails
            print(f"[{timestamp}] [{level.upper()}] [{source}] {message}")
            if details:
                print(f"Details: {details}")
            print(f"Logging service error: {e}")

    @staticmethod
    def debug(source, message, details=None):
        """Log debug message"""
        LoggingService.log('DEBUG', source, message, details)

    @staticmethod
    def info(source, message, details=None):
        """Log info message"""
        LoggingService.log('INFO', source, message, details)

    @staticmethod
    def warning(source, message, details=None):
        """Log warning message"""
        LoggingService.log('WARNING', source, message, details)

    @staticmethod
    def error(source, message, details=None):
        """Log error message"""
        LoggingService.log('ERROR', source, message, details)

    @staticmethod
    def log_admin_action(source, action, details=None):
        """Log content mutations made through the admin panel"""
        LoggingService.info(source, f"Admin action: {action}", details)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def log_security_event(message, details=None):
        """Log security-related events"""
        LoggingService.warning('security', message, details)

    @staticmethod
    def get_recent_logs(limit=50, level=None):
        """Most recent log entries, newest first"""
        try:
            conn = Database.connect(LoggingService._get_logs_db())
            try:
                LoggingService._ensure_logs_table(conn)
                if level:
                    rows = conn.execute(
                        'SELECT * FROM app_logs WHERE level = ? ORDER BY id DESC LIMIT ?',
                        (level.upper(), limit)
                    ).fetchall()
                else:
                    rows = conn.execute(
                        'SELECT * FROM app_logs ORDER BY id DESC LIMIT ?', (limit,)
                    ).fetchall()
                return [dict(row) for row in rows]
            finally:
                conn.close()
        except Exception as e:
            print(f"Error reading logs: {e}")
            return []

    @staticmethod
    def cleanup_old_logs(days_to_keep=30):
        """Clean up old log entries"""
        cutoff_iso = (datetime.now() - timedelta(days=days_to_keep)).isoformat()

        try:
            conn = Database.connect(LoggingService._get_logs_db())
            try:
                with conn:
                    LoggingService._ensure_logs_table(conn)
                    cursor = conn.execute('DELETE FROM app_logs WHERE timestamp < ?', (cutoff_iso,))
                    deleted_count = cursor.rowcount
            finally:
                conn.close()

            LoggingService.info('system', f"Cleaned up {deleted_count} old log entries")
            return deleted_count

        except Exception as e:
            LoggingService.error('system', f"Failed to cleanup old logs: {e}")
            return 0


# Convenience instance for easy importing
logger = LoggingService()
