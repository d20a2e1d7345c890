"""
Logging helper module for terminal-first logging.
All output goes to stdout with formatted prefixes, and also to a log file.

The log file is opened on first write, in a "logs" folder under the per-user
calendar directory (VENDROM_CALENDAR_HOME), and closed at interpreter exit.
Set VENDROM_CALENDAR_LOG_DIR to move it and VENDROM_CALENDAR_FILE_LOGGING=0 to
keep output on stdout only.
"""

import atexit
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

# Same per-user directory the settings file lives in
_user_dir = Path(
    os.environ.get("VENDROM_CALENDAR_HOME", Path.home() / ".config" / "vendrom-calendar")
)

_log_dir = Path(os.environ.get("VENDROM_CALENDAR_LOG_DIR", _user_dir / "logs"))
_file_logging = os.environ.get("VENDROM_CALENDAR_FILE_LOGGING", "1").lower() not in ("0", "false", "no")
_log_file_path: Optional[Path] = None
_log_file = None


def configure(log_dir: Optional[Path] = None, file_logging: Optional[bool] = None) -> None:
    """
    Change where (and whether) log lines are written to disk.
    Closes the current log file so the next write opens a fresh one.
    """
    global _log_dir, _file_logging

    close()

    if log_dir is not None:
        _log_dir = Path(log_dir)
    if file_logging is not None:
        _file_logging = file_logging


def close() -> None:
    """Close the current log file, if one is open."""
    global _log_file, _log_file_path

    if _log_file is not None:
        _log_file.close()
        _log_file = None
        _log_file_path = None


atexit.register(close)


def _open_log_file():
    """Create log file with timestamp in the configured directory."""
    global _log_file, _log_file_path

    _log_dir.mkdir(parents=True, exist_ok=True)
    _log_file_path = _log_dir / f"vendrom_calendar_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    _log_file = open(_log_file_path, 'a', encoding='utf-8')
    return _log_file


def _log(message: str):
    """Write message to both stdout and log file."""
    print(message)
    if not _file_logging:
        return
    log_file = _log_file or _open_log_file()
    log_file.write(message + '\n')
    log_file.flush()


class Log:
    """Simple logging class that outputs to stdout and log file with formatted prefixes."""

    @staticmethod
    def section(title: str):
        """Print a section header: blank line + '===== TITLE ====='"""
        _log("")
        _log(f"===== {title} =====")

    @staticmethod
    def info(message: str):
        """Print an info message: '[INFO] message'"""
        _log(f"[INFO] {message}")

    @staticmethod
    def warn(message: str):
        """Print a warning message: '[WARN] message'"""
        _log(f"[WARN] {message}")

    @staticmethod
    def error(message: str):
        """Print an error message: '[ERROR] message'"""
        _log(f"[ERROR] {message}")

    @staticmethod
    def kv(pairs: dict):
        """
        Print key-value pairs: '[KV] key=value | key2=value2'

        Args:
            pairs: Dictionary of key-value pairs to print
        """
        kv_string = " | ".join([f"{k}={v}" for k, v in pairs.items()])
        _log(f"[KV] {kv_string}")

    @staticmethod
    def get_log_path() -> Optional[str]:
        """Get the path to the current log file, or None if nothing was written yet."""
        if _log_file_path is None:
            return None
        return str(_log_file_path)
