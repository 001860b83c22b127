"""
Logging utilities
Console logging plus the append-only, timestamped error report
"""

import os
import re
import threading
from datetime import datetime
from dateutil import parser as dateutil_parser
from form_helpers.config_utils import load_logging_config, DEFAULT_LOGGING_CONFIG


ENTRY_PATTERN = re.compile(r'^\[(?P<timestamp>[^\]]*)\] (?P<body>.*)$')
DETAIL_SEPARATOR = '. Exception: '

# Process-wide error report, initialized at import
_error_report = []
_error_report_lock = threading.Lock()

_logging_config = None


def get_logging_config():
    """Return the active logging config, loading it on first use"""
    global _logging_config
    if _logging_config is None:
        _logging_config = load_logging_config()
    return _logging_config


def configure_logging(config=None):
    """
    Replace the active logging config

    Args:
        config: Dict of settings merged over the defaults, or None to reload
                from config/logging.json and the environment

    Returns:
        dict: The active logging config
    """
    global _logging_config
    if config is None:
        _logging_config = load_logging_config()
    else:
        _logging_config = {**DEFAULT_LOGGING_CONFIG, **config}
    return _logging_config


def _with_detail(message, detail):
    if detail is None:
        return message
    return f"{message}{DETAIL_SEPARATOR}{detail}"


def log(message, detail=None):
    """
    Write a message to the console only

    Args:
        message: Message to write
        detail: Optional exception/cause text; switches to the "Error: ..." form
    """
    if not get_logging_config().get('log_to_console', True):
        return

    if detail is None:
        print(message)
    else:
        print(f"Error: {_with_detail(message, detail)}")


def log_error(message, detail=None):
    """
    Append a timestamped entry to the error report and echo it to the console

    Args:
        message: Error message
        detail: Optional underlying cause (e.g. an exception message)

    Returns:
        bool: True if the entry was stored
    """
    try:
        timestamp = datetime.now().strftime(get_logging_config()['timestamp_format'])
        entry = f"[{timestamp}] {_with_detail(message, detail)}"

        with _error_report_lock:
            _error_report.append(entry)
    except Exception as e:
        log("Failed to log error!", str(e))
        return False

    log(f"Error: {_with_detail(message, detail)}")
    return True


def get_error_report():
    """
    Get the stored error entries

    Returns:
        list: Copy of the entries, oldest first
    """
    with _error_report_lock:
        return list(_error_report)


def init_error_report():
    """Start a fresh, empty error report (host startup only)"""
    global _error_report
    with _error_report_lock:
        _error_report = []


def export_error_report(path=None):
    """
    Append every stored entry to a text file, one entry per line

    Args:
        path: Target file; defaults to the configured error_report_file

    Returns:
        bool: True if successful
    """
    if path is None:
        path = get_logging_config()['error_report_file']

    entries = get_error_report()

    try:
        with open(path, 'a', encoding='utf-8') as f:
            for entry in entries:
                f.write(entry.replace('\n', ' ') + '\n')
        return True
    except Exception as e:
        log(f"Error writing error report to {path}", str(e))
        return False


def parse_error_entry(line):
    """
    Split a stored entry into its parts

    Args:
        line: One "[<timestamp>] <message>[. Exception: <detail>]" entry

    Returns:
        dict: {'timestamp': datetime or None, 'message': str,
               'detail': str or None, 'raw': str}
    """
    line = line.rstrip('\n')
    match = ENTRY_PATTERN.match(line)
    if not match:
        return {'timestamp': None, 'message': line, 'detail': None, 'raw': line}

    try:
        timestamp = dateutil_parser.parse(match.group('timestamp'))
    except (ValueError, OverflowError):
        timestamp = None

    message, separator, detail = match.group('body').partition(DETAIL_SEPARATOR)

    return {
        'timestamp': timestamp,
        'message': message,
        'detail': detail if separator else None,
        'raw': line
    }


def read_error_report(path=None, limit=None):
    """
    Read an exported error report back (for display/admin)

    Args:
        path: Report file; defaults to the configured error_report_file
        limit: Optional maximum number of entries to return (most recent)

    Returns:
        list: List of parsed entry dictionaries
    """
    if path is None:
        path = get_logging_config()['error_report_file']

    if not os.path.exists(path):
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except Exception as e:
        log(f"Error reading error report {path}", str(e))
        return []

    entries = [parse_error_entry(line) for line in lines if line.strip()]

    if limit:
        return entries[-limit:]
    return entries
