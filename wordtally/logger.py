"""Logging configuration for wordtally."""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Attributes every LogRecord carries; anything else was passed via `extra`
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Handler added by the last setup_logging call
_installed_handler: Optional[logging.Handler] = None


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        # Add extra fields if present
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value
        
        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = "WARNING", json_format: bool = False) -> logging.Handler:
    """
    Set up stderr logging for the command line tool.
    
    Replaces any handler installed by a previous call, so calling this
    more than once never duplicates output.
    
    Args:
        log_level: Level name such as "INFO" or "DEBUG"
        json_format: Emit one JSON object per line instead of plain text
        
    Returns:
        The installed handler
    """
    global _installed_handler
    
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    
    root_logger = logging.getLogger()
    if _installed_handler is not None:
        root_logger.removeHandler(_installed_handler)
    
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    root_logger.addHandler(handler)
    _installed_handler = handler
    return handler
