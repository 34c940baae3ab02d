import structlog
import logging
import sys
from filebrowser.config import Config

def setup_logging():
    """Configure structlog for JSON output"""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    )

    return structlog.get_logger("filebrowser")

logger = setup_logging()

def log_filesystem_error(operation: str, path: str, error: Exception):
    """Log structured filesystem failure event"""
    logger.error(
        "filesystem_error",
        operation=operation,
        path=path,
        error_type=type(error).__name__,
        error=str(error),
        exc_info=error
    )
