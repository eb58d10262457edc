"""
Logging for the Marketplace API.

Human-readable console output in development; JSON on stdout and in a
rotating file in production. Application code logs through structlog.
"""
import logging
import logging.config
import os
import sys
import time
import uuid
from typing import Any, Dict, Optional

import structlog

from marketplace.core.config import settings

LOG_FILE = "logs/marketplace.log"
SERVICE_NAME = "marketplace-api"
SERVICE_VERSION = "1.0.0"

# Loggers we own, plus the SQL engine which is noisy below WARNING
APP_LOGGERS = ("marketplace",)
QUIET_LOGGERS = {"sqlalchemy.engine": "WARNING"}


def _build_config(production: bool) -> Dict[str, Any]:
    handlers = ["console"]
    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(funcName)s %(lineno)d",
            },
            "plain": {"format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if production else "plain",
                "stream": sys.stdout,
            },
        },
    }

    if production:
        os.makedirs(os.path.dirname(LOG_FILE), exist_ok=True)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": LOG_FILE,
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 5,
            "formatter": "json",
        }
        handlers.append("file")

    config["root"] = {"handlers": handlers, "level": settings.LOG_LEVEL}
    loggers = {name: {"handlers": handlers, "level": settings.LOG_LEVEL, "propagate": False} for name in APP_LOGGERS}
    for name, level in QUIET_LOGGERS.items():
        loggers[name] = {"handlers": handlers, "level": level, "propagate": False}
    config["loggers"] = loggers
    return config


def setup_logging() -> None:
    """Configure stdlib handlers and the structlog pipeline."""
    production = settings.ENVIRONMENT == "production"
    logging.config.dictConfig(_build_config(production))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            add_service_context,
            structlog.processors.JSONRenderer() if production else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name or "marketplace")


class LoggingMiddleware:
    """
    ASGI middleware that logs each HTTP request once it starts and again
    when the response status is known, tagged with a fresh request id.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        log = get_logger("marketplace.request").bind(
            request_id=uuid.uuid4().hex,
            method=scope["method"],
            path=scope["path"],
        )
        log.debug("Request started")
        started = time.perf_counter()
        status_code = 500

        async def capture_status(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, capture_status)
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            level = log.warning if status_code >= 500 else log.info
            level("Request completed", status_code=status_code, duration_ms=elapsed_ms)


def log_auth_event(event_type: str, user_email: Optional[str] = None, success: bool = True, **kwargs):
    """Sign-up and sign-in outcomes."""
    get_logger("marketplace.auth").info(
        "Authentication event", event_type=event_type, user_email=user_email, success=success, **kwargs
    )


def log_business_event(event_type: str, user_id: Optional[str] = None, **kwargs):
    """Onboarding, order and catalogue changes."""
    get_logger("marketplace.business").info("Business event", event_type=event_type, user_id=user_id, **kwargs)
