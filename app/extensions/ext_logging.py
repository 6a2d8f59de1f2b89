"""Logging bootstrap for code driving requests through the filter chain.

While a chain runs, every log record carries the chain's request id, the HTTP
method, the request path and the name of the filter currently executing, so
the output of interleaved requests can be told apart. Outside a chain those
fields are empty strings.
"""

import logging
import os
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import Optional

from configs import AppConfig, app_config

CHAIN_RECORD_FIELDS = ("request_id", "request_method", "request_path", "filter_name")


@dataclass
class ChainLogContext:
    request_id: str
    method: str = ""
    path: str = ""
    filter_name: str = ""


chain_context_var: ContextVar[Optional[ChainLogContext]] = ContextVar("chain_context", default=None)


def request_id_generator() -> str:
    return str(uuid.uuid4().hex)


@contextmanager
def chain_log_context(method: str = "", path: str = "") -> Iterator[ChainLogContext]:
    context = ChainLogContext(request_id_generator(), method or "", path or "")
    token = chain_context_var.set(context)
    try:
        yield context
    finally:
        chain_context_var.reset(token)


def init_logging(config: AppConfig | None = None):
    config = config or app_config
    log_handlers: list[logging.Handler] = []
    log_file = config.LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        log_handlers.append(
            RotatingFileHandler(
                filename=log_file,
                maxBytes=config.LOG_FILE_MAX_SIZE * 1024 * 1024,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
            )
        )
    log_handlers.append(logging.StreamHandler(sys.stdout))

    for handler in log_handlers:
        handler.addFilter(ChainContextFilter())
        handler.setFormatter(
            ChainContextFormatter(config.LOG_FORMAT, config.LOG_DATEFORMAT, tz=config.LOG_TZ)
        )

    logging.basicConfig(level=config.LOG_LEVEL, handlers=log_handlers, force=True)

    # the transport logs every exchange itself
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class ChainContextFilter(logging.Filter):
    def filter(self, record):
        context = chain_context_var.get()
        record.request_id = context.request_id if context else ""
        record.request_method = context.method if context else ""
        record.request_path = context.path if context else ""
        record.filter_name = context.filter_name if context else ""
        return True


class ChainContextFormatter(logging.Formatter):
    def __init__(self, fmt=None, datefmt=None, tz: str | None = None):
        super().__init__(fmt, datefmt)
        if tz:
            from datetime import datetime

            import pytz

            timezone = pytz.timezone(tz)

            def time_converter(seconds):
                return datetime.fromtimestamp(seconds, tz=timezone).timetuple()

            self.converter = time_converter

    def format(self, record):
        for name in CHAIN_RECORD_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, "")
        return super().format(record)
