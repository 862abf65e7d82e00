"""Configure application logging using the Python standard library.

``configure_logging`` attaches a console handler and, when ``LOG_DIR`` is
set, a rotating file handler to the application's logger. Module loggers
under ``storefront.*`` propagate to it. With ``LOG_JSON`` enabled records
are written as one JSON object per line with the context fields passed in
``extra``. Cart and session change notifications are logged at debug
level.
"""

import json
import logging
import logging.handlers
import os
from datetime import datetime, timezone

from flask.logging import default_handler

from storefront.signals import cart_changed, session_changed

log = logging.getLogger(__name__)

PLAIN_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


class JsonFormatter(logging.Formatter):
    """Format log records as JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'message': record.getMessage(),
        }
        # Context passed as extra={'extra': {...}} is merged at top level
        extra = getattr(record, 'extra', None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


class _StorefrontHandler:
    """Marker mixin so a reconfigure replaces only our own handlers."""


class _StreamHandler(_StorefrontHandler, logging.StreamHandler):
    pass


class _RotatingFileHandler(_StorefrontHandler, logging.handlers.RotatingFileHandler):
    pass


def configure_logging(app) -> None:
    """Attach handlers to ``app.logger`` according to the app config."""
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = app.logger
    logger.setLevel(level)
    logger.removeHandler(default_handler)
    for handler in list(logger.handlers):
        if isinstance(handler, _StorefrontHandler):
            logger.removeHandler(handler)
            handler.close()

    if app.config.get('LOG_JSON'):
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    if not app.testing:
        console_handler = _StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    log_dir = app.config.get('LOG_DIR')
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = _RotatingFileHandler(
            filename=os.path.join(log_dir, 'storefront.log'),
            maxBytes=5 * 1024 * 1024,  # 5 MB per log file
            backupCount=3,
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)


@session_changed.connect
def log_session_change(gate, status, **extra):
    log.debug('Session %s for %s', status.value, gate.current_user or 'anonymous')


@cart_changed.connect
def log_cart_change(ledger, action, line=None, **extra):
    log.debug('Cart %s: %r (%d items)', action, line, ledger.total_items)
