"""Simulated payment processing.

Nothing here talks to a payment network. Each "backend" call is a task that
sleeps for a configured delay and then runs a completion function on a
worker thread. The caller gets a :class:`concurrent.futures.Future` as its
only completion channel. A started task cannot be aborted.
"""

import enum
import logging
import time
from concurrent.futures import ThreadPoolExecutor

from flask import current_app

log = logging.getLogger(__name__)

DEFAULT_DELAYS = {
    'login': 0.5,
    'card': 1.0,
    'apple_pay': 2.0,
}


class PaymentMethod(enum.Enum):
    CARD = 'card'
    APPLE_PAY = 'apple_pay'

    @property
    def label(self):
        return {
            PaymentMethod.CARD: 'Credit Card',
            PaymentMethod.APPLE_PAY: 'Apple Pay',
        }[self]

    def __str__(self):
        return self.label


class PaymentInProgressError(Exception):
    """A checkout was submitted while another one is still processing."""


class SimulatedProcessor:
    """Runs fake backend calls after an injectable delay.

    ``sleep`` defaults to :func:`time.sleep`; tests pass a recorder so that
    nothing actually waits.
    """

    def __init__(self, app=None, delays=None, sleep=None, max_workers=2):
        self.delays = dict(DEFAULT_DELAYS)
        if delays:
            self.delays.update(delays)
        self.sleep = sleep or time.sleep
        self.max_workers = max_workers
        self._executor = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.delays.update(app.config.get('SIMULATED_DELAYS') or {})
        self.max_workers = app.config.get('PAYMENT_WORKERS', self.max_workers)
        app.extensions['payment_processor'] = self

    @property
    def executor(self):
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix='simulated-backend')
        return self._executor

    def delay_for(self, kind):
        if isinstance(kind, PaymentMethod):
            kind = kind.value
        return self.delays.get(kind, 0)

    def submit(self, kind, fn, *args, **kwargs):
        """Run ``fn`` after the delay configured for ``kind``."""
        delay = self.delay_for(kind)

        def task():
            if delay:
                self.sleep(delay)
            return fn(*args, **kwargs)

        log.debug('Simulating %s backend call (%.1fs)', kind, delay)
        return self.executor.submit(task)

    def shutdown(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None


def current_processor():
    """The :class:`SimulatedProcessor` of the current application."""
    return current_app.extensions['payment_processor']
