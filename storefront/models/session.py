"""Session gate and shopper models."""

import enum
import threading
import uuid

from flask import current_app
from flask_login import UserMixin

from storefront.models.cart import CartLedger
from storefront.signals import session_changed

# Demo credentials, not a real credential check.
DEMO_USERNAME = 'admin'
DEMO_PASSWORD = 'password'

LOGIN_FAILED_MESSAGE = 'Invalid username or password. Please try again.'


class SessionStatus(enum.Enum):
    UNAUTHENTICATED = 'unauthenticated'
    AUTHENTICATED = 'authenticated'


class SessionGate:
    """Two-state authentication gate.

    There is no lockout, rate limiting or password hashing.
    """

    def __init__(self):
        self.status = SessionStatus.UNAUTHENTICATED
        self.current_user = None

    @property
    def is_authenticated(self):
        return self.status is SessionStatus.AUTHENTICATED

    def login(self, username, password):
        """Authenticate with the demo credentials.

        Returns ``True`` on success. A failed attempt leaves the gate as it
        was.
        """
        if username == DEMO_USERNAME and password == DEMO_PASSWORD:
            self.status = SessionStatus.AUTHENTICATED
            self.current_user = username
            session_changed.send(self, status=self.status)
            return True
        return False

    def logout(self):
        self.status = SessionStatus.UNAUTHENTICATED
        self.current_user = None
        session_changed.send(self, status=self.status)

    def to_dict(self):
        return {
            'authenticated': self.is_authenticated,
            'current_user': self.current_user,
        }

    def __repr__(self):
        return f'<SessionGate {self.status.value}>'


class Shopper(UserMixin):
    """One browser session: its session gate, its cart and its last order."""

    def __init__(self, shopper_id=None):
        self.id = shopper_id or uuid.uuid4().hex
        self.gate = SessionGate()
        self.cart = CartLedger()
        self.last_order = None
        self.processing = False
        self.checkout_lock = threading.Lock()

    @property
    def is_authenticated(self):
        return self.gate.is_authenticated

    @property
    def username(self):
        return self.gate.current_user

    def __repr__(self):
        return f'<Shopper {self.id} {self.gate.status.value}>'


class ShopperRegistry:
    """In-memory shopper lookup keyed by the id kept in the Flask session."""

    def __init__(self, app=None):
        self._shoppers = {}
        self._lock = threading.Lock()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions['shoppers'] = self

    def __len__(self):
        return len(self._shoppers)

    def get(self, shopper_id):
        if not shopper_id:
            return None
        with self._lock:
            return self._shoppers.get(shopper_id)

    def get_or_create(self, shopper_id=None):
        with self._lock:
            shopper = self._shoppers.get(shopper_id) if shopper_id else None
            if shopper is None:
                shopper = Shopper()
                self._shoppers[shopper.id] = shopper
            return shopper

    def add(self, shopper):
        with self._lock:
            self._shoppers[shopper.id] = shopper
        return shopper

    def discard(self, shopper_id):
        with self._lock:
            return self._shoppers.pop(shopper_id, None)

    def clear(self):
        with self._lock:
            self._shoppers.clear()


def current_shoppers():
    """The :class:`ShopperRegistry` of the current application."""
    return current_app.extensions['shoppers']
