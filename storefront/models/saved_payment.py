"""Saved payment information."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from storefront.extensions import db

log = logging.getLogger(__name__)

CUSTOMER_NAME_KEY = 'saved_customer_name'
CUSTOMER_EMAIL_KEY = 'saved_customer_email'
CARD_NUMBER_KEY = 'saved_card_number'
EXPIRY_DATE_KEY = 'saved_expiry_date'

SAVED_PAYMENT_KEYS = (CUSTOMER_NAME_KEY, CUSTOMER_EMAIL_KEY, CARD_NUMBER_KEY, EXPIRY_DATE_KEY)


def _utcnow():
    return datetime.now(timezone.utc)


class StoredValue(db.Model):
    """A plain string stored under a fixed key."""
    __tablename__ = 'stored_values'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=False, default='')
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f'<StoredValue {self.key}>'


@dataclass(frozen=True)
class SavedPaymentRecord:
    """Checkout form fields kept for pre-fill. There is no CVV field."""
    name: str
    email: str = ''
    card_number: str = ''
    expiry_date: str = ''

    def to_dict(self):
        return {
            'customer_name': self.name,
            'customer_email': self.email,
            'card_number': self.card_number,
            'expiry_date': self.expiry_date,
        }


class SavedPaymentStore:
    """Key-value persistence of the last opted-in payment details.

    Values are stored unencrypted under four fixed keys. There is a single
    record for the whole installation, it is not scoped to the logged-in
    user.
    """

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session or db.session

    def save(self, name, email, card_number, expiry_date):
        """Overwrite the stored record with these four fields."""
        values = {
            CUSTOMER_NAME_KEY: name,
            CUSTOMER_EMAIL_KEY: email,
            CARD_NUMBER_KEY: card_number,
            EXPIRY_DATE_KEY: expiry_date,
        }
        for key, value in values.items():
            entry = self.session.get(StoredValue, key)
            if entry is None:
                self.session.add(StoredValue(key=key, value=value or ''))
            else:
                entry.value = value or ''
        self.session.commit()
        log.info('Saved payment information updated')

    def load(self):
        """Return the saved record, or ``None`` if no name has been saved."""
        entries = self.session.query(StoredValue).filter(StoredValue.key.in_(SAVED_PAYMENT_KEYS)).all()
        values = {entry.key: entry.value for entry in entries}

        name = values.get(CUSTOMER_NAME_KEY)
        if not name:
            return None

        return SavedPaymentRecord(
            name=name,
            email=values.get(CUSTOMER_EMAIL_KEY, ''),
            card_number=values.get(CARD_NUMBER_KEY, ''),
            expiry_date=values.get(EXPIRY_DATE_KEY, ''),
        )

    def has_saved(self):
        return self.load() is not None

    def clear(self):
        self.session.query(StoredValue).filter(StoredValue.key.in_(SAVED_PAYMENT_KEYS)).delete(
            synchronize_session=False)
        self.session.commit()
        log.info('Saved payment information cleared')
