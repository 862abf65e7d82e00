"""Order models."""

import random
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

TAX_RATE = Decimal('0.08')
GUEST_NAME = 'Guest'
READY_WINDOW_MINUTES = (15, 45)


@dataclass(frozen=True)
class CompletedOrder:
    """Immutable record of a checkout, kept only for the confirmation step."""
    order_number: str
    lines: tuple
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    payment_method: str
    customer_name: str
    customer_email: str
    created_at: datetime
    estimated_ready: datetime

    @property
    def total_items(self):
        return sum(line.quantity for line in self.lines)

    def to_dict(self):
        return {
            'order_number': self.order_number,
            'items': [{
                'line_id': line.id,
                'product_id': line.product.id,
                'product_name': line.product.name,
                'unit_price': f'{line.product.price:.2f}',
                'quantity': line.quantity,
                'subtotal': f'{line.subtotal:.2f}',
            } for line in self.lines],
            'total_items': self.total_items,
            'subtotal': f'{self.subtotal:.2f}',
            'tax': f'{self.tax:.2f}',
            'total': f'{self.total:.2f}',
            'payment_method': self.payment_method,
            'customer_name': self.customer_name,
            'customer_email': self.customer_email,
            'created_at': self.created_at.isoformat(),
            'estimated_ready': self.estimated_ready.isoformat(),
        }

    def __repr__(self):
        return f'<CompletedOrder {self.order_number}>'


def calculate_tax(subtotal):
    """Flat 8% tax, not configurable and not location aware."""
    return subtotal * TAX_RATE


def generate_order_number(now=None, rng=None):
    """Generate an order number like ``RC12345678``.

    The number is built from the last five digits of the unix time plus a
    random three digit suffix, so two orders placed in the same second have
    roughly a one in 900 chance of sharing a number. Callers must not treat
    it as a unique key.
    """
    rng = rng or random
    seconds = int(now.timestamp()) if now is not None else int(time.time())
    return f'RC{seconds % 100000}{rng.randint(100, 999)}'


def create_order(cart_lines, payment_method, customer_name='', customer_email='',
                 now=None, rng=None):
    """Assemble a :class:`CompletedOrder` from a snapshot of cart lines.

    This never fails, an empty cart gives a zero-total order. The caller is
    responsible for clearing the cart, after this returns.
    """
    rng = rng or random
    now = now or datetime.now(timezone.utc)
    lines = tuple(cart_lines)

    subtotal = sum((line.subtotal for line in lines), Decimal('0'))
    tax = calculate_tax(subtotal)

    name = customer_name if customer_name and customer_name.strip() else GUEST_NAME
    email = customer_email if customer_email and customer_email.strip() else None

    return CompletedOrder(
        order_number=generate_order_number(now, rng),
        lines=lines,
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        payment_method=str(payment_method),
        customer_name=name,
        customer_email=email,
        created_at=now,
        estimated_ready=now + timedelta(minutes=rng.randint(*READY_WINDOW_MINUTES)),
    )
