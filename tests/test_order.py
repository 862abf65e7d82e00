"""Tests for order assembly."""

import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from storefront.models.cart import CartLedger
from storefront.models.order import create_order, generate_order_number
from storefront.services.payments import PaymentMethod

NOW = datetime(2025, 6, 26, 12, 0, 0, tzinfo=timezone.utc)


def test_order_totals_are_not_rounded(cola, orange_juice):
    cart = CartLedger()
    cart.add_item(cola)
    cart.add_item(cola)
    cart.add_item(orange_juice)

    order = create_order(cart.snapshot(), PaymentMethod.CARD, 'Jane', 'jane@example.com', now=NOW)

    assert order.subtotal == Decimal('7.47')
    assert order.tax == Decimal('0.5976')
    assert order.total == Decimal('8.0676')
    assert order.to_dict()['total'] == '8.07'
    assert order.payment_method == 'Credit Card'


def test_empty_cart_still_produces_an_order():
    order = create_order((), PaymentMethod.APPLE_PAY, now=NOW)

    assert order.lines == ()
    assert order.subtotal == 0
    assert order.tax == 0
    assert order.total == 0
    assert order.order_number.startswith('RC')


def test_blank_name_and_email_defaults():
    order = create_order((), PaymentMethod.CARD, '   ', '', now=NOW)

    assert order.customer_name == 'Guest'
    assert order.customer_email is None


def test_customer_fields_kept_when_present():
    order = create_order((), PaymentMethod.CARD, 'Jane Doe', 'jane@example.com', now=NOW)

    assert order.customer_name == 'Jane Doe'
    assert order.customer_email == 'jane@example.com'


def test_order_number_format():
    rng = random.Random(3)
    expected_suffix = random.Random(3).randint(100, 999)
    seconds = int(NOW.timestamp())

    assert generate_order_number(NOW, rng) == f'RC{seconds % 100000}{expected_suffix}'


def test_estimated_ready_is_15_to_45_minutes_out():
    rng = random.Random(11)
    for _ in range(50):
        order = create_order((), PaymentMethod.CARD, now=NOW, rng=rng)
        assert order.created_at == NOW
        assert timedelta(minutes=15) <= order.estimated_ready - NOW <= timedelta(minutes=45)


def test_order_snapshot_survives_clearing_the_cart(cola):
    cart = CartLedger()
    cart.add_item(cola)
    order = create_order(cart.snapshot(), PaymentMethod.CARD, now=NOW)
    cart.clear_cart()

    assert order.total_items == 1
    assert order.lines[0].product is cola
