"""Checkout flow: save details, simulate payment, assemble the order."""

import logging

from storefront.models.order import create_order
from storefront.services.payments import PaymentInProgressError, PaymentMethod
from storefront.signals import order_completed

log = logging.getLogger(__name__)


def start_checkout(shopper, processor, payment_method, customer_name='', customer_email='',
                   card_number='', expiry_date='', save_payment_info=False, store=None):
    """Begin a simulated payment for the shopper's cart.

    The cart is drained when the checkout is submitted, so the order holds
    exactly the lines the shopper paid for and anything added while the
    payment is processing stays in the cart. Returns a future that resolves
    to the :class:`CompletedOrder`, which is also kept on
    ``shopper.last_order``. Raises :class:`PaymentInProgressError` if the
    shopper already has a payment in flight.
    """
    payment_method = PaymentMethod(payment_method)

    with shopper.checkout_lock:
        if shopper.processing:
            raise PaymentInProgressError('A payment is already being processed.')
        shopper.processing = True

    lines = ()

    def complete():
        try:
            order = create_order(lines, payment_method, customer_name, customer_email)
            shopper.last_order = order
        finally:
            shopper.processing = False
        log.info('Order %s completed (%s, %s)', order.order_number,
                 payment_method.label, f'{order.total:.2f}',
                 extra={'extra': {'shopper_id': shopper.id, 'order_number': order.order_number}})
        order_completed.send(shopper, order=order)
        return order

    try:
        # CVV never reaches the store.
        if save_payment_info and store is not None and payment_method is PaymentMethod.CARD:
            store.save(customer_name, customer_email, card_number, expiry_date)
        lines = shopper.cart.drain()
        return processor.submit(payment_method, complete)
    except Exception:
        shopper.cart.restore(lines)
        shopper.processing = False
        raise


def checkout(shopper, processor, payment_method, **fields):
    """Run :func:`start_checkout` and wait for the order."""
    return start_checkout(shopper, processor, payment_method, **fields).result()
