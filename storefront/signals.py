"""Change notifications for the storefront state containers."""

from blinker import Namespace

_signals = Namespace()

#: Sent by a :class:`~storefront.models.cart.CartLedger` after every mutation.
cart_changed = _signals.signal('cart-changed')

#: Sent by a :class:`~storefront.models.session.SessionGate` on login/logout.
session_changed = _signals.signal('session-changed')

#: Sent once a checkout has produced a completed order.
order_completed = _signals.signal('order-completed')
