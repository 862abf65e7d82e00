"""Cart models."""

import threading
import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal

from storefront.models.product import Product
from storefront.signals import cart_changed


@dataclass(frozen=True)
class CartLine:
    """A product and its quantity in the cart."""
    product: Product
    quantity: int = 1
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def subtotal(self):
        """Calculate subtotal for this cart line."""
        return self.product.price * self.quantity

    def to_dict(self):
        return {
            'id': self.id,
            'product': self.product.to_dict(),
            'quantity': self.quantity,
            'subtotal': f'{self.subtotal:.2f}',
        }

    def __repr__(self):
        return f'<CartLine {self.product.name} x {self.quantity}>'


class CartLedger:
    """In-memory shopping cart for one shopper.

    Lines keep insertion order and there is never more than one line per
    product id. Totals are computed on every read. Each mutation sends
    :data:`~storefront.signals.cart_changed` with the ledger as sender.
    """

    def __init__(self):
        self._lines = []
        self._lock = threading.RLock()

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self.snapshot())

    @property
    def lines(self):
        return self.snapshot()

    def snapshot(self):
        """Return the current lines as an immutable tuple."""
        with self._lock:
            return tuple(self._lines)

    @property
    def total_items(self):
        """Total number of individual items in the cart."""
        return sum(line.quantity for line in self.snapshot())

    @property
    def total_price(self):
        """Sum of unit price times quantity, unrounded."""
        return sum((line.subtotal for line in self.snapshot()), Decimal('0'))

    @property
    def is_empty(self):
        return not self._lines

    def find_line(self, line_id):
        with self._lock:
            for line in self._lines:
                if line.id == line_id:
                    return line
        return None

    def line_for_product(self, product_id):
        with self._lock:
            for line in self._lines:
                if line.product.id == product_id:
                    return line
        return None

    def add_item(self, product):
        """Add a product, or bump the quantity of its existing line."""
        with self._lock:
            existing = self.line_for_product(product.id)
            if existing is not None:
                return self.update_quantity(existing.id, existing.quantity + 1)
            line = CartLine(product=product, quantity=1)
            self._lines.append(line)
        self._notify('add', line)
        return line

    def update_quantity(self, line_id, quantity):
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(line_id)
            return None
        with self._lock:
            for index, line in enumerate(self._lines):
                if line.id == line_id:
                    updated = replace(line, quantity=quantity)
                    self._lines[index] = updated
                    break
            else:
                return None
        self._notify('update', updated)
        return updated

    def remove_item(self, line_id):
        with self._lock:
            line = self.find_line(line_id)
            if line is None:
                return None
            self._lines.remove(line)
        self._notify('remove', line)
        return line

    def clear_cart(self):
        with self._lock:
            self._lines.clear()
        self._notify('clear', None)

    def drain(self):
        """Snapshot the lines and empty the cart in one step."""
        with self._lock:
            lines = tuple(self._lines)
            self._lines.clear()
            self._notify('clear', None)
        return lines

    def restore(self, lines):
        """Put drained lines back ahead of anything added since."""
        with self._lock:
            present = {line.product.id for line in self._lines}
            restored = [line for line in lines if line.product.id not in present]
            self._lines[:0] = restored
            self._notify('restore', None)

    def _notify(self, action, line):
        cart_changed.send(self, action=action, line=line)

    def __repr__(self):
        return f'<CartLedger {len(self._lines)} lines>'
