"""Tests for the cart ledger."""

from decimal import Decimal

from storefront.models.cart import CartLedger
from storefront.models.product import Product
from storefront.signals import cart_changed


def test_adding_same_product_twice_increments_one_line(cola):
    cart = CartLedger()
    cart.add_item(cola)
    cart.add_item(cola)

    assert len(cart) == 1
    assert cart.lines[0].quantity == 2
    assert cart.lines[0].product is cola


def test_line_id_differs_from_product_id_and_survives_updates(cola):
    cart = CartLedger()
    line = cart.add_item(cola)
    assert line.id != cola.id

    cart.add_item(cola)
    cart.update_quantity(line.id, 7)
    assert cart.lines[0].id == line.id
    assert cart.lines[0].quantity == 7


def test_lines_keep_insertion_order(cola, orange_juice):
    cart = CartLedger()
    cart.add_item(orange_juice)
    cart.add_item(cola)
    cart.add_item(orange_juice)

    assert [line.product.name for line in cart] == ['Orange Juice 16oz', 'Coca-Cola 12oz']


def test_update_quantity_to_zero_or_negative_removes_line(cola, orange_juice):
    cart = CartLedger()
    first = cart.add_item(cola)
    second = cart.add_item(orange_juice)

    assert cart.update_quantity(first.id, 0) is None
    assert cart.update_quantity(second.id, -5) is None
    assert cart.is_empty


def test_update_and_remove_unknown_line_are_noops(cola):
    cart = CartLedger()
    cart.add_item(cola)

    assert cart.update_quantity('missing', 3) is None
    assert cart.remove_item('missing') is None
    assert cart.total_items == 1


def test_totals(cola, orange_juice):
    cart = CartLedger()
    assert cart.total_items == 0
    assert cart.total_price == 0

    cart.add_item(cola)
    cart.add_item(cola)
    cart.add_item(orange_juice)

    assert cart.total_items == 3
    assert cart.total_price == Decimal('7.47')


def test_totals_keep_full_precision():
    cart = CartLedger()
    line = cart.add_item(Product(name='Bulk nuts', price=Decimal('0.333')))
    cart.update_quantity(line.id, 3)

    assert cart.total_price == Decimal('0.999')


def test_clear_cart(cola, orange_juice):
    cart = CartLedger()
    cart.add_item(cola)
    cart.add_item(orange_juice)
    cart.clear_cart()

    assert cart.total_items == 0
    assert cart.total_price == 0
    assert cart.lines == ()


def test_snapshot_is_not_affected_by_later_mutations(cola):
    cart = CartLedger()
    cart.add_item(cola)
    snapshot = cart.snapshot()
    cart.clear_cart()

    assert len(snapshot) == 1
    assert snapshot[0].quantity == 1


def test_mutations_send_cart_changed(cola):
    cart = CartLedger()
    actions = []

    def receiver(sender, action, line=None, **extra):
        actions.append(action)

    cart_changed.connect(receiver, sender=cart)
    try:
        line = cart.add_item(cola)
        cart.add_item(cola)
        cart.remove_item(line.id)
        cart.clear_cart()
    finally:
        cart_changed.disconnect(receiver, sender=cart)

    assert actions == ['add', 'update', 'remove', 'clear']


def test_drain_returns_lines_and_empties_cart(cola, orange_juice):
    cart = CartLedger()
    cart.add_item(cola)
    cart.add_item(orange_juice)

    lines = cart.drain()

    assert [line.product.name for line in lines] == ['Coca-Cola 12oz', 'Orange Juice 16oz']
    assert cart.is_empty


def test_restore_puts_drained_lines_back_first(cola, orange_juice):
    cart = CartLedger()
    cart.add_item(cola)
    lines = cart.drain()
    cart.add_item(orange_juice)

    cart.restore(lines)

    assert [line.product.name for line in cart] == ['Coca-Cola 12oz', 'Orange Juice 16oz']
