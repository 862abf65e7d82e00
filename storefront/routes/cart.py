"""Cart routes."""

from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user, login_required

from storefront.catalog import catalog
from storefront.models.order import calculate_tax

cart_bp = Blueprint('cart', __name__)


def _payload():
    return request.get_json(silent=True) or request.form


def cart_summary(cart):
    """Line items and totals; amounts are rounded here and nowhere earlier."""
    subtotal = cart.total_price
    tax = calculate_tax(subtotal)
    return {
        'items': [line.to_dict() for line in cart.lines],
        'total_items': cart.total_items,
        'subtotal': f'{subtotal:.2f}',
        'tax': f'{tax:.2f}',
        'total': f'{subtotal + tax:.2f}',
    }


@cart_bp.route('/')
@login_required
def view_cart():
    """View shopping cart."""
    return jsonify(cart_summary(current_user.cart))


@cart_bp.route('/add', methods=['POST'])
@login_required
def add_to_cart():
    """Add product to cart."""
    product_id = _payload().get('product_id')
    product = catalog.get_product(product_id)

    if product is None:
        return jsonify({'success': False, 'message': 'Product not found'}), 404
    if not product.in_stock:
        return jsonify({'success': False, 'message': 'This product is out of stock.'}), 400

    line = current_user.cart.add_item(product)
    current_app.logger.debug('Added %s to cart (qty %d)', product.name, line.quantity,
                             extra={'extra': {'shopper_id': current_user.id}})
    return jsonify({
        'success': True,
        'message': f'{product.name} added to cart',
        'line': line.to_dict(),
        'cart_count': current_user.cart.total_items,
    })


@cart_bp.route('/update', methods=['POST'])
@login_required
def update_cart():
    """Update cart line quantity."""
    data = _payload()
    line_id = data.get('line_id')
    try:
        quantity = int(data.get('quantity', 1))
    except (TypeError, ValueError):
        return jsonify({'success': False, 'message': 'Quantity must be a whole number'}), 400

    cart = current_user.cart
    if cart.find_line(line_id) is None:
        return jsonify({'success': False, 'message': 'Item not found'}), 404

    line = cart.update_quantity(line_id, quantity)
    return jsonify({
        'success': True,
        'message': 'Cart updated.' if line else 'Item removed from cart.',
        'line': line.to_dict() if line else None,
        **cart_summary(cart),
    })


@cart_bp.route('/remove/<line_id>', methods=['POST'])
@login_required
def remove_from_cart(line_id):
    """Remove line from cart."""
    cart = current_user.cart
    if cart.remove_item(line_id) is None:
        return jsonify({'success': False, 'message': 'Item not found'}), 404
    return jsonify({'success': True, 'cart_count': cart.total_items})


@cart_bp.route('/clear', methods=['POST'])
@login_required
def clear_cart():
    """Clear all items from cart."""
    current_user.cart.clear_cart()
    return jsonify({'success': True, 'message': 'Cart cleared.', 'cart_count': 0})
