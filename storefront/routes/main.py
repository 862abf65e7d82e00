"""Main routes: dashboard and catalog browsing."""

from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from storefront.catalog import catalog

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
@login_required
def index():
    """Dashboard with categories and a few products from each."""
    return jsonify({
        'current_user': current_user.username,
        'cart_count': current_user.cart.total_items,
        'categories': [{
            **category.to_dict(),
            'featured_products': [p.to_dict() for p in catalog.products_for(category)[:4]],
        } for category in catalog.categories],
    })


@main_bp.route('/categories')
@login_required
def categories():
    """List all categories."""
    return jsonify({'categories': [c.to_dict() for c in catalog.categories]})


@main_bp.route('/categories/<category_id>/products')
@login_required
def category_products(category_id):
    """Products in a category."""
    category = catalog.get_category(category_id)
    if category is None:
        return jsonify({'success': False, 'message': 'Category not found'}), 404

    products = catalog.products_for(category)
    return jsonify({
        'category': category.to_dict(),
        'products': [p.to_dict() for p in products],
    })


@main_bp.route('/products/<product_id>')
@login_required
def product_detail(product_id):
    """Product detail."""
    product = catalog.get_product(product_id)
    if product is None:
        return jsonify({'success': False, 'message': 'Product not found'}), 404
    return jsonify(product.to_dict())
