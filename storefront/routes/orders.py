"""Order routes: checkout, confirmation and saved payment details."""

from flask import Blueprint, current_app, jsonify
from flask_login import current_user, login_required

from storefront.forms.checkout import CheckoutForm
from storefront.models.saved_payment import SavedPaymentStore
from storefront.routes.cart import cart_summary
from storefront.services.checkout import start_checkout
from storefront.services.payments import PaymentInProgressError, current_processor

orders_bp = Blueprint('orders', __name__)


@orders_bp.route('/checkout')
@login_required
def checkout_summary():
    """Checkout page data, pre-filled from saved payment details."""
    saved = SavedPaymentStore().load()
    return jsonify({
        **cart_summary(current_user.cart),
        'processing': current_user.processing,
        'saved_payment': saved.to_dict() if saved else None,
        'save_payment_info': saved is not None,
    })


@orders_bp.route('/checkout', methods=['POST'])
@login_required
def checkout():
    """Run a simulated card or Apple Pay payment and place the order."""
    form = CheckoutForm()
    if not form.validate_on_submit():
        return jsonify({'success': False, 'message': 'Invalid checkout details',
                        'errors': form.errors}), 400

    shopper = current_user._get_current_object()
    try:
        future = start_checkout(
            shopper,
            current_processor(),
            form.payment_method.data,
            store=SavedPaymentStore(),
            **form.payment_fields()
        )
    except PaymentInProgressError as e:
        return jsonify({'success': False, 'message': str(e)}), 409

    order = future.result()
    current_app.logger.info('Checkout complete for shopper %s', shopper.id,
                            extra={'extra': {'shopper_id': shopper.id,
                                             'order_number': order.order_number}})
    return jsonify({
        'success': True,
        'message': 'Your order has been processed successfully!',
        'order': order.to_dict(),
    })


@orders_bp.route('/confirmation')
@login_required
def order_confirmation():
    """The most recent completed order for this session."""
    order = current_user.last_order
    if order is None:
        return jsonify({'success': False, 'message': 'No completed order'}), 404
    return jsonify({'success': True, 'order': order.to_dict()})


@orders_bp.route('/saved-payment')
@login_required
def saved_payment():
    """Saved payment details, if any."""
    saved = SavedPaymentStore().load()
    return jsonify({'saved_payment': saved.to_dict() if saved else None})


@orders_bp.route('/saved-payment', methods=['DELETE'])
@login_required
def forget_saved_payment():
    """Forget saved payment details."""
    SavedPaymentStore().clear()
    return jsonify({'success': True, 'message': 'Saved payment information removed.'})
