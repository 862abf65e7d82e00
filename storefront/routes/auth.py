"""Authentication routes."""

from flask import Blueprint, current_app, jsonify, session
from flask_login import current_user, login_required, login_user, logout_user

from storefront.forms.auth import LoginForm
from storefront.models.session import LOGIN_FAILED_MESSAGE, Shopper, current_shoppers
from storefront.services.payments import current_processor

auth_bp = Blueprint('auth', __name__)

SHOPPER_SESSION_KEY = 'shopper_id'


@auth_bp.route('/login', methods=['POST'])
def login():
    """Demo login."""
    if current_user.is_authenticated:
        return jsonify({'success': True, 'session': current_user.gate.to_dict()})

    # Only a successful login registers the shopper
    shopper = current_shoppers().get(session.get(SHOPPER_SESSION_KEY)) or Shopper()

    form = LoginForm()
    authenticated = False
    if form.validate_on_submit():
        authenticated = current_processor().submit(
            'login', shopper.gate.login, form.username.data, form.password.data
        ).result()

    if not authenticated:
        current_app.logger.info('Failed login attempt for %r', form.username.data,
                                extra={'extra': {'shopper_id': shopper.id}})
        return jsonify({'success': False, 'message': LOGIN_FAILED_MESSAGE}), 401

    current_shoppers().add(shopper)
    session[SHOPPER_SESSION_KEY] = shopper.id
    login_user(shopper)
    current_app.logger.info('User %s logged in', shopper.username,
                            extra={'extra': {'shopper_id': shopper.id}})
    return jsonify({
        'success': True,
        'message': f'Welcome back, {shopper.username}!',
        'session': shopper.gate.to_dict(),
    })


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """User logout. The cart belongs to the session and goes with it."""
    shopper = current_user._get_current_object()
    shopper.gate.logout()
    logout_user()
    current_shoppers().discard(shopper.id)
    session.pop(SHOPPER_SESSION_KEY, None)
    current_app.logger.info('Shopper %s logged out', shopper.id)
    return jsonify({'success': True, 'message': 'You have been logged out.'})


@auth_bp.route('/session')
def session_status():
    """Current session gate state."""
    if current_user.is_authenticated:
        return jsonify(current_user.gate.to_dict())
    return jsonify({'authenticated': False, 'current_user': None})
