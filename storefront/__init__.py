"""Flask application factory."""

import os
from flask import Flask, jsonify
from .config import config
from .extensions import db, migrate, login_manager


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    from .log_config import configure_logging
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    from .models.session import ShopperRegistry
    from .services.payments import SimulatedProcessor
    ShopperRegistry(app)
    SimulatedProcessor(app)

    # Tables come from `flask init-db` or Flask-Migrate
    os.makedirs(app.instance_path, exist_ok=True)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    from .commands import register_commands
    register_commands(app)

    # Shopper loader for Flask-Login
    from .models.session import current_shoppers

    @login_manager.user_loader
    def load_shopper(shopper_id):
        shopper = current_shoppers().get(shopper_id)
        if shopper is None or not shopper.is_authenticated:
            return None
        return shopper

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'success': False, 'message': 'Please log in to continue.'}), 401

    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'success': False, 'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'success': False, 'message': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return jsonify({'success': False, 'message': 'Internal server error'}), 500

    return app
