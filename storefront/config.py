import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database - SQLite backs the saved payment key-value store.
    # Relative SQLite paths land in the app instance folder.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///storefront.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # The API speaks JSON, forms are filled from request bodies
    WTF_CSRF_ENABLED = False

    # Simulated backend latency in seconds
    SIMULATED_DELAYS = {
        'login': float(os.environ.get('LOGIN_DELAY', 0.5)),
        'card': float(os.environ.get('CARD_PAYMENT_DELAY', 1.0)),
        'apple_pay': float(os.environ.get('APPLE_PAY_DELAY', 2.0)),
    }
    PAYMENT_WORKERS = int(os.environ.get('PAYMENT_WORKERS', 4))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = os.environ.get('LOG_JSON', 'False').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_JSON = os.environ.get('LOG_JSON', 'True').lower() == 'true'


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SIMULATED_DELAYS = {'login': 0, 'card': 0, 'apple_pay': 0}
    LOG_DIR = None
    LOG_JSON = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
