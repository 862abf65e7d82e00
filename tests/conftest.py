import pytest

from storefront import create_app
from storefront.catalog import catalog
from storefront.extensions import db


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
    app.extensions['payment_processor'].shutdown()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    response = client.post('/auth/login', json={'username': 'admin', 'password': 'password'})
    assert response.status_code == 200
    return client


@pytest.fixture
def cola():
    return catalog.find_product('Coca-Cola 12oz')


@pytest.fixture
def orange_juice():
    return catalog.find_product('Orange Juice 16oz')


@pytest.fixture
def energy_drink():
    return catalog.find_product('Energy Drink 16oz')
