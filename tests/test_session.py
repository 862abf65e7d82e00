"""Tests for the session gate and shopper registry."""

from storefront.models.session import SessionGate, SessionStatus, ShopperRegistry
from storefront.signals import session_changed


def test_gate_starts_unauthenticated():
    gate = SessionGate()
    assert gate.status is SessionStatus.UNAUTHENTICATED
    assert not gate.is_authenticated
    assert gate.current_user is None


def test_login_with_demo_credentials():
    gate = SessionGate()
    assert gate.login('admin', 'password') is True
    assert gate.status is SessionStatus.AUTHENTICATED
    assert gate.current_user == 'admin'


def test_any_other_credentials_fail():
    gate = SessionGate()
    for username, password in [('admin', 'wrong'), ('Admin', 'password'), ('', ''), ('user', 'password')]:
        assert gate.login(username, password) is False
        assert gate.status is SessionStatus.UNAUTHENTICATED
        assert gate.current_user is None


def test_failed_login_does_not_log_out_existing_session():
    gate = SessionGate()
    gate.login('admin', 'password')
    assert gate.login('admin', 'nope') is False
    assert gate.is_authenticated
    assert gate.current_user == 'admin'


def test_logout_clears_user():
    gate = SessionGate()
    gate.login('admin', 'password')
    gate.logout()
    assert not gate.is_authenticated
    assert gate.current_user is None


def test_transitions_send_session_changed():
    gate = SessionGate()
    seen = []

    def receiver(sender, status, **extra):
        seen.append(status)

    session_changed.connect(receiver, sender=gate)
    try:
        gate.login('admin', 'bad')
        gate.login('admin', 'password')
        gate.logout()
    finally:
        session_changed.disconnect(receiver, sender=gate)

    assert seen == [SessionStatus.AUTHENTICATED, SessionStatus.UNAUTHENTICATED]


def test_registry_gives_each_shopper_its_own_cart_and_gate():
    registry = ShopperRegistry()
    first = registry.get_or_create()
    second = registry.get_or_create()

    assert first is not second
    assert first.cart is not second.cart
    assert registry.get_or_create(first.id) is first
    assert registry.get(first.id) is first
    assert len(registry) == 2

    registry.discard(first.id)
    assert registry.get(first.id) is None


def test_shopper_is_authenticated_follows_gate():
    shopper = ShopperRegistry().get_or_create()
    assert not shopper.is_authenticated
    shopper.gate.login('admin', 'password')
    assert shopper.is_authenticated
    assert shopper.username == 'admin'
    assert shopper.get_id() == shopper.id
