"""Storefront models package."""

from .product import Product, CategoryListing
from .cart import CartLine, CartLedger
from .order import CompletedOrder, create_order
from .session import SessionGate, SessionStatus, Shopper, ShopperRegistry
from .saved_payment import SavedPaymentRecord, SavedPaymentStore, StoredValue

__all__ = [
    'Product',
    'CategoryListing',
    'CartLine',
    'CartLedger',
    'CompletedOrder',
    'create_order',
    'SessionGate',
    'SessionStatus',
    'Shopper',
    'ShopperRegistry',
    'SavedPaymentRecord',
    'SavedPaymentStore',
    'StoredValue',
]
