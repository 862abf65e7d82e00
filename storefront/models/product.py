"""Product and category models."""

import uuid
from dataclasses import dataclass, field
from decimal import Decimal


def _new_id():
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Product:
    """A product available for purchase."""
    name: str
    price: Decimal
    description: str = ''
    in_stock: bool = True
    stock_count: int = 0
    id: str = field(default_factory=_new_id)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': f'{self.price:.2f}',
            'description': self.description,
            'in_stock': self.in_stock,
            'stock_count': self.stock_count,
        }

    def __repr__(self):
        return f'<Product {self.name}>'


@dataclass(frozen=True)
class CategoryListing:
    """A product category shown on the dashboard.

    ``item_count`` is a display label only and is not kept in sync with the
    number of products the catalog actually returns for the category.
    """
    name: str
    icon: str
    color: str
    item_count: int
    id: str = field(default_factory=_new_id)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'color': self.color,
            'item_count': self.item_count,
        }

    def __repr__(self):
        return f'<CategoryListing {self.name}>'
