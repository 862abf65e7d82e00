"""Static product catalog for the convenience store."""

from decimal import Decimal

from storefront.models.product import CategoryListing, Product

CATEGORIES = (
    CategoryListing(name='Beverages', icon='cup.and.saucer.fill', color='blue', item_count=45),
    CategoryListing(name='Snacks', icon='bag.fill', color='orange', item_count=32),
    CategoryListing(name='Health', icon='cross.fill', color='green', item_count=22),
    CategoryListing(name='Personal Care', icon='heart.fill', color='pink', item_count=28),
)

# name, price, description, in stock, stock count
_PRODUCT_DATA = {
    'Beverages': [
        ('Coca-Cola 12oz', '1.99', 'Classic cola soft drink', True, 24),
        ('Pepsi 12oz', '1.99', 'Cola soft drink', True, 18),
        ('Sprite 12oz', '1.99', 'Lemon-lime soda', True, 15),
        ('Orange Juice 16oz', '3.49', 'Fresh squeezed orange juice', True, 12),
        ('Water Bottle 16.9oz', '0.99', 'Purified drinking water', True, 48),
        ('Energy Drink 16oz', '2.99', 'High caffeine energy drink', False, 0),
        ('Iced Tea 20oz', '2.49', 'Sweet tea beverage', True, 8),
    ],
    'Snacks': [
        ("Lay's Potato Chips", '2.99', 'Classic salted potato chips', True, 16),
        ('Doritos Nacho Cheese', '3.49', 'Nacho cheese flavored tortilla chips', True, 12),
        ('Snickers Bar', '1.49', 'Chocolate bar with peanuts and caramel', True, 32),
        ('Pringles Original', '2.79', 'Stackable potato crisps', True, 8),
        ('Trail Mix', '4.99', 'Mixed nuts, dried fruit, and chocolate', True, 6),
        ('Beef Jerky', '6.99', 'Original flavored beef jerky', False, 0),
    ],
    'Health': [
        ('Multivitamins', '12.99', 'Daily vitamin supplement', True, 15),
        ('Pain Relief', '6.99', 'Ibuprofen 200mg tablets', True, 8),
        ('Allergy Medicine', '8.49', '24-hour allergy relief', True, 12),
        ('Cough Drops', '2.99', 'Honey lemon cough drops', True, 20),
        ('Thermometer', '15.99', 'Digital thermometer', True, 5),
        ('Hand Sanitizer', '3.49', '70% alcohol hand sanitizer', False, 0),
        ('First Aid Kit', '19.99', 'Complete first aid kit', True, 3),
    ],
    'Personal Care': [
        ('Toothpaste', '3.99', 'Fluoride toothpaste', True, 10),
        ('Shampoo', '5.99', 'Daily care shampoo', True, 8),
        ('Body Wash', '4.49', 'Moisturizing body wash', True, 12),
        ('Deodorant', '3.49', '24-hour protection', False, 0),
        ('Toothbrush', '2.99', 'Soft bristle toothbrush', True, 18),
        ('Face Wash', '6.99', 'Gentle daily face cleanser', True, 9),
    ],
}

# Returned for any category without its own product list.
_SAMPLE_PRODUCTS = [
    ('Sample Product 1', '9.99', 'Description for sample product', True, 10),
    ('Sample Product 2', '14.99', 'Another sample product', False, 0),
    ('Sample Product 3', '7.49', 'Third sample product', True, 5),
]


def _build(rows):
    return tuple(
        Product(name=name, price=Decimal(price), description=description,
                in_stock=in_stock, stock_count=stock_count)
        for name, price, description, in_stock, stock_count in rows
    )


class CatalogProvider:
    """Read-only access to categories and their products.

    Products are built once so that their ids stay stable for the lifetime
    of the provider.
    """

    def __init__(self, categories=CATEGORIES, product_data=None):
        self._categories = tuple(categories)
        product_data = _PRODUCT_DATA if product_data is None else product_data
        self._products = {
            category.id: _build(product_data.get(category.name, _SAMPLE_PRODUCTS))
            for category in self._categories
        }
        self._by_id = {
            product.id: product
            for products in self._products.values()
            for product in products
        }

    @property
    def categories(self):
        return self._categories

    def get_category(self, category_id):
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def products_for(self, category):
        """Products for a category (or category id); empty if unknown."""
        category_id = getattr(category, 'id', category)
        return self._products.get(category_id, ())

    def get_product(self, product_id):
        return self._by_id.get(product_id)

    def find_product(self, name):
        for product in self._by_id.values():
            if product.name == name:
                return product
        return None

    @property
    def products(self):
        return tuple(self._by_id.values())


catalog = CatalogProvider()
