"""Flask CLI commands."""

import click
from flask import Flask
from flask.cli import with_appcontext

from .catalog import catalog
from .extensions import db
from .models.saved_payment import SavedPaymentStore


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the database tables."""
    from .models import StoredValue  # noqa: F401
    db.create_all()
    click.echo('Database initialised.')


@click.command('catalog')
def catalog_command():
    """Print categories and their products."""
    for category in catalog.categories:
        click.echo(f'{category.name} ({category.item_count} listed)')
        for product in catalog.products_for(category):
            stock = f'in stock ({product.stock_count})' if product.in_stock else 'out of stock'
            click.echo(f'  {product.name:<28} ${product.price:>6.2f}  {stock}')


@click.command('forget-payment')
@with_appcontext
def forget_payment_command():
    """Clear saved payment information."""
    SavedPaymentStore().clear()
    click.echo('Saved payment information cleared.')


def register_commands(app: Flask):
    """Register CLI commands with the application."""
    app.cli.add_command(init_db_command)
    app.cli.add_command(catalog_command)
    app.cli.add_command(forget_payment_command)
