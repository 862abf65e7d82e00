"""Checkout forms."""

from flask_wtf import FlaskForm
from wtforms import BooleanField, PasswordField, RadioField, StringField
from wtforms.validators import DataRequired, Optional

from storefront.services.payments import PaymentMethod


class CheckoutForm(FlaskForm):
    """Payment details for a simulated checkout.

    Only the payment method is required; blank customer fields fall back
    to the order defaults. The CVV is read so it can be discarded, it is
    never handed to the saved payment store.
    """
    payment_method = RadioField('Payment Method', choices=[
        (method.value, method.label) for method in PaymentMethod
    ], default=PaymentMethod.CARD.value, validators=[
        DataRequired(message='Payment method is required')
    ])
    customer_name = StringField('Full Name', validators=[Optional()])
    customer_email = StringField('Email', validators=[Optional()])
    card_number = StringField('Card Number', validators=[Optional()])
    expiry_date = StringField('Expiry (MM/YY)', validators=[Optional()])
    cvv = PasswordField('CVV', validators=[Optional()])
    save_payment_info = BooleanField('Save payment information for future purchases')

    def payment_fields(self):
        """Fields passed on to checkout, CVV excluded."""
        return {
            'customer_name': self.customer_name.data or '',
            'customer_email': self.customer_email.data or '',
            'card_number': self.card_number.data or '',
            'expiry_date': self.expiry_date.data or '',
            'save_payment_info': bool(self.save_payment_info.data),
        }
