from datetime import date

from sqlalchemy import false

from shopdesk.extensions import db
from shopdesk.models.mixins import RecordMixin

PAYMENT_METHODS = ('cash', 'card', 'upi', 'netbanking', 'credit')
PAYMENT_STATUSES = ('paid', 'pending', 'partial')


class SalesInvoice(RecordMixin, db.Model):
    __tablename__ = 'sales_invoice'

    id = db.Column(db.Integer, primary_key=True)
    invoice_number = db.Column(db.String(32), nullable=False, unique=True, index=True)
    invoice_date = db.Column(db.Date, nullable=False, default=date.today)
    customer_id = db.Column(db.Integer, db.ForeignKey('customer.id'), nullable=True, index=True)
    customer_name = db.Column(db.String(128), nullable=True)
    customer_phone = db.Column(db.String(32), nullable=True)
    customer_gstin = db.Column(db.String(15), nullable=True)

    subtotal = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    discount_amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    cgst_amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    sgst_amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    igst_amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    round_off = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    total_amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)

    payment_method = db.Column(db.String(16), nullable=True)
    payment_status = db.Column(db.String(16), nullable=False, default='paid')
    is_printed = db.Column(db.Boolean, default=False, nullable=False, server_default=false())
    notes = db.Column(db.Text, nullable=True)

    # Print order follows insertion order
    items = db.relationship(
        'SalesInvoiceItem',
        back_populates='invoice',
        cascade='all, delete-orphan',
        order_by='SalesInvoiceItem.id',
    )


class SalesInvoiceItem(db.Model):
    __tablename__ = 'sales_invoice_item'

    id = db.Column(db.Integer, primary_key=True)
    invoice_id = db.Column(db.Integer, db.ForeignKey('sales_invoice.id', ondelete='CASCADE'), nullable=False, index=True)
    item_id = db.Column(db.Integer, db.ForeignKey('item.id'), nullable=True)
    item_name = db.Column(db.String(255), nullable=True)
    quantity = db.Column(db.Numeric(precision=12, scale=3), nullable=False)
    rate = db.Column(db.Numeric(precision=12, scale=2), nullable=False)
    gst_rate = db.Column(db.Numeric(precision=5, scale=2), nullable=False, default=0)
    total_amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False)

    invoice = db.relationship('SalesInvoice', back_populates='items')
    item = db.relationship('Item')

    @property
    def display_name(self):
        if self.item_name:
            return self.item_name
        if self.item is not None:
            return self.item.name
        return None
