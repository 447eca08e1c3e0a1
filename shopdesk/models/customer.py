from shopdesk.extensions import db
from shopdesk.models.mixins import RecordMixin

CUSTOMER_TYPES = ('retail', 'wholesale', 'b2b')


class Customer(RecordMixin, db.Model):
    __tablename__ = 'customer'

    id = db.Column(db.Integer, primary_key=True, index=True)
    name = db.Column(db.String(128), nullable=False)
    phone = db.Column(db.String(32), nullable=True, index=True)
    email = db.Column(db.String(128), nullable=True)
    address = db.Column(db.String(256), nullable=True)
    city = db.Column(db.String(128), nullable=True)
    state = db.Column(db.String(128), nullable=True)
    pincode = db.Column(db.String(12), nullable=True)
    gstin = db.Column(db.String(15), nullable=True)
    customer_type = db.Column(db.String(16), nullable=False, default='retail')
    credit_limit = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)

    invoices = db.relationship('SalesInvoice', backref='customer', lazy=True)
