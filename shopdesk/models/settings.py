from datetime import datetime

from shopdesk.extensions import db


class StoreSettings(db.Model):
    """Single-row table holding the store profile and invoice print defaults."""
    __tablename__ = "store_settings"

    id = db.Column(db.Integer, primary_key=True)
    store_name = db.Column(db.String(255), nullable=False)
    address = db.Column(db.String(256), nullable=True)
    city = db.Column(db.String(128), nullable=True)
    state = db.Column(db.String(128), nullable=True)
    pincode = db.Column(db.String(12), nullable=True)
    phone = db.Column(db.String(32), nullable=True)
    email = db.Column(db.String(128), nullable=True)
    gstin = db.Column(db.String(15), nullable=True)

    invoice_prefix = db.Column(db.String(16), nullable=False, default='INV')
    invoice_footer = db.Column(db.String(512), nullable=True)
    terms_conditions = db.Column(db.Text, nullable=True)
    print_width = db.Column(db.String(8), nullable=False, default='80mm')

    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<StoreSettings id={self.id} store_name={self.store_name!r}>"
