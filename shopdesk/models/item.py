from shopdesk.extensions import db
from shopdesk.models.mixins import RecordMixin


class Item(RecordMixin, db.Model):
    __tablename__ = 'item'

    id = db.Column(db.Integer, primary_key=True, index=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    sku = db.Column(db.String(64), nullable=True, unique=True)
    barcode = db.Column(db.String(64), nullable=True, index=True)
    hsn_code = db.Column(db.String(16), nullable=True)
    unit = db.Column(db.String(32), nullable=True)
    category = db.Column(db.String(128), nullable=True)
    purchase_price = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    selling_price = db.Column(db.Numeric(precision=12, scale=2), nullable=False, default=0)
    mrp = db.Column(db.Numeric(precision=12, scale=2), nullable=True)
    gst_rate = db.Column(db.Numeric(precision=5, scale=2), nullable=False, default=0)
    current_stock = db.Column(db.Numeric(precision=12, scale=3), nullable=False, default=0)
    min_stock_level = db.Column(db.Numeric(precision=12, scale=3), nullable=False, default=0)

    def __repr__(self):
        return f"<Item id={self.id} name={self.name!r}>"
