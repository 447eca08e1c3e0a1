from shopdesk.extensions import db
from shopdesk.models.mixins import RecordMixin


class Vendor(RecordMixin, db.Model):
    __tablename__ = 'vendor'

    id = db.Column(db.Integer, primary_key=True, index=True)
    name = db.Column(db.String(128), nullable=False)
    contact_person = db.Column(db.String(128), nullable=True)
    phone = db.Column(db.String(32), nullable=True)
    email = db.Column(db.String(128), nullable=True)
    address = db.Column(db.String(256), nullable=True)
    city = db.Column(db.String(128), nullable=True)
    state = db.Column(db.String(128), nullable=True)
    pincode = db.Column(db.String(12), nullable=True)
    gstin = db.Column(db.String(15), nullable=True)
