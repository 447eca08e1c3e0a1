from datetime import date

from shopdesk.extensions import db
from shopdesk.models.mixins import RecordMixin


class Expense(RecordMixin, db.Model):
    __tablename__ = 'expense'

    id = db.Column(db.Integer, primary_key=True)
    expense_date = db.Column(db.Date, nullable=False, default=date.today, index=True)
    category = db.Column(db.String(128), nullable=False)
    description = db.Column(db.String(512), nullable=True)
    amount = db.Column(db.Numeric(precision=12, scale=2), nullable=False)
    payment_method = db.Column(db.String(16), nullable=True)
    reference_number = db.Column(db.String(64), nullable=True)
