from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from shopdesk.models.expense import Expense


class ExpenseSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = Expense
        exclude = ('is_deleted',)

    id = auto_field(dump_only=True)
    amount = auto_field(validate=validate.Range(min=0))
    created_at = auto_field(dump_only=True)
    updated_at = auto_field(dump_only=True)
