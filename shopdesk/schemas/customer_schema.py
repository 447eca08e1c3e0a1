from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from shopdesk.models.customer import Customer, CUSTOMER_TYPES


class CustomerSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = Customer
        exclude = ('is_deleted',)

    id = auto_field(dump_only=True)
    name = auto_field(validate=validate.Length(min=1, max=128))
    email = auto_field(validate=validate.Email())
    customer_type = auto_field(validate=validate.OneOf(CUSTOMER_TYPES))
    created_at = auto_field(dump_only=True)
    updated_at = auto_field(dump_only=True)
