from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from shopdesk.models.vendor import Vendor


class VendorSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = Vendor
        exclude = ('is_deleted',)

    id = auto_field(dump_only=True)
    name = auto_field(validate=validate.Length(min=1, max=128))
    email = auto_field(validate=validate.Email())
    created_at = auto_field(dump_only=True)
    updated_at = auto_field(dump_only=True)
