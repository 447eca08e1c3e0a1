from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from shopdesk.models.settings import StoreSettings


class StoreSettingsSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = StoreSettings

    id = auto_field(dump_only=True)
    store_name = auto_field(validate=validate.Length(min=1, max=255))
    print_width = auto_field(validate=validate.OneOf(('58mm', '80mm')))
    updated_at = auto_field(dump_only=True)
