from marshmallow import validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from shopdesk.models.item import Item


class ItemSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = Item
        exclude = ('is_deleted',)

    id = auto_field(dump_only=True)
    name = auto_field(validate=validate.Length(min=1, max=255))
    gst_rate = auto_field(validate=validate.Range(min=0, max=100))
    created_at = auto_field(dump_only=True)
    updated_at = auto_field(dump_only=True)
