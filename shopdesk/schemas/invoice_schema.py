from marshmallow import fields, validate
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from shopdesk.models.invoice import SalesInvoice, SalesInvoiceItem, PAYMENT_METHODS, PAYMENT_STATUSES


class SalesInvoiceItemSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = SalesInvoiceItem
        include_fk = True

    id = auto_field(dump_only=True)
    invoice_id = auto_field(dump_only=True)
    quantity = auto_field(validate=validate.Range(min=0))
    gst_rate = auto_field(validate=validate.Range(min=0, max=100))


class SalesInvoiceSchema(SQLAlchemyAutoSchema):
    class Meta:
        model = SalesInvoice
        include_fk = True
        exclude = ('is_deleted',)

    id = auto_field(dump_only=True)
    invoice_number = auto_field(required=False)
    payment_method = auto_field(validate=validate.OneOf(PAYMENT_METHODS))
    payment_status = auto_field(validate=validate.OneOf(PAYMENT_STATUSES))
    is_printed = auto_field(dump_only=True)
    created_at = auto_field(dump_only=True)
    updated_at = auto_field(dump_only=True)

    items = fields.List(fields.Nested(SalesInvoiceItemSchema), load_default=list)
