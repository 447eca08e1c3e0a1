import logging

from sqlalchemy import func

from shopdesk.extensions import db
from shopdesk.models.invoice import SalesInvoice, SalesInvoiceItem
from shopdesk.models.settings import StoreSettings
from shopdesk.services.record_service import RecordService, ServiceError

logger = logging.getLogger(__name__)


class InvoiceService(RecordService):
    model = SalesInvoice
    label = ("invoice", "invoices")

    @staticmethod
    def next_invoice_number():
        """Next number in the store's prefix series, e.g. INV-0042."""
        settings = StoreSettings.query.first()
        prefix = settings.invoice_prefix if settings and settings.invoice_prefix else 'INV'
        count = db.session.query(func.count(SalesInvoice.id)).scalar() or 0
        return f"{prefix}-{count + 1:04d}"

    @staticmethod
    def create(data):
        data = dict(data)
        line_items = data.pop('items', None) or []
        try:
            if not data.get('invoice_number'):
                data['invoice_number'] = InvoiceService.next_invoice_number()
            invoice = SalesInvoice(**data)
            invoice.items = [SalesInvoiceItem(**line) for line in line_items]
            db.session.add(invoice)
            db.session.commit()
            logger.info(f"Created invoice {invoice.invoice_number} with {len(line_items)} item(s)")
            return invoice
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error creating invoice: {e}", exc_info=True)
            raise ServiceError("Could not create invoice. Please try again later.")

    @staticmethod
    def update(invoice_id, data):
        data = dict(data)
        line_items = data.pop('items', None)
        try:
            invoice = SalesInvoice.query_active().filter_by(id=invoice_id).first()
            if not invoice:
                return None
            for key, value in data.items():
                setattr(invoice, key, value)
            if line_items is not None:
                invoice.items = [SalesInvoiceItem(**line) for line in line_items]
            db.session.commit()
            return invoice
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error updating invoice: {e}", exc_info=True)
            raise ServiceError("Could not update invoice. Please try again later.")

    @staticmethod
    def mark_printed(invoice_id):
        try:
            invoice = SalesInvoice.query_active().filter_by(id=invoice_id).first()
            if not invoice:
                return None
            invoice.is_printed = True
            db.session.commit()
            return invoice
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error marking invoice {invoice_id} printed: {e}", exc_info=True)
            raise ServiceError("Could not update invoice. Please try again later.")
