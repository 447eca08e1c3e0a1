"""
Receipt service - resolves store and invoice records into receipt models,
formats them and hands the text to a delivery sink.
"""
import logging

from flask import current_app

from shopdesk.services.invoice_service import InvoiceService
from shopdesk.services.record_service import ServiceError
from shopdesk.services.settings_service import SettingsService
from shopdesk.services.thermal_receipt import (
    DeliveryMethod,
    InvoiceData,
    InvoiceLineItem,
    LayoutOptions,
    StoreInfo,
    deliver,
    format_receipt,
)

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_NAME = "Unknown Item"
WALK_IN_CUSTOMER = "Walk-in Customer"
DATE_DISPLAY_FORMAT = "%d/%m/%Y"


def build_store_info(settings) -> StoreInfo:
    return StoreInfo(
        store_name=settings.store_name,
        address=settings.address,
        city=settings.city,
        state=settings.state,
        pincode=settings.pincode,
        phone=settings.phone,
        gstin=settings.gstin,
    )


def build_invoice_data(invoice) -> InvoiceData:
    items = [
        InvoiceLineItem(
            name=line.display_name or UNKNOWN_ITEM_NAME,
            quantity=line.quantity,
            rate=line.rate,
            gst_rate=line.gst_rate or 0,
            total=line.total_amount,
        )
        for line in invoice.items
    ]
    customer_name = invoice.customer_name
    if not customer_name and invoice.customer is not None:
        customer_name = invoice.customer.name

    return InvoiceData(
        invoice_number=invoice.invoice_number,
        invoice_date=invoice.invoice_date.strftime(DATE_DISPLAY_FORMAT) if invoice.invoice_date else "",
        customer_name=customer_name or WALK_IN_CUSTOMER,
        customer_phone=invoice.customer_phone,
        customer_gstin=invoice.customer_gstin,
        items=items,
        subtotal=invoice.subtotal or 0,
        discount_amount=invoice.discount_amount,
        cgst_amount=invoice.cgst_amount or 0,
        sgst_amount=invoice.sgst_amount or 0,
        igst_amount=invoice.igst_amount or 0,
        round_off=invoice.round_off or 0,
        total_amount=invoice.total_amount or 0,
        payment_method=invoice.payment_method,
    )


class ReceiptService:
    @staticmethod
    def layout_options(settings, paper_width=None, method=DeliveryMethod.IFRAME) -> LayoutOptions:
        """Explicit width wins, then the store's print width, then app config."""
        config = current_app.config
        width = paper_width or settings.print_width or config.get('RECEIPT_PAPER_WIDTH')
        return LayoutOptions(
            paper_width=width,
            footer=settings.invoice_footer or config.get('RECEIPT_DEFAULT_FOOTER'),
            terms=settings.terms_conditions or config.get('RECEIPT_DEFAULT_TERMS'),
            delivery_method=method,
        )

    @staticmethod
    def _load(invoice_id):
        invoice = InvoiceService.get_by_id(invoice_id)
        if not invoice:
            return None, None
        settings = SettingsService.get()
        if not settings:
            raise ServiceError("Store settings are not configured. Please set up the store profile first.")
        return invoice, settings

    @staticmethod
    def render(invoice_id, paper_width=None):
        """
        Format the receipt for one invoice.

        Returns:
            tuple: (receipt text, LayoutOptions) or (None, None) if the invoice does not exist
        """
        invoice, settings = ReceiptService._load(invoice_id)
        if invoice is None:
            return None, None

        options = ReceiptService.layout_options(settings, paper_width)
        text = format_receipt(
            build_store_info(settings),
            build_invoice_data(invoice),
            options,
            currency_symbol=current_app.config.get('RECEIPT_CURRENCY_SYMBOL', '₹'),
        )
        return text, options

    @staticmethod
    def print_invoice(invoice_id, method=DeliveryMethod.IFRAME, paper_width=None):
        """
        Format and deliver the receipt, then flag the invoice as printed.

        Returns:
            DeliveryResult, or None if the invoice does not exist

        Raises:
            ServiceError: store settings missing or the invoice could not be updated
            DeliveryError: the delivery sink failed; the invoice stays unprinted
        """
        invoice, settings = ReceiptService._load(invoice_id)
        if invoice is None:
            return None

        options = ReceiptService.layout_options(settings, paper_width, method)
        text = format_receipt(
            build_store_info(settings),
            build_invoice_data(invoice),
            options,
            currency_symbol=current_app.config.get('RECEIPT_CURRENCY_SYMBOL', '₹'),
        )

        config = current_app.config
        result = deliver(
            text,
            options.paper_width,
            method,
            print_command=config.get('RECEIPT_PRINT_COMMAND'),
            settle_seconds=config.get('RECEIPT_SETTLE_SECONDS', 1.0),
            spool_dir=config.get('RECEIPT_SPOOL_DIR'),
            timeout=config.get('RECEIPT_PRINT_TIMEOUT', 10.0),
        )
        InvoiceService.mark_printed(invoice.id)
        logger.info(f"Invoice {invoice.invoice_number} printed via {result.method.value}")
        return result
