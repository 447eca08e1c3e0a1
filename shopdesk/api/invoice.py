import logging

from flask import request, jsonify

from shopdesk.api.crud import make_crud_blueprint, unexpected_error
from shopdesk.schemas.invoice_schema import SalesInvoiceSchema
from shopdesk.services.invoice_service import InvoiceService
from shopdesk.services.receipt_service import ReceiptService
from shopdesk.services.record_service import ServiceError
from shopdesk.services.thermal_receipt import DeliveryError, DeliveryMethod

logger = logging.getLogger(__name__)

invoice_bp = make_crud_blueprint('invoice', '/invoices', InvoiceService, SalesInvoiceSchema, 'invoice')


@invoice_bp.route('/invoices/<int:invoice_id>/receipt', methods=['GET'])
def get_invoice_receipt(invoice_id):
    try:
        text, options = ReceiptService.render(invoice_id, paper_width=request.args.get('width'))
        if text is None:
            return jsonify({'error': 'Invoice not found'}), 404
        return jsonify({
            'text': text,
            'paper_width': options.paper_width.value,
            'max_chars': options.paper_width.max_chars,
        }), 200
    except ServiceError as se:
        return jsonify({'error': se.message}), 400
    except Exception as e:
        return unexpected_error("get_invoice_receipt", e)


@invoice_bp.route('/invoices/<int:invoice_id>/print', methods=['POST'])
def print_invoice_receipt(invoice_id):
    try:
        data = request.get_json(silent=True) or {}
        method = data.get('method', DeliveryMethod.IFRAME.value)
        result = ReceiptService.print_invoice(invoice_id, method=method, paper_width=data.get('width'))
        if result is None:
            return jsonify({'error': 'Invoice not found'}), 404
        return jsonify(result.model_dump(mode='json')), 200
    except DeliveryError as de:
        logger.error(f"Receipt delivery failed for invoice {invoice_id}: {de.message}")
        return jsonify({'error': de.message}), 502
    except ServiceError as se:
        return jsonify({'error': se.message}), 400
    except Exception as e:
        return unexpected_error("print_invoice_receipt", e)
