import shlex
import sys
from datetime import date
from decimal import Decimal

import pytest

from shopdesk.config import TestConfig
from shopdesk.extensions import db
from shopdesk.server import create_app
from shopdesk.services.thermal_receipt import InvoiceData, InvoiceLineItem, StoreInfo


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig)
    app.config['RECEIPT_SPOOL_DIR'] = str(tmp_path / 'spool')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store():
    return StoreInfo(
        store_name="Sri Ganesh Stores",
        address="12 Market Road",
        city="Chennai",
        state="Tamil Nadu",
        pincode="600001",
        phone="9876543210",
        gstin="33ABCDE1234F1Z5",
    )


@pytest.fixture
def camphor():
    return InvoiceLineItem(name="Camphor Tablets", quantity=2, rate=45, gst_rate=0, total=90)


@pytest.fixture
def invoice(camphor):
    return InvoiceData(
        invoice_number="INV-0001",
        invoice_date="15/01/2025",
        customer_name="Ravi Kumar",
        items=[camphor],
        subtotal=Decimal("90"),
        total_amount=Decimal("90"),
        payment_method="upi",
    )


@pytest.fixture
def store_settings(app):
    from shopdesk.services.settings_service import SettingsService
    return SettingsService.save({
        'store_name': "Sri Ganesh Stores",
        'city': "Chennai",
        'state': "Tamil Nadu",
        'pincode': "600001",
        'phone': "9876543210",
        'gstin': "33ABCDE1234F1Z5",
        'invoice_footer': "Thank you",
        'print_width': '80mm',
    })


@pytest.fixture
def saved_invoice(app):
    from shopdesk.services.invoice_service import InvoiceService
    return InvoiceService.create({
        'invoice_number': 'INV-0001',
        'invoice_date': date(2025, 1, 15),
        'customer_name': 'Ravi Kumar',
        'subtotal': Decimal('190.00'),
        'cgst_amount': Decimal('9.00'),
        'sgst_amount': Decimal('9.00'),
        'round_off': Decimal('-0.40'),
        'total_amount': Decimal('207.60'),
        'payment_method': 'cash',
        'items': [
            {'item_name': 'Camphor Tablets', 'quantity': Decimal('2'), 'rate': Decimal('45'),
             'gst_rate': Decimal('0'), 'total_amount': Decimal('90')},
            {'item_name': 'Agarbatti Premium', 'quantity': Decimal('1'), 'rate': Decimal('100'),
             'gst_rate': Decimal('18'), 'total_amount': Decimal('100')},
        ],
    })


@pytest.fixture
def printer_command():
    """Build a print command that runs a Python snippet; the spool file path arrives as the last argv entry."""
    def build(script, *args):
        return shlex.join([sys.executable, "-c", script, *args])
    return build
