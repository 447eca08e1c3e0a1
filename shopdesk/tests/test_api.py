"""
HTTP tests for the record and receipt endpoints
"""
import pytest

from shopdesk.services.thermal_receipt import delivery


@pytest.fixture(autouse=True)
def no_wait(monkeypatch):
    monkeypatch.setattr(delivery.time, "sleep", lambda seconds: None)


def create_invoice(client, **overrides):
    payload = {
        'invoice_date': '2025-01-15',
        'customer_name': 'Ravi Kumar',
        'subtotal': '90.00',
        'total_amount': '90.00',
        'payment_method': 'upi',
        'items': [
            {'item_name': 'Camphor Tablets', 'quantity': '2', 'rate': '45', 'total_amount': '90'},
        ],
    }
    payload.update(overrides)
    return client.post('/api/invoices', json=payload)


class TestHealth:

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok', 'database': {'dialect': 'sqlite', 'healthy': True}}


class TestItemEndpoints:

    def test_item_lifecycle(self, client):
        response = client.post('/api/items', json={'name': 'Camphor Tablets', 'selling_price': '45.00'})
        assert response.status_code == 201
        item_id = response.get_json()['id']

        response = client.put(f'/api/items/{item_id}', json={'current_stock': '12'})
        assert response.status_code == 200
        assert response.get_json()['name'] == 'Camphor Tablets'

        assert client.get(f'/api/items/{item_id}').status_code == 200
        assert client.delete(f'/api/items/{item_id}').status_code == 200
        assert client.get(f'/api/items/{item_id}').status_code == 404
        assert client.get('/api/items').get_json() == []

    def test_missing_item(self, client):
        response = client.get('/api/items/999')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Item not found'}
        assert client.delete('/api/items/999').status_code == 404

    def test_validation_error(self, client):
        response = client.post('/api/items', json={'selling_price': '45.00'})
        assert response.status_code == 400
        assert 'name' in response.get_json()

    def test_barcode_lookup(self, client):
        client.post('/api/items', json={'name': 'Ghee 500ml', 'barcode': '8901234567890'})
        response = client.get('/api/items/barcode/8901234567890')
        assert response.status_code == 200
        assert response.get_json()['name'] == 'Ghee 500ml'
        assert client.get('/api/items/barcode/0000').status_code == 404


class TestSettingsEndpoints:

    def test_settings_not_configured(self, client):
        assert client.get('/api/settings').status_code == 404

    def test_first_save_requires_store_name(self, client):
        response = client.put('/api/settings', json={'city': 'Chennai'})
        assert response.status_code == 400
        assert 'store_name' in response.get_json()

    def test_partial_update_after_first_save(self, client):
        client.put('/api/settings', json={'store_name': 'Sri Ganesh Stores'})
        response = client.put('/api/settings', json={'print_width': '58mm'})
        assert response.status_code == 200
        body = response.get_json()
        assert body['store_name'] == 'Sri Ganesh Stores'
        assert body['print_width'] == '58mm'

    def test_rejects_unknown_print_width(self, client):
        response = client.put('/api/settings', json={'store_name': 'Sri Ganesh Stores', 'print_width': '110mm'})
        assert response.status_code == 400


class TestInvoiceEndpoints:

    def test_create_invoice_with_items(self, client):
        response = create_invoice(client)
        assert response.status_code == 201
        body = response.get_json()
        assert body['invoice_number'] == 'INV-0001'
        assert body['is_printed'] is False
        assert [line['item_name'] for line in body['items']] == ['Camphor Tablets']

    def test_rejects_unknown_payment_method(self, client):
        assert create_invoice(client, payment_method='barter').status_code == 400

    def test_receipt_text(self, client, store_settings):
        invoice_id = create_invoice(client).get_json()['id']
        response = client.get(f'/api/invoices/{invoice_id}/receipt?width=58mm')
        assert response.status_code == 200
        body = response.get_json()
        assert body['paper_width'] == '58mm'
        assert body['max_chars'] == 32
        assert "Sri Ganesh Stores" in body['text']
        assert body['text'].endswith("\n\n\n\n")

    def test_receipt_for_missing_invoice(self, client, store_settings):
        assert client.get('/api/invoices/999/receipt').status_code == 404

    def test_receipt_without_store_settings(self, client):
        invoice_id = create_invoice(client).get_json()['id']
        response = client.get(f'/api/invoices/{invoice_id}/receipt')
        assert response.status_code == 400

    def test_print_falls_back_to_iframe(self, client, store_settings):
        invoice_id = create_invoice(client).get_json()['id']
        response = client.post(f'/api/invoices/{invoice_id}/print', json={'method': 'bluetooth'})
        assert response.status_code == 200
        body = response.get_json()
        assert body['method'] == 'iframe'
        assert body['fallback_from'] == 'bluetooth'
        assert body['paper_width'] == '80mm'
        assert body['spooled'] is False
        assert client.get(f'/api/invoices/{invoice_id}').get_json()['is_printed'] is True

    def test_print_delivery_failure(self, app, client, store_settings, printer_command):
        app.config['RECEIPT_PRINT_COMMAND'] = printer_command("import sys; sys.exit('printer offline')")
        invoice_id = create_invoice(client).get_json()['id']
        response = client.post(f'/api/invoices/{invoice_id}/print', json={})
        assert response.status_code == 502
        assert response.get_json()['error'] == 'Print command failed: printer offline'
        assert client.get(f'/api/invoices/{invoice_id}').get_json()['is_printed'] is False
