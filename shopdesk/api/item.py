from flask import jsonify

from shopdesk.api.crud import make_crud_blueprint, unexpected_error
from shopdesk.schemas.item_schema import ItemSchema
from shopdesk.services.item_service import ItemService
from shopdesk.services.record_service import ServiceError

item_bp = make_crud_blueprint('item', '/items', ItemService, ItemSchema, 'item')
schema = ItemSchema()
schema_many = ItemSchema(many=True)


@item_bp.route('/items/barcode/<string:barcode>', methods=['GET'])
def get_item_by_barcode(barcode):
    try:
        item = ItemService.find_by_barcode(barcode)
        if not item:
            return jsonify({'error': 'Item not found'}), 404
        return jsonify(schema.dump(item)), 200
    except ServiceError as se:
        return jsonify({'error': se.message}), 400
    except Exception as e:
        return unexpected_error("get_item_by_barcode", e)


@item_bp.route('/items/low-stock', methods=['GET'])
def list_low_stock_items():
    try:
        return jsonify(schema_many.dump(ItemService.low_stock())), 200
    except ServiceError as se:
        return jsonify({'error': se.message}), 400
    except Exception as e:
        return unexpected_error("list_low_stock_items", e)
