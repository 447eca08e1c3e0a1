"""
CRUD blueprint factory.

Every record table exposes the same five routes; this builds them around a
RecordService subclass and a marshmallow schema.
"""
import logging

from flask import Blueprint, request, jsonify
from marshmallow import ValidationError

from shopdesk.services.record_service import ServiceError

logger = logging.getLogger(__name__)


def unexpected_error(handler_name, e):
    logger.error(f"Unhandled error in {handler_name}: {e}", exc_info=True)
    return jsonify({'error': 'An unexpected error occurred. Please try again later.'}), 500


def make_crud_blueprint(name, url, service, schema_cls, label):
    bp = Blueprint(name, __name__)
    schema = schema_cls()
    schema_many = schema_cls(many=True)
    not_found = {'error': f'{label.capitalize()} not found'}

    @bp.route(url, methods=['GET'])
    def list_records():
        try:
            return jsonify(schema_many.dump(service.get_all())), 200
        except ServiceError as se:
            return jsonify({'error': se.message}), 400
        except Exception as e:
            return unexpected_error(f"list_{name}", e)

    @bp.route(f'{url}/<int:record_id>', methods=['GET'])
    def get_record(record_id):
        try:
            record = service.get_by_id(record_id)
            if not record:
                return jsonify(not_found), 404
            return jsonify(schema.dump(record)), 200
        except ServiceError as se:
            return jsonify({'error': se.message}), 400
        except Exception as e:
            return unexpected_error(f"get_{name}", e)

    @bp.route(url, methods=['POST'])
    def create_record():
        try:
            data = schema.load(request.get_json() or {})
            record = service.create(data)
            return jsonify(schema.dump(record)), 201
        except ValidationError as err:
            return jsonify(err.messages), 400
        except ServiceError as se:
            return jsonify({'error': se.message}), 400
        except Exception as e:
            return unexpected_error(f"create_{name}", e)

    @bp.route(f'{url}/<int:record_id>', methods=['PUT'])
    def update_record(record_id):
        try:
            data = schema.load(request.get_json() or {}, partial=True)
            record = service.update(record_id, data)
            if not record:
                return jsonify(not_found), 404
            return jsonify(schema.dump(record)), 200
        except ValidationError as err:
            return jsonify(err.messages), 400
        except ServiceError as se:
            return jsonify({'error': se.message}), 400
        except Exception as e:
            return unexpected_error(f"update_{name}", e)

    @bp.route(f'{url}/<int:record_id>', methods=['DELETE'])
    def delete_record(record_id):
        try:
            if not service.soft_delete(record_id):
                return jsonify(not_found), 404
            logger.info(f"{label.capitalize()} {record_id} soft deleted")
            return jsonify({'message': f'{label.capitalize()} deleted successfully'}), 200
        except ServiceError as se:
            return jsonify({'error': se.message}), 400
        except Exception as e:
            return unexpected_error(f"delete_{name}", e)

    return bp
