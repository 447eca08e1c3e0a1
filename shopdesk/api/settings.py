from flask import Blueprint, request, jsonify
from marshmallow import ValidationError

from shopdesk.api.crud import unexpected_error
from shopdesk.schemas.settings_schema import StoreSettingsSchema
from shopdesk.services.record_service import ServiceError
from shopdesk.services.settings_service import SettingsService

settings_bp = Blueprint('settings', __name__)
schema = StoreSettingsSchema()


@settings_bp.route('/settings', methods=['GET'])
def get_settings():
    try:
        settings = SettingsService.get()
        if not settings:
            return jsonify({'error': 'Store settings are not configured'}), 404
        return jsonify(schema.dump(settings)), 200
    except ServiceError as se:
        return jsonify({'error': se.message}), 400
    except Exception as e:
        return unexpected_error("get_settings", e)


@settings_bp.route('/settings', methods=['PUT'])
def save_settings():
    try:
        # store_name is only required the first time the profile is saved
        partial = SettingsService.get() is not None
        data = schema.load(request.get_json() or {}, partial=partial)
        settings = SettingsService.save(data)
        return jsonify(schema.dump(settings)), 200
    except ValidationError as err:
        return jsonify(err.messages), 400
    except ServiceError as se:
        return jsonify({'error': se.message}), 400
    except Exception as e:
        return unexpected_error("save_settings", e)
