import logging

from shopdesk.extensions import db
from shopdesk.models.settings import StoreSettings
from shopdesk.services.record_service import ServiceError

logger = logging.getLogger(__name__)


class SettingsService:
    @staticmethod
    def get():
        try:
            return StoreSettings.query.order_by(StoreSettings.id).first()
        except Exception as e:
            logger.error(f"Error fetching store settings: {e}", exc_info=True)
            raise ServiceError("Could not fetch store settings. Please try again later.")

    @staticmethod
    def save(data):
        """Create the settings row on first save, update it afterwards."""
        try:
            settings = StoreSettings.query.order_by(StoreSettings.id).first()
            if settings is None:
                settings = StoreSettings(**data)
                db.session.add(settings)
            else:
                for key, value in data.items():
                    setattr(settings, key, value)
            db.session.commit()
            return settings
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error saving store settings: {e}", exc_info=True)
            raise ServiceError("Could not save store settings. Please try again later.")
