import logging

from shopdesk.extensions import db

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class RecordService:
    """
    get_all / get_by_id / create / update / soft_delete over one table.

    Subclasses set ``model`` and ``label`` (singular, plural) for messages.
    Soft-deleted rows are invisible to every read.
    """

    model = None
    label = ("record", "records")

    @classmethod
    def get_all(cls):
        try:
            return cls.model.query_active().order_by(cls.model.id).all()
        except Exception as e:
            logger.error(f"Error fetching {cls.label[1]}: {e}", exc_info=True)
            raise ServiceError(f"Could not fetch {cls.label[1]}. Please try again later.")

    @classmethod
    def get_by_id(cls, record_id):
        try:
            return cls.model.query_active().filter_by(id=record_id).first()
        except Exception as e:
            logger.error(f"Error fetching {cls.label[0]}: {e}", exc_info=True)
            raise ServiceError(f"Could not fetch {cls.label[0]}. Please try again later.")

    @classmethod
    def create(cls, data):
        try:
            record = cls.model(**data)
            db.session.add(record)
            db.session.commit()
            return record
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error creating {cls.label[0]}: {e}", exc_info=True)
            raise ServiceError(f"Could not create {cls.label[0]}. Please try again later.")

    @classmethod
    def update(cls, record_id, data):
        try:
            record = cls.model.query_active().filter_by(id=record_id).first()
            if not record:
                return None
            for key, value in data.items():
                setattr(record, key, value)
            db.session.commit()
            return record
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error updating {cls.label[0]}: {e}", exc_info=True)
            raise ServiceError(f"Could not update {cls.label[0]}. Please try again later.")

    @classmethod
    def soft_delete(cls, record_id):
        try:
            record = cls.model.query_active().filter_by(id=record_id).first()
            if not record:
                return False
            record.is_deleted = True
            db.session.commit()
            return True
        except Exception as e:
            db.session.rollback()
            logger.error(f"Error deleting {cls.label[0]}: {e}", exc_info=True)
            raise ServiceError(f"Could not delete {cls.label[0]}. Please try again later.")
