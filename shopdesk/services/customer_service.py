import logging

from shopdesk.models.customer import Customer
from shopdesk.services.record_service import RecordService, ServiceError

logger = logging.getLogger(__name__)


class CustomerService(RecordService):
    model = Customer
    label = ("customer", "customers")

    @staticmethod
    def find_by_phone(phone):
        try:
            return Customer.query_active().filter_by(phone=phone).first()
        except Exception as e:
            logger.error(f"Error looking up customer by phone: {e}", exc_info=True)
            raise ServiceError("Could not fetch customer. Please try again later.")
