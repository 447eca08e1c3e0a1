import logging

from shopdesk.models.item import Item
from shopdesk.services.record_service import RecordService, ServiceError

logger = logging.getLogger(__name__)


class ItemService(RecordService):
    model = Item
    label = ("item", "items")

    @staticmethod
    def find_by_barcode(barcode):
        try:
            return Item.query_active().filter_by(barcode=barcode).first()
        except Exception as e:
            logger.error(f"Error looking up barcode {barcode}: {e}", exc_info=True)
            raise ServiceError("Could not look up item. Please try again later.")

    @staticmethod
    def low_stock():
        try:
            return (
                Item.query_active()
                .filter(Item.current_stock <= Item.min_stock_level)
                .order_by(Item.name)
                .all()
            )
        except Exception as e:
            logger.error(f"Error fetching low stock items: {e}", exc_info=True)
            raise ServiceError("Could not fetch low stock items. Please try again later.")
