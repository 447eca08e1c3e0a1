from shopdesk.models.vendor import Vendor
from shopdesk.services.record_service import RecordService


class VendorService(RecordService):
    model = Vendor
    label = ("vendor", "vendors")
