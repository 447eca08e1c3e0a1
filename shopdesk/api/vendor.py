from shopdesk.api.crud import make_crud_blueprint
from shopdesk.schemas.vendor_schema import VendorSchema
from shopdesk.services.vendor_service import VendorService

vendor_bp = make_crud_blueprint('vendor', '/vendors', VendorService, VendorSchema, 'vendor')
