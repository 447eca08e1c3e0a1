from shopdesk.api.crud import make_crud_blueprint
from shopdesk.schemas.customer_schema import CustomerSchema
from shopdesk.services.customer_service import CustomerService

customer_bp = make_crud_blueprint('customer', '/customers', CustomerService, CustomerSchema, 'customer')
