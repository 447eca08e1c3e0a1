from shopdesk.api.crud import make_crud_blueprint
from shopdesk.schemas.expense_schema import ExpenseSchema
from shopdesk.services.expense_service import ExpenseService

expense_bp = make_crud_blueprint('expense', '/expenses', ExpenseService, ExpenseSchema, 'expense')
