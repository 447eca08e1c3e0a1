from shopdesk.models.expense import Expense
from shopdesk.services.record_service import RecordService


class ExpenseService(RecordService):
    model = Expense
    label = ("expense", "expenses")
