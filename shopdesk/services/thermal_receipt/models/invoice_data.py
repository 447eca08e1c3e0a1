"""
Invoice model
"""

from decimal import Decimal
from typing import Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict

from .invoice_line_item import InvoiceLineItem


class InvoiceData(BaseModel):
    model_config = ConfigDict(frozen=True)

    invoice_number: str
    invoice_date: str
    customer_name: str
    customer_phone: Optional[str] = None
    customer_gstin: Optional[str] = None

    # Print order is input order
    items: Tuple[InvoiceLineItem, ...] = Field(default_factory=tuple)

    subtotal: Decimal
    discount_amount: Optional[Decimal] = None
    cgst_amount: Decimal = Decimal("0")
    sgst_amount: Decimal = Decimal("0")
    igst_amount: Decimal = Decimal("0")
    round_off: Decimal = Decimal("0")
    total_amount: Decimal
    payment_method: Optional[str] = None

    @property
    def has_discount(self) -> bool:
        return bool(self.discount_amount and self.discount_amount > 0)
