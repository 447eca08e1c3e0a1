from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict


class InvoiceLineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: Decimal = Field(ge=0)
    rate: Decimal
    gst_rate: Decimal = Field(default=Decimal("0"), ge=0)
    total: Decimal

    @property
    def has_gst(self) -> bool:
        return self.gst_rate > 0
