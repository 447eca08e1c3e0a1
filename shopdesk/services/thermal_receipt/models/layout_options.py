from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from .delivery_method import DeliveryMethod
from .paper_width import PaperWidth


class LayoutOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    paper_width: PaperWidth = PaperWidth.MM_80
    footer: Optional[str] = None
    terms: Optional[str] = None
    # Only paper_width affects layout; the delivery tag travels with the options
    delivery_method: DeliveryMethod = DeliveryMethod.IFRAME

    @field_validator("paper_width", mode="before")
    @classmethod
    def _coerce_paper_width(cls, value):
        return PaperWidth.coerce(value)

    @field_validator("delivery_method", mode="before")
    @classmethod
    def _coerce_delivery_method(cls, value):
        if isinstance(value, DeliveryMethod):
            return value
        try:
            return DeliveryMethod(str(value).strip().lower())
        except ValueError:
            return DeliveryMethod.IFRAME
