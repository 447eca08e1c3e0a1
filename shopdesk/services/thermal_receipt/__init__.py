"""
Thermal receipt formatting and delivery
"""

from .models import (
    DeliveryMethod,
    InvoiceData,
    InvoiceLineItem,
    LayoutOptions,
    PaperWidth,
    StoreInfo,
)
from .formatter import Align, ThermalReceiptFormatter, display_width, format_receipt
from .delivery import DeliveryError, DeliveryResult, deliver

__all__ = [
    "Align",
    "DeliveryError",
    "DeliveryMethod",
    "DeliveryResult",
    "InvoiceData",
    "InvoiceLineItem",
    "LayoutOptions",
    "PaperWidth",
    "StoreInfo",
    "ThermalReceiptFormatter",
    "deliver",
    "display_width",
    "format_receipt",
]
