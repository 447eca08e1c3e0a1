"""
Data models for the thermal receipt formatter
"""

from .paper_width import PaperWidth
from .delivery_method import DeliveryMethod
from .store_info import StoreInfo
from .invoice_line_item import InvoiceLineItem
from .invoice_data import InvoiceData
from .layout_options import LayoutOptions

__all__ = [
    "PaperWidth",
    "DeliveryMethod",
    "StoreInfo",
    "InvoiceLineItem",
    "InvoiceData",
    "LayoutOptions",
]
