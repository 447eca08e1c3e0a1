"""
Delivery method enumeration
"""

from enum import Enum


class DeliveryMethod(str, Enum):
    IFRAME = "iframe"
    PREVIEW = "preview"
    DIRECT = "direct"
    BLUETOOTH = "bluetooth"
