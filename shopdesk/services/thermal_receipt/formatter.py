"""
Thermal receipt formatter.

Renders a sales invoice into fixed-width monospace text for 58mm and 80mm
thermal printers. The formatter is a pure mapping from
(StoreInfo, InvoiceData, LayoutOptions) to a string: it performs no I/O and
keeps no state between calls.

Usage:
    from shopdesk.services.thermal_receipt import format_receipt, LayoutOptions

    text = format_receipt(store, invoice, LayoutOptions(paper_width="58mm"))
"""
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import List, NamedTuple, Union

from .models import InvoiceData, InvoiceLineItem, LayoutOptions, PaperWidth, StoreInfo

DEFAULT_CURRENCY_SYMBOL = "₹"

# Code point bands printed as double-width cells by the printer font
WIDE_CHAR_RANGES = (
    (0x0900, 0x0DFF),  # Devanagari .. Sinhala
    (0x3040, 0x30FF),  # Hiragana, Katakana
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
)


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ItemColumns(NamedTuple):
    item: int
    qty: int
    rate: int
    total: int


ITEM_COLUMNS = {
    PaperWidth.MM_80: ItemColumns(item=22, qty=4, rate=7, total=9),
    PaperWidth.MM_58: ItemColumns(item=16, qty=4, rate=6, total=6),
}


def char_width(char: str) -> int:
    """Number of printer cells a single character occupies."""
    code = ord(char)
    for start, end in WIDE_CHAR_RANGES:
        if start <= code <= end:
            return 2
    return 1


def display_width(text: str) -> int:
    """Sum of per-character cell widths, which can differ from len(text)."""
    return sum(char_width(c) for c in text)


def _to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_number(value) -> str:
    """Plain number display: integers without a fraction, decimals trimmed."""
    number = _to_decimal(value)
    if number == number.to_integral_value():
        return str(int(number))
    return format(number.normalize(), "f")


def format_whole(value) -> str:
    """Round half-up to an integer for the compact item table."""
    return str(_to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def fit_quantity(value, width: int) -> str:
    """Quantity display, dropping decimal places (half-up) until it fits the column."""
    number = _to_decimal(value)
    text = format_number(number)
    places = len(text) - text.index(".") - 1 if "." in text else 0
    while len(text) > width and places > 0:
        places -= 1
        text = format_number(number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))
    return text


class ThermalReceiptFormatter:
    """Fixed-width layout engine bound to one paper width."""

    def __init__(self, paper_width=PaperWidth.MM_80, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL):
        self.paper_width = PaperWidth.coerce(paper_width)
        self.max_chars = self.paper_width.max_chars
        self.columns = ITEM_COLUMNS[self.paper_width]
        self.currency_symbol = currency_symbol

    # ------------------------------------------------------------------
    # primitives
    # ------------------------------------------------------------------
    def format_line(self, text: str, align: Union[Align, str] = Align.LEFT) -> str:
        """Truncate to the line budget, or pad for center/right alignment."""
        if len(text) > self.max_chars:
            return text[:self.max_chars]

        if align == Align.CENTER:
            padding = (self.max_chars - len(text)) // 2
            return " " * padding + text
        if align == Align.RIGHT:
            return " " * (self.max_chars - len(text)) + text
        return text

    def two_column(self, left: str, right: str) -> str:
        """Label on the left, value ending in the last column; the value is never cut."""
        left_budget = self.max_chars - len(right) - 1
        if len(left) > left_budget:
            if left_budget >= 3:
                left = left[:left_budget - 3] + "..."
            else:
                left = "..."[:max(left_budget, 0)]
        padding = self.max_chars - len(left) - len(right)
        return left + " " * padding + right

    def separator(self, char: str = "-") -> str:
        return char * self.max_chars

    def money(self, amount) -> str:
        value = _to_decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{self.currency_symbol}{value}"

    def signed_money(self, amount) -> str:
        value = _to_decimal(amount)
        sign = "+" if value > 0 else "-"
        return sign + self.money(abs(value))

    # ------------------------------------------------------------------
    # sections
    # ------------------------------------------------------------------
    def store_header(self, store: StoreInfo) -> List[str]:
        lines = [self.format_line(store.store_name, Align.CENTER)]

        if store.address:
            lines.append(self.format_line(store.address, Align.CENTER))

        if store.city and store.state:
            location = f"{store.city}, {store.state}"
            if store.pincode:
                location += f" - {store.pincode}"
            lines.append(self.format_line(location, Align.CENTER))

        if store.phone:
            lines.append(self.format_line(f"Ph: {store.phone}", Align.CENTER))

        if store.gstin:
            lines.append(self.format_line(f"GSTIN: {store.gstin}", Align.CENTER))

        return lines

    def invoice_details(self, invoice: InvoiceData) -> List[str]:
        lines = [
            self.two_column("Invoice:", invoice.invoice_number),
            self.two_column("Date:", invoice.invoice_date),
            self.two_column("Customer:", invoice.customer_name),
        ]
        if invoice.customer_phone:
            lines.append(self.two_column("Phone:", invoice.customer_phone))
        if invoice.customer_gstin:
            lines.append(self.two_column("GSTIN:", invoice.customer_gstin))
        return lines

    def item_header(self) -> str:
        cols = self.columns
        return (
            "ITEM".ljust(cols.item)
            + "QTY".rjust(cols.qty)
            + "RATE".rjust(cols.rate)
            + "TOTAL".rjust(cols.total)
        )

    def item_rows(self, item: InvoiceLineItem) -> List[str]:
        cols = self.columns
        qty = fit_quantity(item.quantity, cols.qty)
        rate = format_whole(item.rate)
        total = format_whole(item.total)
        figures = qty.rjust(cols.qty) + rate.rjust(cols.rate) + total.rjust(cols.total)

        name_width = display_width(item.name)
        if len(figures) > cols.qty + cols.rate + cols.total:
            # figures too wide for their columns get a line of their own
            rows = [self.format_line(item.name), self.format_line(f"{qty} x {rate} = {total}", Align.RIGHT)]
        elif name_width > cols.item:
            rows = [self.format_line(item.name), " " * cols.item + figures]
        else:
            # Pad by display width so wide names still line up with the header
            rows = [item.name + " " * (cols.item - name_width) + figures]

        if item.has_gst:
            rows.append(f"  (GST {format_number(item.gst_rate)}%)")
        return rows

    def totals(self, invoice: InvoiceData) -> List[str]:
        lines = [self.two_column("Subtotal:", self.money(invoice.subtotal))]

        if invoice.has_discount:
            lines.append(self.two_column("Discount:", "-" + self.money(invoice.discount_amount)))

        if invoice.cgst_amount > 0:
            lines.append(self.two_column("CGST:", self.money(invoice.cgst_amount)))
            lines.append(self.two_column("SGST:", self.money(invoice.sgst_amount)))

        if invoice.igst_amount > 0:
            lines.append(self.two_column("IGST:", self.money(invoice.igst_amount)))

        if invoice.round_off != 0:
            lines.append(self.two_column("Round Off:", self.signed_money(invoice.round_off)))

        return lines

    def centered_block(self, text: str) -> List[str]:
        return [self.format_line(line, Align.CENTER) for line in text.splitlines()]

    # ------------------------------------------------------------------
    # document
    # ------------------------------------------------------------------
    def generate(self, store: StoreInfo, invoice: InvoiceData, footer: str = None, terms: str = None) -> str:
        lines = self.store_header(store)

        lines.append(self.separator("="))
        lines.extend(self.invoice_details(invoice))
        lines.append(self.separator("="))

        lines.append(self.item_header())
        lines.append(self.separator("-"))
        for item in invoice.items:
            lines.extend(self.item_rows(item))
        lines.append(self.separator("-"))

        lines.extend(self.totals(invoice))

        lines.append(self.separator("="))
        lines.append(self.two_column("TOTAL:", self.money(invoice.total_amount)))
        lines.append(self.separator("="))

        if invoice.payment_method:
            lines.append(self.format_line(f"Payment: {invoice.payment_method.upper()}", Align.CENTER))
            lines.append("")

        if terms:
            lines.extend(self.centered_block(terms))

        if footer:
            lines.extend(self.centered_block(footer))

        # paper feed before the tear bar
        lines.extend(["", "", ""])

        return "\n".join(lines) + "\n"


def format_receipt(
    store: StoreInfo,
    invoice: InvoiceData,
    options: LayoutOptions = None,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """Render one invoice as receipt text for the configured paper width."""
    options = options or LayoutOptions()
    formatter = ThermalReceiptFormatter(options.paper_width, currency_symbol=currency_symbol)
    return formatter.generate(store, invoice, footer=options.footer, terms=options.terms)
