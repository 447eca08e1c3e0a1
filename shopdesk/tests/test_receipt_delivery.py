"""
Tests for receipt delivery dispatch
"""
import os
import subprocess

import pytest

from shopdesk.services.thermal_receipt import DeliveryError, DeliveryMethod, PaperWidth, deliver
from shopdesk.services.thermal_receipt import delivery

RECEIPT = "Sri Ganesh Stores\n<b>Rice & Dal</b>\n"

COPY_TO_OUTBOX = "import shutil, sys; shutil.copy(sys.argv[-1], sys.argv[1])"


@pytest.fixture
def no_wait(monkeypatch):
    waits = []
    monkeypatch.setattr(delivery.time, "sleep", lambda seconds: waits.append(seconds))
    return waits


class TestDeliver:

    def test_iframe_renders_print_document(self, tmp_path, no_wait):
        result = deliver(RECEIPT, "58mm", "iframe", spool_dir=str(tmp_path))
        assert result.method is DeliveryMethod.IFRAME
        assert result.fallback_from is None
        assert result.paper_width is PaperWidth.MM_58
        assert "size: 58mm auto;" in result.document
        assert "font-size: 10px;" in result.document
        assert "white-space: pre;" in result.document

    def test_iframe_without_print_command_returns_immediately(self, tmp_path, no_wait):
        result = deliver(RECEIPT, "80mm", "iframe", spool_dir=str(tmp_path))
        assert result.spooled is False
        assert no_wait == []
        assert os.listdir(tmp_path) == []

    def test_print_command_receives_spooled_receipt(self, tmp_path, no_wait, printer_command):
        spool_dir = tmp_path / "spool"
        outbox = tmp_path / "printed.txt"
        result = deliver(
            RECEIPT, "80mm", DeliveryMethod.IFRAME,
            print_command=printer_command(COPY_TO_OUTBOX, str(outbox)),
            settle_seconds=0.25,
            spool_dir=str(spool_dir),
        )
        assert result.spooled is True
        assert outbox.read_text(encoding="utf-8") == RECEIPT
        assert no_wait == [0.25]
        assert os.listdir(spool_dir) == []

    def test_text_is_escaped(self, tmp_path, no_wait):
        result = deliver(RECEIPT, "80mm", "iframe", spool_dir=str(tmp_path))
        assert "&lt;b&gt;Rice &amp; Dal&lt;/b&gt;" in result.document
        assert "<b>" not in result.document

    def test_preview_never_spools(self, tmp_path, no_wait, printer_command):
        outbox = tmp_path / "printed.txt"
        result = deliver(
            RECEIPT, "80mm", "preview",
            print_command=printer_command(COPY_TO_OUTBOX, str(outbox)),
            spool_dir=str(tmp_path / "spool"),
        )
        assert result.method is DeliveryMethod.PREVIEW
        assert result.spooled is False
        assert "width: 80mm;" in result.document
        assert "font-size: 12px;" in result.document
        assert no_wait == []
        assert not outbox.exists()

    @pytest.mark.parametrize("method", ["direct", "bluetooth", DeliveryMethod.BLUETOOTH, "fax"])
    def test_unavailable_methods_fall_back_to_iframe(self, tmp_path, no_wait, method):
        result = deliver(RECEIPT, "80mm", method, spool_dir=str(tmp_path))
        assert result.method is DeliveryMethod.IFRAME
        assert result.fallback_from == (method.value if isinstance(method, DeliveryMethod) else method)
        assert "@page" in result.document

    def test_unknown_width_is_treated_as_80mm(self, no_wait):
        result = deliver(RECEIPT, "110mm", "preview")
        assert result.paper_width is PaperWidth.MM_80

    def test_failing_print_command_is_a_delivery_error(self, tmp_path, no_wait, printer_command):
        spool_dir = tmp_path / "spool"
        with pytest.raises(DeliveryError) as exc_info:
            deliver(
                RECEIPT, "80mm", "iframe",
                print_command=printer_command("import sys; sys.exit('printer offline')"),
                spool_dir=str(spool_dir),
            )
        assert exc_info.value.message == "Print command failed: printer offline"
        assert os.listdir(spool_dir) == []
        assert no_wait == []

    def test_missing_print_command_is_a_delivery_error(self, tmp_path, no_wait):
        spool_dir = tmp_path / "spool"
        with pytest.raises(DeliveryError) as exc_info:
            deliver(RECEIPT, "80mm", "iframe", print_command="no-such-receipt-printer", spool_dir=str(spool_dir))
        assert exc_info.value.message.startswith("Print surface is not accessible")
        assert os.listdir(spool_dir) == []

    def test_print_command_timeout(self, tmp_path, no_wait, monkeypatch):
        def hung(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        monkeypatch.setattr(delivery.subprocess, "run", hung)
        spool_dir = tmp_path / "spool"
        with pytest.raises(DeliveryError) as exc_info:
            deliver(RECEIPT, "80mm", "iframe", print_command="lp", spool_dir=str(spool_dir), timeout=2.0)
        assert exc_info.value.message == "Print command timed out after 2.0s"
        assert os.listdir(spool_dir) == []

    def test_failure_during_wait_still_releases_spool_file(self, tmp_path, monkeypatch, printer_command):
        def surface_lost(seconds):
            raise OSError("surface lost")

        monkeypatch.setattr(delivery.time, "sleep", surface_lost)
        with pytest.raises(DeliveryError) as exc_info:
            deliver(RECEIPT, "80mm", "iframe", print_command=printer_command("pass"), spool_dir=str(tmp_path))
        assert "surface lost" in exc_info.value.message
        assert os.listdir(tmp_path) == []

    def test_inaccessible_spool_dir_is_a_delivery_error(self, tmp_path, no_wait):
        blocker = tmp_path / "spool"
        blocker.write_text("not a directory")
        with pytest.raises(DeliveryError) as exc_info:
            deliver(RECEIPT, "80mm", "iframe", print_command="lp", spool_dir=str(blocker))
        assert exc_info.value.message.startswith("Print surface is not accessible")
