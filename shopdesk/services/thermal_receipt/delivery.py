"""
Receipt delivery - hands a finished receipt to an output sink.

Every delivery goes through deliver(), which routes on the DeliveryMethod
tag. Methods without a sink of their own (direct, bluetooth, unknown tags)
fall back to the iframe sink.

The iframe sink always returns the print document for the browser to print.
When a print command is configured (e.g. ``lp -d receipt -o raw``) it also
spools the receipt text to a file, runs the command with the file path as
its last argument, waits ``settle_seconds`` and then removes the file.
"""
import logging
import os
import shlex
import subprocess
import tempfile
import time
from typing import NamedTuple, Optional, Tuple
from xml.sax.saxutils import escape

from pydantic import BaseModel

from .models import DeliveryMethod, PaperWidth

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_SECONDS = 1.0
DEFAULT_PRINT_TIMEOUT = 10.0


class DeliveryError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class DeliveryResult(BaseModel):
    requested_method: str
    method: DeliveryMethod
    fallback_from: Optional[str] = None
    paper_width: PaperWidth
    document: str
    spooled: bool = False


class PrintSpool(NamedTuple):
    command: Optional[str]
    directory: Optional[str]
    settle_seconds: float
    timeout: float


def _font_size(width: PaperWidth) -> str:
    return "10px" if width is PaperWidth.MM_58 else "12px"


def render_print_document(text: str, width: PaperWidth) -> str:
    """Hidden print document: page sized to the roll, text kept verbatim."""
    return f"""<html>
  <head>
    <meta charset="utf-8"/>
    <style>
      @media print {{
        @page {{
          size: {width.value} auto;
          margin: 0;
        }}
        body {{
          font-family: monospace;
          font-size: {_font_size(width)};
          margin: 0;
          padding: 5px;
          white-space: pre;
        }}
      }}
    </style>
  </head>
  <body>{escape(text)}</body>
</html>"""


def render_preview(text: str, width: PaperWidth) -> str:
    return f"""<!doctype html>
<html>
<head><meta charset="utf-8"/><title>Receipt preview</title></head>
<body>
  <div style="
    font-family: 'Courier New', monospace;
    font-size: {_font_size(width)};
    width: {width.value};
    background: white;
    padding: 10px;
    border: 1px solid #ccc;
    white-space: pre;
    line-height: 1.4;
  ">{escape(text)}</div>
</body>
</html>"""


def _spool_to_printer(text: str, spool: PrintSpool) -> None:
    spool_path = None
    try:
        if spool.directory:
            os.makedirs(spool.directory, exist_ok=True)
        fd, spool_path = tempfile.mkstemp(prefix="receipt-", suffix=".txt", dir=spool.directory)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)

        subprocess.run(
            shlex.split(spool.command) + [spool_path],
            check=True,
            capture_output=True,
            text=True,
            timeout=spool.timeout,
        )
        # the print queue may open the file after the command returns
        time.sleep(spool.settle_seconds)
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        logger.error(f"Print command failed: {detail}")
        raise DeliveryError(f"Print command failed: {detail}") from e
    except subprocess.TimeoutExpired as e:
        logger.error(f"Print command timed out after {spool.timeout}s")
        raise DeliveryError(f"Print command timed out after {spool.timeout}s") from e
    except OSError as e:
        logger.error(f"Could not hand receipt to the printer: {e}", exc_info=True)
        raise DeliveryError(f"Print surface is not accessible: {e.strerror or e}") from e
    finally:
        if spool_path and os.path.exists(spool_path):
            try:
                os.remove(spool_path)
            except OSError as e:
                logger.warning(f"Could not remove spool file {spool_path}: {e}")


def _deliver_iframe(text: str, width: PaperWidth, spool: PrintSpool) -> Tuple[str, bool]:
    document = render_print_document(text, width)
    if not spool.command:
        return document, False
    _spool_to_printer(text, spool)
    return document, True


def _deliver_preview(text: str, width: PaperWidth, spool: PrintSpool) -> Tuple[str, bool]:
    return render_preview(text, width), False


_SINKS = {
    DeliveryMethod.IFRAME: _deliver_iframe,
    DeliveryMethod.PREVIEW: _deliver_preview,
}


def _resolve_method(method) -> Optional[DeliveryMethod]:
    if isinstance(method, DeliveryMethod):
        return method
    try:
        return DeliveryMethod(str(method).strip().lower())
    except ValueError:
        return None


def deliver(
    text: str,
    width,
    method=DeliveryMethod.IFRAME,
    print_command: Optional[str] = None,
    settle_seconds: float = DEFAULT_SETTLE_SECONDS,
    spool_dir: Optional[str] = None,
    timeout: float = DEFAULT_PRINT_TIMEOUT,
) -> DeliveryResult:
    """
    Deliver a finished receipt to the sink named by ``method``.

    Args:
        text: Formatted receipt text.
        width: Paper width tag; unknown values are treated as 80mm.
        method: Delivery method tag.
        print_command: Command that prints a spooled receipt file (iframe sink only).
        settle_seconds: Fixed wait after the print command before the spool file is removed.
        spool_dir: Directory for spool files (system temp dir if None).
        timeout: Seconds the print command may run.

    Returns:
        DeliveryResult describing the sink actually used.

    Raises:
        DeliveryError: If the spool file could not be written or the print command failed.
    """
    paper_width = PaperWidth.coerce(width)
    requested = method.value if isinstance(method, DeliveryMethod) else str(method)
    resolved = _resolve_method(method)

    fallback_from = None
    if resolved not in _SINKS:
        fallback_from = requested
        resolved = DeliveryMethod.IFRAME
        logger.warning(f"Delivery method '{requested}' is not available, falling back to iframe")

    spool = PrintSpool(print_command, spool_dir, settle_seconds, timeout)
    document, spooled = _SINKS[resolved](text, paper_width, spool)
    logger.info(f"Receipt delivered via {resolved.value} ({paper_width.value})")

    return DeliveryResult(
        requested_method=requested,
        method=resolved,
        fallback_from=fallback_from,
        paper_width=paper_width,
        document=document,
        spooled=spooled,
    )
