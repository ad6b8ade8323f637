"""
Module: iou_engines
Responsibility:
    Package entrypoint re-exporting the pure preview engines.  This is the
    canonical import surface for rendering layers.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Imports kernel domain types and receives config/translators as
    arguments.

Invariants enforced:
    - Determinism: identical inputs always produce identical outputs.
    - Every engine invocation is traced via ``@traced_engine``
      (see ``iou_engines.tracer``), emitting IOU_ENGINE_TRACE log records.

Usage:
    from iou_engines import derive_preview, PreviewFlags

    view_model = derive_preview(transaction, report, action, session, details)
"""

from iou_engines.money_request_preview import calculate_amount_each, derive_preview
from iou_engines.tracer import compute_input_fingerprint, traced_engine
from iou_kernel.domain.preview_model import (
    DisplayTextKind,
    PreviewFlags,
    PreviewViewModel,
    ReceiptImage,
)

__all__ = [
    "DisplayTextKind",
    "PreviewFlags",
    "PreviewViewModel",
    "ReceiptImage",
    "calculate_amount_each",
    "compute_input_fingerprint",
    "derive_preview",
    "traced_engine",
]
