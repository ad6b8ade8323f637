"""
iou_engines.tracer -- Engine invocation tracer emitting IOU_ENGINE_TRACE.

Responsibility:
    Provide a lightweight decorator (``@traced_engine``) that wraps pure
    engine invocations with structured trace logging.  The trace captures
    engine_name, engine_version, input_fingerprint (deterministic SHA-256
    hash of selected arguments), and duration_ms.

Invariants enforced:
    - Fingerprints are deterministic: dict keys and dataclass fields are
      canonicalized in sorted order, sequences in given order.
    - Engine purity: the decorator only reads arguments and emits a log
      record; it never mutates inputs or changes the result.

Usage:
    from iou_engines.tracer import traced_engine

    @traced_engine("money_request_preview", "1.0", ("transaction", "action"))
    def derive_preview(transaction, report, action, ...):
        ...
"""

from __future__ import annotations

import dataclasses
import functools
import hashlib
import inspect
import logging
import time
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

# In production this logger is configured by configure_logging().
_logger = logging.getLogger("iou_kernel.engines.tracer")


def _canonicalize(value: Any) -> str:
    """Produce a stable string representation of a value for fingerprinting."""
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (bool, int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        items = sorted(
            (f.name, getattr(value, f.name)) for f in dataclasses.fields(value)
        )
        return type(value).__name__ + "{" + ",".join(
            f"{k}:{_canonicalize(v)}" for k, v in items
        ) + "}"
    if isinstance(value, Mapping):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        return "{" + ",".join(f"{k}:{_canonicalize(v)}" for k, v in items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonicalize(v) for v in value) + "]"
    return str(value)


def compute_input_fingerprint(
    fingerprint_fields: tuple[str, ...],
    arguments: Mapping[str, Any],
) -> str:
    """16-hex-char SHA-256 prefix over the named arguments.

    Missing arguments are recorded as "null".
    """
    parts = [
        f"{name}={_canonicalize(arguments.get(name))}" for name in fingerprint_fields
    ]
    canonical = "|".join(parts)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]


def traced_engine(
    engine_name: str,
    engine_version: str,
    fingerprint_fields: tuple[str, ...] = (),
) -> Callable:
    """Decorator that emits IOU_ENGINE_TRACE for pure engine invocations.

    Positional and keyword arguments are both bound to parameter names
    before fingerprinting, so call style does not change the hash.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            fp = ""
            if fingerprint_fields:
                bound = signature.bind_partial(*args, **kwargs)
                fp = compute_input_fingerprint(fingerprint_fields, bound.arguments)

            t0 = time.monotonic()
            result = func(*args, **kwargs)
            duration_ms = round((time.monotonic() - t0) * 1000, 2)

            _logger.info(
                "IOU_ENGINE_TRACE",
                extra={
                    "trace_type": "IOU_ENGINE_TRACE",
                    "engine_name": engine_name,
                    "engine_version": engine_version,
                    "input_fingerprint": fp,
                    "duration_ms": duration_ms,
                    "function": func.__qualname__,
                },
            )
            return result

        return wrapper

    return decorator
