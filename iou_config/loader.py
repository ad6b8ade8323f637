"""
Configuration Loader (``iou_config.loader``).

Responsibility
--------------
Loads a preview configuration YAML file and parses it into a frozen
``PreviewConfig``.  Runtime callers go through
``iou_config.get_preview_config()``; this module is the parsing layer
underneath it.

File shape
----------
::

    preview:
      max_preview_length: 83
      violation_message_max_length: 15
      default_currency: USD
      partial_transaction_merchant: "(none)"
      default_merchant: Request
      locale: en

Every key is optional; missing keys keep their schema default.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown keys, wrong types, or values failing validation  ->
  ``InvalidPreviewConfigError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from iou_config.schema import PreviewConfig
from iou_kernel.exceptions import InvalidPreviewConfigError

_INT_FIELDS = frozenset({"max_preview_length", "violation_message_max_length"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_preview_config(data: dict[str, Any]) -> PreviewConfig:
    """
    Parse a ``PreviewConfig`` from the document root.

    Raises:
        InvalidPreviewConfigError: on unknown keys, wrong value types, or
            values rejected by ``PreviewConfig`` validation.
    """
    section = data.get("preview", {})
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise InvalidPreviewConfigError("preview", "must be a mapping")

    unknown = set(section) - PreviewConfig.field_names()
    if unknown:
        raise InvalidPreviewConfigError(
            ", ".join(sorted(unknown)), "unknown configuration key"
        )

    values: dict[str, Any] = {}
    for key, value in section.items():
        if key in _INT_FIELDS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidPreviewConfigError(key, f"expected an integer, got {value!r}")
        elif not isinstance(value, str):
            raise InvalidPreviewConfigError(key, f"expected a string, got {value!r}")
        values[key] = value

    return PreviewConfig(**values)


def load_preview_config(path: Path) -> PreviewConfig:
    return parse_preview_config(load_yaml_file(path))


def compute_checksum(config: PreviewConfig) -> str:
    """Deterministic SHA-256 of a configuration, for change detection."""
    canonical = json.dumps(
        {name: getattr(config, name) for name in sorted(PreviewConfig.field_names())},
        sort_keys=True,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
