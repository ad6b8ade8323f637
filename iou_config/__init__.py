"""
iou_config -- single public entrypoint for preview configuration.

Responsibility:
    ``get_preview_config()`` returns the validated ``PreviewConfig`` the
    preview engine runs with; ``get_localizer()`` returns the translator
    for a locale.  Both read the YAML files bundled with this package
    unless a path or locale is given.

Architecture position:
    Configuration -- sits above ``iou_kernel``; the kernel never imports
    from here.  Engines receive the config and translator as arguments.

Failure modes:
    - ``FileNotFoundError`` -- explicit config path does not exist.
    - ``InvalidPreviewConfigError`` -- schema validation failed.
    - ``UnsupportedLocaleError`` -- no catalog for the requested locale.

Audit relevance:
    Every ``get_preview_config()`` call emits an ``IOU_CONFIG_TRACE`` log
    entry with the source path and the configuration checksum.
"""

from __future__ import annotations

from pathlib import Path

from iou_config.loader import compute_checksum, load_preview_config
from iou_config.localization import Localizer, load_catalog
from iou_config.schema import PreviewConfig
from iou_kernel.logging_config import get_logger

logger = get_logger("config")

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults" / "preview.yaml"


def get_preview_config(path: Path | None = None) -> PreviewConfig:
    """Load and validate the preview configuration."""
    source = path or _DEFAULT_CONFIG_PATH
    config = load_preview_config(source)
    logger.info(
        "IOU_CONFIG_TRACE",
        extra={
            "trace_type": "IOU_CONFIG_TRACE",
            "source": str(source),
            "checksum": compute_checksum(config),
            "locale": config.locale,
        },
    )
    return config


def get_localizer(locale: str = "en") -> Localizer:
    return Localizer.for_locale(locale)


__all__ = [
    "Localizer",
    "PreviewConfig",
    "get_localizer",
    "get_preview_config",
    "load_catalog",
]
