"""
Preview configuration schema (``iou_config.schema``).

Display constants for money-request previews.  Defaults match the values
the chat client ships with; deployments override them through a YAML
file read by ``iou_config.loader``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from iou_config.localization import has_catalog
from iou_kernel.domain.currency import CurrencyRegistry
from iou_kernel.domain.transaction import DEFAULT_MERCHANT, PARTIAL_TRANSACTION_MERCHANT
from iou_kernel.exceptions import InvalidPreviewConfigError
from iou_kernel.logging_config import get_logger

logger = get_logger("config.schema")

# Shortest merchant/description that still leaves room for text before "..."
MIN_PREVIEW_LENGTH = 4


@dataclass(frozen=True)
class PreviewConfig:
    """
    Configuration for preview derivation.

        config = PreviewConfig(max_preview_length=60, default_currency="EUR")
    """

    # Merchant and description are truncated to this many characters
    max_preview_length: int = 83

    # Longer violation messages collapse to "Review required" in the header
    violation_message_max_length: int = 15

    # Currency assumed when a request or snapshot carries none
    default_currency: str = CurrencyRegistry.DEFAULT_CURRENCY

    # Merchant placeholders that are never displayed
    partial_transaction_merchant: str = PARTIAL_TRANSACTION_MERCHANT
    default_merchant: str = DEFAULT_MERCHANT

    locale: str = "en"

    def __post_init__(self):
        if self.max_preview_length < MIN_PREVIEW_LENGTH:
            raise InvalidPreviewConfigError(
                "max_preview_length",
                f"must be at least {MIN_PREVIEW_LENGTH}, got {self.max_preview_length}",
            )
        if self.violation_message_max_length < 0:
            raise InvalidPreviewConfigError(
                "violation_message_max_length", "cannot be negative"
            )
        if not CurrencyRegistry.is_valid(self.default_currency):
            raise InvalidPreviewConfigError(
                "default_currency",
                f"unknown currency code {self.default_currency!r}",
            )
        if not self.partial_transaction_merchant or not self.default_merchant:
            raise InvalidPreviewConfigError(
                "merchant placeholders", "cannot be empty"
            )
        if not self.locale:
            raise InvalidPreviewConfigError("locale", "cannot be empty")
        if not has_catalog(self.locale):
            raise InvalidPreviewConfigError("locale", f"no translation catalog for {self.locale!r}")

        # Normalized code so lookups and comparisons agree
        object.__setattr__(self, "default_currency", self.default_currency.upper().strip())

        logger.debug(
            "preview_config_initialized",
            extra={
                "max_preview_length": self.max_preview_length,
                "default_currency": self.default_currency,
                "locale": self.locale,
            },
        )

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))
