"""
Preview view model (``iou_kernel.domain.preview_model``).

The exposed surface of the preview engine: everything the renderer needs
to draw a money-request preview, already decided.  The renderer makes no
business decisions of its own; it only lays these fields out.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from iou_kernel.domain.personal_details import Avatar


class DisplayTextKind(str, Enum):
    """Which text, if any, occupies the line under the amount."""

    MERCHANT = "merchant"
    DESCRIPTION = "description"
    NONE = "none"


@dataclass(frozen=True)
class ReceiptImage:
    image: str | None
    thumbnail: str | None = None
    filename: str | None = None


@dataclass(frozen=True)
class PreviewFlags:
    """Hints from the hosting chat view that are not part of the domain data.

    ``wallet_terms_errors`` is an opaque payload; it is handed back on the
    view model untouched.
    """

    is_bill_split: bool = False
    is_whisper: bool = False
    is_hovered: bool = False
    should_show_pending_conversion_message: bool = False
    has_press_handler: bool = True
    wallet_terms_errors: Any = None


@dataclass(frozen=True)
class PreviewViewModel:
    # Skeleton placeholder instead of details
    is_loading: bool

    header_text: str
    amount_text: str
    is_deleted: bool
    show_attention_indicator: bool

    merchant_or_description: str
    merchant_or_description_kind: DisplayTextKind
    description_is_markdown: bool

    is_settled: bool
    show_settled_checkmark: bool

    participant_avatars: tuple[Avatar, ...]
    show_avatars: bool
    split_each_amount: int | None
    split_each_text: str | None

    receipt_images: tuple[ReceiptImage, ...]
    show_map_as_image: bool
    is_highlighted: bool

    # Hover styling for the receipt thumbnails and the avatar stack
    is_receipt_hovered: bool
    is_avatar_hovered: bool

    is_current_user_manager: bool
    show_pending_conversion_message: bool

    is_press_enabled: bool
    accessibility_label: str
    accessibility_hint: str

    errors: Any = None

    @property
    def should_show_merchant(self) -> bool:
        return self.merchant_or_description_kind == DisplayTextKind.MERCHANT

    @property
    def should_show_description(self) -> bool:
        return self.merchant_or_description_kind == DisplayTextKind.DESCRIPTION
