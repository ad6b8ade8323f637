"""
Viewer session and personal-details directory.

Avatars are resolved per account id from the personal-details lookup.
Accounts missing from the directory still produce an avatar so that a
participant never silently disappears from a split preview.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

UNKNOWN_ACCOUNT_ID = -1

FALLBACK_AVATAR_SOURCE = "fallback-avatar"


class AvatarType(str, Enum):
    USER = "avatar"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class Session:
    """The signed-in viewer."""

    account_id: int | None = None


@dataclass(frozen=True)
class PersonalDetail:
    account_id: int
    display_name: str = ""
    login: str = ""
    avatar: str | None = None


@dataclass(frozen=True)
class Avatar:
    """Icon descriptor handed to the avatar renderer.

    ``id`` is the sort key: an account id for users, the policy id for a
    workspace.
    """

    id: int | str
    source: str
    name: str = ""
    avatar_type: AvatarType = AvatarType.USER


PersonalDetailsList = Mapping[int, PersonalDetail]


def get_avatar_for_account_id(
    account_id: int,
    personal_details: PersonalDetailsList | None,
) -> Avatar:
    detail = (personal_details or {}).get(account_id)
    if detail is None:
        return Avatar(id=account_id, source=FALLBACK_AVATAR_SOURCE)
    return Avatar(
        id=account_id,
        source=detail.avatar or FALLBACK_AVATAR_SOURCE,
        name=detail.display_name or detail.login,
    )


def get_avatars_for_account_ids(
    account_ids: Iterable[int],
    personal_details: PersonalDetailsList | None,
) -> list[Avatar]:
    return [get_avatar_for_account_id(account_id, personal_details) for account_id in account_ids]
